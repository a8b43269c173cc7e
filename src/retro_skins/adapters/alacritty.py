"""Alacritty adapter: emits a YAML color configuration."""

from typing import Any, Dict

import yaml

from .base import ResolvedColors, TerminalAdapter, TerminalTarget
from ..skin_engine.schema import EffectType, SkinConfig

# Alacritty names the purple slot "magenta".
ALACRITTY_SLOT_NAMES: Dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "purple": "magenta",
    "cyan": "cyan",
    "white": "white",
}


class AlacrittyAdapter(TerminalAdapter):
    """Render skins as an ``alacritty.yml`` colors section."""

    target = TerminalTarget.ALACRITTY
    display_name = "Alacritty"
    filename = "retro_skin.yml"
    install_hint = "Alacritty config - copy to ~/.config/alacritty/retro_skin.yml"
    comment_prefix = "#"

    def build_document(self, skin: SkinConfig, colors: ResolvedColors) -> Dict[str, Any]:
        """Build the mapping that is serialized to YAML."""
        section: Dict[str, Any] = {
            "primary": {
                "background": colors.background,
                "foreground": colors.foreground,
            },
            "cursor": {
                "text": colors.background,
                "cursor": colors.foreground,
            },
            "selection": {
                "text": colors.background,
                "background": colors.foreground,
            },
            "normal": {
                ALACRITTY_SLOT_NAMES[slot]: color for slot, color in colors.normal
            },
            "bright": {
                ALACRITTY_SLOT_NAMES[slot[len("bright_"):]]: color for slot, color in colors.bright
            },
        }

        glow = skin.get_effect(EffectType.PHOSPHOR_GLOW)
        if glow is not None and glow.intensity > 0:
            section["draw_bold_text_with_bright_colors"] = True

        return {"colors": section}

    def _emit(self, skin: SkinConfig, colors: ResolvedColors) -> str:
        body = yaml.safe_dump(
            self.build_document(skin, colors),
            default_flow_style=False,
            sort_keys=False,
            indent=2,
        )
        return f"{self.comment_block(self.header_lines(skin, colors))}\n\n{body}"
