"""WezTerm adapter: emits a Lua configuration script."""

from typing import List

from .base import ResolvedColors, TerminalAdapter, TerminalTarget
from ..skin_engine.schema import EffectType, SkinConfig
from ..skin_engine.utils import format_number

# Text brightness boost at full glow intensity.
GLOW_BRIGHTNESS_BOOST = 0.25


class WezTermAdapter(TerminalAdapter):
    """Render skins as a WezTerm ``wezterm.lua`` config table."""

    target = TerminalTarget.WEZTERM
    display_name = "WezTerm"
    filename = "retro_skin.lua"
    install_hint = "WezTerm config - copy to ~/.config/wezterm/retro_skin.lua"
    comment_prefix = "--"

    def _emit(self, skin: SkinConfig, colors: ResolvedColors) -> str:
        lines: List[str] = [
            self.comment_block(self.header_lines(skin, colors)),
            "local wezterm = require 'wezterm'",
            "",
            "local config = {}",
            "if wezterm.config_builder then",
            "  config = wezterm.config_builder()",
            "end",
            "",
            "local ansi = {",
        ]
        for slot, color in colors.palette:
            lines.append(f"  '{color}', -- {slot}")
        lines.extend([
            "}",
            "",
            "local colors = {",
            f"  foreground = '{colors.foreground}',",
            f"  background = '{colors.background}',",
            f"  cursor_bg = '{colors.foreground}',",
            f"  cursor_fg = '{colors.background}',",
            f"  cursor_border = '{colors.foreground}',",
            f"  selection_fg = '{colors.background}',",
            f"  selection_bg = '{colors.foreground}',",
            "  ansi = { table.unpack(ansi, 1, 8) },",
            "  brights = { table.unpack(ansi, 9, 16) },",
            "}",
            "",
            "config.colors = colors",
        ])

        glow = skin.get_effect(EffectType.PHOSPHOR_GLOW)
        if glow is not None and glow.intensity > 0:
            brightness = 1.0 + glow.intensity * GLOW_BRIGHTNESS_BOOST
            lines.extend([
                "config.foreground_text_hsb = {",
                "  hue = 1.0,",
                "  saturation = 1.0,",
                f"  brightness = {format_number(round(brightness, 4))},",
                "}",
            ])

        lines.extend(["", "return config", ""])
        return "\n".join(lines)
