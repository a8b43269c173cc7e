"""Kitty adapter: emits flat ``key value`` lines."""

from typing import List, Tuple

from .base import ResolvedColors, TerminalAdapter, TerminalTarget
from ..skin_engine.schema import SkinConfig


class KittyAdapter(TerminalAdapter):
    """Render skins as a ``kitty.conf`` include file."""

    target = TerminalTarget.KITTY
    display_name = "Kitty"
    filename = "retro_skin.conf"
    install_hint = "Kitty config - copy to ~/.config/kitty/retro_skin.conf"
    comment_prefix = "#"

    def pairs(self, colors: ResolvedColors) -> List[Tuple[str, str]]:
        """Return config keys and values in emission order."""
        pairs = [
            ("background", colors.background),
            ("foreground", colors.foreground),
            ("cursor", colors.foreground),
            ("cursor_text_color", colors.background),
            ("selection_background", colors.foreground),
            ("selection_foreground", colors.background),
        ]
        pairs.extend((f"color{index}", color) for index, color in enumerate(colors.ansi))
        return pairs

    def _emit(self, skin: SkinConfig, colors: ResolvedColors) -> str:
        lines = [self.comment_block(self.header_lines(skin, colors)), ""]
        for key, value in self.pairs(colors):
            if key == "color0":
                lines.extend(["", "# ANSI colors"])
            lines.append(f"{key} {value}")
        lines.append("")
        return "\n".join(lines)
