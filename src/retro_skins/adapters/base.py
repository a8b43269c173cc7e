"""Abstract base class for terminal config adapters.

This module defines the interface every terminal adapter implements, plus the
shared color resolution step: all consumed colors are checked against the
``#RRGGBB`` pattern and the 16-slot ANSI table is taken from the skin's
palette or derived from its main colors. Rendering never mutates the skin and
never touches the file system.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..skin_engine.schema import ANSI_SLOTS, BASE_SLOTS, BRIGHT_SLOTS, SkinConfig
from ..skin_engine.utils import derive_palette, format_number, glow_shadow, validate_hex_color

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]+')


class TerminalTarget(str, Enum):
    """Supported terminal emulators"""
    WEZTERM = "wezterm"
    ALACRITTY = "alacritty"
    KITTY = "kitty"
    WINDOWS_TERMINAL = "windows-terminal"


@dataclass(frozen=True)
class ResolvedColors:
    """Validated colors ready for emission."""

    background: str
    foreground: str
    accent: str
    glow: str
    palette: Tuple[Tuple[str, str], ...]
    derived: bool = False

    def slot(self, name: str) -> str:
        for slot, color in self.palette:
            if slot == name:
                return color
        raise KeyError(name)

    @property
    def ansi(self) -> List[str]:
        """All 16 colors in fixed slot order."""
        return [color for _, color in self.palette]

    @property
    def normal(self) -> List[Tuple[str, str]]:
        return [(slot, self.slot(slot)) for slot in BASE_SLOTS]

    @property
    def bright(self) -> List[Tuple[str, str]]:
        return [(slot, self.slot(slot)) for slot in BRIGHT_SLOTS]


def resolve_colors(skin: SkinConfig) -> ResolvedColors:
    """Validate a skin's colors and resolve its 16-slot ANSI table.

    Args:
        skin: Skin to resolve

    Returns:
        ResolvedColors instance

    Raises:
        MalformedColorError: If any consumed color is not ``#RRGGBB``
    """
    scheme = skin.colors
    background = validate_hex_color('background', scheme.background)
    foreground = validate_hex_color('foreground', scheme.foreground)
    accent = validate_hex_color('accent', scheme.accent)
    glow = validate_hex_color('glow', scheme.glow)

    if scheme.palette is not None:
        palette = tuple(
            (slot, validate_hex_color(f"palette.{slot}", color))
            for slot, color in scheme.palette.slots()
        )
        derived = False
    else:
        derived_palette = derive_palette(background, foreground, accent)
        palette = tuple((slot, derived_palette[slot]) for slot in ANSI_SLOTS)
        derived = True

    return ResolvedColors(
        background=background,
        foreground=foreground,
        accent=accent,
        glow=glow,
        palette=palette,
        derived=derived,
    )


def comment_safe(text: str) -> str:
    """Collapse control characters so text fits on one comment line."""
    return _CONTROL_CHARS.sub(' ', text).strip()


class TerminalAdapter(ABC):
    """Base class for all terminal adapters.

    Each adapter translates one SkinConfig into the configuration text of a
    specific terminal emulator. Subclasses implement ``_emit``; ``render``
    resolves and validates colors first so malformed input never produces
    partial output.
    """

    target: TerminalTarget
    display_name: str = ""
    filename: str = ""
    install_hint: str = ""
    comment_prefix: Optional[str] = "#"

    def render(self, skin: SkinConfig) -> str:
        """Render a skin into configuration text.

        Args:
            skin: Skin to render

        Returns:
            Configuration document ending with a newline

        Raises:
            MalformedColorError: If any consumed color is malformed
        """
        colors = resolve_colors(skin)
        return self._emit(skin, colors)

    @abstractmethod
    def _emit(self, skin: SkinConfig, colors: ResolvedColors) -> str:
        """Produce the document from validated colors."""
        pass

    def header_lines(self, skin: SkinConfig, colors: ResolvedColors) -> List[str]:
        """Descriptive lines shared by every format's header comment."""
        lines = [f"Retro Skin: {comment_safe(skin.name)}"]
        if skin.effects:
            effects = ", ".join(
                f"{effect.type.value} {format_number(effect.intensity)}" for effect in skin.effects
            )
            lines.append(f"Effects: {effects}")
        shadow = glow_shadow(skin, colors.glow)
        if shadow:
            lines.append(f"Glow shadow: {shadow}")
        if colors.derived:
            lines.append("ANSI palette derived from background/foreground/accent")
        return lines

    def comment_block(self, lines: List[str]) -> str:
        """Prefix each line as a comment; empty for formats without comments."""
        if not self.comment_prefix:
            return ""
        return "\n".join(f"{self.comment_prefix} {line}" for line in lines)

    def install_banner(self) -> Optional[str]:
        """Comment line telling the user where the generated file goes."""
        if not self.comment_prefix or not self.install_hint:
            return None
        return f"{self.comment_prefix} {self.install_hint}"
