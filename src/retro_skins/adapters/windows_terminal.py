"""Windows Terminal adapter: emits a JSON color scheme fragment."""

import json
from typing import Any, Dict

from .base import ResolvedColors, TerminalAdapter, TerminalTarget, comment_safe
from ..skin_engine.schema import EffectType, SkinConfig

# Windows Terminal scheme keys for each ANSI slot.
SCHEME_KEYS: Dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "purple": "purple",
    "cyan": "cyan",
    "white": "white",
    "bright_black": "brightBlack",
    "bright_red": "brightRed",
    "bright_green": "brightGreen",
    "bright_yellow": "brightYellow",
    "bright_blue": "brightBlue",
    "bright_purple": "brightPurple",
    "bright_cyan": "brightCyan",
    "bright_white": "brightWhite",
}


class WindowsTerminalAdapter(TerminalAdapter):
    """Render skins as a ``settings.json`` scheme fragment.

    JSON has no comments, so the ``Retro Skin`` marker lives in the scheme
    name.
    """

    target = TerminalTarget.WINDOWS_TERMINAL
    display_name = "Windows Terminal"
    filename = "retro_skin.json"
    install_hint = "Windows Terminal config - add scheme to settings.json"
    comment_prefix = None

    def scheme_name(self, skin: SkinConfig) -> str:
        return f"Retro Skin: {comment_safe(skin.name)}"

    def build_document(self, skin: SkinConfig, colors: ResolvedColors) -> Dict[str, Any]:
        """Build the JSON document as a dict."""
        name = self.scheme_name(skin)
        scheme: Dict[str, Any] = {
            "name": name,
            "background": colors.background,
            "foreground": colors.foreground,
            "cursorColor": colors.foreground,
            "selectionBackground": colors.foreground,
        }
        for slot, color in colors.palette:
            scheme[SCHEME_KEYS[slot]] = color

        return {
            "schemes": [scheme],
            "profiles": {
                "defaults": {
                    "colorScheme": name,
                    "experimental.retroTerminalEffect": skin.has_effect(EffectType.CRT_SCANLINES),
                },
            },
        }

    def _emit(self, skin: SkinConfig, colors: ResolvedColors) -> str:
        return json.dumps(self.build_document(skin, colors), indent=2) + "\n"
