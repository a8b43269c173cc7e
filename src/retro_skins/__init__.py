"""Retro Skins - translate retro CRT skins into terminal emulator configs."""

__version__ = "1.0.0"
__author__ = "Retro Skins Team"

from .errors import (
    RetroSkinsError,
    UnknownPresetError,
    UnknownTargetError,
    MalformedColorError,
)
from .skin_engine import (
    SkinConfig,
    ColorScheme,
    ANSIPalette,
    VisualEffect,
    EffectType,
    PRESET_SKINS,
    SkinRegistry,
    create_skin,
)
from .adapters import TerminalTarget, get_adapter, render

__all__ = [
    "SkinConfig",
    "ColorScheme",
    "ANSIPalette",
    "VisualEffect",
    "EffectType",
    "PRESET_SKINS",
    "SkinRegistry",
    "create_skin",
    "TerminalTarget",
    "get_adapter",
    "render",
    "RetroSkinsError",
    "UnknownPresetError",
    "UnknownTargetError",
    "MalformedColorError",
    "__version__",
]
