"""Retro Skins Skin Engine Package.

This package provides the shared skin model for terminal config generation:
effect types, color schemes with 16-slot ANSI palettes, the built-in preset
catalog, the skin registry, and hex color utilities.
"""

from .registry import SkinRegistry
from .presets import PRESET_SKINS
from .schema import (
    # Core models
    SkinConfig,
    ColorScheme,
    ANSIPalette,
    VisualEffect,
    PerformanceConfig,

    # Enums
    EffectType,
    Quality,

    # Slot order
    BASE_SLOTS,
    BRIGHT_SLOTS,
    ANSI_SLOTS,

    create_skin,
    default_color_scheme,
)
from .utils import (
    BRIGHT_FACTOR,
    is_hex_color,
    validate_hex_color,
    hex_to_rgb,
    rgb_to_hex,
    lighten,
    derive_palette,
    glow_shadow,
    calculate_contrast_ratio,
    deep_merge_dict,
)

__all__ = [
    # Main classes
    "SkinRegistry",
    "PRESET_SKINS",

    # Schema models
    "SkinConfig",
    "ColorScheme",
    "ANSIPalette",
    "VisualEffect",
    "PerformanceConfig",

    # Enums
    "EffectType",
    "Quality",

    "BASE_SLOTS",
    "BRIGHT_SLOTS",
    "ANSI_SLOTS",
    "create_skin",
    "default_color_scheme",

    # Utilities
    "BRIGHT_FACTOR",
    "is_hex_color",
    "validate_hex_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "lighten",
    "derive_palette",
    "glow_shadow",
    "calculate_contrast_ratio",
    "deep_merge_dict",
]
