"""Utility functions for skin engine operations.

This module provides hex color validation and conversion, the palette
derivation fallback shared by every adapter, glow shadow derivation,
contrast calculation, and dictionary merging for skin inheritance.
"""

import re
import colorsys
from typing import Tuple, Optional, Dict, Any

from .schema import BASE_SLOTS, SkinConfig, EffectType
from ..errors import MalformedColorError

HEX_COLOR_PATTERN = re.compile(r'#[0-9A-Fa-f]{6}')

# Bright slots are their base color lerped toward white by this factor.
BRIGHT_FACTOR = 0.4

# Minimum saturation/value for hue slots derived from the accent color.
MIN_DERIVED_SATURATION = 0.5
MIN_DERIVED_VALUE = 0.6

# Fixed hues (degrees) for the chromatic base slots.
DERIVED_HUES: Dict[str, int] = {
    'red': 0,
    'yellow': 60,
    'green': 120,
    'cyan': 180,
    'blue': 240,
    'purple': 300,
}


def is_hex_color(value: Any) -> bool:
    """Return True if value is a ``#RRGGBB`` string."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value) is not None


def validate_hex_color(field: str, value: Any) -> str:
    """Check a color value against the ``#RRGGBB`` pattern.

    Args:
        field: Name of the field being validated (for error reporting)
        value: Color value

    Returns:
        The unchanged color string

    Raises:
        MalformedColorError: If value is not a ``#RRGGBB`` string
    """
    if not is_hex_color(value):
        raise MalformedColorError(field, value)
    return value


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        MalformedColorError: If hex_color is not a valid hex color
    """
    validate_hex_color('color', hex_color)
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to an uppercase hex color string."""
    return f"#{r:02X}{g:02X}{b:02X}"


def _round_channel(value: float) -> int:
    # Half-up rounding keeps derived colors identical across platforms.
    return max(0, min(255, int(value + 0.5)))


def lighten(hex_color: str, factor: float = BRIGHT_FACTOR) -> str:
    """Interpolate a color toward white.

    Each channel becomes ``c + (255 - c) * factor``, rounded half up.

    Args:
        hex_color: Source hex color
        factor: 0.0 keeps the color, 1.0 yields white

    Returns:
        Uppercase hex color string
    """
    r, g, b = hex_to_rgb(hex_color)
    return rgb_to_hex(*(_round_channel(c + (255 - c) * factor) for c in (r, g, b)))


def derive_palette(background: str, foreground: str, accent: str) -> Dict[str, str]:
    """Synthesize a 16-slot ANSI palette from the scheme's main colors.

    ``black`` is the background and ``white`` the foreground. The chromatic
    slots use the fixed hues in ``DERIVED_HUES`` with the accent's saturation
    and value (floored at ``MIN_DERIVED_SATURATION``/``MIN_DERIVED_VALUE``).
    Each bright slot is its base slot passed through ``lighten``.

    Args:
        background, foreground, accent: ``#RRGGBB`` colors

    Returns:
        Dict of slot name to uppercase hex color, in ANSI slot order

    Raises:
        MalformedColorError: If any input color is malformed
    """
    validate_hex_color('background', background)
    validate_hex_color('foreground', foreground)
    ar, ag, ab = hex_to_rgb(accent)

    _, saturation, value = colorsys.rgb_to_hsv(ar / 255.0, ag / 255.0, ab / 255.0)
    saturation = max(saturation, MIN_DERIVED_SATURATION)
    value = max(value, MIN_DERIVED_VALUE)

    base: Dict[str, str] = {}
    for slot in BASE_SLOTS:
        if slot == 'black':
            base[slot] = background.upper()
        elif slot == 'white':
            base[slot] = foreground.upper()
        else:
            r, g, b = colorsys.hsv_to_rgb(DERIVED_HUES[slot] / 360.0, saturation, value)
            base[slot] = rgb_to_hex(_round_channel(r * 255), _round_channel(g * 255),
                                    _round_channel(b * 255))

    palette = dict(base)
    for slot in BASE_SLOTS:
        palette[f"bright_{slot}"] = lighten(base[slot])
    return palette


def format_number(value: float) -> str:
    """Format a float compactly and deterministically ('2.4', '1', '0.05')."""
    return f"{value:g}"


def glow_shadow(skin: SkinConfig, glow_color: Optional[str] = None) -> Optional[str]:
    """Derive a text-shadow value from the skin's phosphor glow effect.

    Args:
        skin: Skin to inspect
        glow_color: Validated glow color (defaults to ``skin.colors.glow``)

    Returns:
        Shadow string like ``0 0 2.4px #00FF41``, or None without glow
    """
    effect = skin.get_effect(EffectType.PHOSPHOR_GLOW)
    if effect is None or effect.intensity <= 0:
        return None
    color = glow_color or validate_hex_color('glow', skin.colors.glow)
    return f"0 0 {format_number(effect.intensity * 4)}px {color}"


def calculate_luminance(r: int, g: int, b: int) -> float:
    """Calculate relative luminance of an RGB color.

    Uses the WCAG formula for luminance calculation.
    """
    def gamma_correct(value: int) -> float:
        normalized = value / 255.0
        if normalized <= 0.03928:
            return normalized / 12.92
        else:
            return ((normalized + 0.055) / 1.055) ** 2.4

    return (0.2126 * gamma_correct(r) + 0.7152 * gamma_correct(g)
            + 0.0722 * gamma_correct(b))


def calculate_contrast_ratio(color1: str, color2: str) -> float:
    """Calculate WCAG contrast ratio between two hex colors.

    Returns:
        Contrast ratio 1.0-21.0 (higher is more contrast)

    Raises:
        MalformedColorError: If either color is malformed
    """
    lum1 = calculate_luminance(*hex_to_rgb(color1))
    lum2 = calculate_luminance(*hex_to_rgb(color2))

    if lum1 < lum2:
        lum1, lum2 = lum2, lum1

    return (lum1 + 0.05) / (lum2 + 0.05)


def deep_merge_dict(base: Dict[Any, Any], overlay: Dict[Any, Any]) -> Dict[Any, Any]:
    """Deep merge two dictionaries, with overlay taking precedence.

    Returns:
        New merged dictionary
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_dict(result[key], value)
        else:
            result[key] = value

    return result
