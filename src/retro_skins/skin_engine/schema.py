"""Skin schema definitions for the Retro Skins translation layer.

This module defines the Pydantic models shared by every terminal adapter:
effect types, the color scheme with its optional 16-slot ANSI palette,
performance hints, and the skin record itself. Color strings are not checked
here; adapters validate them when they consume them.
"""

from typing import Dict, Any, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class EffectType(str, Enum):
    """Visual effect identifiers"""
    CRT_SCANLINES = "crt-scanlines"
    CRT_CURVATURE = "crt-curvature"
    CRT_FLICKER = "crt-flicker"
    PHOSPHOR_GLOW = "phosphor-glow"
    PHOSPHOR_PERSISTENCE = "phosphor-persistence"
    SHAKE = "shake"
    ANIMATED_BG = "animated-bg"
    COLOR_SHIFT = "color-shift"
    VIGNETTE = "vignette"
    NOISE = "noise"


class Quality(str, Enum):
    """Render quality presets"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Fixed slot order shared by every adapter: 8 base colors then their bright twins.
BASE_SLOTS: Tuple[str, ...] = (
    "black", "red", "green", "yellow", "blue", "purple", "cyan", "white",
)
BRIGHT_SLOTS: Tuple[str, ...] = tuple(f"bright_{slot}" for slot in BASE_SLOTS)
ANSI_SLOTS: Tuple[str, ...] = BASE_SLOTS + BRIGHT_SLOTS


class VisualEffect(BaseModel):
    """A named visual effect with an advisory intensity"""

    model_config = ConfigDict(frozen=True)

    type: EffectType
    intensity: float = Field(..., description="Effect strength, nominally 0-1")
    params: Dict[str, float] = Field(default_factory=dict)


class ANSIPalette(BaseModel):
    """Explicit 16-color ANSI palette.

    Field names are snake_case; skin files may use the camelCase aliases
    (``brightBlack`` and so on).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    black: str
    red: str
    green: str
    yellow: str
    blue: str
    purple: str
    cyan: str
    white: str
    bright_black: str = Field(..., alias="brightBlack")
    bright_red: str = Field(..., alias="brightRed")
    bright_green: str = Field(..., alias="brightGreen")
    bright_yellow: str = Field(..., alias="brightYellow")
    bright_blue: str = Field(..., alias="brightBlue")
    bright_purple: str = Field(..., alias="brightPurple")
    bright_cyan: str = Field(..., alias="brightCyan")
    bright_white: str = Field(..., alias="brightWhite")

    def slots(self) -> Tuple[Tuple[str, str], ...]:
        """Return (slot, color) pairs in fixed ANSI order."""
        return tuple((slot, getattr(self, slot)) for slot in ANSI_SLOTS)


class ColorScheme(BaseModel):
    """Skin color scheme"""

    model_config = ConfigDict(frozen=True)

    background: str = Field(..., description="Background color")
    foreground: str = Field(..., description="Foreground/text color")
    accent: str = Field(..., description="Accent color")
    glow: str = Field(..., description="Glow color")
    palette: Optional[ANSIPalette] = None


class PerformanceConfig(BaseModel):
    """Performance hints for the preview layer; adapters ignore these"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gpu_acceleration: bool = Field(True, alias="gpuAcceleration")
    target_fps: int = Field(60, gt=0, alias="targetFps")
    quality: Quality = Quality.HIGH


class SkinConfig(BaseModel):
    """Complete skin definition"""

    model_config = ConfigDict(frozen=True)

    name: str
    effects: Tuple[VisualEffect, ...] = ()
    colors: ColorScheme
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)

    def get_effect(self, effect_type: Union[EffectType, str]) -> Optional[VisualEffect]:
        """Return the first effect of the given type, if any."""
        effect_type = EffectType(effect_type)
        for effect in self.effects:
            if effect.type == effect_type:
                return effect
        return None

    def has_effect(self, effect_type: Union[EffectType, str]) -> bool:
        return self.get_effect(effect_type) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain data using skin-file key names."""
        return self.model_dump(mode="json", by_alias=True)


def default_color_scheme() -> ColorScheme:
    """Green phosphor scheme used when a skin omits its colors."""
    return ColorScheme(
        background="#0D0208",
        foreground="#00FF41",
        accent="#008F11",
        glow="#00FF41",
    )


def create_skin(name: Optional[str] = None,
                effects: Optional[Any] = None,
                colors: Optional[Union[ColorScheme, Dict[str, Any]]] = None,
                performance: Optional[Union[PerformanceConfig, Dict[str, Any]]] = None) -> SkinConfig:
    """Build a skin, filling omitted fields with defaults.

    Args:
        name: Display name (defaults to ``"Default"``)
        effects: Sequence of VisualEffect models or dicts
        colors: ColorScheme model or dict (defaults to green phosphor)
        performance: PerformanceConfig model or dict

    Returns:
        A new SkinConfig
    """
    return SkinConfig(
        name=name or "Default",
        effects=effects if effects is not None else (),
        colors=colors if colors is not None else default_color_scheme(),
        performance=performance if performance is not None else PerformanceConfig(),
    )
