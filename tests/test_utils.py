"""Tests for skin engine color utilities."""

import pytest

from retro_skins.errors import MalformedColorError
from retro_skins.skin_engine import (
    BASE_SLOTS,
    BRIGHT_FACTOR,
    PRESET_SKINS,
    calculate_contrast_ratio,
    create_skin,
    deep_merge_dict,
    derive_palette,
    glow_shadow,
    hex_to_rgb,
    is_hex_color,
    lighten,
    rgb_to_hex,
    validate_hex_color,
)


class TestHexValidation:
    """Test the #RRGGBB check."""

    @pytest.mark.parametrize("value", ["#00FF41", "#abcdef", "#AbC012", "#000000"])
    def test_valid(self, value):
        assert is_hex_color(value)
        assert validate_hex_color("foreground", value) == value

    @pytest.mark.parametrize("value", [
        "#FFF", "00FF41", "#00FF4", "#00FF411", "#GGGGGG", "green",
        "", "#00FF41\n", " #00FF41", "#00FF41FF", None, 0x00FF41,
    ])
    def test_invalid(self, value):
        assert not is_hex_color(value)
        with pytest.raises(MalformedColorError) as exc_info:
            validate_hex_color("foreground", value)
        assert exc_info.value.field == "foreground"
        assert exc_info.value.value == value

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_hex_color("glow", "nope")


class TestConversions:
    """Test hex/RGB conversions."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#00FF41") == (0, 255, 65)
        assert hex_to_rgb("#ff8800") == (255, 136, 0)

    def test_rgb_to_hex_uppercase(self):
        assert rgb_to_hex(255, 136, 0) == "#FF8800"

    def test_hex_to_rgb_rejects_malformed(self):
        with pytest.raises(MalformedColorError):
            hex_to_rgb("FF0000")


class TestLighten:
    """Test interpolation toward white."""

    def test_black(self):
        assert lighten("#000000") == "#666666"

    def test_red(self):
        assert lighten("#FF0000") == "#FF6666"

    def test_white_unchanged(self):
        assert lighten("#FFFFFF") == "#FFFFFF"

    def test_factor_bounds(self):
        assert lighten("#123456", 0.0) == "#123456"
        assert lighten("#123456", 1.0) == "#FFFFFF"

    def test_default_factor(self):
        assert lighten("#336699") == lighten("#336699", BRIGHT_FACTOR)


class TestDerivePalette:
    """Test the palette derivation fallback."""

    def setup_method(self):
        self.palette = derive_palette("#0d0208", "#00FF41", "#008F11")

    def test_has_all_slots(self):
        assert len(self.palette) == 16
        assert all(is_hex_color(color) for color in self.palette.values())

    def test_black_and_white_from_scheme(self):
        assert self.palette["black"] == "#0D0208"
        assert self.palette["white"] == "#00FF41"

    def test_hue_slots(self):
        # Accent #008F11 is fully saturated with value 0.56, floored to 0.6.
        assert self.palette["red"] == "#990000"
        assert self.palette["bright_red"] == "#C26666"

    @pytest.mark.parametrize("slot", BASE_SLOTS)
    def test_bright_is_lightened_base(self, slot):
        assert self.palette[f"bright_{slot}"] == lighten(self.palette[slot])

    def test_grey_accent_gets_minimum_saturation(self):
        palette = derive_palette("#000000", "#FFFFFF", "#808080")
        r, g, b = hex_to_rgb(palette["green"])
        assert g > r and g > b

    def test_deterministic(self):
        assert derive_palette("#0d0208", "#00FF41", "#008F11") == self.palette

    def test_malformed_input(self):
        with pytest.raises(MalformedColorError):
            derive_palette("#000000", "#FFFFFF", "accent")


class TestGlowShadow:
    """Test glow shadow derivation."""

    def test_phosphor(self):
        assert glow_shadow(PRESET_SKINS["phosphor"]()) == "0 0 2.4px #00FF41"

    def test_cyber_uses_glow_color(self):
        assert glow_shadow(PRESET_SKINS["cyber"]()) == "0 0 2.8px #E040FB"

    def test_no_glow_effect(self):
        assert glow_shadow(create_skin()) is None

    def test_zero_intensity(self):
        skin = create_skin(effects=[{"type": "phosphor-glow", "intensity": 0}])
        assert glow_shadow(skin) is None

    def test_malformed_glow(self):
        skin = create_skin(
            effects=[{"type": "phosphor-glow", "intensity": 0.5}],
            colors={"background": "#000000", "foreground": "#FFFFFF",
                    "accent": "#FFFFFF", "glow": "glowy"},
        )
        with pytest.raises(MalformedColorError):
            glow_shadow(skin)


class TestContrastAndMerge:
    """Test contrast ratio and dict merging."""

    def test_black_white_contrast(self):
        assert calculate_contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_contrast_is_symmetric(self):
        assert calculate_contrast_ratio("#00FF41", "#0D0208") == \
            calculate_contrast_ratio("#0D0208", "#00FF41")

    def test_deep_merge(self):
        base = {"colors": {"background": "#000000", "foreground": "#FFFFFF"}, "name": "a"}
        merged = deep_merge_dict(base, {"colors": {"foreground": "#00FF00"}})

        assert merged == {"colors": {"background": "#000000", "foreground": "#00FF00"}, "name": "a"}
        assert base["colors"]["foreground"] == "#FFFFFF"
