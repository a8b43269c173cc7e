"""Tests for the skin registry."""

import json
import logging

import pytest
import yaml

from retro_skins.config import ConfigModel
from retro_skins.errors import UnknownPresetError
from retro_skins.skin_engine import PRESET_SKINS, SkinRegistry, create_skin


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestBuiltinRegistry:
    """Test the registry with only built-in presets."""

    def setup_method(self):
        self.registry = SkinRegistry()

    def test_keys_follow_catalog_order(self):
        assert self.registry.keys() == list(PRESET_SKINS)

    def test_get_returns_fresh_skin(self):
        first = self.registry.get("amber")
        second = self.registry.get("amber")
        assert first == second
        assert first is not second

    def test_get_unknown_returns_none(self):
        assert self.registry.get("nope") is None
        assert "nope" not in self.registry

    def test_require_unknown_raises(self):
        with pytest.raises(UnknownPresetError) as exc_info:
            self.registry.require("nope")
        assert exc_info.value.key == "nope"
        assert "phosphor" in exc_info.value.available
        assert "Unknown skin" in str(exc_info.value)

    def test_custom_presets(self):
        registry = SkinRegistry(presets={"plain": lambda: create_skin(name="Plain")})
        assert registry.keys() == ["plain"]
        assert registry.get("plain").name == "Plain"

    def test_presets_are_read_only(self):
        with pytest.raises(TypeError):
            self.registry.presets["x"] = create_skin

    def test_list_skins(self):
        skins = self.registry.list_skins()
        assert [s["key"] for s in skins] == list(PRESET_SKINS)
        phosphor = skins[0]
        assert phosphor["name"] == "Phosphor CRT"
        assert phosphor["type"] == "builtin"
        assert phosphor["effects"][0] == "crt-scanlines"

    def test_missing_skins_dir_is_fine(self, tmp_path):
        registry = SkinRegistry(skins_dir=tmp_path / "missing")
        assert registry.keys() == list(PRESET_SKINS)


class TestUserSkins:
    """Test loading skins from a user directory."""

    def test_yaml_skin(self, skins_dir):
        write_yaml(skins_dir / "ocean.yaml", {
            "name": "Ocean",
            "colors": {"background": "#001020", "foreground": "#80D0FF",
                       "accent": "#0060A0", "glow": "#80D0FF"},
        })
        registry = SkinRegistry(skins_dir=skins_dir)

        assert registry.keys()[-1] == "ocean"
        skin = registry.get("ocean")
        assert skin.name == "Ocean"
        assert skin.colors.palette is None
        assert skin.effects == ()

    def test_json_skin_default_name(self, skins_dir):
        (skins_dir / "deep_sea.json").write_text(json.dumps({
            "effects": [{"type": "noise", "intensity": 0.1}],
        }), encoding="utf-8")
        skin = SkinRegistry(skins_dir=skins_dir).get("deep_sea")

        assert skin.name == "Deep Sea"
        assert skin.colors.background == "#0D0208"

    def test_extends_preset(self, skins_dir):
        write_yaml(skins_dir / "dim.yaml", {
            "extends": "phosphor",
            "name": "Dim Phosphor",
            "colors": {"foreground": "#00CC33", "palette": {"bright_white": "#AAFFAA"}},
        })
        skin = SkinRegistry(skins_dir=skins_dir).get("dim")

        assert skin.name == "Dim Phosphor"
        assert skin.colors.foreground == "#00CC33"
        assert skin.colors.background == "#0D0208"
        assert skin.colors.palette.bright_white == "#AAFFAA"
        assert skin.colors.palette.bright_black == "#1A1A1A"
        assert len(skin.effects) == 5

    def test_extends_unknown(self, skins_dir):
        write_yaml(skins_dir / "orphan.yaml", {"extends": "missing"})
        registry = SkinRegistry(skins_dir=skins_dir)

        with pytest.raises(ValueError, match="extends unknown skin"):
            registry.get("orphan")

    def test_shadowing_preset_skipped(self, skins_dir, caplog):
        write_yaml(skins_dir / "amber.yaml", {"name": "Fake Amber"})
        with caplog.at_level(logging.WARNING):
            registry = SkinRegistry(skins_dir=skins_dir)

        assert registry.get("amber").name == "Amber Monochrome"
        assert "shadows a built-in preset" in caplog.text

    def test_invalid_file_listed_with_error(self, skins_dir):
        (skins_dir / "broken.yaml").write_text("colors: [unclosed", encoding="utf-8")
        registry = SkinRegistry(skins_dir=skins_dir)

        broken = [s for s in registry.list_skins() if s["key"] == "broken"][0]
        assert broken["type"] == "user"
        assert "Invalid YAML" in broken["error"]

    def test_invalid_definition(self, skins_dir):
        write_yaml(skins_dir / "bad.yaml", {"effects": [{"type": "teleport", "intensity": 1}]})
        with pytest.raises(ValueError, match="Invalid skin definition"):
            SkinRegistry(skins_dir=skins_dir).get("bad")

    @pytest.mark.parametrize("effects", [True, 5, "noise"])
    def test_scalar_effects_rejected(self, skins_dir, effects):
        write_yaml(skins_dir / "bad.yaml", {"extends": "phosphor", "effects": effects})
        registry = SkinRegistry(skins_dir=skins_dir)

        with pytest.raises(ValueError, match="Invalid skin definition"):
            registry.get("bad")

        bad = [s for s in registry.list_skins() if s["key"] == "bad"][0]
        assert "Invalid skin definition" in bad["error"]

    def test_non_string_extends(self, skins_dir):
        write_yaml(skins_dir / "odd.yaml", {"extends": ["phosphor"]})
        with pytest.raises(ValueError, match="non-string extends"):
            SkinRegistry(skins_dir=skins_dir).get("odd")

    def test_file_removed_after_scan(self, skins_dir):
        path = write_yaml(skins_dir / "gone.yaml", {"name": "Gone"})
        registry = SkinRegistry(skins_dir=skins_dir)
        path.unlink()

        gone = [s for s in registry.list_skins() if s["key"] == "gone"][0]
        assert "not found" in gone["error"]
        assert registry.validate("gone")[0].startswith("Failed to load skin")

    def test_ignores_other_files(self, skins_dir):
        (skins_dir / "notes.txt").write_text("hello", encoding="utf-8")
        assert SkinRegistry(skins_dir=skins_dir).keys() == list(PRESET_SKINS)

    def test_load_skin_file_unsupported(self, tmp_path):
        path = tmp_path / "skin.toml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported file format"):
            SkinRegistry().load_skin_file(path)

    def test_load_skin_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SkinRegistry().load_skin_file(tmp_path / "gone.yaml")

    def test_from_config(self, skins_dir):
        write_yaml(skins_dir / "ocean.yaml", {"name": "Ocean"})
        registry = SkinRegistry.from_config(ConfigModel())
        assert "ocean" in registry


class TestValidate:
    """Test eager skin validation."""

    def test_phosphor_is_clean(self):
        assert SkinRegistry().validate("phosphor") == []

    def test_puncore_low_contrast(self):
        issues = SkinRegistry().validate("puncore")
        assert len(issues) == 1
        assert "Low contrast" in issues[0]

    def test_unknown_skin(self):
        issues = SkinRegistry().validate("nope")
        assert issues and "Unknown skin" in issues[0]

    def test_reports_colors_and_intensity(self, skins_dir):
        write_yaml(skins_dir / "messy.yaml", {
            "extends": "phosphor",
            "effects": [{"type": "shake", "intensity": 1.5}],
            "colors": {"glow": "bright", "palette": {"red": "#F00"}},
        })
        issues = SkinRegistry(skins_dir=skins_dir).validate("messy")

        assert "Invalid color for 'glow': 'bright'" in issues
        assert "Invalid color for 'palette.red': '#F00'" in issues
        assert any("intensity 1.5 outside 0-1" in issue for issue in issues)
