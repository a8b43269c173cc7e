"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from retro_skins.config import Config, HOME_ENV_VAR  # noqa: E402
from retro_skins.skin_engine import create_skin  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the config home at a temp dir and drop any cached config."""
    home = tmp_path / "retro_home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    Config._instance = None
    yield home
    Config._instance = None


@pytest.fixture
def skins_dir(isolated_home):
    path = isolated_home / "skins"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def unpaletted_skin():
    """A skin with no explicit palette, forcing derivation."""
    return create_skin(
        name="Derived",
        effects=[{"type": "phosphor-glow", "intensity": 0.5, "params": {"radius": 2}}],
        colors={
            "background": "#101010",
            "foreground": "#D0D0D0",
            "accent": "#3366CC",
            "glow": "#D0D0D0",
        },
    )
