"""Configuration management for the Retro Skins CLI."""

import os
import logging
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional
import yaml

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "RETRO_SKINS_HOME"


def default_data_dir() -> str:
    return os.environ.get(HOME_ENV_VAR, "~/.retro_skins")


@dataclass
class ConfigModel:
    """Global configuration model for Retro Skins."""

    # File paths
    data_dir: str = ""
    skins_dir: str = ""  # Defaults to <data_dir>/skins

    # Behavior settings
    default_terminal: str = "wezterm"
    show_effects: bool = True

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        # Expand user paths
        self.data_dir = os.path.expanduser(self.data_dir or default_data_dir())
        self.skins_dir = os.path.expanduser(
            self.skins_dir or os.path.join(self.data_dir, "skins")
        )
        self.log_level = str(self.log_level).upper()

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "skins_dir": self.skins_dir,
            "default_terminal": self.default_terminal,
            "show_effects": self.show_effects,
            "log_level": self.log_level,
        }
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping")

        known = {f.name: f.type for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - set(known))
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if not isinstance(value, known[key]):
                raise ValueError(
                    f"Config key '{key}' must be {known[key].__name__}, "
                    f"got {type(value).__name__}"
                )
            values[key] = value

        return cls(**values)

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for Retro Skins."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or fall back to defaults."""
        if cls._instance is not None and config_path is None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
                logger.warning("Using default configuration.")
                config = ConfigModel()
        else:
            logger.debug(f"No configuration at {config_path}; using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load()


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
