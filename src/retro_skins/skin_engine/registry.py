"""Skin registry for built-in presets and user skin files.

This module provides the SkinRegistry class: a read-only catalog of skin
producers built from the preset table, optionally extended with YAML/JSON
skin files found in a user skins directory.
"""

import json
import yaml
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Any
import logging

from pydantic import ValidationError

from .schema import ANSI_SLOTS, SkinConfig, create_skin
from .presets import PRESET_SKINS
from .utils import calculate_contrast_ratio, deep_merge_dict, is_hex_color
from ..errors import UnknownPresetError

logger = logging.getLogger(__name__)

SKIN_FILE_SUFFIXES = ('.yaml', '.yml', '.json')


def _camel_slot(slot: str) -> str:
    head, _, tail = slot.partition('_')
    return head + tail.capitalize() if tail else head


class SkinRegistry:
    """Read-only registry mapping skin keys to skin producers."""

    def __init__(self, presets: Optional[Mapping[str, Callable[[], SkinConfig]]] = None,
                 skins_dir: Optional[Path] = None):
        """Initialize the skin registry.

        Args:
            presets: Mapping of key to zero-argument skin producer
                (defaults to the built-in presets)
            skins_dir: Optional directory holding user skin files
        """
        self._presets = MappingProxyType(dict(presets if presets is not None else PRESET_SKINS))
        self.skins_dir = Path(skins_dir).expanduser() if skins_dir else None

        self._user_skins: Dict[str, Path] = {}
        self._scan_user_skins()

    @classmethod
    def from_config(cls, config) -> 'SkinRegistry':
        """Create a registry from application config."""
        skins_dir = Path(config.skins_dir) if getattr(config, 'skins_dir', None) else None
        return cls(skins_dir=skins_dir)

    def _scan_user_skins(self) -> None:
        """Scan the skins directory for user skin files."""
        self._user_skins.clear()

        if self.skins_dir is None or not self.skins_dir.is_dir():
            return

        for skin_file in sorted(self.skins_dir.iterdir()):
            if skin_file.suffix.lower() not in SKIN_FILE_SUFFIXES:
                continue
            key = skin_file.stem
            if key in self._presets:
                logger.warning(f"User skin '{key}' shadows a built-in preset; skipping {skin_file}")
                continue
            if key in self._user_skins:
                logger.warning(f"Duplicate user skin '{key}'; keeping {self._user_skins[key]}")
                continue
            self._user_skins[key] = skin_file
            logger.debug(f"Found user skin: {key}")

    @property
    def presets(self) -> Mapping[str, Callable[[], SkinConfig]]:
        return self._presets

    def keys(self) -> List[str]:
        """Return preset keys in catalog order, then user skin keys."""
        return list(self._presets) + sorted(self._user_skins)

    def __contains__(self, key: object) -> bool:
        return key in self._presets or key in self._user_skins

    def is_builtin(self, key: str) -> bool:
        return key in self._presets

    def get(self, key: str) -> Optional[SkinConfig]:
        """Build a fresh skin for a key.

        Args:
            key: Skin key

        Returns:
            A new SkinConfig, or None if the key is unknown

        Raises:
            ValueError: If a user skin file exists but is invalid
        """
        producer = self._presets.get(key)
        if producer is not None:
            return producer()

        skin_path = self._user_skins.get(key)
        if skin_path is not None:
            return self.load_skin_file(skin_path)

        return None

    def require(self, key: str) -> SkinConfig:
        """Like ``get`` but raises UnknownPresetError for unknown keys."""
        skin = self.get(key)
        if skin is None:
            raise UnknownPresetError(key, self.keys())
        return skin

    def list_skins(self) -> List[Dict[str, Any]]:
        """List all skins with summary metadata.

        Returns:
            List of skin info dictionaries
        """
        skins = []

        for key in self.keys():
            skin_type = 'builtin' if self.is_builtin(key) else 'user'
            try:
                skin = self.get(key)
                skins.append({
                    'key': key,
                    'name': skin.name,
                    'type': skin_type,
                    'background': skin.colors.background,
                    'foreground': skin.colors.foreground,
                    'effects': [effect.type.value for effect in skin.effects],
                })
            except (ValueError, OSError) as e:
                logger.error(f"Error loading skin {key}: {e}")
                skins.append({
                    'key': key,
                    'name': key,
                    'type': skin_type,
                    'error': str(e),
                })

        return skins

    def load_skin_file(self, path: Path) -> SkinConfig:
        """Load a skin from a YAML or JSON file.

        A file may set ``extends`` to a preset key; its fields are then deep
        merged over that preset.

        Args:
            path: Path to the skin file

        Returns:
            SkinConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file or skin definition is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Skin file not found: {path}")

        if path.suffix.lower() in ('.yaml', '.yml'):
            data = self._load_yaml_file(path)
        elif path.suffix.lower() == '.json':
            data = self._load_json_file(path)
        else:
            raise ValueError(f"Unsupported file format: {path.suffix}")

        return self._parse_skin_data(data, path.stem)

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML file safely."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {file_path}: {e}")

    def _load_json_file(self, file_path: Path) -> Dict[str, Any]:
        """Load JSON file safely."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

    def _parse_skin_data(self, skin_data: Dict[str, Any], skin_key: str) -> SkinConfig:
        """Parse raw skin data into a SkinConfig.

        Raises:
            ValueError: If skin data is invalid
        """
        if not isinstance(skin_data, dict):
            raise ValueError(f"Invalid skin definition for '{skin_key}': expected a mapping")

        skin_data = self._normalize_palette_keys(dict(skin_data))

        base_key = skin_data.pop('extends', None)
        if base_key is not None and not isinstance(base_key, str):
            raise ValueError(f"Skin '{skin_key}' has a non-string extends: {base_key!r}")
        if base_key:
            producer = self._presets.get(base_key)
            if producer is None:
                raise ValueError(f"Skin '{skin_key}' extends unknown skin '{base_key}'")
            base_data = producer().to_dict()
            base_data.pop('name', None)
            skin_data = deep_merge_dict(base_data, skin_data)

        try:
            return create_skin(
                name=skin_data.get('name') or skin_key.replace('_', ' ').title(),
                effects=skin_data.get('effects'),
                colors=skin_data.get('colors'),
                performance=skin_data.get('performance'),
            )
        except ValidationError as e:
            raise ValueError(f"Invalid skin definition for '{skin_key}': {e}")

    @staticmethod
    def _normalize_palette_keys(skin_data: Dict[str, Any]) -> Dict[str, Any]:
        """Rewrite snake_case palette slots to the camelCase used by presets."""
        colors = skin_data.get('colors')
        if isinstance(colors, dict) and isinstance(colors.get('palette'), dict):
            palette = {_camel_slot(k) if k in ANSI_SLOTS else k: v
                       for k, v in colors['palette'].items()}
            skin_data['colors'] = dict(colors, palette=palette)
        return skin_data

    def validate(self, key: str) -> List[str]:
        """Validate a skin and return any issues.

        Checks color formats, effect intensity range, and foreground contrast.
        Rendering still validates colors on its own.

        Args:
            key: Skin key

        Returns:
            List of validation issues (empty if valid)
        """
        issues: List[str] = []

        try:
            skin = self.require(key)
        except (UnknownPresetError, ValueError, OSError) as e:
            return [f"Failed to load skin: {e}"]

        colors = skin.colors
        for field in ('background', 'foreground', 'accent', 'glow'):
            value = getattr(colors, field)
            if not is_hex_color(value):
                issues.append(f"Invalid color for '{field}': {value!r}")

        if colors.palette is not None:
            for slot, value in colors.palette.slots():
                if not is_hex_color(value):
                    issues.append(f"Invalid color for 'palette.{slot}': {value!r}")

        for effect in skin.effects:
            if not 0.0 <= effect.intensity <= 1.0:
                issues.append(
                    f"Effect '{effect.type.value}' intensity {effect.intensity} outside 0-1"
                )

        if is_hex_color(colors.foreground) and is_hex_color(colors.background):
            ratio = calculate_contrast_ratio(colors.foreground, colors.background)
            if ratio < 3.0:
                issues.append(
                    f"Low contrast between foreground and background: "
                    f"{ratio:.1f}:1 (recommended 3:1+)"
                )

        return issues
