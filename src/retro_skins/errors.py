"""Exceptions raised by the Retro Skins core and dispatch layers."""

from typing import Iterable, List


class RetroSkinsError(Exception):
    """Base exception for Retro Skins operations."""
    pass


class UnknownPresetError(RetroSkinsError):
    """Requested skin key is not in the catalog."""

    def __init__(self, key: str, available: Iterable[str] = ()):
        self.key = key
        self.available: List[str] = list(available)
        super().__init__(f"Unknown skin: {key}")


class UnknownTargetError(RetroSkinsError):
    """Requested terminal key is not a supported adapter target."""

    def __init__(self, key: str, available: Iterable[str] = ()):
        self.key = key
        self.available: List[str] = list(available)
        super().__init__(f"Invalid terminal: {key}")


class MalformedColorError(RetroSkinsError, ValueError):
    """A color value does not match the #RRGGBB pattern."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid color for '{field}': {value!r} (expected #RRGGBB)")
