"""Terminal config adapters.

This package contains one TerminalAdapter implementation per supported
terminal emulator, selected through the TerminalTarget enum.
"""

from types import MappingProxyType
from typing import List, Mapping, Union

from .base import (
    TerminalAdapter,
    TerminalTarget,
    ResolvedColors,
    resolve_colors,
)
from .wezterm import WezTermAdapter
from .alacritty import AlacrittyAdapter
from .kitty import KittyAdapter
from .windows_terminal import WindowsTerminalAdapter
from ..errors import UnknownTargetError
from ..skin_engine.schema import SkinConfig

ADAPTERS: Mapping[TerminalTarget, TerminalAdapter] = MappingProxyType({
    TerminalTarget.WEZTERM: WezTermAdapter(),
    TerminalTarget.ALACRITTY: AlacrittyAdapter(),
    TerminalTarget.KITTY: KittyAdapter(),
    TerminalTarget.WINDOWS_TERMINAL: WindowsTerminalAdapter(),
})


def available_targets() -> List[str]:
    """Return the supported terminal keys."""
    return [target.value for target in TerminalTarget]


def parse_target(target: Union[TerminalTarget, str]) -> TerminalTarget:
    """Resolve a terminal key (case-insensitive) to a TerminalTarget.

    Raises:
        UnknownTargetError: If the key is not supported
    """
    if isinstance(target, TerminalTarget):
        return target
    try:
        return TerminalTarget(str(target).strip().lower())
    except ValueError:
        raise UnknownTargetError(str(target), available_targets()) from None


def get_adapter(target: Union[TerminalTarget, str]) -> TerminalAdapter:
    """Return the adapter for a terminal key or enum member."""
    return ADAPTERS[parse_target(target)]


def render(skin: SkinConfig, target: Union[TerminalTarget, str]) -> str:
    """Render a skin for a terminal in one call."""
    return get_adapter(target).render(skin)


__all__ = [
    'TerminalAdapter',
    'TerminalTarget',
    'ResolvedColors',
    'resolve_colors',
    'WezTermAdapter',
    'AlacrittyAdapter',
    'KittyAdapter',
    'WindowsTerminalAdapter',
    'ADAPTERS',
    'available_targets',
    'parse_target',
    'get_adapter',
    'render',
]
