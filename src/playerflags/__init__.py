"""
Player flags: named values attached to a player through its attribute store.

- Flag handles with explicit get_value/set_value/remove accessors
- JSON round-tripping for structured values (dicts and lists)
- Registry for existence checks, enumeration and clearing
- Added/removed notification streams derived from attribute changes
"""

from .core.errors import (
    PlayerFlagsError,
    InvalidOwnerError,
    InvalidIdentifierError,
    InvalidMemberError,
    AttributeTypeError,
    SnapshotLoadError,
)
from .core.scheduler import Scheduler
from .core.signal import Signal, Connection
from .host.player import Player, AttributeStore
from .flags.codec import encode, decode
from .flags.handle import Flag, DEFAULT_PREFIX
from .flags.registry import FlagRegistry
from .flags.streams import FlagStream
from .system.settings import Settings, SettingsData

__all__ = [
    'PlayerFlagsError',
    'InvalidOwnerError',
    'InvalidIdentifierError',
    'InvalidMemberError',
    'AttributeTypeError',
    'SnapshotLoadError',
    'Scheduler',
    'Signal',
    'Connection',
    'Player',
    'AttributeStore',
    'encode',
    'decode',
    'Flag',
    'DEFAULT_PREFIX',
    'FlagRegistry',
    'FlagStream',
    'Settings',
    'SettingsData',
]
