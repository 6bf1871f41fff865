"""Stateless flag operations over a player's attributes.

Every flag lives in exactly one attribute, ``<prefix><identifier>``. The
attribute is the only source of truth: a flag exists iff the attribute is
set, and handles are built on demand rather than cached.
"""
from __future__ import annotations
from typing import Any, Dict
from ..core.logging import logger
from ..core.scheduler import Scheduler
from ..host.player import Player
from .codec import decode, decode_with_default
from .handle import DEFAULT_PREFIX, Flag, check_identifier, check_owner
from .streams import FlagStream

class FlagRegistry:
    """Flag operations bound to one attribute prefix and the host's turn scheduler.

    Immediate fires of the added stream are deferred onto ``scheduler``, so it
    must be the scheduler the host steps every turn.
    """

    def __init__(self, scheduler: Scheduler, prefix: str = DEFAULT_PREFIX):
        if not isinstance(scheduler, Scheduler):
            raise TypeError(f"FlagRegistry needs the host Scheduler, got {scheduler!r}")
        if not isinstance(prefix, str) or not prefix:
            raise ValueError(f"Flag prefix must be a non-empty string, got {prefix!r}")
        self.prefix = prefix
        self.scheduler = scheduler

    @classmethod
    def from_settings(cls, settings, scheduler: Scheduler) -> "FlagRegistry":
        return cls(scheduler, settings.data.prefix)

    def key_for(self, name: str) -> str:
        return self.prefix + name

    def _raw(self, owner: Player, name: str) -> Any:
        check_owner(owner)
        check_identifier(name)
        return owner.get_attribute(self.key_for(name))

    def has_flag(self, owner: Player, name: str) -> bool:
        return self._raw(owner, name) is not None

    def get_flag_value(self, owner: Player, name: str) -> Any:
        raw = self._raw(owner, name)
        if raw is None:
            return None
        return decode(raw)

    def flag(self, owner: Player, name: str, default: Any = True) -> Flag:
        """Get-or-create. An absent flag is written with ``default`` straight away."""
        raw = self._raw(owner, name)
        if raw is not None:
            return Flag(owner, name, decode_with_default(raw, default), self.prefix)
        handle = Flag(owner, name, default, self.prefix)
        handle.set_value(default)
        logger.debug("FlagCreated", player=owner.name, flag=name)
        return handle

    def get_flags(self, owner: Player) -> Dict[str, Flag]:
        check_owner(owner)
        flags: Dict[str, Flag] = {}
        for key, raw in owner.get_attributes().items():
            if not key.startswith(self.prefix):
                continue
            name = key[len(self.prefix):]
            if not name:
                continue
            flags[name] = Flag(owner, name, decode(raw), self.prefix)
        return flags

    def clear_flags(self, owner: Player) -> int:
        check_owner(owner)
        cleared = 0
        for key in owner.get_attributes():
            if key.startswith(self.prefix):
                owner.set_attribute(key, None)
                cleared += 1
        logger.debug("FlagsCleared", player=owner.name, count=cleared)
        return cleared

    def get_flag_added_signal(self, owner: Player, name: str) -> FlagStream:
        """Stream that fires with a fresh handle whenever the flag holds a value.

        Fires on every non-nil change, not only absent -> present. If the flag
        is already set, one fire is queued on the scheduler for the next turn.
        """
        raw = self._raw(owner, name)
        stream = FlagStream(name, "added")

        def on_changed(value):
            if value is not None:
                stream.fire(Flag(owner, name, decode(value), self.prefix))

        stream.bind(owner.get_attribute_changed_signal(self.key_for(name)).connect(on_changed))
        if raw is not None:
            self.scheduler.defer(stream.fire, Flag(owner, name, decode(raw), self.prefix))
        logger.debug("FlagStreamCreated", player=owner.name, flag=name, kind="added")
        return stream

    def get_flag_removed_signal(self, owner: Player, name: str) -> FlagStream:
        check_owner(owner)
        check_identifier(name)
        stream = FlagStream(name, "removed")

        def on_changed(value):
            if value is None:
                stream.fire()

        stream.bind(owner.get_attribute_changed_signal(self.key_for(name)).connect(on_changed))
        logger.debug("FlagStreamCreated", player=owner.name, flag=name, kind="removed")
        return stream
