from __future__ import annotations
from typing import Any
from ..core.errors import InvalidIdentifierError, InvalidMemberError, InvalidOwnerError
from ..host.player import Player
from .codec import decode, encode

DEFAULT_PREFIX = "Flag_"

def check_owner(owner: Any):
    if not isinstance(owner, Player) or owner.destroyed:
        raise InvalidOwnerError(owner)

def check_identifier(name: Any):
    if not isinstance(name, str) or not name:
        raise InvalidIdentifierError(name)

class Flag:
    """Transient view over one flag slot on a player.

    Handles are cheap and never cached: two handles for the same flag are
    independent objects over the same attribute. Writes go straight to the
    player's attributes; reads decode the last value this handle saw.
    Only the members below exist; touching anything else raises
    ``InvalidMemberError`` naming the flag.
    """

    __slots__ = ("name", "owner", "key", "_value")

    def __init__(self, owner: Player, name: str, value: Any, prefix: str = DEFAULT_PREFIX):
        check_owner(owner)
        check_identifier(name)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "owner", owner)
        object.__setattr__(self, "key", prefix + name)
        object.__setattr__(self, "_value", value)

    def get_value(self) -> Any:
        return decode(self._value)

    def set_value(self, value: Any):
        self.owner.set_attribute(self.key, encode(value))
        object.__setattr__(self, "_value", value)

    def remove(self):
        self.owner.set_attribute(self.key, None)

    def __getattr__(self, member: str):
        if member.startswith("__"):
            raise AttributeError(member)
        raise InvalidMemberError(object.__getattribute__(self, "name"), member)

    def __setattr__(self, member: str, value: Any):
        if member in Flag.__slots__:
            raise AttributeError(f"Flag member '{member}' is read-only; use set_value()")
        raise InvalidMemberError(self.name, member)

    def __repr__(self) -> str:
        return f"<Flag {self.name}={self.get_value()!r} on {self.owner.name}>"
