from __future__ import annotations
from typing import Dict, Optional, Union
from ..core.errors import AttributeTypeError, PlayerFlagsError
from ..core.signal import Signal

Scalar = Union[bool, int, float, str]
SCALAR_TYPES = (bool, int, float, str)

def _same(a: object, b: object) -> bool:
    # True == 1 in Python, but swapping one for the other is still a change
    return type(a) is type(b) and a == b

class AttributeStore:
    """Scalar-only key/value slots. A missing key and ``None`` mean the same thing."""

    def __init__(self):
        self._values: Dict[str, Scalar] = {}
        self._changed: Dict[str, Signal] = {}

    def get(self, key: str) -> Optional[Scalar]:
        return self._values.get(key)

    def set(self, key: str, value: Optional[Scalar]):
        if not isinstance(key, str) or not key:
            raise PlayerFlagsError(f"Attribute key must be a non-empty string, got {key!r}")
        if value is not None and not isinstance(value, SCALAR_TYPES):
            raise AttributeTypeError(key, value)
        old = self._values.get(key)
        if _same(old, value):
            return
        if value is None:
            del self._values[key]
        else:
            self._values[key] = value
        sig = self._changed.get(key)
        if sig is not None:
            sig.fire(value)

    def changed_signal(self, key: str) -> Signal:
        sig = self._changed.get(key)
        if sig is None:
            sig = self._changed[key] = Signal()
        return sig

    def list_all(self) -> Dict[str, Scalar]:
        return dict(self._values)

    def disconnect_all(self):
        for sig in self._changed.values():
            sig.disconnect_all()
        self._changed.clear()

class Player:
    def __init__(self, name: str, user_id: int = 0):
        self.name = name
        self.user_id = user_id
        self.attributes = AttributeStore()
        self.destroyed = False

    def get_attribute(self, key: str) -> Optional[Scalar]:
        return self.attributes.get(key)

    def set_attribute(self, key: str, value: Optional[Scalar]):
        self.attributes.set(key, value)

    def get_attributes(self) -> Dict[str, Scalar]:
        return self.attributes.list_all()

    def get_attribute_changed_signal(self, key: str) -> Signal:
        return self.attributes.changed_signal(key)

    def destroy(self):
        self.attributes.disconnect_all()
        self.destroyed = True

    def __repr__(self) -> str:
        return f"<Player {self.name} ({self.user_id})>"
