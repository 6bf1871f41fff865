from __future__ import annotations
from typing import Optional
from ..core.signal import Connection, Signal

class FlagStream(Signal):
    """Signal derived from one attribute's change notifications.

    Owns the underlying attribute subscription; ``destroy`` releases it
    along with every listener connected to the stream.
    """

    def __init__(self, name: str, kind: str):
        super().__init__()
        self.name = name
        self.kind = kind
        self.subscription: Optional[Connection] = None

    def bind(self, subscription: Connection):
        self.subscription = subscription

    @property
    def active(self) -> bool:
        return self.subscription is not None and self.subscription.connected

    def destroy(self):
        if self.subscription is not None:
            self.subscription.disconnect()
        self.disconnect_all()

    def __repr__(self) -> str:
        return f"<FlagStream {self.kind} {self.name} listeners={len(self)}>"
