"""Minimal subscribe/fire/disconnect signal used for attribute and flag notifications."""
from __future__ import annotations
from typing import Any, Callable, List

Listener = Callable[..., Any]

class Connection:
    def __init__(self, signal: "Signal", fn: Listener):
        self._signal = signal
        self.fn = fn
        self.connected = True

    def disconnect(self):
        if not self.connected:
            return
        self.connected = False
        self._signal._drop(self)

    def __repr__(self) -> str:
        state = "connected" if self.connected else "disconnected"
        return f"<Connection {getattr(self.fn, '__name__', self.fn)!s} {state}>"

class Signal:
    def __init__(self):
        self._connections: List[Connection] = []

    def connect(self, fn: Listener) -> Connection:
        if not callable(fn):
            raise TypeError(f"Signal listener must be callable, got {fn!r}")
        conn = Connection(self, fn)
        self._connections.append(conn)
        return conn

    def fire(self, *args: Any):
        # listeners added or dropped mid-fire take effect on the next fire
        for conn in list(self._connections):
            if conn.connected:
                conn.fn(*args)

    def disconnect_all(self):
        for conn in list(self._connections):
            conn.disconnect()

    def _drop(self, conn: Connection):
        if conn in self._connections:
            self._connections.remove(conn)

    def __len__(self) -> int:
        return len(self._connections)
