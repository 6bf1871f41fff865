"""Cooperative turn scheduler.

Everything runs on one logical thread. ``defer`` queues a callback for the
next turn and ``step`` runs one turn; callbacks deferred while a turn is
running land in the turn after it, so a callback is never invoked from
inside the call that scheduled it.
"""
from __future__ import annotations
from collections import deque
from typing import Any, Callable, Deque, Tuple
from .logging import logger

class Scheduler:
    def __init__(self):
        self._queue: Deque[Tuple[Callable[..., Any], tuple]] = deque()
        self.turn = 0

    def defer(self, fn: Callable[..., Any], *args: Any):
        self._queue.append((fn, args))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def step(self) -> int:
        batch = len(self._queue)
        try:
            for _ in range(batch):
                fn, args = self._queue.popleft()
                fn(*args)
        finally:
            self.turn += 1
        return batch

    def run_until_idle(self, max_turns: int = 100) -> int:
        ran = 0
        turns = 0
        while self._queue:
            if turns >= max_turns:
                logger.warn("SchedulerNotIdle", pending=len(self._queue), turns=turns)
                break
            ran += self.step()
            turns += 1
        return ran
