"""Test helpers shared across test packages."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from taskboard.board.models import Item, Lane


class ManualTimers:
    """TimerScheduler that only fires when the test advances the clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.keys: list[str | None] = []
        self._timers: list[tuple[float, int, Callable[..., Any], tuple]] = []
        self._seq = 0

    def call_later(self, delay, callback, *args, key=None) -> None:
        self._seq += 1
        self._timers.append((self.now + delay, self._seq, callback, args))
        self.keys.append(key)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due timers in order."""
        deadline = self.now + seconds
        while True:
            due = sorted((t for t in self._timers if t[0] <= deadline), key=lambda t: t[:2])
            if not due:
                break
            when, seq, callback, args = due[0]
            self._timers = [t for t in self._timers if t[1] != seq]
            self.now = when
            callback(*args)
        self.now = deadline


def items(*specs: str) -> list[Item]:
    """Build items from ``"A@pending"`` style specs."""
    out = []
    for spec in specs:
        item_id, lane = spec.split("@")
        out.append(Item(id=item_id, title=f"Task {item_id}", lane=Lane(lane)))
    return out


def order(seq: Iterable[Item]) -> list[str]:
    return [item.id for item in seq]


def lanes_of(seq: Iterable[Item]) -> dict[str, Lane]:
    return {item.id: item.lane for item in seq}
