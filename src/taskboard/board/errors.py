"""Board failures.

Expected conditions (a stale item id, an empty title) are *returned* as a
``Failure`` inside an ``Outcome``. Broken invariants are *raised* as
``InvariantViolation`` subclasses: they mean a caller has a bug.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FailureKind(StrEnum):
    """Recoverable failure categories reported back to the caller."""

    STALE_REFERENCE = "stale_reference"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class Failure:
    """Why an operation left the board unchanged."""

    kind: FailureKind
    message: str
    item_id: str | None = None

    def __str__(self) -> str:
        return self.message


class InvariantViolation(Exception):
    """A board invariant was broken. Not user-recoverable."""


class DuplicateItemId(InvariantViolation):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Duplicate item id in sequence: {item_id!r}")
        self.item_id = item_id


class UnknownLane(InvariantViolation):
    def __init__(self, lane: object) -> None:
        super().__init__(f"Unknown lane: {lane!r}")
        self.lane = lane
