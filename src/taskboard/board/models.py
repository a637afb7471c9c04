"""Pydantic models for board items, the fixed lane set and operation outcomes."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from taskboard.board.errors import Failure, UnknownLane
from taskboard.config.constants import LANE_ORDER, LANE_TITLES


class Lane(StrEnum):
    """The closed set of lanes an item can sit in."""

    DONE = "done"
    PENDING = "pending"
    NOT_DONE = "not_done"

    @classmethod
    def parse(cls, value: str | Lane) -> Lane:
        """Coerce *value* to a Lane, raising UnknownLane outside the set."""
        if isinstance(value, Lane):
            return value
        try:
            return cls(str(value).strip().lower().replace("-", "_"))
        except ValueError:
            raise UnknownLane(value) from None

    @property
    def display_name(self) -> str:
        return LANE_TITLES[self.value]


# Display order, left to right
LANES: tuple[Lane, ...] = tuple(Lane(value) for value in LANE_ORDER)


class TransitionTag(StrEnum):
    """Where an item is in its entry/exit animation."""

    NONE = "none"
    ENTERING = "entering"
    EXITING = "exiting"


def generate_id() -> str:
    return secrets.token_hex(6)


class Item(BaseModel):
    """A single card on the board. Frozen; derive changes with ``model_copy``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    title: str
    description: str = ""
    lane: Lane = Lane.PENDING
    transition: TransitionTag = TransitionTag.NONE

    @property
    def is_exiting(self) -> bool:
        return self.transition is TransitionTag.EXITING


@dataclass(frozen=True)
class Outcome:
    """Result of a board operation: the resulting sequence, or why it was refused.

    ``items`` is always a complete snapshot. On failure it is the sequence the
    operation started from.
    """

    items: tuple[Item, ...]
    changed: bool = False
    failure: Failure | None = None
    item: Item | None = None  # the item created/deleted, when there is one

    @property
    def ok(self) -> bool:
        return self.failure is None
