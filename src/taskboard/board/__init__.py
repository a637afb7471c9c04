"""Board core — item store, reorder engine and card lifecycle."""

from taskboard.board.engine import reorder
from taskboard.board.errors import (
    DuplicateItemId,
    Failure,
    FailureKind,
    InvariantViolation,
    UnknownLane,
)
from taskboard.board.lifecycle import LifecycleCoordinator
from taskboard.board.models import LANES, Item, Lane, Outcome, TransitionTag
from taskboard.board.service import TaskBoard
from taskboard.board.store import ItemStore

__all__ = [
    "LANES",
    "DuplicateItemId",
    "Failure",
    "FailureKind",
    "InvariantViolation",
    "Item",
    "ItemStore",
    "Lane",
    "LifecycleCoordinator",
    "Outcome",
    "TaskBoard",
    "TransitionTag",
    "UnknownLane",
    "reorder",
]
