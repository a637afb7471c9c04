"""Request messages the presentation layer sends to the board."""

from __future__ import annotations

from dataclasses import dataclass

from taskboard.board.models import Lane


@dataclass(frozen=True)
class StartDrag:
    item_id: str


@dataclass(frozen=True)
class DropOnItem:
    target_id: str
    lane: Lane


@dataclass(frozen=True)
class DropOnLane:
    lane: Lane


@dataclass(frozen=True)
class EndDrag:
    pass


@dataclass(frozen=True)
class CreateTask:
    title: str
    description: str = ""


@dataclass(frozen=True)
class DeleteTask:
    item_id: str


BoardRequest = StartDrag | DropOnItem | DropOnLane | EndDrag | CreateTask | DeleteTask
