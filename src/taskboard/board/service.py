"""TaskBoard — single entry point the presentation layer talks to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.engine import reorder
from taskboard.board.errors import Failure, FailureKind
from taskboard.board.lifecycle import LifecycleCoordinator
from taskboard.board.models import LANES, Item, Lane, Outcome
from taskboard.board.requests import (
    BoardRequest,
    CreateTask,
    DeleteTask,
    DropOnItem,
    DropOnLane,
    EndDrag,
    StartDrag,
)
from taskboard.board.store import ItemStore
from taskboard.config.constants import DEMO_ITEMS

if TYPE_CHECKING:
    from taskboard.board.timers import TimerScheduler
    from taskboard.config.settings import Settings

logger = logging.getLogger("taskboard.board.service")


def demo_items() -> list[Item]:
    """The sample cards a fresh board starts with."""
    return [
        Item(id=item_id, title=title, description=description, lane=Lane(lane))
        for item_id, title, description, lane in DEMO_ITEMS
    ]


class TaskBoard:
    """Owns the drag session and routes UI requests to the board core.

    UI widgets never touch the store directly: they send a request (or call
    the matching ``on_*`` method) and re-render from the returned snapshot or
    from a store listener.
    """

    def __init__(self, store: ItemStore, lifecycle: LifecycleCoordinator) -> None:
        self._store = store
        self._lifecycle = lifecycle
        self._dragged_item_id: str | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        timers: TimerScheduler,
        seed_demo: bool | None = None,
    ) -> TaskBoard:
        """Build a board wired to *timers*, seeded per settings unless overridden."""
        seed = settings.seed_demo if seed_demo is None else seed_demo
        store = ItemStore(demo_items() if seed else ())
        lifecycle = LifecycleCoordinator(
            store,
            timers,
            entry_seconds=settings.transitions.entry_seconds,
            exit_seconds=settings.transitions.exit_seconds,
        )
        return cls(store, lifecycle)

    # -- Properties ------------------------------------------------------------

    @property
    def store(self) -> ItemStore:
        return self._store

    @property
    def dragged_item_id(self) -> str | None:
        return self._dragged_item_id

    @property
    def lanes(self) -> tuple[Lane, ...]:
        return LANES

    @property
    def entry_duration(self) -> float:
        return self._lifecycle.entry_seconds

    @property
    def exit_duration(self) -> float:
        return self._lifecycle.exit_seconds

    def snapshot(self) -> tuple[Item, ...]:
        return self._store.items

    def get_lane_view(self, lane: Lane | str) -> tuple[Item, ...]:
        """Cards of one lane, top to bottom."""
        return self._store.project_lane(lane)

    # -- Request dispatch ------------------------------------------------------

    def handle(self, request: BoardRequest) -> Outcome:
        """Apply one request and return the resulting board state."""
        match request:
            case StartDrag(item_id=item_id):
                return self.on_drag_start(item_id)
            case DropOnItem(target_id=target_id, lane=lane):
                return self.on_drop_on_item(target_id, lane)
            case DropOnLane(lane=lane):
                return self.on_drop_on_lane_area(lane)
            case EndDrag():
                return self.on_drag_end()
            case CreateTask(title=title, description=description):
                return self.create_task(title, description)
            case DeleteTask(item_id=item_id):
                return self.delete_task(item_id)
        raise TypeError(f"Unsupported board request: {request!r}")

    # -- Drag gesture ----------------------------------------------------------

    def on_drag_start(self, item_id: str) -> Outcome:
        if self._dragged_item_id is not None and self._dragged_item_id != item_id:
            logger.debug("Drag of %s replaced by %s", self._dragged_item_id, item_id)
        self._dragged_item_id = item_id
        return Outcome(items=self._store.items)

    def on_drop_on_item(self, target_id: str, lane: Lane | str) -> Outcome:
        return self._drop(target_id, lane)

    def on_drop_on_lane_area(self, lane: Lane | str) -> Outcome:
        return self._drop(None, lane)

    def on_drag_end(self) -> Outcome:
        self._dragged_item_id = None
        return Outcome(items=self._store.items)

    def _drop(self, target_id: str | None, lane: Lane | str) -> Outcome:
        lane = Lane.parse(lane)
        dragged_id = self._dragged_item_id
        if dragged_id is None:
            return Outcome(
                items=self._store.items,
                failure=Failure(FailureKind.STALE_REFERENCE, "No drag in progress"),
            )
        outcome = reorder(self._store.items, dragged_id, target_id, lane)
        if outcome.changed:
            self._store.replace(outcome.items)
        return outcome

    # -- Lifecycle -------------------------------------------------------------

    def create_task(self, title: str, description: str = "") -> Outcome:
        return self._lifecycle.create(title, description)

    def delete_task(self, item_id: str) -> Outcome:
        return self._lifecycle.delete(item_id)
