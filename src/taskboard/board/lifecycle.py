"""Lifecycle coordinator — card creation and deletion with timed transitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.errors import Failure, FailureKind
from taskboard.board.models import Item, Lane, Outcome, TransitionTag, generate_id
from taskboard.config.constants import (
    DEFAULT_LANE,
    ENTRY_TRANSITION_SECONDS,
    EXIT_TRANSITION_SECONDS,
)

if TYPE_CHECKING:
    from taskboard.board.store import ItemStore
    from taskboard.board.timers import TimerScheduler

logger = logging.getLogger("taskboard.board.lifecycle")


class LifecycleCoordinator:
    """Adds and removes cards without racing the reorder engine.

    New cards are appended tagged ``entering`` and untagged after
    *entry_seconds*. Deleted cards are tagged ``exiting`` at once and dropped
    from the store after *exit_seconds*. Timer callbacks look the card up
    again before acting: it may have been deleted or changed meanwhile.
    """

    def __init__(
        self,
        store: ItemStore,
        timers: TimerScheduler,
        entry_seconds: float = ENTRY_TRANSITION_SECONDS,
        exit_seconds: float = EXIT_TRANSITION_SECONDS,
    ) -> None:
        self._store = store
        self._timers = timers
        self.entry_seconds = entry_seconds
        self.exit_seconds = exit_seconds

    # -- Create ----------------------------------------------------------------

    def create(self, title: str, description: str = "") -> Outcome:
        """Append a new card to the default lane."""
        title = title.strip()
        if not title:
            return Outcome(
                items=self._store.items,
                failure=Failure(FailureKind.INVALID_INPUT, "Title is required."),
            )

        item = Item(
            id=self._new_id(),
            title=title,
            description=description.strip(),
            lane=Lane(DEFAULT_LANE),
            transition=TransitionTag.ENTERING,
        )
        self._store.replace((*self._store.items, item))
        self._timers.call_later(
            self.entry_seconds, self._finish_entry, item.id, key=f"enter:{item.id}"
        )
        logger.info("Created card %s (%s)", item.id, item.title)
        return Outcome(items=self._store.items, changed=True, item=item)

    def _finish_entry(self, item_id: str) -> None:
        item = self._store.find_by_id(item_id)
        if item is None or item.transition is not TransitionTag.ENTERING:
            logger.debug("Entry timer for %s skipped (card gone or exiting)", item_id)
            return
        self._swap(item.model_copy(update={"transition": TransitionTag.NONE}))

    # -- Delete ----------------------------------------------------------------

    def delete(self, item_id: str) -> Outcome:
        """Start the exit transition for a card; it is removed when it ends."""
        item = self._store.find_by_id(item_id)
        if item is None:
            return Outcome(
                items=self._store.items,
                failure=Failure(
                    FailureKind.STALE_REFERENCE, f"Card {item_id} not found", item_id
                ),
            )
        if item.is_exiting:
            logger.debug("Card %s already being deleted", item_id)
            return Outcome(items=self._store.items, item=item)

        exiting = item.model_copy(update={"transition": TransitionTag.EXITING})
        self._swap(exiting)
        self._timers.call_later(
            self.exit_seconds, self._finish_exit, item_id, key=f"exit:{item_id}"
        )
        logger.info("Deleting card %s", item_id)
        return Outcome(items=self._store.items, changed=True, item=exiting)

    def _finish_exit(self, item_id: str) -> None:
        if self._store.find_by_id(item_id) is None:
            logger.debug("Exit timer for %s skipped (card already gone)", item_id)
            return
        self._store.replace(item for item in self._store.items if item.id != item_id)
        logger.debug("Removed card %s", item_id)

    # -- Internal helpers ------------------------------------------------------

    def _new_id(self) -> str:
        item_id = generate_id()
        while item_id in self._store:
            item_id = generate_id()
        return item_id

    def _swap(self, updated: Item) -> None:
        """Replace the card with the same id, keeping its position."""
        self._store.replace(
            updated if item.id == updated.id else item for item in self._store.items
        )
