"""In-memory ordered item store with lane projections."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from taskboard.board.errors import DuplicateItemId, UnknownLane
from taskboard.board.models import Item, Lane

logger = logging.getLogger("taskboard.board.store")

StoreListener = Callable[[tuple[Item, ...]], None]


class ItemStore:
    """Holds the authoritative item sequence.

    The sequence is an immutable tuple swapped as a whole by ``replace()``, so
    a reader never sees a half-applied change. Lanes are not containers: a
    lane's cards are a filtered view over the global order.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: tuple[Item, ...] = ()
        self._listeners: list[StoreListener] = []
        self.replace(items)

    # -- Reads -----------------------------------------------------------------

    @property
    def items(self) -> tuple[Item, ...]:
        """Current snapshot."""
        return self._items

    def project_lane(self, lane: Lane | str) -> tuple[Item, ...]:
        """Return the items in *lane*, in store order."""
        lane = Lane.parse(lane)
        return tuple(item for item in self._items if item.lane is lane)

    def find_by_id(self, item_id: str) -> Item | None:
        """Retrieve an item by ID."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def index_of(self, item_id: str) -> int | None:
        """Global position of *item_id*, or None."""
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self.find_by_id(item_id) is not None

    # -- Writes ----------------------------------------------------------------

    def replace(self, new_sequence: Iterable[Item]) -> None:
        """Swap in a whole new sequence.

        Raises DuplicateItemId / UnknownLane without touching the current
        sequence if *new_sequence* breaks an invariant.
        """
        candidate = tuple(new_sequence)
        seen: set[str] = set()
        for item in candidate:
            if item.id in seen:
                raise DuplicateItemId(item.id)
            if not isinstance(item.lane, Lane):
                raise UnknownLane(item.lane)
            seen.add(item.id)

        self._items = candidate
        logger.debug("Store replaced: %d items", len(candidate))
        self._notify(candidate)

    # -- Listeners -------------------------------------------------------------

    def add_listener(self, listener: StoreListener) -> None:
        """Call *listener* with the new snapshot after every replace()."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, snapshot: tuple[Item, ...]) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Store listener %r failed", listener)
