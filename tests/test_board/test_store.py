"""Tests for the in-memory ItemStore."""

from __future__ import annotations

import pytest

from taskboard.board.errors import DuplicateItemId, UnknownLane
from taskboard.board.models import Item, Lane
from taskboard.board.store import ItemStore
from tests.helpers import items, order


def test_empty_store():
    """A new store with no items should be empty."""
    store = ItemStore()
    assert store.items == ()
    assert len(store) == 0


def test_project_lane_preserves_store_order():
    store = ItemStore(items("A@pending", "X@done", "B@pending", "Y@done", "C@pending"))
    assert order(store.project_lane(Lane.PENDING)) == ["A", "B", "C"]
    assert order(store.project_lane(Lane.DONE)) == ["X", "Y"]
    assert store.project_lane(Lane.NOT_DONE) == ()


def test_project_lane_accepts_lane_names():
    store = ItemStore(items("A@not_done"))
    assert order(store.project_lane("not-done")) == ["A"]


def test_project_lane_rejects_unknown_lane():
    store = ItemStore(items("A@pending"))
    with pytest.raises(UnknownLane):
        store.project_lane("backlog")


def test_project_lane_does_not_mutate(store: ItemStore):
    before = store.items
    store.project_lane(Lane.PENDING)
    assert store.items is before


def test_find_by_id(store: ItemStore):
    assert store.find_by_id("B").title == "Task B"
    assert store.find_by_id("nope") is None


def test_index_of_and_contains(store: ItemStore):
    assert store.index_of("C") == 2
    assert store.index_of("nope") is None
    assert "A" in store
    assert "nope" not in store
    assert 42 not in store


def test_replace_swaps_whole_sequence(store: ItemStore):
    store.replace(items("Z@done"))
    assert order(store) == ["Z"]


def test_replace_rejects_duplicate_ids(store: ItemStore):
    """A duplicate id is a programming error and leaves the store untouched."""
    before = store.items
    with pytest.raises(DuplicateItemId):
        store.replace([*store.items, Item(id="A", title="Clone")])
    assert store.items is before


def test_replace_rejects_unvalidated_lane(store: ItemStore):
    bogus = Item(id="Q", title="Q").model_copy(update={"lane": "backlog"})
    with pytest.raises(UnknownLane):
        store.replace([bogus])
    assert order(store) == ["A", "B", "C"]


def test_constructor_rejects_duplicate_ids():
    with pytest.raises(DuplicateItemId):
        ItemStore(items("A@pending", "A@done"))


def test_listener_receives_new_snapshot(store: ItemStore):
    seen = []
    store.add_listener(seen.append)
    store.replace(items("Z@done"))
    assert len(seen) == 1
    assert order(seen[0]) == ["Z"]


def test_failing_listener_does_not_block_others(store: ItemStore):
    seen = []

    def broken(_snapshot):
        raise RuntimeError("boom")

    store.add_listener(broken)
    store.add_listener(seen.append)
    store.replace(items("Z@done"))
    assert len(seen) == 1


def test_remove_listener(store: ItemStore):
    seen = []
    store.add_listener(seen.append)
    store.remove_listener(seen.append)
    store.remove_listener(seen.append)  # second removal is harmless
    store.replace(items("Z@done"))
    assert seen == []
