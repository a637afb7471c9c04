"""Tests for card creation/deletion with timed transitions."""

from __future__ import annotations

from taskboard.board.errors import FailureKind
from taskboard.board.lifecycle import LifecycleCoordinator
from taskboard.board.models import Lane, TransitionTag
from taskboard.board.store import ItemStore
from tests.helpers import ManualTimers, order


class TestCreate:
    def test_create_appends_entering_card_to_pending(
        self, store: ItemStore, lifecycle: LifecycleCoordinator
    ):
        outcome = lifecycle.create("Buy milk", "Semi-skimmed")
        assert outcome.ok
        assert outcome.changed is True

        item = outcome.item
        assert store.items[-1] == item
        assert item.lane is Lane.PENDING
        assert item.transition is TransitionTag.ENTERING
        assert item.description == "Semi-skimmed"

    def test_entry_tag_cleared_after_duration(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        item = lifecycle.create("Buy milk").item
        timers.advance(0.2)
        assert store.find_by_id(item.id).transition is TransitionTag.ENTERING
        timers.advance(0.1)
        assert store.find_by_id(item.id).transition is TransitionTag.NONE

    def test_entry_clear_keeps_position_and_lane(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        item = lifecycle.create("Buy milk").item
        # Moved to the front of Done while still entering
        moved = store.find_by_id(item.id).model_copy(update={"lane": Lane.DONE})
        store.replace([moved, *(i for i in store.items if i.id != item.id)])
        timers.advance(0.3)

        settled = store.items[0]
        assert settled.id == item.id
        assert settled.lane is Lane.DONE
        assert settled.transition is TransitionTag.NONE

    def test_empty_title_rejected(self, store: ItemStore, lifecycle: LifecycleCoordinator):
        before = store.items
        outcome = lifecycle.create("", "desc")
        assert not outcome.ok
        assert outcome.failure.kind is FailureKind.INVALID_INPUT
        assert store.items is before

    def test_whitespace_title_rejected(self, lifecycle: LifecycleCoordinator, timers: ManualTimers):
        outcome = lifecycle.create("   \t ")
        assert outcome.failure.kind is FailureKind.INVALID_INPUT
        assert timers.pending == 0

    def test_title_is_trimmed(self, lifecycle: LifecycleCoordinator):
        assert lifecycle.create("  Buy milk  ").item.title == "Buy milk"

    def test_ids_are_unique(self, store: ItemStore, lifecycle: LifecycleCoordinator):
        for n in range(50):
            lifecycle.create(f"Task {n}")
        ids = order(store)
        assert len(ids) == len(set(ids))

    def test_id_collision_is_regenerated(self, store: ItemStore, lifecycle: LifecycleCoordinator):
        from unittest.mock import patch

        with patch(
            "taskboard.board.lifecycle.generate_id", side_effect=["A", "B", "fresh"]
        ):
            item = lifecycle.create("New").item
        assert item.id == "fresh"


class TestDelete:
    def test_delete_marks_exiting_then_removes(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        outcome = lifecycle.delete("B")
        assert outcome.ok
        assert outcome.changed is True
        assert store.find_by_id("B").transition is TransitionTag.EXITING
        assert order(store) == ["A", "B", "C"]  # still visible, same place

        timers.advance(0.3)
        assert store.find_by_id("B") is None
        assert order(store) == ["A", "C"]

    def test_delete_unknown_id_is_noop(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        before = store.items
        outcome = lifecycle.delete("ghost")
        assert outcome.failure.kind is FailureKind.STALE_REFERENCE
        assert store.items is before
        assert timers.pending == 0

    def test_delete_twice_removes_once(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        first = lifecycle.delete("A")
        timers.advance(0.1)
        second = lifecycle.delete("A")

        assert first.changed is True
        assert second.ok
        assert second.changed is False
        assert timers.pending == 1

        timers.advance(0.2)
        assert order(store) == ["B", "C"]
        timers.advance(1.0)
        assert order(store) == ["B", "C"]

    def test_exit_timer_skips_card_already_removed(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        lifecycle.delete("A")
        store.replace(i for i in store.items if i.id != "A")
        timers.advance(0.3)
        assert order(store) == ["B", "C"]

    def test_create_then_delete_before_entry_finishes(
        self, store: ItemStore, lifecycle: LifecycleCoordinator, timers: ManualTimers
    ):
        """entering → exiting → removed, never passing through none."""
        seen: list[TransitionTag] = []
        item = lifecycle.create("Buy milk", "").item

        def record(snapshot):
            for i in snapshot:
                if i.id == item.id:
                    seen.append(i.transition)

        store.add_listener(record)
        timers.advance(0.1)
        lifecycle.delete(item.id)
        timers.advance(1.0)

        assert seen == [TransitionTag.EXITING]
        assert store.find_by_id(item.id) is None
        assert item.id not in order(store)

    def test_timer_keys_name_the_card(self, lifecycle: LifecycleCoordinator, timers: ManualTimers):
        item = lifecycle.create("Buy milk").item
        lifecycle.delete(item.id)
        assert timers.keys == [f"enter:{item.id}", f"exit:{item.id}"]


def test_zero_durations_apply_on_next_tick():
    store = ItemStore()
    timers = ManualTimers()
    lifecycle = LifecycleCoordinator(store, timers, entry_seconds=0, exit_seconds=0)

    item = lifecycle.create("Now").item
    assert store.find_by_id(item.id).transition is TransitionTag.ENTERING
    timers.advance(0)
    assert store.find_by_id(item.id).transition is TransitionTag.NONE
