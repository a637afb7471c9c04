"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from taskboard.board.lifecycle import LifecycleCoordinator
from taskboard.board.service import TaskBoard
from taskboard.board.store import ItemStore
from taskboard.config.models import TransitionConfig
from taskboard.config.settings import Settings
from tests.helpers import ManualTimers, items


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the developer's config.json, .env files and TASKBOARD_ vars out of tests."""
    for name in list(os.environ):
        if name.startswith("TASKBOARD_"):
            monkeypatch.delenv(name)
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    monkeypatch.setattr("taskboard.config.settings.CONFIG_FILE", tmp_path / "config.json")


@pytest.fixture
def timers() -> ManualTimers:
    return ManualTimers()


@pytest.fixture
def store() -> ItemStore:
    return ItemStore(items("A@pending", "B@pending", "C@done"))


@pytest.fixture
def lifecycle(store: ItemStore, timers: ManualTimers) -> LifecycleCoordinator:
    return LifecycleCoordinator(store, timers, entry_seconds=0.3, exit_seconds=0.3)


@pytest.fixture
def board(store: ItemStore, lifecycle: LifecycleCoordinator) -> TaskBoard:
    return TaskBoard(store, lifecycle)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no config file, no demo seeding, short transitions."""
    return Settings(
        transitions=TransitionConfig(entry_seconds=0.3, exit_seconds=0.3),
        seed_demo=False,
    )
