"""Deferred callbacks — APScheduler bridge for card entry/exit transitions."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger

logger = logging.getLogger("taskboard.board.timers")


class TimerScheduler(Protocol):
    """Runs a callback once, *delay* seconds from now, on the board's event loop."""

    def call_later(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
        key: str | None = None,
    ) -> None: ...


class AsyncIOTimerScheduler:
    """One-shot timers on APScheduler's asyncio scheduler.

    Callbacks are wrapped in a coroutine so APScheduler runs them on the event
    loop itself rather than handing them to a worker thread. Scheduling twice
    with the same *key* replaces the earlier timer.
    """

    def __init__(self, scheduler: AsyncIOScheduler | None = None) -> None:
        self._scheduler = scheduler or AsyncIOScheduler(timezone=UTC)
        self._started = False

    # -- Lifecycle -------------------------------------------------------------

    def start(self) -> None:
        """Start the scheduler. Must be called with the event loop running."""
        if self._started:
            return
        if self._scheduler.running:
            # A shutdown from stop() is still queued on the loop
            self._scheduler = AsyncIOScheduler(timezone=UTC)
        self._scheduler.start()
        self._started = True
        logger.debug("Timer scheduler started")

    def stop(self) -> None:
        """Shut down without waiting; pending timers are dropped.

        APScheduler queues the shutdown onto the event loop, so ``running``
        is tracked here rather than read back from the scheduler.
        """
        if not self._started:
            return
        self._started = False
        self._scheduler.shutdown(wait=False)
        logger.debug("Timer scheduler stopped")

    @property
    def running(self) -> bool:
        return self._started

    # -- Scheduling ------------------------------------------------------------

    def call_later(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
        key: str | None = None,
    ) -> None:
        run_date = datetime.now(UTC) + timedelta(seconds=max(delay, 0.0))
        self._scheduler.add_job(
            _run_callback,
            trigger=DateTrigger(run_date=run_date),
            args=[callback, *args],
            id=key or secrets.token_hex(6),
            replace_existing=True,
            misfire_grace_time=None,
        )

    def pending(self) -> list[str]:
        """IDs of timers that have not fired yet."""
        return [job.id for job in self._scheduler.get_jobs()]


async def _run_callback(callback: Callable[..., Any], *args: Any) -> None:
    try:
        callback(*args)
    except Exception:
        logger.exception("Timer callback %r failed", callback)
