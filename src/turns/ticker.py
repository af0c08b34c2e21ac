"""APScheduler integration for the meeting countdown.

Provides the shared scheduler, an owned handle for the one-second tick
job, and FastAPI lifespan integration.
"""

from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import UTC
from typing import TYPE_CHECKING

import structlog
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from src.config import settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = structlog.get_logger()

TICK_JOB_ID = "session_tick"

# Module-level scheduler instance
_scheduler: AsyncIOScheduler | None = None


def get_scheduler() -> AsyncIOScheduler:
    """Get or create the scheduler instance.

    Returns:
        AsyncIOScheduler instance
    """
    global _scheduler
    if _scheduler is None:
        _scheduler = AsyncIOScheduler(timezone=UTC)
    return _scheduler


def reset_scheduler() -> None:
    """Reset the scheduler instance (for testing)."""
    global _scheduler
    if _scheduler is not None and _scheduler.running:
        _scheduler.shutdown(wait=False)
    _scheduler = None


@asynccontextmanager
async def ticker_lifespan() -> "AsyncGenerator[AsyncIOScheduler, None]":
    """Lifespan context manager for the countdown scheduler.

    Starts the scheduler and shuts it down on exit, which also drops any
    tick job still registered.

    Usage:
        async with ticker_lifespan() as scheduler:
            # Scheduler is running
            yield
        # Scheduler stopped
    """
    scheduler = get_scheduler()

    logger.info("Starting countdown scheduler")
    scheduler.start()

    try:
        yield scheduler
    finally:
        logger.info("Shutting down countdown scheduler")
        scheduler.shutdown(wait=False)


class Ticker:
    """Owned handle for the periodic countdown job.

    At most one tick job exists per ticker. ``start`` and ``stop`` are both
    idempotent so the owner can call them on every state change.
    """

    def __init__(
        self,
        scheduler: AsyncIOScheduler | None = None,
        interval_seconds: float | None = None,
        job_id: str = TICK_JOB_ID,
    ):
        """Initialize ticker.

        Args:
            scheduler: Scheduler to register the job on (shared one if None)
            interval_seconds: Seconds between ticks (from settings if None)
            job_id: Scheduler job identifier
        """
        self._scheduler = scheduler or get_scheduler()
        self._interval = interval_seconds or settings.tick_interval_seconds
        self._job_id = job_id
        self._running = False

    @property
    def running(self) -> bool:
        """Whether this ticker currently owns a tick job."""
        return self._running

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def start(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Begin firing callback once per interval.

        The first tick fires one full interval after starting.
        """
        if self._running:
            return

        self._scheduler.add_job(
            callback,
            "interval",
            seconds=self._interval,
            id=self._job_id,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._running = True
        logger.debug("Ticker started", job_id=self._job_id, interval=self._interval)

    def restart(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Replace the tick job so the next tick is one full interval away."""
        self.stop()
        self.start(callback)

    def stop(self) -> None:
        """Stop firing ticks. Safe to call when already stopped."""
        if not self._running:
            return

        self._running = False
        try:
            self._scheduler.remove_job(self._job_id)
        except JobLookupError:
            # Scheduler already shut down and dropped the job
            logger.debug("Tick job already gone", job_id=self._job_id)
            return
        logger.debug("Ticker stopped", job_id=self._job_id)
