"""Server-sent event feed of session snapshots."""

import asyncio
import json
import logging
from collections.abc import AsyncIterator

from src.config import settings
from src.events.bus import EventBus
from src.events.types import SessionUpdated
from src.render.view import SessionView

logger = logging.getLogger(__name__)


def format_sse(event: str, data: dict) -> str:
    """Encode one server-sent event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


class SnapshotFeed:
    """Per-client subscription to SessionUpdated events.

    Use as an async context manager so the bus subscription is always
    released, including when the client disconnects mid-stream.
    """

    def __init__(self, event_bus: EventBus, maxsize: int | None = None):
        self._bus = event_bus
        self._queue: asyncio.Queue[SessionUpdated] = asyncio.Queue(
            maxsize=maxsize or settings.stream_queue_size
        )

    async def __aenter__(self) -> "SnapshotFeed":
        self._bus.subscribe(SessionUpdated, self._on_update)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self._bus.unsubscribe(SessionUpdated, self._on_update)

    async def _on_update(self, event: SessionUpdated) -> None:
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            # Slow client: drop the oldest snapshot, the newest supersedes it
            self._queue.get_nowait()
            self._queue.put_nowait(event)
            logger.warning("Snapshot feed full, dropped oldest update")

    async def next_update(self) -> SessionUpdated:
        return await self._queue.get()

    async def stream(self, initial: SessionView) -> AsyncIterator[str]:
        """Yield the current snapshot, then one event per session change."""
        yield format_sse("snapshot", initial.model_dump(mode="json"))
        while True:
            update = await self.next_update()
            yield format_sse("snapshot", update.snapshot)
