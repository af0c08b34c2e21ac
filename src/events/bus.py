"""Async event bus for in-process pub/sub.

The event bus decouples the session controller from consumers.
The controller emits events, subscribers receive events they're interested in.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from src.events.base import Event

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Event)
EventHandler = Callable[[Event], Awaitable[None]]


class EventBus:
    """Simple async event bus for in-process pub/sub.

    Handlers are coroutine functions. They run concurrently per event, and
    one handler failing does not affect the others.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[Event], list[EventHandler]] = {}

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], Awaitable[None]],
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The event class to subscribe to
            handler: Coroutine function to await when event is published
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)
        logger.debug(f"Subscribed handler to {event_type.__name__}")

    def unsubscribe(
        self,
        event_type: type[T],
        handler: EventHandler,
    ) -> None:
        """Unsubscribe a handler from an event type.

        Args:
            event_type: The event class to unsubscribe from
            handler: The handler to remove
        """
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler from {event_type.__name__}")
            except ValueError:
                pass  # Handler wasn't subscribed

    async def publish(self, event: Event) -> None:
        """Publish an event to all subscribers.

        Args:
            event: The event to publish
        """
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, []))

        logger.debug(f"Publishing {event.event_type} to {len(handlers)} handler(s)")

        if not handlers:
            return

        # Run handlers concurrently
        results = await asyncio.gather(
            *(handler(event) for handler in handlers), return_exceptions=True
        )
        # Log any handler errors but don't re-raise
        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                name = getattr(handler, "__name__", repr(handler))
                logger.error(f"Handler {name} failed for {event.event_type}: {result}")

    async def publish_all(self, events: list[Event]) -> None:
        """Publish events one after another, preserving order."""
        for event in events:
            await self.publish(event)

    def subscriber_count(self, event_type: type[Event]) -> int:
        """Get number of subscribers for an event type."""
        return len(self._subscribers.get(event_type, []))
