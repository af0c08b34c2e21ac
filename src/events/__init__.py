"""Event infrastructure for Turn Timer.

Provides:
- Event: Base class for all domain events
- EventBus: In-process pub/sub for event routing
"""

from src.events.base import Event
from src.events.bus import EventBus
from src.events.types import (
    MeetingEnded,
    MeetingFinished,
    MeetingPaused,
    MeetingResumed,
    MeetingStarted,
    SessionUpdated,
    SpeakerChanged,
)

__all__ = [
    # Base
    "Event",
    # Infrastructure
    "EventBus",
    # Event types
    "MeetingStarted",
    "SpeakerChanged",
    "MeetingPaused",
    "MeetingResumed",
    "MeetingFinished",
    "MeetingEnded",
    "SessionUpdated",
]
