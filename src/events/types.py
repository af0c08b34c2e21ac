"""Typed event definitions for session events.

These events represent things that happen during a meeting round:
- MeetingStarted: A round was scheduled and the first speaker has the floor
- SpeakerChanged: The floor moved to the next speaker
- MeetingPaused: The countdown was suspended
- MeetingResumed: The countdown continues
- MeetingFinished: Everyone has spoken
- MeetingEnded: The round was discarded and the session is idle again
- SessionUpdated: Any change; carries the full render snapshot
"""

from typing import Any, Literal
from uuid import UUID

from pydantic import Field

from src.events.base import Event


class MeetingStarted(Event):
    """Emitted when a new round starts."""

    aggregate_type: str = "Session"
    participant_count: int = Field(description="Number of speakers")
    time_per_speaker: int = Field(description="Seconds allocated per speaker")
    speaking_order: list[str] = Field(
        default_factory=list, description="Names in shuffled turn order"
    )


class SpeakerChanged(Event):
    """Emitted when the floor moves to the next participant."""

    aggregate_type: str = "Session"
    previous_participant_id: UUID = Field(description="Speaker who just finished")
    participant_id: UUID = Field(description="Speaker now holding the floor")
    participant_name: str = Field(description="Name of the new speaker")
    speaker_index: int = Field(description="Position of the new speaker")
    reason: Literal["expired", "skipped"] = Field(
        description="Whether time ran out or the turn was skipped"
    )


class MeetingPaused(Event):
    """Emitted when the countdown is suspended."""

    aggregate_type: str = "Session"
    time_remaining: int = Field(description="Seconds left for the current speaker")


class MeetingResumed(Event):
    """Emitted when the countdown continues after a pause."""

    aggregate_type: str = "Session"
    time_remaining: int = Field(description="Seconds left for the current speaker")


class MeetingFinished(Event):
    """Emitted when the last speaker's turn ends."""

    aggregate_type: str = "Session"
    participant_count: int = Field(description="Number of speakers who had a turn")
    reason: Literal["expired", "skipped"] = Field(
        description="How the last turn ended"
    )


class MeetingEnded(Event):
    """Emitted when a round is discarded and the session resets to idle."""

    aggregate_type: str = "Session"
    previous_state: str = Field(description="State the session was in before ending")


class SessionUpdated(Event):
    """Emitted on every session change, including countdown ticks."""

    aggregate_type: str = "Session"
    state: str = Field(description="Session state after the change")
    snapshot: dict[str, Any] = Field(description="Render snapshot of the session")
