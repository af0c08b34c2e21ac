"""Session model holding the state of one meeting round."""

from enum import Enum

from pydantic import Field

from src.models.base import BaseEntity
from src.models.participant import Participant, ParticipantStatus


class MeetingState(str, Enum):
    """Lifecycle state of a meeting session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


class AllocationMode(str, Enum):
    """How speaking time is divided between participants."""

    TOTAL_TIME = "total_time"
    PER_MEMBER = "per_member"


class Session(BaseEntity):
    """A meeting round: turn order, current speaker and countdown.

    Sessions are immutable. The reducer in ``src.turns.reducer`` derives a
    new session for every command; an idle session carries no participants
    and zeroed times.
    """

    state: MeetingState = Field(
        default=MeetingState.IDLE,
        description="Lifecycle state",
    )
    participants: list[Participant] = Field(
        default_factory=list,
        description="Speakers in turn order, fixed once the meeting starts",
    )
    current_speaker_index: int = Field(
        default=0,
        ge=0,
        description="Index of the participant holding the floor",
    )
    time_per_speaker: int = Field(
        default=0,
        ge=0,
        description="Seconds allocated to each speaker",
    )
    current_time_remaining: int = Field(
        default=0,
        ge=0,
        description="Seconds left for the current speaker",
    )

    @classmethod
    def idle(cls) -> "Session":
        """Create an empty session awaiting a start command."""
        return cls()

    @property
    def is_active(self) -> bool:
        """True while a speaker holds the floor (running or paused)."""
        return self.state in (MeetingState.RUNNING, MeetingState.PAUSED)

    @property
    def current_speaker(self) -> Participant | None:
        if not self.participants or not self.is_active:
            return None
        return self.participants[self.current_speaker_index]

    @property
    def next_speaker(self) -> Participant | None:
        next_index = self.current_speaker_index + 1
        if not self.is_active or next_index >= len(self.participants):
            return None
        return self.participants[next_index]

    @property
    def is_last_speaker(self) -> bool:
        return self.current_speaker_index >= len(self.participants) - 1

    @property
    def spoken_count(self) -> int:
        return sum(1 for p in self.participants if p.status == ParticipantStatus.SPOKEN)

    @property
    def participant_count(self) -> int:
        return len(self.participants)
