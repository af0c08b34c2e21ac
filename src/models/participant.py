"""Participant model for meeting speakers."""

from enum import Enum

from pydantic import ConfigDict, Field

from src.models.base import BaseEntity


class ParticipantStatus(str, Enum):
    """Where a participant is in the turn order."""

    PENDING = "pending"
    SPEAKING = "speaking"
    SPOKEN = "spoken"


class Participant(BaseEntity):
    """A person taking a turn in the meeting.

    Participants are created in a batch when a meeting is scheduled and
    only change status afterwards.
    """

    # Setup trims names; the model keeps them exactly as scheduled
    model_config = ConfigDict(str_strip_whitespace=False)

    name: str = Field(
        min_length=1,
        description="Display name as entered at setup",
    )
    status: ParticipantStatus = Field(
        default=ParticipantStatus.PENDING,
        description="Turn status",
    )
    is_custom: bool = Field(
        default=True,
        description="Whether the facilitator typed this name in",
    )

    def with_status(self, status: ParticipantStatus) -> "Participant":
        """Return a copy of this participant with a new status."""
        return self.model_copy(update={"status": status})
