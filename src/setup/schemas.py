"""Schemas for meeting setup.

Defines the start request accepted from the setup surface and the
duration preview shown before a meeting starts.
"""

from pydantic import BaseModel, Field, field_validator

from src.models.session import AllocationMode
from src.render.formatter import format_time
from src.setup.roster import add_names
from src.turns.commands import StartMeeting
from src.turns.scheduler import compute_time_per_speaker

MAX_NAME_LENGTH = 200


class StartRequest(BaseModel):
    """Setup form submission for a new meeting round."""

    time_value: int = Field(
        default=30,
        gt=0,
        description="Minutes: whole meeting (total_time) or per person (per_member)",
    )
    mode: AllocationMode = Field(
        default=AllocationMode.TOTAL_TIME,
        description="How time is split between speakers",
    )
    names: list[str] = Field(
        min_length=1,
        description="Participant names; entries may hold comma-separated names",
    )

    @field_validator("names")
    @classmethod
    def normalize_names(cls, v: list[str]) -> list[str]:
        """Expand comma-separated entries into a trimmed, deduplicated roster."""
        roster: list[str] = []
        for entry in v:
            roster = add_names(roster, entry)
        if not roster:
            msg = "At least one participant name is required"
            raise ValueError(msg)
        too_long = [name for name in roster if len(name) > MAX_NAME_LENGTH]
        if too_long:
            msg = f"Names must be at most {MAX_NAME_LENGTH} characters"
            raise ValueError(msg)
        return roster

    def to_command(self) -> StartMeeting:
        return StartMeeting(
            time_value=self.time_value, mode=self.mode, names=self.names
        )


class SetupPreview(BaseModel):
    """Per-speaker duration shown before starting."""

    participant_count: int = Field(description="Number of speakers")
    time_per_speaker: int = Field(description="Seconds per speaker, unclamped")
    time_per_speaker_display: str = Field(description="Seconds per speaker as MM:SS")
    mode: AllocationMode = Field(description="Allocation mode used")


def preview(request: StartRequest) -> SetupPreview:
    """Compute the duration preview for a setup request.

    Matches the setup form display, which shows the raw division without
    the one-second minimum applied at start.
    """
    count = len(request.names)
    seconds = compute_time_per_speaker(
        request.time_value, request.mode, count, clamp=False
    )
    return SetupPreview(
        participant_count=count,
        time_per_speaker=seconds,
        time_per_speaker_display=format_time(seconds),
        mode=request.mode,
    )
