"""Render snapshot of a session.

SessionView is what every display surface consumes: the HTTP API, the
snapshot stream and the board templates.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from src.models.participant import ParticipantStatus
from src.models.session import MeetingState, Session
from src.render.formatter import TimerPhase, format_time, progress_percent, timer_phase


class ParticipantView(BaseModel):
    """Participant as shown in the speaker list."""

    id: UUID
    name: str
    status: ParticipantStatus
    position: int = Field(description="1-based place in the turn order")


class SessionView(BaseModel):
    """Full snapshot of a session for display."""

    session_id: UUID
    state: MeetingState
    participants: list[ParticipantView] = Field(default_factory=list)
    current_speaker_index: int
    current_speaker: str | None = None
    next_speaker: str | None = None
    is_last_speaker: bool = False
    spoken_count: int = 0
    participant_count: int = 0
    time_per_speaker: int
    current_time_remaining: int
    remaining_display: str
    total_display: str
    progress_percent: float
    phase: TimerPhase

    @classmethod
    def from_session(cls, session: Session) -> "SessionView":
        """Build a view from a session."""
        current = session.current_speaker
        upcoming = session.next_speaker
        return cls(
            session_id=session.id,
            state=session.state,
            participants=[
                ParticipantView(
                    id=p.id,
                    name=p.name,
                    status=p.status,
                    position=index + 1,
                )
                for index, p in enumerate(session.participants)
            ],
            current_speaker_index=session.current_speaker_index,
            current_speaker=current.name if current else None,
            next_speaker=upcoming.name if upcoming else None,
            is_last_speaker=session.is_active and session.is_last_speaker,
            spoken_count=session.spoken_count,
            participant_count=session.participant_count,
            time_per_speaker=session.time_per_speaker,
            current_time_remaining=session.current_time_remaining,
            remaining_display=format_time(session.current_time_remaining),
            total_display=format_time(session.time_per_speaker),
            progress_percent=progress_percent(
                session.current_time_remaining, session.time_per_speaker
            ),
            phase=timer_phase(session.current_time_remaining, session.time_per_speaker),
        )

    @property
    def is_finished(self) -> bool:
        return self.state == MeetingState.FINISHED
