"""Session state machine as a pure reducer.

``reduce(session, command)`` returns the next session without touching the
one passed in. Commands that do not apply to the current state (pausing a
paused meeting, skipping while idle, ticks after the meeting stopped)
return the session unchanged, so callers never need to pre-check state.

    IDLE --start--> RUNNING --pause--> PAUSED --resume--> RUNNING
    RUNNING/PAUSED --skip or expiry--> next speaker (RUNNING) or FINISHED
    RUNNING/PAUSED/FINISHED --end--> IDLE
"""

import random

from src.models.participant import ParticipantStatus
from src.models.session import MeetingState, Session
from src.turns.commands import (
    Command,
    EndMeeting,
    Pause,
    Resume,
    Skip,
    StartMeeting,
    Tick,
)
from src.turns.scheduler import schedule


def reduce(
    session: Session, command: Command, rng: random.Random | None = None
) -> Session:
    """Apply a command to a session.

    Args:
        session: Current session
        command: Command to apply
        rng: Random source for scheduling on start (unseeded if None)

    Returns:
        The next session, or the same session if the command is a no-op
    """
    if isinstance(command, StartMeeting):
        return _start(session, command, rng)
    if isinstance(command, Tick):
        return _tick(session)
    if isinstance(command, Pause):
        if session.state != MeetingState.RUNNING:
            return session
        return session.model_copy(update={"state": MeetingState.PAUSED})
    if isinstance(command, Resume):
        if session.state != MeetingState.PAUSED:
            return session
        return session.model_copy(update={"state": MeetingState.RUNNING})
    if isinstance(command, Skip):
        if not session.is_active:
            return session
        return advance_to_next_speaker(session)
    if isinstance(command, EndMeeting):
        if session.state == MeetingState.IDLE:
            return session
        return Session.idle()

    msg = f"Unsupported command: {command.command_type}"
    raise TypeError(msg)


def advance_to_next_speaker(session: Session) -> Session:
    """Mark the current speaker spoken and hand over the floor.

    Moves to the next participant with a full countdown, or finishes the
    meeting when the current speaker was the last one. Advancing always
    leaves the meeting RUNNING when someone is left to speak.
    """
    index = session.current_speaker_index
    participants = list(session.participants)
    participants[index] = participants[index].with_status(ParticipantStatus.SPOKEN)

    next_index = index + 1
    if next_index < len(participants):
        participants[next_index] = participants[next_index].with_status(
            ParticipantStatus.SPEAKING
        )
        return session.model_copy(
            update={
                "state": MeetingState.RUNNING,
                "participants": participants,
                "current_speaker_index": next_index,
                "current_time_remaining": session.time_per_speaker,
            }
        )

    return session.model_copy(
        update={
            "state": MeetingState.FINISHED,
            "participants": participants,
            "current_time_remaining": 0,
        }
    )


def _start(
    session: Session, command: StartMeeting, rng: random.Random | None
) -> Session:
    if session.state != MeetingState.IDLE:
        return session

    participants, time_per_speaker = schedule(
        command.names, command.time_value, command.mode, rng=rng
    )
    return Session(
        state=MeetingState.RUNNING,
        participants=participants,
        current_speaker_index=0,
        time_per_speaker=time_per_speaker,
        current_time_remaining=time_per_speaker,
    )


def _tick(session: Session) -> Session:
    if session.state != MeetingState.RUNNING:
        return session
    # Expiry hands over directly; a zero countdown is never kept while running
    if session.current_time_remaining <= 1:
        return advance_to_next_speaker(session)
    return session.model_copy(
        update={"current_time_remaining": session.current_time_remaining - 1}
    )
