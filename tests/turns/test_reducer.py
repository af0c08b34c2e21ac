"""Tests for the session reducer."""

import random

import pytest

from src.models.participant import ParticipantStatus
from src.models.session import AllocationMode, MeetingState, Session
from src.turns.commands import (
    Command,
    EndMeeting,
    Pause,
    Resume,
    Skip,
    StartMeeting,
    Tick,
)
from src.turns.reducer import advance_to_next_speaker, reduce


def statuses(session: Session) -> list[ParticipantStatus]:
    return [p.status for p in session.participants]


def expire_turn(session: Session) -> Session:
    """Tick until the current speaker's time runs out."""
    for _ in range(session.current_time_remaining):
        session = reduce(session, Tick())
    return session


class TestStart:
    """Tests for StartMeeting."""

    def test_start_from_idle(self):
        """Start schedules the round and begins the countdown."""
        command = StartMeeting(
            time_value=30, mode=AllocationMode.TOTAL_TIME, names=["Alice", "Bob", "Carol"]
        )
        session = reduce(Session.idle(), command, rng=random.Random(5))

        assert session.state == MeetingState.RUNNING
        assert session.participant_count == 3
        assert session.current_speaker_index == 0
        assert session.time_per_speaker == 600
        assert session.current_time_remaining == 600
        assert statuses(session) == [
            ParticipantStatus.SPEAKING,
            ParticipantStatus.PENDING,
            ParticipantStatus.PENDING,
        ]

    def test_start_ignored_when_not_idle(self, running_session: Session):
        """A running meeting is not rescheduled."""
        command = StartMeeting(time_value=1, mode=AllocationMode.PER_MEMBER, names=["Zed"])
        assert reduce(running_session, command) is running_session

    def test_start_does_not_mutate_input(self):
        """Reducer returns a new session."""
        idle = Session.idle()
        reduce(idle, StartMeeting(time_value=5, mode=AllocationMode.PER_MEMBER, names=["A"]))
        assert idle.state == MeetingState.IDLE
        assert idle.participants == []


class TestTick:
    """Tests for countdown ticks."""

    def test_tick_decrements(self, running_session: Session):
        """Each tick removes one second."""
        session = reduce(running_session, Tick())
        assert session.current_time_remaining == 4
        assert session.current_speaker_index == 0
        assert running_session.current_time_remaining == 5

    def test_tick_at_one_advances(self, running_session: Session):
        """The last second hands the floor over with a full countdown."""
        session = running_session.model_copy(update={"current_time_remaining": 1})
        session = reduce(session, Tick())

        assert session.state == MeetingState.RUNNING
        assert session.current_speaker_index == 1
        assert session.current_time_remaining == 5
        assert statuses(session) == [
            ParticipantStatus.SPOKEN,
            ParticipantStatus.SPEAKING,
            ParticipantStatus.PENDING,
        ]

    def test_running_session_never_shows_zero(self, running_session: Session):
        """Remaining time stays positive while running."""
        session = running_session
        while session.state == MeetingState.RUNNING:
            assert session.current_time_remaining > 0
            session = reduce(session, Tick())
        assert session.state == MeetingState.FINISHED

    @pytest.mark.parametrize("state", [MeetingState.PAUSED, MeetingState.FINISHED])
    def test_tick_ignored_when_not_running(self, running_session: Session, state):
        """Ticks only count while running."""
        session = running_session.model_copy(update={"state": state})
        assert reduce(session, Tick()) is session

    def test_tick_ignored_when_idle(self):
        """An idle session has no countdown."""
        idle = Session.idle()
        assert reduce(idle, Tick()) is idle


class TestFullTraversal:
    """Walking a whole meeting by letting every turn expire."""

    def test_three_expiries_finish_meeting(self, running_session: Session):
        """RUNNING -> RUNNING -> RUNNING -> FINISHED in turn order."""
        session = running_session
        names = [p.name for p in session.participants]

        session = expire_turn(session)
        assert session.state == MeetingState.RUNNING
        assert session.current_speaker_index == 1
        assert session.participants[0].status == ParticipantStatus.SPOKEN

        session = expire_turn(session)
        assert session.state == MeetingState.RUNNING
        assert session.current_speaker_index == 2
        assert session.participants[1].status == ParticipantStatus.SPOKEN
        assert session.participants[2].status == ParticipantStatus.SPEAKING

        session = expire_turn(session)
        assert session.state == MeetingState.FINISHED
        assert statuses(session) == [ParticipantStatus.SPOKEN] * 3
        assert [p.name for p in session.participants] == names

    def test_finished_keeps_last_index_and_zero_time(self, running_session: Session):
        """Finishing leaves the index on the last speaker and stops the clock."""
        session = running_session
        for _ in range(3):
            session = expire_turn(session)
        assert session.current_speaker_index == 2
        assert session.current_time_remaining == 0

    def test_ids_stable_across_turns(self, running_session: Session):
        """Participant and session ids survive status changes."""
        ids = [p.id for p in running_session.participants]
        session = expire_turn(running_session)
        assert [p.id for p in session.participants] == ids
        assert session.id == running_session.id


class TestPauseResume:
    """Tests for Pause and Resume."""

    def test_pause_keeps_remaining(self, running_session: Session):
        """Pausing changes only the state."""
        session = reduce(reduce(running_session, Tick()), Pause())
        assert session.state == MeetingState.PAUSED
        assert session.current_time_remaining == 4

    def test_repeated_pause_is_noop(self, running_session: Session):
        """Pausing a paused meeting changes nothing."""
        paused = reduce(running_session, Pause())
        again = reduce(paused, Pause())
        assert again is paused
        assert again.current_time_remaining == 5

    def test_time_while_paused_not_counted(self, running_session: Session):
        """Ticks delivered while paused are ignored."""
        paused = reduce(running_session, Pause())
        for _ in range(10):
            paused = reduce(paused, Tick())
        resumed = reduce(paused, Resume())
        assert resumed.state == MeetingState.RUNNING
        assert resumed.current_time_remaining == 5

    def test_resume_only_from_paused(self, running_session: Session):
        """Resume does nothing unless paused."""
        assert reduce(running_session, Resume()) is running_session
        idle = Session.idle()
        assert reduce(idle, Resume()) is idle

    def test_pause_only_from_running(self):
        """Pause does nothing while idle."""
        idle = Session.idle()
        assert reduce(idle, Pause()) is idle


class TestSkip:
    """Tests for Skip."""

    def test_skip_advances_regardless_of_time(self, running_session: Session):
        """Skip hands over immediately with a fresh countdown."""
        session = reduce(reduce(running_session, Tick()), Skip())
        assert session.current_speaker_index == 1
        assert session.current_time_remaining == 5
        assert session.state == MeetingState.RUNNING

    def test_skip_while_paused_resumes(self, running_session: Session):
        """Skipping from pause starts the next speaker running."""
        paused = reduce(running_session, Pause())
        session = reduce(paused, Skip())
        assert session.state == MeetingState.RUNNING
        assert session.current_speaker_index == 1

    def test_skip_on_last_speaker_finishes(self, make_session):
        """Skipping the last speaker ends the meeting."""
        session = make_session(["Alice", "Bob"], 60)
        session = reduce(session, Skip())
        assert session.current_speaker_index == 1
        assert session.current_time_remaining == 60

        session = reduce(session, Skip())
        assert session.state == MeetingState.FINISHED
        assert statuses(session) == [ParticipantStatus.SPOKEN] * 2

    def test_skip_last_speaker_while_paused_finishes(self, make_session):
        """Paused last speaker skips straight to finished."""
        session = reduce(make_session(["Solo"], 30), Pause())
        session = reduce(session, Skip())
        assert session.state == MeetingState.FINISHED

    def test_skip_ignored_when_idle_or_finished(self, make_session):
        """Nothing to skip outside an active meeting."""
        idle = Session.idle()
        assert reduce(idle, Skip()) is idle

        finished = reduce(make_session(["Solo"], 30), Skip())
        assert reduce(finished, Skip()) is finished


class TestEnd:
    """Tests for EndMeeting."""

    @pytest.mark.parametrize("command", [None, Pause(), Skip()])
    def test_end_resets_everything(self, make_session, command):
        """Ending from running, paused or finished returns a blank idle session."""
        session = make_session(["Solo"], 30)
        if command is not None:
            session = reduce(session, command)

        ended = reduce(session, EndMeeting())
        assert ended.state == MeetingState.IDLE
        assert ended.participants == []
        assert ended.current_speaker_index == 0
        assert ended.time_per_speaker == 0
        assert ended.current_time_remaining == 0
        assert ended.id != session.id

    def test_end_when_idle_is_noop(self):
        idle = Session.idle()
        assert reduce(idle, EndMeeting()) is idle

    def test_new_round_after_end(self, running_session: Session):
        """After ending, a new start schedules a fresh round."""
        idle = reduce(running_session, EndMeeting())
        session = reduce(
            idle, StartMeeting(time_value=2, mode=AllocationMode.PER_MEMBER, names=["X", "Y"])
        )
        assert session.state == MeetingState.RUNNING
        assert session.time_per_speaker == 120
        assert sorted(p.name for p in session.participants) == ["X", "Y"]


class TestAdvanceToNextSpeaker:
    """Tests for advance_to_next_speaker directly."""

    def test_spoken_count_matches_index(self, make_session):
        """Invariant: spoken count equals the current index."""
        session = make_session(["A", "B", "C", "D"], 10)
        for expected in range(1, 4):
            session = advance_to_next_speaker(session)
            assert session.spoken_count == expected == session.current_speaker_index
            assert statuses(session).count(ParticipantStatus.SPEAKING) == 1


def test_unknown_command_raises(running_session: Session):
    """Only the known commands are accepted."""

    class Rewind(Command):
        pass

    with pytest.raises(TypeError, match="Rewind"):
        reduce(running_session, Rewind())
