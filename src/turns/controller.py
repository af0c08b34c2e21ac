"""SessionController hosts one meeting session.

Feeds commands and ticks through the reducer, keeps the countdown job in
step with the session state, and publishes what changed.
"""

import random

import structlog

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
from src.models.session import AllocationMode, MeetingState, Session
from src.render.view import SessionView
from src.turns.commands import (
    Command,
    EndMeeting,
    Pause,
    Resume,
    Skip,
    StartMeeting,
    Tick,
)
from src.turns.reducer import reduce
from src.turns.ticker import Ticker

logger = structlog.get_logger()


class SessionController:
    """Owner of a session, its tick source and its event stream.

    All state changes go through ``dispatch``. The reduce step and the
    ticker update run without awaiting, so commands and ticks arriving on
    the event loop are applied one at a time. The ticker runs exactly while
    the session is RUNNING.
    """

    def __init__(
        self,
        ticker: Ticker,
        event_bus: EventBus | None = None,
        session: Session | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize controller.

        Args:
            ticker: Countdown source owned by this controller
            event_bus: Bus for session events (events dropped if None)
            session: Starting session (idle if None)
            rng: Random source for turn order (unseeded if None)
        """
        self._ticker = ticker
        self._bus = event_bus
        self._session = session or Session.idle()
        self._rng = rng

    @property
    def session(self) -> Session:
        return self._session

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    def view(self) -> SessionView:
        """Snapshot of the current session for display."""
        return SessionView.from_session(self._session)

    async def dispatch(self, command: Command) -> Session:
        """Apply a command and publish the resulting events.

        Args:
            command: Command to apply

        Returns:
            The session after the command
        """
        before = self._session
        after = reduce(before, command, rng=self._rng)
        self._session = after
        self._sync_ticker(before)

        if after is before:
            logger.debug(
                "Command ignored",
                command=command.command_type,
                state=before.state.value,
            )
            return after

        events = describe_change(before, after, command)
        if not isinstance(command, Tick):
            logger.info(
                "Session transition",
                command=command.command_type,
                from_state=before.state.value,
                to_state=after.state.value,
                speaker_index=after.current_speaker_index,
            )
        if self._bus is not None:
            await self._bus.publish_all(events)
        return after

    async def start(
        self, time_value: float, mode: AllocationMode, names: list[str]
    ) -> Session:
        return await self.dispatch(
            StartMeeting(time_value=time_value, mode=mode, names=names)
        )

    async def tick(self) -> None:
        """Countdown callback; registered with the ticker."""
        await self.dispatch(Tick())

    async def pause(self) -> Session:
        return await self.dispatch(Pause())

    async def resume(self) -> Session:
        return await self.dispatch(Resume())

    async def toggle(self) -> Session:
        """Pause a running meeting or resume a paused one.

        Mirrors the pause/resume key. Any other state is left alone.
        """
        if self._session.state == MeetingState.RUNNING:
            return await self.pause()
        if self._session.state == MeetingState.PAUSED:
            return await self.resume()
        return self._session

    async def skip(self) -> Session:
        return await self.dispatch(Skip())

    async def end(self) -> Session:
        return await self.dispatch(EndMeeting())

    def close(self) -> None:
        """Stop the countdown unconditionally (shutdown path)."""
        self._ticker.stop()
        logger.info("Session controller closed", state=self._session.state.value)

    def _sync_ticker(self, before: Session) -> None:
        after = self._session
        if after.state != MeetingState.RUNNING:
            self._ticker.stop()
        elif before.is_active and (
            after.current_speaker_index != before.current_speaker_index
        ):
            # Each new speaker gets a full first second
            self._ticker.restart(self.tick)
        else:
            self._ticker.start(self.tick)


def describe_change(before: Session, after: Session, command: Command) -> list[Event]:
    """Derive the events for a session change.

    Always ends with a SessionUpdated carrying the new snapshot.
    """
    events: list[Event] = []
    aggregate_id = after.id
    reason = "skipped" if isinstance(command, Skip) else "expired"

    if after.state == MeetingState.IDLE:
        events.append(
            MeetingEnded(aggregate_id=before.id, previous_state=before.state.value)
        )
    elif before.state == MeetingState.IDLE:
        events.append(
            MeetingStarted(
                aggregate_id=aggregate_id,
                participant_count=after.participant_count,
                time_per_speaker=after.time_per_speaker,
                speaking_order=[p.name for p in after.participants],
            )
        )
    elif after.state == MeetingState.FINISHED:
        events.append(
            MeetingFinished(
                aggregate_id=aggregate_id,
                participant_count=after.participant_count,
                reason=reason,
            )
        )
    elif after.current_speaker_index != before.current_speaker_index:
        previous = before.participants[before.current_speaker_index]
        current = after.participants[after.current_speaker_index]
        events.append(
            SpeakerChanged(
                aggregate_id=aggregate_id,
                previous_participant_id=previous.id,
                participant_id=current.id,
                participant_name=current.name,
                speaker_index=after.current_speaker_index,
                reason=reason,
            )
        )
    elif before.state == MeetingState.RUNNING and after.state == MeetingState.PAUSED:
        events.append(
            MeetingPaused(
                aggregate_id=aggregate_id, time_remaining=after.current_time_remaining
            )
        )
    elif before.state == MeetingState.PAUSED and after.state == MeetingState.RUNNING:
        events.append(
            MeetingResumed(
                aggregate_id=aggregate_id, time_remaining=after.current_time_remaining
            )
        )

    view = SessionView.from_session(after)
    events.append(
        SessionUpdated(
            aggregate_id=aggregate_id,
            state=after.state.value,
            snapshot=view.model_dump(mode="json"),
        )
    )
    return events
