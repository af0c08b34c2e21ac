"""Pytest configuration and fixtures."""

import random
from collections.abc import AsyncIterator

import pytest
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from httpx import ASGITransport, AsyncClient

from src.events.bus import EventBus
from src.main import app
from src.models.participant import Participant, ParticipantStatus
from src.models.session import MeetingState, Session
from src.turns.controller import SessionController
from src.turns.ticker import Ticker


def make_running_session(names: list[str], seconds: int) -> Session:
    """Build a RUNNING session with names in the given order."""
    participants = [
        Participant(
            name=name,
            status=ParticipantStatus.SPEAKING if i == 0 else ParticipantStatus.PENDING,
        )
        for i, name in enumerate(names)
    ]
    return Session(
        state=MeetingState.RUNNING,
        participants=participants,
        current_speaker_index=0,
        time_per_speaker=seconds,
        current_time_remaining=seconds,
    )


@pytest.fixture
def make_session():
    """Factory for RUNNING sessions with a fixed speaking order."""
    return make_running_session


@pytest.fixture
def running_session() -> Session:
    """Three-person meeting with five seconds per speaker."""
    return make_running_session(["Alice", "Bob", "Carol"], 5)


@pytest.fixture
def ticker() -> Ticker:
    """Ticker on a scheduler that is never started, so no ticks fire."""
    return Ticker(scheduler=AsyncIOScheduler(), interval_seconds=1.0)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def controller(ticker: Ticker, event_bus: EventBus) -> SessionController:
    return SessionController(ticker=ticker, event_bus=event_bus, rng=random.Random(7))


@pytest.fixture
async def client(
    controller: SessionController, event_bus: EventBus
) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with a session controller."""
    app.state.event_bus = event_bus
    app.state.session_controller = controller

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Cleanup
    controller.close()
    del app.state.event_bus
    del app.state.session_controller
