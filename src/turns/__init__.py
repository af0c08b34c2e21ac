"""Turn-taking core.

Provides the turn scheduler, the session reducer, the countdown ticker
and the controller that ties them together.
"""

from src.turns.commands import (
    Command,
    EndMeeting,
    Pause,
    Resume,
    Skip,
    StartMeeting,
    Tick,
)
from src.turns.controller import SessionController, describe_change
from src.turns.reducer import advance_to_next_speaker, reduce
from src.turns.scheduler import (
    Schedule,
    compute_time_per_speaker,
    schedule,
    shuffle_names,
)
from src.turns.ticker import Ticker, get_scheduler, reset_scheduler, ticker_lifespan

__all__ = [
    "Command",
    "EndMeeting",
    "Pause",
    "Resume",
    "Schedule",
    "SessionController",
    "Skip",
    "StartMeeting",
    "Tick",
    "Ticker",
    "advance_to_next_speaker",
    "compute_time_per_speaker",
    "describe_change",
    "get_scheduler",
    "reduce",
    "reset_scheduler",
    "schedule",
    "shuffle_names",
    "ticker_lifespan",
]
