"""Turn scheduling: randomized speaking order and per-speaker duration.

Scheduling runs once when a meeting starts. It is pure: calling it again
with the same roster produces a fresh random order.
"""

import math
import random
from collections.abc import Sequence
from typing import NamedTuple

from src.models.participant import Participant, ParticipantStatus
from src.models.session import AllocationMode

# Unseeded source for production use; tests pass their own random.Random
_system_random = random.SystemRandom()


class Schedule(NamedTuple):
    """Result of scheduling a meeting round."""

    participants: list[Participant]
    time_per_speaker: int


def shuffle_names(names: Sequence[str], rng: random.Random | None = None) -> list[str]:
    """Return a uniformly random permutation of names (Fisher-Yates).

    Walks from the last index down to 1, swapping each slot with a
    uniformly chosen index in [0, i]. The input is not modified.
    """
    rng = rng or _system_random
    shuffled = list(names)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def compute_time_per_speaker(
    time_value: float,
    mode: AllocationMode,
    participant_count: int,
    clamp: bool = True,
) -> int:
    """Compute whole seconds each speaker gets.

    Args:
        time_value: Minutes; the whole meeting for TOTAL_TIME, one turn
            for PER_MEMBER
        mode: Allocation mode
        participant_count: Number of speakers (must be positive)
        clamp: Raise a zero result to one second when time_value > 0

    Returns:
        Seconds per speaker
    """
    if mode == AllocationMode.TOTAL_TIME:
        seconds = math.floor(time_value * 60 / participant_count)
    else:
        seconds = math.floor(time_value * 60)

    if clamp and seconds < 1 and time_value > 0:
        seconds = 1
    return seconds


def schedule(
    names: Sequence[str],
    time_value: float,
    mode: AllocationMode,
    rng: random.Random | None = None,
) -> Schedule:
    """Build the turn order and speaking duration for a new round.

    Duplicate names are kept; each entry becomes its own participant.
    The first speaker in the shuffled order starts as SPEAKING.

    Raises:
        ValueError: If names is empty
    """
    if not names:
        msg = "Cannot schedule a meeting without participants"
        raise ValueError(msg)

    participants = [
        Participant(
            name=name,
            status=(
                ParticipantStatus.SPEAKING if index == 0 else ParticipantStatus.PENDING
            ),
        )
        for index, name in enumerate(shuffle_names(names, rng))
    ]
    time_per_speaker = compute_time_per_speaker(time_value, mode, len(participants))
    return Schedule(participants=participants, time_per_speaker=time_per_speaker)
