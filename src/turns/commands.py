"""Commands accepted by the session reducer.

Commands are immutable values. External surfaces (HTTP, tests, the tick
source) build them and hand them to ``reduce`` or ``SessionController``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.models.session import AllocationMode


class Command(BaseModel):
    """Base class for all session commands."""

    model_config = ConfigDict(frozen=True)

    @property
    def command_type(self) -> str:
        """Return the command name (class name)."""
        return self.__class__.__name__


class StartMeeting(Command):
    """Schedule a new round and start the first speaker's countdown.

    Inputs are expected to be validated by the input surface already
    (see ``src.setup.schemas.StartRequest``).
    """

    kind: Literal["start"] = "start"
    time_value: float = Field(description="Minutes, interpreted per allocation mode")
    mode: AllocationMode = Field(description="Allocation mode")
    names: list[str] = Field(description="Participant names in entry order")


class Tick(Command):
    """One tick interval elapsed."""

    kind: Literal["tick"] = "tick"


class Pause(Command):
    kind: Literal["pause"] = "pause"


class Resume(Command):
    kind: Literal["resume"] = "resume"


class Skip(Command):
    """Hand the floor to the next speaker regardless of time left."""

    kind: Literal["skip"] = "skip"


class EndMeeting(Command):
    """Discard the round and return to idle."""

    kind: Literal["end"] = "end"
