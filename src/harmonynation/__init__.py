"""Harmony Nation simulation core public façade."""

from .config import NationConfig
from .errors import CommandRejected, RejectionReason
from .rng import SequenceRandom, make_rng
from .simulation.engine import CommandResult, NationController
from .simulation.snapshots import ChoiceView, EventView, NationSnapshot
from .state import EventStage, GroupState, NationState, TerminalCause, initial_state
from .world.catalog import EVENT_CATALOG, Choice, EventTemplate

__all__ = [
    "ChoiceView",
    "Choice",
    "CommandRejected",
    "CommandResult",
    "EVENT_CATALOG",
    "EventStage",
    "EventTemplate",
    "EventView",
    "GroupState",
    "NationConfig",
    "NationController",
    "NationSnapshot",
    "NationState",
    "RejectionReason",
    "SequenceRandom",
    "TerminalCause",
    "initial_state",
    "make_rng",
]
