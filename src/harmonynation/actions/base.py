"""Action primitives shared by the player command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Mapping

from ..config import NationConfig
from ..errors import CommandRejected, RejectionReason
from ..state import NationState

Precondition = Callable[[NationState, NationConfig], None]
Executor = Callable[[NationState, NationConfig], str]


@dataclass(slots=True)
class ActionOutcome:
    verb: str
    message: str
    task_completed: bool = False
    details: Dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class ActionDefinition:
    """A verb with its preconditions and executor.

    Preconditions raise :class:`CommandRejected`; all of them run before the
    executor so a failing check never leaves a half-applied action behind.
    """

    verb: str
    preconditions: Iterable[Precondition]
    executor: Executor
    counts_as_task: bool = False

    def check(self, state: NationState, config: NationConfig) -> None:
        for precondition in self.preconditions:
            precondition(state, config)

    def run(self, state: NationState, config: NationConfig) -> ActionOutcome:
        self.check(state, config)
        message = self.executor(state, config)
        return ActionOutcome(verb=self.verb, message=message, task_completed=self.counts_as_task)


def lookup(definitions: Mapping[str, ActionDefinition], key: str, *, what: str) -> ActionDefinition:
    definition = definitions.get(key)
    if definition is None:
        known = ", ".join(sorted(definitions))
        raise CommandRejected(RejectionReason.INVALID_COMMAND, f"Unknown {what} '{key}'. Expected one of: {known}.")
    return definition


__all__ = [
    "ActionDefinition",
    "ActionOutcome",
    "Executor",
    "Precondition",
    "lookup",
]
