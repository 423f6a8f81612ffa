"""Rejection taxonomy for player commands.

Every rejection is recoverable.  Handlers raise :class:`CommandRejected`
before touching state; the controller turns it into a rejected
``CommandResult`` so nothing escapes the command surface.
"""

from __future__ import annotations

from enum import Enum


class RejectionReason(Enum):
    INSUFFICIENT_RESOURCE = "InsufficientResource"
    TASKS_INCOMPLETE = "TasksIncomplete"
    CHOICE_UNAVAILABLE = "ChoiceUnavailable"
    NO_ACTIVE_EVENT = "NoActiveEvent"
    EVENT_ALREADY_ACTIVE = "EventAlreadyActive"
    EVENT_PENDING = "EventPending"
    TERMINAL = "Terminal"
    INVALID_COMMAND = "InvalidCommand"


class CommandRejected(Exception):
    """Raised by a handler whose preconditions do not hold."""

    def __init__(self, reason: RejectionReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


def insufficient(what: str, needed: float, available: float) -> CommandRejected:
    shortfall = needed - available
    return CommandRejected(
        RejectionReason.INSUFFICIENT_RESOURCE,
        f"Not enough {what}: need {needed:g}, have {available:g} (short {shortfall:g}).",
    )


__all__ = ["CommandRejected", "RejectionReason", "insufficient"]
