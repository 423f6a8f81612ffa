"""Random event selection and choice resolution.

An event moves ``NONE -> QUEUED -> DISPLAYED -> RESOLVED -> NONE``.  Only one
event can be in flight and the nation is paused for as long as it is.  The
candidate pool grows with the nation's level and never shrinks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..effects import apply_effects
from ..errors import CommandRejected, RejectionReason
from ..rng import RandomSource, pick_uniform
from ..state import EventStage, NationState
from ..world.catalog import EVENT_CATALOG, Choice, EventTemplate


@dataclass(slots=True)
class Resolution:
    event: EventTemplate
    choice_index: int
    choice: Choice


def select_candidates(level: int, catalog: Sequence[EventTemplate] = EVENT_CATALOG) -> List[EventTemplate]:
    return [template for template in catalog if template.min_level <= level]


def queue_random_event(
    state: NationState,
    rng: RandomSource,
    catalog: Sequence[EventTemplate] = EVENT_CATALOG,
) -> EventTemplate:
    if state.active_event is not None:
        raise CommandRejected(
            RejectionReason.EVENT_ALREADY_ACTIVE,
            f"'{state.active_event.title}' is still awaiting a decision.",
        )
    template = pick_uniform(rng, select_candidates(state.level, catalog))
    state.active_event = template
    state.event_stage = EventStage.QUEUED
    state.paused = True
    return template


def display_event(state: NationState) -> Optional[EventTemplate]:
    if state.active_event is not None and state.event_stage is EventStage.QUEUED:
        state.event_stage = EventStage.DISPLAYED
    return state.active_event


def resolve_choice(state: NationState, choice_index: int) -> Resolution:
    event = state.active_event
    if event is None:
        raise CommandRejected(RejectionReason.NO_ACTIVE_EVENT, "There is no event awaiting a decision.")
    if not 0 <= choice_index < len(event.choices):
        raise CommandRejected(
            RejectionReason.INVALID_COMMAND,
            f"'{event.title}' has no choice #{choice_index}.",
        )
    choice = event.choices[choice_index]
    if not choice.available(state):
        raise CommandRejected(
            RejectionReason.CHOICE_UNAVAILABLE,
            f"'{choice.label}' is not available right now.",
        )

    apply_effects(state, choice.effects)
    state.active_event = None
    state.event_stage = EventStage.NONE
    state.paused = False
    return Resolution(event=event, choice_index=choice_index, choice=choice)


__all__ = [
    "Resolution",
    "display_event",
    "queue_random_event",
    "resolve_choice",
    "select_candidates",
]
