import pytest

from harmonynation.config import NationConfig
from harmonynation.errors import CommandRejected, RejectionReason
from harmonynation.rng import SequenceRandom
from harmonynation.runtime.event_engine import (
    display_event,
    queue_random_event,
    resolve_choice,
    select_candidates,
)
from harmonynation.state import EventStage, NationState, initial_state
from harmonynation.world.catalog import (
    DROUGHT_WARNING,
    EVENT_CATALOG,
    REFUGEE_CRISIS,
    TECHNOLOGICAL_REVOLUTION,
    TRADE_OPPORTUNITY,
    WORKER_STRIKE,
    template_by_id,
)


def _make_state() -> NationState:
    return initial_state(NationConfig())


def _with_event(template) -> NationState:
    state = _make_state()
    state.active_event = template
    state.event_stage = EventStage.DISPLAYED
    state.paused = True
    return state


def test_candidate_pool_grows_with_level() -> None:
    sizes = [len(select_candidates(level)) for level in range(1, 8)]
    assert sizes[:3] == [7, 8, 9]
    assert sizes == sorted(sizes)
    assert REFUGEE_CRISIS not in select_candidates(1)
    assert REFUGEE_CRISIS in select_candidates(2)
    assert TECHNOLOGICAL_REVOLUTION in select_candidates(3)


def test_every_event_has_an_unconditional_choice() -> None:
    for template in EVENT_CATALOG:
        assert len(template.choices) == 3
        assert any(not choice.requirements for choice in template.choices), template.event_id


def test_queue_draws_uniformly_from_pool() -> None:
    state = _make_state()
    assert queue_random_event(state, SequenceRandom([0.999])) is TRADE_OPPORTUNITY

    state = _make_state()
    state.level = 3
    assert queue_random_event(state, SequenceRandom([0.999])) is TECHNOLOGICAL_REVOLUTION


def test_queue_sets_pause_and_stage() -> None:
    state = _make_state()
    queue_random_event(state, SequenceRandom([0.0]))
    assert state.active_event is DROUGHT_WARNING
    assert state.event_stage is EventStage.QUEUED
    assert state.paused

    display_event(state)
    assert state.event_stage is EventStage.DISPLAYED


def test_queue_rejected_while_event_active() -> None:
    state = _with_event(WORKER_STRIKE)
    before = state.signature()

    with pytest.raises(CommandRejected) as excinfo:
        queue_random_event(state, SequenceRandom([0.0]))

    assert excinfo.value.reason is RejectionReason.EVENT_ALREADY_ACTIVE
    assert state.signature() == before


def test_resolve_applies_effects_and_clears_event() -> None:
    state = _with_event(DROUGHT_WARNING)

    resolution = resolve_choice(state, 2)

    assert resolution.choice.label == "Do nothing and hope for rain"
    assert state.resources["food"] == pytest.approx(10.0)
    assert state.groups["farmers"].satisfaction == pytest.approx(35.0)
    assert state.active_event is None
    assert state.event_stage is EventStage.NONE
    assert not state.paused


def test_unavailable_choice_is_rejected_even_if_selected() -> None:
    state = _with_event(DROUGHT_WARNING)
    state.resources["food"] = 5.0
    before = state.signature()

    with pytest.raises(CommandRejected) as excinfo:
        resolve_choice(state, 0)

    assert excinfo.value.reason is RejectionReason.CHOICE_UNAVAILABLE
    assert state.signature() == before
    assert state.active_event is DROUGHT_WARNING


def test_out_of_range_choice_is_invalid() -> None:
    state = _with_event(DROUGHT_WARNING)
    for index in (-1, 3):
        with pytest.raises(CommandRejected) as excinfo:
            resolve_choice(state, index)
        assert excinfo.value.reason is RejectionReason.INVALID_COMMAND


def test_resolve_without_event() -> None:
    with pytest.raises(CommandRejected) as excinfo:
        resolve_choice(_make_state(), 0)
    assert excinfo.value.reason is RejectionReason.NO_ACTIVE_EVENT


def test_effects_are_not_clamped_inline() -> None:
    state = _with_event(WORKER_STRIKE)
    state.groups["workers"].satisfaction = 10.0
    state.metrics["harmony"] = 5.0

    resolve_choice(state, 2)

    assert state.groups["workers"].satisfaction == pytest.approx(-10.0)
    assert state.metrics["harmony"] == pytest.approx(-5.0)


def test_diplomacy_gated_choice() -> None:
    state = _with_event(TRADE_OPPORTUNITY)
    assert state.active_event.available_choices(state) == [0, 2]
    state.metrics["diplomacy"] = 20.0
    assert state.active_event.available_choices(state) == [0, 1, 2]


def test_template_lookup() -> None:
    assert template_by_id("worker_strike") is WORKER_STRIKE
    with pytest.raises(KeyError):
        template_by_id("alien_invasion")
