import pytest

from harmonynation.actions.handlers import distribute_food, invest_in_sector, trade
from harmonynation.config import NationConfig
from harmonynation.errors import CommandRejected, RejectionReason
from harmonynation.state import NationState, initial_state


def _make_state() -> NationState:
    return initial_state(NationConfig())


def test_invest_in_agriculture() -> None:
    state = _make_state()

    outcome = invest_in_sector(state, NationConfig(), "agriculture")

    assert state.treasury == pytest.approx(85.0)
    assert state.resources["wealth"] == pytest.approx(100.0)
    assert state.tasks.completed == 1
    assert state.metrics["agriculture"] == pytest.approx(15.0)
    assert state.groups["farmers"].satisfaction == pytest.approx(60.0)
    assert state.groups["workers"].satisfaction == pytest.approx(50.0)
    assert outcome.task_completed
    assert outcome.message.startswith("Invested in agriculture. Farmers are pleased!")


@pytest.mark.parametrize(
    "sector, group",
    [("infrastructure", "workers"), ("education", "scholars")],
)
def test_invest_pleases_matching_group(sector: str, group: str) -> None:
    state = _make_state()
    invest_in_sector(state, NationConfig(), sector)
    assert state.groups[group].satisfaction == pytest.approx(60.0)


def test_invest_in_healthcare_lifts_everyone_with_cap() -> None:
    state = _make_state()
    state.groups["farmers"].satisfaction = 99.0

    invest_in_sector(state, NationConfig(), "healthcare")

    assert state.groups["farmers"].satisfaction == 100.0
    for name in ("workers", "merchants", "scholars"):
        assert state.groups[name].satisfaction == pytest.approx(53.0)


def test_invest_in_diplomacy_leaves_groups_alone() -> None:
    state = _make_state()
    invest_in_sector(state, NationConfig(), "diplomacy")
    assert state.metrics["diplomacy"] == pytest.approx(15.0)
    assert all(group.satisfaction == pytest.approx(50.0) for group in state.groups.values())


def test_invest_metric_capped() -> None:
    state = _make_state()
    state.metrics["education"] = 98.0
    invest_in_sector(state, NationConfig(), "education")
    assert state.metrics["education"] == 100.0


def test_invest_rejected_without_treasury() -> None:
    state = _make_state()
    state.treasury = 10.0
    before = state.signature()

    with pytest.raises(CommandRejected) as excinfo:
        invest_in_sector(state, NationConfig(), "agriculture")

    assert excinfo.value.reason is RejectionReason.INSUFFICIENT_RESOURCE
    assert "short 5" in excinfo.value.message
    assert state.signature() == before


def test_invest_unknown_sector() -> None:
    state = _make_state()
    with pytest.raises(CommandRejected) as excinfo:
        invest_in_sector(state, NationConfig(), "military")
    assert excinfo.value.reason is RejectionReason.INVALID_COMMAND
    assert state.treasury == pytest.approx(100.0)


def test_distribute_food() -> None:
    state = _make_state()
    state.groups["scholars"].satisfaction = 98.0

    outcome = distribute_food(state, NationConfig())

    assert state.resources["food"] == pytest.approx(40.0)
    assert state.tasks.completed == 1
    assert state.groups["farmers"].satisfaction == pytest.approx(55.0)
    assert state.groups["scholars"].satisfaction == 100.0
    assert outcome.task_completed
    assert set(state.groups) == {"farmers", "workers", "merchants", "scholars"}


def test_distribute_food_rejected_when_pantry_low() -> None:
    state = _make_state()
    state.resources["food"] = 9.0
    before = state.signature()

    with pytest.raises(CommandRejected) as excinfo:
        distribute_food(state, NationConfig())

    assert excinfo.value.reason is RejectionReason.INSUFFICIENT_RESOURCE
    assert state.signature() == before


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("food_to_wealth", {"food": 30.0, "wealth": 110.0}),
        ("wealth_to_food", {"wealth": 85.0, "food": 75.0}),
        ("materials_to_technology", {"materials": 45.0, "technology": 20.0}),
        ("wealth_to_materials", {"wealth": 80.0, "materials": 100.0}),
    ],
)
def test_trade_rates(kind: str, expected: dict) -> None:
    state = _make_state()

    outcome = trade(state, NationConfig(), kind)

    for resource, amount in expected.items():
        assert state.resources[resource] == pytest.approx(amount)
    assert state.tasks.completed == 0
    assert not outcome.task_completed
    assert state.treasury == pytest.approx(100.0)


def test_trade_round_trip_loses_value() -> None:
    state = _make_state()
    state.resources["food"] = 20.0
    state.resources["wealth"] = 0.0

    trade(state, NationConfig(), "food_to_wealth")
    assert state.resources["food"] == pytest.approx(0.0)
    assert state.resources["wealth"] == pytest.approx(10.0)

    with pytest.raises(CommandRejected) as excinfo:
        trade(state, NationConfig(), "wealth_to_food")
    assert excinfo.value.reason is RejectionReason.INSUFFICIENT_RESOURCE
    assert state.resources["food"] != 20.0
    assert state.resources["wealth"] == pytest.approx(10.0)


def test_trade_unknown_kind() -> None:
    with pytest.raises(CommandRejected) as excinfo:
        trade(_make_state(), NationConfig(), "gold_to_silver")
    assert excinfo.value.reason is RejectionReason.INVALID_COMMAND
