"""Player actions: sector investment, food distribution and trade.

Investment spends the treasury (the top-level wealth currency) while trades
move ``resources["wealth"]``; the two pools are deliberately kept apart.
Investment and food distribution each complete one daily task, trades do
not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..config import NationConfig
from ..errors import insufficient
from ..state import NationState
from .base import ActionDefinition, ActionOutcome, lookup


@dataclass(frozen=True, slots=True)
class SectorBenefit:
    groups: Tuple[str, ...]
    healthcare_style: bool
    message: str


SECTOR_BENEFITS: Dict[str, SectorBenefit] = {
    "agriculture": SectorBenefit(("farmers",), False, "Invested in agriculture. Farmers are pleased!"),
    "infrastructure": SectorBenefit(("workers",), False, "Invested in infrastructure. Workers are pleased!"),
    "education": SectorBenefit(("scholars",), False, "Invested in education. Scholars are pleased!"),
    "healthcare": SectorBenefit((), True, "Invested in healthcare. Everyone appreciates it!"),
    "diplomacy": SectorBenefit((), False, "Invested in diplomacy. International relations improved!"),
}


@dataclass(frozen=True, slots=True)
class TradeRate:
    source: str
    cost: float
    target: str
    gain: float
    message: str


TRADE_RATES: Dict[str, TradeRate] = {
    "food_to_wealth": TradeRate("food", 20, "wealth", 10, "Traded food for wealth"),
    "wealth_to_food": TradeRate("wealth", 15, "food", 25, "Traded wealth for food"),
    "materials_to_technology": TradeRate("materials", 30, "technology", 10, "Traded materials for technology"),
    "wealth_to_materials": TradeRate("wealth", 20, "materials", 25, "Traded wealth for materials"),
}


def _task_note(state: NationState) -> str:
    return f"Task completed! ({state.tasks.completed}/{state.required_tasks})"


def _cap_satisfaction(state: NationState, config: NationConfig) -> None:
    for group in state.groups.values():
        group.cap(config.metric_ceiling)


# ---------------------------------------------------------------------------
# Investment
# ---------------------------------------------------------------------------


def _treasury_covers_investment(state: NationState, config: NationConfig) -> None:
    if state.treasury < config.invest_cost:
        raise insufficient("treasury wealth", config.invest_cost, state.treasury)


def _investment_definition(sector: str, benefit: SectorBenefit) -> ActionDefinition:
    def execute(state: NationState, config: NationConfig) -> str:
        state.treasury -= config.invest_cost
        state.tasks.complete_one()
        state.metrics[sector] = min(state.metrics[sector] + config.invest_metric_gain, config.metric_ceiling)
        for name in benefit.groups:
            state.groups[name].adjust(config.invest_group_gain)
        if benefit.healthcare_style:
            for group in state.groups.values():
                group.adjust(config.healthcare_group_gain)
        _cap_satisfaction(state, config)
        return f"{benefit.message} {_task_note(state)}"

    return ActionDefinition(
        verb=f"invest:{sector}",
        preconditions=(_treasury_covers_investment,),
        executor=execute,
        counts_as_task=True,
    )


INVESTMENTS: Dict[str, ActionDefinition] = {
    sector: _investment_definition(sector, benefit) for sector, benefit in SECTOR_BENEFITS.items()
}


def invest_in_sector(state: NationState, config: NationConfig, sector: str) -> ActionOutcome:
    outcome = lookup(INVESTMENTS, sector, what="sector").run(state, config)
    outcome.details = {"sector": sector, "cost": config.invest_cost, "metric": state.metrics[sector]}
    return outcome


# ---------------------------------------------------------------------------
# Food distribution
# ---------------------------------------------------------------------------


def _food_covers_distribution(state: NationState, config: NationConfig) -> None:
    food = state.resources["food"]
    if food < config.food_distribution_amount:
        raise insufficient("food", config.food_distribution_amount, food)


def _execute_distribution(state: NationState, config: NationConfig) -> str:
    state.resources["food"] -= config.food_distribution_amount
    state.tasks.complete_one()
    for group in state.groups.values():
        group.adjust(config.food_distribution_gain)
    _cap_satisfaction(state, config)
    return f"Food distributed. Population satisfaction improved! {_task_note(state)}"


DISTRIBUTE_FOOD = ActionDefinition(
    verb="distribute_food",
    preconditions=(_food_covers_distribution,),
    executor=_execute_distribution,
    counts_as_task=True,
)


def distribute_food(state: NationState, config: NationConfig) -> ActionOutcome:
    outcome = DISTRIBUTE_FOOD.run(state, config)
    outcome.details = {"amount": config.food_distribution_amount}
    return outcome


# ---------------------------------------------------------------------------
# Trade
# ---------------------------------------------------------------------------


def _trade_definition(kind: str, rate: TradeRate) -> ActionDefinition:
    def source_covers_trade(state: NationState, config: NationConfig) -> None:
        available = state.resources.get(rate.source, 0.0)
        if available < rate.cost:
            raise insufficient(rate.source, rate.cost, available)

    def execute(state: NationState, config: NationConfig) -> str:
        state.resources[rate.source] -= rate.cost
        state.resources[rate.target] = state.resources.get(rate.target, 0.0) + rate.gain
        return rate.message

    return ActionDefinition(verb=f"trade:{kind}", preconditions=(source_covers_trade,), executor=execute)


TRADES: Dict[str, ActionDefinition] = {kind: _trade_definition(kind, rate) for kind, rate in TRADE_RATES.items()}


def trade(state: NationState, config: NationConfig, kind: str) -> ActionOutcome:
    outcome = lookup(TRADES, kind, what="trade").run(state, config)
    rate = TRADE_RATES[kind]
    outcome.details = {
        "trade_kind": kind,
        "spent": {rate.source: rate.cost},
        "received": {rate.target: rate.gain},
    }
    return outcome


__all__ = [
    "DISTRIBUTE_FOOD",
    "INVESTMENTS",
    "SECTOR_BENEFITS",
    "TRADES",
    "TRADE_RATES",
    "SectorBenefit",
    "TradeRate",
    "distribute_food",
    "invest_in_sector",
    "trade",
]
