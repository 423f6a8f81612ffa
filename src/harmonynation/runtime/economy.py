"""Daily production, consumption and harmony convergence.

The compute helpers are pure: they read the state and return a report.  The
``apply_*``/``update_*`` functions write the result back in place.  Keep the
order of operations intact; harmony in particular is smoothed toward the
group target before the diplomacy bonus and only then clamped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

from ..config import NationConfig
from ..state import GroupState, NationState


@dataclass(slots=True)
class ProductionReport:
    produced: Dict[str, float] = field(default_factory=dict)
    consumed_food: float = 0.0
    famine: bool = False
    resources_after: Dict[str, float] = field(default_factory=dict)


def _group_yield(group: GroupState, rate: float) -> float:
    return group.satisfaction * group.influence * rate


def compute_daily_production(state: NationState, config: NationConfig) -> ProductionReport:
    metrics = state.metrics
    groups = state.groups
    produced = {
        "food": metrics["agriculture"] * config.food_per_agriculture,
        "wealth": metrics["infrastructure"] * config.wealth_per_infrastructure
        + _group_yield(groups["merchants"], config.merchant_wealth_rate),
        "materials": _group_yield(groups["workers"], config.worker_materials_rate),
        "technology": metrics["education"] * config.technology_per_education
        + _group_yield(groups["scholars"], config.scholar_technology_rate),
    }
    after = dict(state.resources)
    for kind, amount in produced.items():
        after[kind] = after.get(kind, 0.0) + amount

    consumption = config.food_consumption(state.level)
    after["food"] -= consumption
    famine = after["food"] <= 0
    if famine:
        after["food"] = 0.0

    for kind in after:
        after[kind] = max(0.0, min(after[kind], config.max_resources))

    return ProductionReport(
        produced=produced,
        consumed_food=consumption,
        famine=famine,
        resources_after=after,
    )


def apply_daily_production(state: NationState, config: NationConfig) -> ProductionReport:
    report = compute_daily_production(state, config)
    state.resources.update(report.resources_after)
    return report


def harmony_target(groups: Mapping[str, GroupState]) -> float:
    """Influence-weighted mean satisfaction."""

    total_influence = sum(group.influence for group in groups.values())
    if total_influence <= 0:
        return 0.0
    weighted = sum(group.satisfaction * group.influence for group in groups.values())
    return weighted / total_influence


def next_harmony(state: NationState, config: NationConfig) -> float:
    harmony = state.metrics["harmony"]
    harmony += (harmony_target(state.groups) - harmony) * config.harmony_smoothing
    harmony += state.metrics["diplomacy"] * config.diplomacy_harmony_bonus
    return min(max(harmony, 0.0), config.metric_ceiling)


def update_harmony(state: NationState, config: NationConfig) -> float:
    state.metrics["harmony"] = next_harmony(state, config)
    return state.metrics["harmony"]


def settle_bounds(state: NationState, config: NationConfig) -> None:
    """Pull metrics and satisfactions pushed out of range by effects back in."""

    ceiling = config.metric_ceiling
    for kind, value in state.metrics.items():
        state.metrics[kind] = min(max(value, 0.0), ceiling)
    for group in state.groups.values():
        group.satisfaction = min(max(group.satisfaction, 0.0), ceiling)


def run_daily_economy(state: NationState, config: NationConfig) -> ProductionReport:
    report = apply_daily_production(state, config)
    update_harmony(state, config)
    settle_bounds(state, config)
    return report


__all__ = [
    "ProductionReport",
    "apply_daily_production",
    "compute_daily_production",
    "harmony_target",
    "next_harmony",
    "run_daily_economy",
    "settle_bounds",
    "update_harmony",
]
