"""Tuning constants for the nation simulation.

Every number the economy, progression and action code relies on lives on
:class:`NationConfig` so a scenario can be replayed with different balance
settings.  The defaults reproduce the shipped game.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Sequence

HARMONY_CRITICAL: float = 25.0
DAYS_PER_LEVEL: int = 30
MAX_RESOURCES: float = 1000.0
METRIC_CEILING: float = 100.0


@dataclass(slots=True)
class NationConfig:
    harmony_critical: float = HARMONY_CRITICAL
    days_per_level: int = DAYS_PER_LEVEL
    max_resources: float = MAX_RESOURCES
    metric_ceiling: float = METRIC_CEILING

    # daily tasks
    base_required_tasks: int = 4
    level_task_modifier: int = 1

    # production rates
    food_per_agriculture: float = 0.5
    wealth_per_infrastructure: float = 0.3
    merchant_wealth_rate: float = 0.05
    worker_materials_rate: float = 0.05
    technology_per_education: float = 0.1
    scholar_technology_rate: float = 0.02
    base_food_consumption: float = 5.0
    food_consumption_per_level: float = 2.0

    # harmony
    harmony_smoothing: float = 0.1
    diplomacy_harmony_bonus: float = 0.05

    # actions
    invest_cost: float = 15.0
    invest_metric_gain: float = 5.0
    invest_group_gain: float = 10.0
    healthcare_group_gain: float = 3.0
    food_distribution_amount: float = 10.0
    food_distribution_gain: float = 5.0

    # levels
    level_base_reward: float = 50.0
    harmony_bonus_per_decile: float = 5.0
    starting_treasury: float = 100.0

    # events
    event_chance: float = 0.3

    chronicle_capacity: int = 2000

    def required_tasks(self, level: int) -> int:
        return self.base_required_tasks + (level - 1) * self.level_task_modifier

    def food_consumption(self, level: int) -> float:
        return self.base_food_consumption + level * self.food_consumption_per_level


def _coerce_value(raw: str) -> object:
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    return raw


def parse_overrides(pairs: Sequence[str]) -> Dict[str, object]:
    overrides: Dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Overrides must be of the form key=value, received '{pair}'")
        key, raw_value = pair.split("=", 1)
        overrides[key.strip()] = _coerce_value(raw_value.strip())
    return overrides


def with_overrides(config: NationConfig, overrides: Mapping[str, Any]) -> NationConfig:
    """Return a copy of ``config`` with ``overrides`` applied.

    Unknown keys and non-numeric values raise :class:`ValueError`.  Values are
    cast to the type of the field default so ``days_per_level=10.0`` stays an
    int.
    """

    known = {f.name: f for f in fields(NationConfig)}
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            raise ValueError(f"Unknown config field '{key}'")
        current = getattr(config, key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Field '{key}' expects {type(current).__name__}")
        changes[key] = type(current)(value)
    return replace(config, **changes)


__all__ = [
    "DAYS_PER_LEVEL",
    "HARMONY_CRITICAL",
    "MAX_RESOURCES",
    "METRIC_CEILING",
    "NationConfig",
    "parse_overrides",
    "with_overrides",
]
