"""Per-day runtime: economy tick, event engine and level progression."""

from .economy import (
    ProductionReport,
    apply_daily_production,
    compute_daily_production,
    harmony_target,
    run_daily_economy,
    settle_bounds,
    update_harmony,
)
from .event_engine import display_event, queue_random_event, resolve_choice, select_candidates
from .progression import DayReport, LevelReward, advance_day, complete_level, declare_game_over

__all__ = [
    "DayReport",
    "LevelReward",
    "ProductionReport",
    "advance_day",
    "apply_daily_production",
    "complete_level",
    "compute_daily_production",
    "declare_game_over",
    "display_event",
    "harmony_target",
    "queue_random_event",
    "resolve_choice",
    "run_daily_economy",
    "select_candidates",
    "settle_bounds",
    "update_harmony",
]
