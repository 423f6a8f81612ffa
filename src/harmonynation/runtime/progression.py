"""Day, level and failure state machine.

``IN_PROGRESS -> DAY_ADVANCE -> (day > days_per_level) -> LEVEL_COMPLETE``
and back to ``IN_PROGRESS`` at the next level; ``GAME_OVER`` is reachable
from any day advance through famine or a harmony collapse.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Dict, Optional, Tuple

from ..config import NationConfig
from ..effects import EffectOp, InfluenceDelta, apply_effects, every_group
from ..errors import CommandRejected, RejectionReason
from ..rng import RandomSource
from ..state import GROUP_NAMES, NationState, TerminalCause
from ..story import phase_message
from ..world.catalog import EventTemplate
from .economy import ProductionReport, run_daily_economy
from .event_engine import display_event, queue_random_event

# keyed by the level just reached
LEVEL_MILESTONES: Dict[int, Tuple[EffectOp, ...]] = {
    2: (InfluenceDelta("scholars", 0.5),),
    3: (InfluenceDelta("merchants", 0.5),),
    4: every_group(-10, GROUP_NAMES),
}


@dataclass(slots=True)
class LevelReward:
    completed_level: int
    base: float
    harmony_bonus: float

    @property
    def total(self) -> float:
        return self.base + self.harmony_bonus


@dataclass(slots=True)
class DayReport:
    day: int
    level: int
    production: ProductionReport
    story_message: Optional[str] = None
    terminal_cause: Optional[TerminalCause] = None
    level_reward: Optional[LevelReward] = None
    queued_event: Optional[EventTemplate] = None


def check_can_advance(state: NationState) -> None:
    if state.game_over:
        raise CommandRejected(RejectionReason.TERMINAL, "The game is over. Start a new game to continue.")
    if state.active_event is not None:
        raise CommandRejected(
            RejectionReason.EVENT_PENDING,
            f"Resolve '{state.active_event.title}' before advancing the day.",
        )
    remaining = state.tasks.remaining(state.level)
    if remaining > 0:
        raise CommandRejected(
            RejectionReason.TASKS_INCOMPLETE,
            f"Complete {remaining} more tasks to advance!",
        )


def advance_story(state: NationState) -> Optional[str]:
    """Move to the next story phase; past the table the task list stays put."""

    tasks = state.tasks
    tasks.story_progress += 1
    if tasks.story_progress < len(tasks.story_tasks):
        tasks.current = tasks.story_tasks[tasks.story_progress]
        return phase_message(tasks.story_progress)
    return None


def complete_level(state: NationState, config: NationConfig) -> LevelReward:
    completed = state.level
    state.level += 1
    harmony_bonus = math.floor(state.metrics["harmony"] / 10) * config.harmony_bonus_per_decile
    reward = LevelReward(
        completed_level=completed,
        base=config.level_base_reward,
        harmony_bonus=float(harmony_bonus),
    )
    state.treasury += reward.total
    state.day = 1
    apply_effects(state, LEVEL_MILESTONES.get(state.level, ()))
    return reward


def declare_game_over(state: NationState, cause: TerminalCause) -> None:
    state.game_over = True
    state.terminal_cause = cause


def advance_day(state: NationState, config: NationConfig, rng: RandomSource) -> DayReport:
    check_can_advance(state)

    story_message = advance_story(state)
    state.tasks.completed = 0
    state.day += 1

    production = run_daily_economy(state, config)
    report = DayReport(day=state.day, level=state.level, production=production, story_message=story_message)

    if production.famine:
        declare_game_over(state, TerminalCause.FAMINE)
        report.terminal_cause = TerminalCause.FAMINE
        return report
    if state.metrics["harmony"] <= 0:
        declare_game_over(state, TerminalCause.HARMONY_COLLAPSE)
        report.terminal_cause = TerminalCause.HARMONY_COLLAPSE
        return report

    if state.day > config.days_per_level:
        report.level_reward = complete_level(state, config)
        report.day = state.day
        report.level = state.level
        return report

    if state.active_event is None and rng.random() < config.event_chance:
        report.queued_event = queue_random_event(state, rng)
        display_event(state)
    return report


__all__ = [
    "DayReport",
    "LEVEL_MILESTONES",
    "LevelReward",
    "advance_day",
    "advance_story",
    "check_can_advance",
    "complete_level",
    "declare_game_over",
]
