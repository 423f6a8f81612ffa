"""Structured nation state.

Dataclasses hold the single mutable aggregate the simulation works on.  The
state is created once per game by :func:`initial_state`, mutated in place by
the runtime and action modules, and thrown away wholesale on reset.  A
canonical JSON form backs :meth:`NationState.signature`, which tests use to
prove a rejected command left everything untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from hashlib import sha256
from typing import TYPE_CHECKING, Any, Dict, MutableMapping, Optional, Tuple

from .config import NationConfig
from .story import STORY_TASKS

if TYPE_CHECKING:
    from .world.catalog import EventTemplate


RESOURCE_KINDS: Tuple[str, ...] = ("food", "wealth", "materials", "technology")
METRIC_KINDS: Tuple[str, ...] = (
    "harmony",
    "infrastructure",
    "agriculture",
    "education",
    "healthcare",
    "diplomacy",
)
GROUP_NAMES: Tuple[str, ...] = ("farmers", "workers", "merchants", "scholars")


class EventStage(Enum):
    NONE = "NONE"
    QUEUED = "QUEUED"
    DISPLAYED = "DISPLAYED"
    RESOLVED = "RESOLVED"


class TerminalCause(Enum):
    HARMONY_COLLAPSE = "HARMONY_COLLAPSE"
    FAMINE = "FAMINE"


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class GroupState:
    satisfaction: float = 50.0
    influence: float = 1.0

    def adjust(self, delta: float) -> None:
        self.satisfaction += delta

    def cap(self, ceiling: float = 100.0) -> None:
        self.satisfaction = min(self.satisfaction, ceiling)


@dataclass(slots=True)
class DailyTasks:
    base_required: int = 4
    level_modifier: int = 1
    completed: int = 0
    story_progress: int = 0
    story_tasks: Tuple[Tuple[str, ...], ...] = STORY_TASKS
    current: Tuple[str, ...] = STORY_TASKS[0]

    def required(self, level: int) -> int:
        return self.base_required + (level - 1) * self.level_modifier

    def remaining(self, level: int) -> int:
        return max(0, self.required(level) - self.completed)

    def complete_one(self) -> int:
        self.completed += 1
        return self.completed


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------


@dataclass
class NationState:
    resources: MutableMapping[str, float]
    metrics: MutableMapping[str, float]
    groups: Dict[str, GroupState]
    tasks: DailyTasks = field(default_factory=DailyTasks)
    treasury: float = 0.0
    level: int = 1
    day: int = 1
    active_event: Optional["EventTemplate"] = None
    event_stage: EventStage = EventStage.NONE
    game_over: bool = False
    paused: bool = False
    terminal_cause: Optional[TerminalCause] = None

    @property
    def harmony(self) -> float:
        return self.metrics["harmony"]

    @property
    def required_tasks(self) -> int:
        return self.tasks.required(self.level)

    def at_risk(self, threshold: float = 25.0) -> bool:
        return self.metrics["harmony"] < threshold

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resources": {k: float(v) for k, v in self.resources.items()},
            "treasury": float(self.treasury),
            "metrics": {k: float(v) for k, v in self.metrics.items()},
            "groups": {
                name: {"satisfaction": float(g.satisfaction), "influence": float(g.influence)}
                for name, g in self.groups.items()
            },
            "tasks": {
                "required": self.required_tasks,
                "completed": self.tasks.completed,
                "story_progress": self.tasks.story_progress,
                "current": list(self.tasks.current),
            },
            "level": self.level,
            "day": self.day,
            "active_event": self.active_event.event_id if self.active_event is not None else None,
            "event_stage": self.event_stage.value,
            "game_over": self.game_over,
            "paused": self.paused,
            "terminal_cause": self.terminal_cause.value if self.terminal_cause is not None else None,
        }

    def signature(self) -> str:
        canonical = self.to_dict()
        canonical["resources"] = {k: round(v, 6) for k, v in canonical["resources"].items()}
        canonical["metrics"] = {k: round(v, 6) for k, v in canonical["metrics"].items()}
        payload = json.dumps(canonical, sort_keys=True, separators=(",", ":"))
        return sha256(payload.encode("utf-8")).hexdigest()


def initial_state(config: Optional[NationConfig] = None) -> NationState:
    """Build the fixed opening position of a new game."""

    cfg = config or NationConfig()
    groups = {name: GroupState() for name in GROUP_NAMES}
    groups["scholars"].influence = 0.5
    metrics: Dict[str, float] = {kind: 10.0 for kind in METRIC_KINDS}
    metrics["harmony"] = 50.0
    return NationState(
        resources={"food": 50.0, "wealth": 100.0, "materials": 75.0, "technology": 10.0},
        metrics=metrics,
        groups=groups,
        tasks=DailyTasks(
            base_required=cfg.base_required_tasks,
            level_modifier=cfg.level_task_modifier,
        ),
        treasury=cfg.starting_treasury,
    )


__all__ = [
    "DailyTasks",
    "EventStage",
    "GROUP_NAMES",
    "GroupState",
    "METRIC_KINDS",
    "NationState",
    "RESOURCE_KINDS",
    "TerminalCause",
    "initial_state",
]
