"""Read-only views of the nation handed to presentation code."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..config import NationConfig
from ..state import NationState
from ..story import storyline_progress


@dataclass(frozen=True)
class ChoiceView:
    index: int
    label: str
    available: bool


@dataclass(frozen=True)
class EventView:
    event_id: str
    title: str
    description: str
    stage: str
    choices: Tuple[ChoiceView, ...]


@dataclass(frozen=True)
class GroupView:
    satisfaction: float
    influence: float


@dataclass(frozen=True)
class NationSnapshot:
    """Immutable copy of the state plus the values a renderer derives from it."""

    level: int
    day: int
    days_per_level: int
    treasury: float
    resources: Mapping[str, float]
    metrics: Mapping[str, float]
    groups: Mapping[str, GroupView]
    tasks: Tuple[str, ...]
    completed_tasks: int
    required_tasks: int
    story_progress: int
    storyline: str
    event: Optional[EventView]
    paused: bool
    game_over: bool
    terminal_cause: Optional[str]
    at_risk: bool
    signature: str

    @property
    def remaining_tasks(self) -> int:
        return max(0, self.required_tasks - self.completed_tasks)

    @property
    def can_advance(self) -> bool:
        return not self.game_over and self.event is None and self.remaining_tasks == 0

    @property
    def status_line(self) -> str:
        if self.at_risk:
            return "WARNING: Harmony levels critical!"
        return "Nation is stable"


def _event_view(state: NationState) -> Optional[EventView]:
    event = state.active_event
    if event is None:
        return None
    return EventView(
        event_id=event.event_id,
        title=event.title,
        description=event.description,
        stage=state.event_stage.value,
        choices=tuple(
            ChoiceView(index=idx, label=choice.label, available=choice.available(state))
            for idx, choice in enumerate(event.choices)
        ),
    )


def take_snapshot(state: NationState, config: NationConfig) -> NationSnapshot:
    return NationSnapshot(
        level=state.level,
        day=state.day,
        days_per_level=config.days_per_level,
        treasury=state.treasury,
        resources=MappingProxyType(dict(state.resources)),
        metrics=MappingProxyType(dict(state.metrics)),
        groups=MappingProxyType(
            {name: GroupView(group.satisfaction, group.influence) for name, group in state.groups.items()}
        ),
        tasks=tuple(state.tasks.current),
        completed_tasks=state.tasks.completed,
        required_tasks=state.required_tasks,
        story_progress=state.tasks.story_progress,
        storyline=storyline_progress(state.tasks.story_progress),
        event=_event_view(state),
        paused=state.paused,
        game_over=state.game_over,
        terminal_cause=state.terminal_cause.value if state.terminal_cause else None,
        at_risk=state.at_risk(config.harmony_critical),
        signature=state.signature(),
    )


__all__ = [
    "ChoiceView",
    "EventView",
    "GroupView",
    "NationSnapshot",
    "take_snapshot",
]
