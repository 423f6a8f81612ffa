"""Declarative state mutations and availability requirements.

Event choices and level milestones describe what they do as tuples of small
records instead of callables.  :func:`apply_effects` is the single
interpreter that writes them onto a :class:`~harmonynation.state.NationState`.
Effects never clamp; the next economy tick settles bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Tuple, Union

if TYPE_CHECKING:
    from .state import NationState


@dataclass(frozen=True, slots=True)
class ResourceDelta:
    resource: str
    amount: float


@dataclass(frozen=True, slots=True)
class MetricDelta:
    metric: str
    amount: float


@dataclass(frozen=True, slots=True)
class SatisfactionDelta:
    group: str
    amount: float


@dataclass(frozen=True, slots=True)
class InfluenceDelta:
    group: str
    amount: float


@dataclass(frozen=True, slots=True)
class TreasuryDelta:
    amount: float


EffectOp = Union[ResourceDelta, MetricDelta, SatisfactionDelta, InfluenceDelta, TreasuryDelta]


@dataclass(frozen=True, slots=True)
class ResourceAtLeast:
    resource: str
    amount: float

    def satisfied(self, state: "NationState") -> bool:
        return state.resources.get(self.resource, 0.0) >= self.amount


@dataclass(frozen=True, slots=True)
class MetricAtLeast:
    metric: str
    amount: float

    def satisfied(self, state: "NationState") -> bool:
        return state.metrics.get(self.metric, 0.0) >= self.amount


Requirement = Union[ResourceAtLeast, MetricAtLeast]


def requirements_met(state: "NationState", requirements: Iterable[Requirement]) -> bool:
    return all(req.satisfied(state) for req in requirements)


def apply_effect(state: "NationState", op: EffectOp) -> None:
    if isinstance(op, ResourceDelta):
        state.resources[op.resource] = state.resources.get(op.resource, 0.0) + op.amount
    elif isinstance(op, MetricDelta):
        state.metrics[op.metric] = state.metrics.get(op.metric, 0.0) + op.amount
    elif isinstance(op, SatisfactionDelta):
        state.groups[op.group].adjust(op.amount)
    elif isinstance(op, InfluenceDelta):
        state.groups[op.group].influence += op.amount
    elif isinstance(op, TreasuryDelta):
        state.treasury += op.amount
    else:
        raise TypeError(f"Unsupported effect op: {op!r}")


def apply_effects(state: "NationState", ops: Iterable[EffectOp]) -> None:
    for op in ops:
        apply_effect(state, op)


def every_group(amount: float, groups: Iterable[str]) -> Tuple[SatisfactionDelta, ...]:
    """Expand a nation-wide satisfaction change into per-group ops."""

    return tuple(SatisfactionDelta(group, amount) for group in groups)


def describe(op: EffectOp) -> str:
    sign = lambda value: f"{value:+g}"
    if isinstance(op, ResourceDelta):
        return f"{op.resource} {sign(op.amount)}"
    if isinstance(op, MetricDelta):
        return f"{op.metric} {sign(op.amount)}"
    if isinstance(op, SatisfactionDelta):
        return f"{op.group} satisfaction {sign(op.amount)}"
    if isinstance(op, InfluenceDelta):
        return f"{op.group} influence {sign(op.amount)}"
    return f"treasury {sign(op.amount)}"


__all__ = [
    "EffectOp",
    "InfluenceDelta",
    "MetricAtLeast",
    "MetricDelta",
    "Requirement",
    "ResourceAtLeast",
    "ResourceDelta",
    "SatisfactionDelta",
    "TreasuryDelta",
    "apply_effect",
    "apply_effects",
    "describe",
    "every_group",
    "requirements_met",
]
