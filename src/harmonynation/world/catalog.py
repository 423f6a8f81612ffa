"""Static catalog of random events.

Each :class:`EventTemplate` lists its choices as data: the requirements that
gate a choice and the effect ops it applies.  ``min_level`` keeps the later
crises out of the candidate pool until the nation has reached that level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..effects import (
    EffectOp,
    MetricAtLeast,
    MetricDelta,
    Requirement,
    ResourceAtLeast,
    ResourceDelta,
    SatisfactionDelta,
    requirements_met,
)
from ..state import NationState


@dataclass(frozen=True, slots=True)
class Choice:
    label: str
    effects: Tuple[EffectOp, ...]
    message: str
    requirements: Tuple[Requirement, ...] = ()

    def available(self, state: NationState) -> bool:
        return requirements_met(state, self.requirements)


@dataclass(frozen=True, slots=True)
class EventTemplate:
    event_id: str
    title: str
    description: str
    choices: Tuple[Choice, ...] = field(default_factory=tuple)
    min_level: int = 1

    def available_choices(self, state: NationState) -> List[int]:
        return [idx for idx, choice in enumerate(self.choices) if choice.available(state)]


DROUGHT_WARNING = EventTemplate(
    event_id="drought_warning",
    title="Drought Warning",
    description="Meteorologists predict a drought that could severely impact food production in the coming days.",
    choices=(
        Choice(
            label="Ration food supplies (costs 10 food)",
            effects=(ResourceDelta("food", -10), SatisfactionDelta("farmers", -5)),
            message="Food rationed. Farmers unhappy but disaster averted.",
            requirements=(ResourceAtLeast("food", 10),),
        ),
        Choice(
            label="Invest in irrigation (costs 15 wealth)",
            effects=(ResourceDelta("wealth", -15), MetricDelta("agriculture", 3)),
            message="Irrigation systems improved. Agriculture capability increased!",
            requirements=(ResourceAtLeast("wealth", 15),),
        ),
        Choice(
            label="Do nothing and hope for rain",
            effects=(
                ResourceDelta("food", -20),
                ResourceDelta("food", -20),
                SatisfactionDelta("farmers", -15),
            ),
            message="The drought hit hard. Food supplies diminished and farmers are upset.",
        ),
    ),
)

BORDER_DISPUTE = EventTemplate(
    event_id="border_dispute",
    title="Border Dispute",
    description="A neighboring nation is disputing your border claims, creating tension.",
    choices=(
        Choice(
            label="Negotiate diplomatically (requires diplomacy level 15)",
            effects=(MetricDelta("diplomacy", 5),),
            message="Diplomatic solution reached. International relations improved!",
            requirements=(MetricAtLeast("diplomacy", 15),),
        ),
        Choice(
            label="Show military strength (costs 25 wealth)",
            effects=(ResourceDelta("wealth", -25), MetricDelta("diplomacy", -10)),
            message="Border secured but international relations damaged.",
            requirements=(ResourceAtLeast("wealth", 25),),
        ),
        Choice(
            label="Cede small territory (lose 10 harmony)",
            effects=(MetricDelta("harmony", -10),),
            message="Territory ceded. Population morale has decreased.",
        ),
    ),
)

WORKER_STRIKE = EventTemplate(
    event_id="worker_strike",
    title="Worker Strike",
    description="Workers are demanding better conditions and higher pay.",
    choices=(
        Choice(
            label="Meet their demands (costs 20 wealth)",
            effects=(ResourceDelta("wealth", -20), SatisfactionDelta("workers", 15)),
            message="Workers' demands met. They are very satisfied!",
            requirements=(ResourceAtLeast("wealth", 20),),
        ),
        Choice(
            label="Partial compromise (costs 10 wealth)",
            effects=(ResourceDelta("wealth", -10), SatisfactionDelta("workers", 5)),
            message="Compromise reached. Workers are somewhat satisfied.",
            requirements=(ResourceAtLeast("wealth", 10),),
        ),
        Choice(
            label="Refuse demands",
            effects=(SatisfactionDelta("workers", -20), MetricDelta("harmony", -10)),
            message="Workers furious! Production decreased and harmony suffered.",
        ),
    ),
)

TECHNOLOGICAL_BREAKTHROUGH = EventTemplate(
    event_id="technological_breakthrough",
    title="Technological Breakthrough",
    description="Your scholars have made a breakthrough! How will you utilize this discovery?",
    choices=(
        Choice(
            label="Improve agriculture (requires 15 technology)",
            effects=(
                ResourceDelta("technology", -15),
                MetricDelta("agriculture", 10),
                SatisfactionDelta("farmers", 10),
            ),
            message="Agricultural technology improved! Food production increased.",
            requirements=(ResourceAtLeast("technology", 15),),
        ),
        Choice(
            label="Enhance infrastructure (requires 15 technology)",
            effects=(
                ResourceDelta("technology", -15),
                MetricDelta("infrastructure", 10),
                SatisfactionDelta("workers", 10),
            ),
            message="Infrastructure technology improved! Production efficiency increased.",
            requirements=(ResourceAtLeast("technology", 15),),
        ),
        Choice(
            label="Sell the technology (gain 30 wealth)",
            effects=(ResourceDelta("wealth", 30), SatisfactionDelta("scholars", -10)),
            message="Technology sold for wealth. Scholars disappointed about lost opportunity.",
        ),
    ),
)

NATURAL_DISASTER = EventTemplate(
    event_id="natural_disaster",
    title="Natural Disaster",
    description="A severe earthquake has struck your nation, causing widespread damage.",
    choices=(
        Choice(
            label="Focus on infrastructure repairs (costs 30 materials)",
            effects=(ResourceDelta("materials", -30),),
            message="Infrastructure restored quickly. Impact minimized.",
            requirements=(ResourceAtLeast("materials", 30),),
        ),
        Choice(
            label="Prioritize emergency relief (costs 25 food and 15 wealth)",
            effects=(
                ResourceDelta("food", -25),
                ResourceDelta("wealth", -15),
                MetricDelta("harmony", 5),
            ),
            message="Relief efforts successful. Population appreciates your response.",
            requirements=(ResourceAtLeast("food", 25), ResourceAtLeast("wealth", 15)),
        ),
        Choice(
            label="Request international aid",
            effects=(
                MetricDelta("diplomacy", -5),
                ResourceDelta("food", 10),
                ResourceDelta("materials", 10),
            ),
            message="Aid received, but diplomatic standing decreased due to perceived weakness.",
        ),
    ),
)

EDUCATIONAL_REFORM = EventTemplate(
    event_id="educational_reform",
    title="Educational Reform",
    description="Educational leaders are proposing reforms to the nation's education system.",
    choices=(
        Choice(
            label="Implement progressive reforms (costs 20 wealth)",
            effects=(
                ResourceDelta("wealth", -20),
                MetricDelta("education", 10),
                SatisfactionDelta("scholars", 15),
            ),
            message="Progressive reforms implemented. Education system improved!",
            requirements=(ResourceAtLeast("wealth", 20),),
        ),
        Choice(
            label="Modest improvements (costs 10 wealth)",
            effects=(
                ResourceDelta("wealth", -10),
                MetricDelta("education", 5),
                SatisfactionDelta("scholars", 5),
            ),
            message="Modest improvements made to education system.",
            requirements=(ResourceAtLeast("wealth", 10),),
        ),
        Choice(
            label="Maintain current system",
            effects=(SatisfactionDelta("scholars", -10),),
            message="Education system unchanged. Scholars dissatisfied.",
        ),
    ),
)

TRADE_OPPORTUNITY = EventTemplate(
    event_id="trade_opportunity",
    title="Trade Opportunity",
    description="A foreign nation proposes a trade agreement that could benefit your economy.",
    choices=(
        Choice(
            label="Accept the deal (trade influence)",
            effects=(
                ResourceDelta("wealth", 25),
                MetricDelta("diplomacy", -5),
                SatisfactionDelta("merchants", 10),
            ),
            message="Trade deal accepted. Economy boosted but some diplomatic leverage lost.",
        ),
        Choice(
            label="Negotiate better terms (requires diplomacy level 20)",
            effects=(
                ResourceDelta("wealth", 40),
                MetricDelta("diplomacy", 5),
                SatisfactionDelta("merchants", 15),
            ),
            message="Better terms negotiated! Excellent deal that pleases everyone.",
            requirements=(MetricAtLeast("diplomacy", 20),),
        ),
        Choice(
            label="Decline the offer",
            effects=(SatisfactionDelta("merchants", -10),),
            message="Trade offer declined. Merchants disappointed about missed opportunity.",
        ),
    ),
)

REFUGEE_CRISIS = EventTemplate(
    event_id="refugee_crisis",
    title="Refugee Crisis",
    description="A conflict in neighboring countries has led to refugees seeking asylum in your nation.",
    min_level=2,
    choices=(
        Choice(
            label="Welcome refugees (costs 20 food, gain 5 harmony)",
            effects=(
                ResourceDelta("food", -20),
                MetricDelta("harmony", 5),
                MetricDelta("diplomacy", 10),
            ),
            message="Refugees welcomed. International standing improved but resources strained.",
            requirements=(ResourceAtLeast("food", 20),),
        ),
        Choice(
            label="Limited acceptance (costs 10 food)",
            effects=(ResourceDelta("food", -10), MetricDelta("diplomacy", 3)),
            message="Limited refugee acceptance policy enacted.",
            requirements=(ResourceAtLeast("food", 10),),
        ),
        Choice(
            label="Close borders",
            effects=(MetricDelta("diplomacy", -15), MetricDelta("harmony", -5)),
            message="Borders closed to refugees. International criticism strong.",
        ),
    ),
)

TECHNOLOGICAL_REVOLUTION = EventTemplate(
    event_id="technological_revolution",
    title="Technological Revolution",
    description="A new technological era is dawning. How will your nation adapt?",
    min_level=3,
    choices=(
        Choice(
            label="Invest heavily (costs 40 wealth, 30 materials)",
            effects=(
                ResourceDelta("wealth", -40),
                ResourceDelta("materials", -30),
                ResourceDelta("technology", 50),
                SatisfactionDelta("scholars", 20),
            ),
            message="Heavy investment in technology. Your nation leaps ahead!",
            requirements=(ResourceAtLeast("wealth", 40), ResourceAtLeast("materials", 30)),
        ),
        Choice(
            label="Moderate investment (costs 20 wealth, 15 materials)",
            effects=(
                ResourceDelta("wealth", -20),
                ResourceDelta("materials", -15),
                ResourceDelta("technology", 25),
                SatisfactionDelta("scholars", 10),
            ),
            message="Moderate technology investment. Your nation keeps pace.",
            requirements=(ResourceAtLeast("wealth", 20), ResourceAtLeast("materials", 15)),
        ),
        Choice(
            label="Minimal investment",
            effects=(ResourceDelta("technology", 5), SatisfactionDelta("scholars", -15)),
            message="Minimal technology investment. Your nation falls behind.",
        ),
    ),
)


EVENT_CATALOG: Tuple[EventTemplate, ...] = (
    DROUGHT_WARNING,
    BORDER_DISPUTE,
    WORKER_STRIKE,
    TECHNOLOGICAL_BREAKTHROUGH,
    NATURAL_DISASTER,
    EDUCATIONAL_REFORM,
    TRADE_OPPORTUNITY,
    REFUGEE_CRISIS,
    TECHNOLOGICAL_REVOLUTION,
)


def template_by_id(event_id: str) -> EventTemplate:
    for template in EVENT_CATALOG:
        if template.event_id == event_id:
            return template
    raise KeyError(event_id)


__all__ = [
    "Choice",
    "EVENT_CATALOG",
    "EventTemplate",
    "template_by_id",
]
