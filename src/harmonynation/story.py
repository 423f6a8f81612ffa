"""Narrative tables for the food-crisis storyline."""

from __future__ import annotations

from typing import Optional, Tuple

STORY_TASKS: Tuple[Tuple[str, ...], ...] = (
    # initial crisis
    ("Survey food resources", "Meet with advisors", "Review resource maps", "Plan emergency measures"),
    # building solutions
    ("Evaluate field conditions", "Gather advisor proposals", "Draft recovery plan", "Rally public support"),
    # implementation
    ("Mobilize work forces", "Distribute resources", "Coordinate village efforts", "Monitor progress"),
    # storm
    ("Assess storm damage", "Organize relief efforts", "Rebuild infrastructure", "Maintain public morale"),
    # recovery
    ("Restore damaged fields", "Strengthen defenses", "Unite communities", "Plan for future"),
)

STORY_MESSAGES: Tuple[str, ...] = (
    "As you survey your nation, the gravity of the food crisis becomes clear...",
    "Your advisors gather to propose bold solutions to the growing crisis...",
    "The nation mobilizes under your leadership to implement the recovery plan...",
    "A devastating storm threatens to undo all your progress...",
    "Despite the setback, your people's resilience shines through...",
)

STORYLINE_PHASES: Tuple[str, ...] = (
    "Your nation faces a severe food crisis. As leader, you must navigate through these challenging times.",
    "With your advisors' support, you work to develop solutions to the growing food shortage.",
    "The nation unites in implementing recovery plans, showing signs of progress.",
    "A devastating storm threatens to undo your progress. Your leadership is crucial.",
    "Despite setbacks, your people's resilience shines through as you rebuild.",
)

INTRODUCTION: Tuple[str, ...] = (
    "Welcome to Harmony Nation",
    "As the leader of a struggling nation, your mission is to guide your people to prosperity and peace.",
    "Your challenges:",
    "  - Maintain harmony above critical levels",
    "  - Balance the needs of various population groups",
    "  - Manage limited resources carefully",
    "  - Respond to crises and opportunities",
    "Complete each level to earn wealth that can be invested in your nation's future.",
)


def storyline_progress(index: int) -> str:
    """Narrative for ``index``; indices past the table reuse the last phase."""

    return STORYLINE_PHASES[max(0, min(index, len(STORYLINE_PHASES) - 1))]


def phase_message(index: int) -> Optional[str]:
    if 0 <= index < len(STORY_MESSAGES):
        return STORY_MESSAGES[index]
    return None


__all__ = [
    "INTRODUCTION",
    "STORYLINE_PHASES",
    "STORY_MESSAGES",
    "STORY_TASKS",
    "phase_message",
    "storyline_progress",
]
