"""Render a :class:`NationSnapshot` as a plain-text dashboard."""

from __future__ import annotations

from typing import List, Sequence

from ..simulation.snapshots import EventView, NationSnapshot
from ..world.chronicle import ChronicleEntry
from .cli_components import Column, Panel, meter, table_lines

GROUP_COLUMNS = (
    Column("Group", 12),
    Column("Satisfaction", 12, numeric=True),
    Column("Influence", 10, numeric=True),
)


class NationDashboardCLI:
    def __init__(self, width: int = 80, *, max_resources: float = 1000.0) -> None:
        self.width = width
        self.max_resources = max_resources

    def render(self, snapshot: NationSnapshot, *, chronicle: Sequence[ChronicleEntry] = ()) -> str:
        panels = [
            self._render_overview(snapshot),
            self._render_groups(snapshot),
            self._render_tasks(snapshot),
        ]
        if snapshot.event is not None:
            panels.append(self._render_event(snapshot.event))
        if chronicle:
            panels.append(self._render_chronicle(chronicle))
        return "\n\n".join(panel.render() for panel in panels)

    def _render_overview(self, snapshot: NationSnapshot) -> Panel:
        lines = [
            f"Level {snapshot.level} | Day {snapshot.day}/{snapshot.days_per_level} | Treasury {snapshot.treasury:g}",
            snapshot.status_line,
            "",
        ]
        for kind, value in snapshot.resources.items():
            lines.append(f"{kind:<14} {meter(value, scale=self.max_resources)}")
        lines.append("")
        for kind, value in snapshot.metrics.items():
            lines.append(f"{kind:<14} {meter(value)}")
        if snapshot.game_over:
            lines.extend(["", f"GAME OVER ({snapshot.terminal_cause})"])
        return Panel("Nation", lines, width=self.width)

    def _render_groups(self, snapshot: NationSnapshot) -> Panel:
        rows = [
            [name, f"{group.satisfaction:0.1f}", f"{group.influence:0.2f}"]
            for name, group in snapshot.groups.items()
        ]
        return Panel("Population", table_lines(GROUP_COLUMNS, rows), width=self.width)

    def _render_tasks(self, snapshot: NationSnapshot) -> Panel:
        lines: List[str] = [f"- {task}" for task in snapshot.tasks]
        lines.append("")
        lines.append(f"Progress: {snapshot.completed_tasks}/{snapshot.required_tasks}")
        lines.append("Ready to advance" if snapshot.can_advance else f"{snapshot.remaining_tasks} task(s) remaining")
        lines.append(snapshot.storyline)
        return Panel("Daily Tasks", lines, width=self.width)

    def _render_event(self, event: EventView) -> Panel:
        lines = [event.description, ""]
        for choice in event.choices:
            marker = " " if choice.available else "x"
            lines.append(f"[{choice.index}]{marker} {choice.label}")
        return Panel(event.title, lines, width=self.width)

    def _render_chronicle(self, entries: Sequence[ChronicleEntry]) -> Panel:
        lines = []
        for entry in entries:
            detail = ", ".join(f"{k}={entry.payload[k]}" for k in sorted(entry.payload))
            lines.append(f"L{entry.level} d{entry.day}: {entry.kind.value} {detail}".rstrip())
        return Panel("Chronicle", lines, width=self.width)


__all__ = ["NationDashboardCLI"]
