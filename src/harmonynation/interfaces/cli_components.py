"""Text building blocks for the nation dashboard."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import List, Sequence


@dataclass(frozen=True)
class Column:
    header: str
    width: int
    numeric: bool = False

    def cell(self, value: object) -> str:
        text = str(value)[: self.width]
        return text.rjust(self.width) if self.numeric else text.ljust(self.width)


def table_lines(columns: Sequence[Column], rows: Sequence[Sequence[object]]) -> List[str]:
    """Header, rule and one line per row; numeric columns are right aligned."""

    lines = [
        " | ".join(col.cell(col.header.upper()) for col in columns),
        "-+-".join("-" * col.width for col in columns),
    ]
    lines.extend(" | ".join(col.cell(value) for col, value in zip(columns, row)) for row in rows)
    return lines


def meter(value: float, scale: float = 100.0, width: int = 20) -> str:
    """``[####....]  42`` with the fill pinned to ``0..scale``."""

    fraction = max(0.0, min(1.0, value / scale)) if scale > 0 else 0.0
    filled = int(round(fraction * width))
    return f"[{'#' * filled}{'.' * (width - filled)}] {round(value):4d}"


@dataclass
class Panel:
    title: str
    lines: Sequence[str]
    width: int = 80

    def render(self) -> str:
        border = "=" * self.width
        body: List[str] = []
        for line in self.lines:
            # wrap prose on word boundaries, leave short rows untouched
            if len(line) <= self.width:
                body.append(line)
            else:
                body.extend(textwrap.wrap(line, self.width))
        return "\n".join([border, self.title.center(self.width), border, *body])


__all__ = ["Column", "Panel", "meter", "table_lines"]
