"""Command line interface: run a seeded reign with the autoplay steward."""

from __future__ import annotations

import argparse
from typing import Sequence

from .config import NationConfig, parse_overrides, with_overrides
from .effects import describe
from .interfaces.dashboard import NationDashboardCLI
from .simulation.autoplay import Steward
from .simulation.engine import NationController
from .story import INTRODUCTION
from .world.catalog import EVENT_CATALOG
from .world.chronicle import ChronicleKind


def _list_events() -> None:
    for template in EVENT_CATALOG:
        print(f"{template.event_id:28} | level>={template.min_level} | {template.title}")
        for idx, choice in enumerate(template.choices):
            effects = ", ".join(describe(op) for op in choice.effects)
            print(f"    [{idx}] {choice.label} -> {effects}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a Harmony Nation reign headlessly")
    parser.add_argument("--seed", type=int, default=None, help="Seed for event draws")
    parser.add_argument("--days", type=int, default=30, help="Days for the steward to play")
    parser.add_argument(
        "--config",
        action="append",
        default=[],
        metavar="key=value",
        help="Override NationConfig fields",
    )
    parser.add_argument("--width", type=int, default=80, help="Panel width")
    parser.add_argument("--chronicle", type=int, default=10, metavar="N", help="Show the last N chronicle entries")
    parser.add_argument("--list-events", action="store_true", help="List the event catalog and exit")
    parser.add_argument("--intro", action="store_true", help="Print the introduction briefing first")
    args = parser.parse_args(argv)

    if args.list_events:
        _list_events()
        return 0

    try:
        config = with_overrides(NationConfig(), parse_overrides(args.config))
    except ValueError as exc:
        parser.error(str(exc))

    if args.intro:
        print("\n".join(INTRODUCTION))
        print("")

    controller = NationController(config, seed=args.seed)
    opening = controller.start()
    print(opening.message)

    report = Steward(controller).play(args.days)
    for result in report.results:
        if result.command in ("advance_day", "trade") or not result.ok:
            print(f"[{result.command}] {result.message}")

    dashboard = NationDashboardCLI(width=args.width, max_resources=config.max_resources)
    print("")
    print(dashboard.render(report.final, chronicle=controller.chronicle.tail(args.chronicle)))
    print("")
    print(f"Days played: {report.days_played}" + (" (stalled)" if report.stalled else ""))
    ending = controller.chronicle.last(ChronicleKind.GAME_OVER)
    if report.final.game_over and ending is not None:
        print(f"Reign ended on level {ending.level}, day {ending.day}: {ending.payload['cause']}")
    return 1 if report.final.game_over else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
