"""A simple scripted player used by the CLI and by long-running tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..actions.handlers import SECTOR_BENEFITS, TRADE_RATES
from .engine import CommandResult, NationController
from .snapshots import NationSnapshot


@dataclass
class StewardReport:
    days_played: int
    final: NationSnapshot
    stalled: bool = False
    results: List[CommandResult] = field(default_factory=list)


class Steward:
    """Plays cautiously: first available event choice, invest in the weakest sector.

    Food is only handed out while the pantry stays above ``food_reserve`` so
    the nation does not starve itself completing tasks.
    """

    def __init__(self, controller: NationController, *, food_reserve: float = 30.0) -> None:
        self.controller = controller
        self.food_reserve = food_reserve

    def resolve_pending_event(self) -> Optional[CommandResult]:
        event = self.controller.snapshot().event
        if event is None:
            return None
        for choice in event.choices:
            if choice.available:
                return self.controller.resolve_event_choice(choice.index)
        return None

    def _weakest_sector(self, snapshot: NationSnapshot) -> str:
        return min(SECTOR_BENEFITS, key=lambda sector: (snapshot.metrics[sector], sector))

    def _food_to_spare(self) -> bool:
        snapshot = self.controller.snapshot()
        return snapshot.resources["food"] - self.controller.config.food_distribution_amount >= self.food_reserve

    def work_toward_task(self) -> List[CommandResult]:
        """Issue the next commands toward one task; empty when nothing is affordable.

        A wealth-for-food trade is made when the pantry is too low to share, and
        food is handed out only if the trade lifted it above the reserve.
        """

        snapshot = self.controller.snapshot()
        if snapshot.treasury >= self.controller.config.invest_cost:
            return [self.controller.invest_in_sector(self._weakest_sector(snapshot))]
        if self._food_to_spare():
            return [self.controller.distribute_food()]
        if snapshot.resources["wealth"] < TRADE_RATES["wealth_to_food"].cost:
            return []
        traded = self.controller.trade("wealth_to_food")
        if traded.ok and self._food_to_spare():
            return [traded, self.controller.distribute_food()]
        return [traded]

    def play_day(self) -> List[CommandResult]:
        results: List[CommandResult] = []
        resolved = self.resolve_pending_event()
        if resolved is not None:
            results.append(resolved)
        while self.controller.snapshot().remaining_tasks > 0:
            issued = self.work_toward_task()
            results.extend(issued)
            if not issued or not all(result.ok for result in issued):
                break
        results.append(self.controller.advance_day())
        return results

    def play(self, days: int) -> StewardReport:
        played = 0
        history: List[CommandResult] = []
        stalled = False
        for _ in range(max(0, days)):
            if self.controller.state.game_over:
                break
            results = self.play_day()
            history.extend(results)
            if not results[-1].ok:
                stalled = True
                break
            played += 1
        return StewardReport(days_played=played, final=self.controller.snapshot(), stalled=stalled, results=history)


__all__ = ["Steward", "StewardReport"]
