"""Scenario fuzz harness: random command streams against the controller."""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from random import Random
from typing import Dict

from ..actions.handlers import SECTOR_BENEFITS, TRADE_RATES
from ..rng import derived_rng
from ..state import NationState
from ..world.chronicle import ChronicleKind
from .engine import CommandResult, NationController


@dataclass(frozen=True)
class FuzzResult:
    """Summary of a fuzz harness execution."""

    steps_run: int
    days_advanced: int
    resets: int
    rejections: int
    invariants: Dict[str, bool]
    chronicle_signature: str


@dataclass
class ScenarioFuzzHarness:
    """Drive a nation with random commands and check invariants throughout."""

    steps: int = 400
    seed: int = 777

    def run(self) -> FuzzResult:
        rng = Random(self.seed)
        controller = NationController(rng=derived_rng("fuzz", self.seed))
        controller.start()
        days = resets = rejections = 0
        invariants: Dict[str, bool] = self._evaluate_invariants(controller, ticked=False)

        for _ in range(self.steps):
            if controller.state.game_over:
                controller.reset_game()
                resets += 1
                continue

            before = controller.state.signature()
            cursor = controller.chronicle.next_seq
            result = self._random_command(controller, rng)
            if not result.ok:
                rejections += 1
                if controller.state.signature() != before:
                    raise AssertionError(f"Rejected {result.command} mutated state: {result.message}")
                logged = [entry.kind for entry in controller.chronicle.since(cursor)]
                if logged != [ChronicleKind.COMMAND_REJECTED]:
                    raise AssertionError(f"Rejected {result.command} logged {logged}")
                continue

            ticked = result.command == "advance_day"
            if ticked:
                days += 1
            invariants = self._evaluate_invariants(controller, ticked=ticked)
            if not all(invariants.values()):
                raise AssertionError(f"Fuzz invariant failed after {result.command}: {invariants}")

        return FuzzResult(
            steps_run=self.steps,
            days_advanced=days,
            resets=resets,
            rejections=rejections,
            invariants=invariants,
            chronicle_signature=controller.chronicle.signature(),
        )

    def _random_command(self, controller: NationController, rng: Random) -> CommandResult:
        roll = rng.random()
        if roll < 0.3:
            return controller.invest_in_sector(rng.choice(sorted(SECTOR_BENEFITS)))
        if roll < 0.45:
            return controller.distribute_food()
        if roll < 0.55:
            return controller.trade(rng.choice(sorted(TRADE_RATES)))
        if roll < 0.75:
            return controller.resolve_event_choice(rng.randint(-1, 3))
        return controller.advance_day()

    def _evaluate_invariants(self, controller: NationController, *, ticked: bool) -> Dict[str, bool]:
        state: NationState = controller.state
        config = controller.config
        invariants: Dict[str, bool] = {}
        invariants["paused_iff_event"] = state.paused == (state.active_event is not None)
        invariants["day_in_range"] = state.game_over or 1 <= state.day <= config.days_per_level
        invariants["level_positive"] = state.level >= 1
        invariants["values_finite"] = all(isfinite(v) for v in state.resources.values()) and all(
            isfinite(v) for v in state.metrics.values()
        )
        report = controller.last_day_report
        settled = report is not None and report.level_reward is None
        if ticked and settled and not state.game_over:
            invariants["resources_bounded"] = all(
                0.0 <= value <= config.max_resources for value in state.resources.values()
            )
            invariants["metrics_bounded"] = all(
                0.0 <= value <= config.metric_ceiling for value in state.metrics.values()
            )
            invariants["satisfaction_bounded"] = all(
                0.0 <= group.satisfaction <= config.metric_ceiling for group in state.groups.values()
            )
        return invariants


__all__ = ["FuzzResult", "ScenarioFuzzHarness"]
