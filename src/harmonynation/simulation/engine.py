"""High level orchestration: the command surface of the simulation.

:class:`NationController` owns the one :class:`NationState` of a game.  Every
command validates first, mutates second, records what happened in the
chronicle and telemetry, and finally hands a fresh snapshot to the optional
render callback.  Rejections come back as data, never as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..actions.base import ActionOutcome
from ..actions.handlers import distribute_food, invest_in_sector, trade
from ..config import NationConfig
from ..errors import CommandRejected, RejectionReason
from ..rng import RandomSource, make_rng
from ..runtime.event_engine import display_event, queue_random_event, resolve_choice
from ..runtime.progression import DayReport, advance_day
from ..runtime.telemetry import Metrics, record_command
from ..state import EventStage, NationState, TerminalCause, initial_state
from ..world.chronicle import ChronicleKind, ChronicleLog
from .snapshots import NationSnapshot, take_snapshot

RenderCallback = Callable[[NationSnapshot], None]


@dataclass(frozen=True)
class CommandResult:
    command: str
    ok: bool
    message: str
    snapshot: NationSnapshot
    reason: Optional[RejectionReason] = None


class NationController:
    """Exclusive owner of the nation state."""

    def __init__(
        self,
        config: Optional[NationConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        on_render: Optional[RenderCallback] = None,
        state: Optional[NationState] = None,
    ) -> None:
        self.config = config or NationConfig()
        self.rng: RandomSource = rng if rng is not None else make_rng(seed)
        self.on_render = on_render
        self.chronicle = ChronicleLog(max_len=self.config.chronicle_capacity)
        self.metrics = Metrics()
        self._state = state if state is not None else initial_state(self.config)
        self.last_day_report: Optional[DayReport] = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> NationState:
        return self._state

    def snapshot(self) -> NationSnapshot:
        return take_snapshot(self._state, self.config)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start(self) -> CommandResult:
        """Open the game with its first event."""

        return self._execute("start", self._start)

    def advance_day(self) -> CommandResult:
        return self._execute("advance_day", self._advance_day)

    def invest_in_sector(self, sector: str) -> CommandResult:
        return self._execute("invest_in_sector", lambda: self._action(invest_in_sector(self._state, self.config, sector)))

    def distribute_food(self) -> CommandResult:
        return self._execute("distribute_food", lambda: self._action(distribute_food(self._state, self.config)))

    def trade(self, kind: str) -> CommandResult:
        return self._execute("trade", lambda: self._action(trade(self._state, self.config, kind)))

    def resolve_event_choice(self, choice_index: int) -> CommandResult:
        return self._execute("resolve_event_choice", lambda: self._resolve(choice_index))

    def reset_game(self) -> CommandResult:
        return self._execute("reset_game", self._reset, allow_terminal=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _execute(self, command: str, body: Callable[[], str], *, allow_terminal: bool = False) -> CommandResult:
        state = self._state
        try:
            if state.game_over and not allow_terminal:
                raise CommandRejected(RejectionReason.TERMINAL, "The game is over. Start a new game to continue.")
            message = body()
        except CommandRejected as exc:
            record_command(self.metrics, command, ok=False)
            self._record(
                ChronicleKind.COMMAND_REJECTED,
                command=command,
                reason=exc.reason.value,
                message=exc.message,
            )
            return CommandResult(
                command=command,
                ok=False,
                message=exc.message,
                snapshot=self.snapshot(),
                reason=exc.reason,
            )

        record_command(self.metrics, command, ok=True)
        self.metrics.set_gauge("harmony", self._state.metrics["harmony"])
        self.metrics.set_gauge("treasury", self._state.treasury)
        snapshot = self.snapshot()
        if self.on_render is not None:
            self.on_render(snapshot)
        return CommandResult(command=command, ok=True, message=message, snapshot=snapshot)

    def _record(self, kind: ChronicleKind, **payload: object) -> None:
        self.chronicle.record(kind, day=self._state.day, level=self._state.level, **payload)

    def _queue_event(self) -> str:
        event = queue_random_event(self._state, self.rng)
        display_event(self._state)
        self.metrics.inc("events.queued")
        self._record(ChronicleKind.EVENT_QUEUED, event_id=event.event_id, title=event.title)
        return event.title

    def _start(self) -> str:
        title = self._queue_event()
        self._record(ChronicleKind.GAME_STARTED, first_event=title)
        return f"A new reign begins. Event: {title}"

    def _reset(self) -> str:
        self._state = initial_state(self.config)
        self.last_day_report = None
        self._record(ChronicleKind.GAME_RESET)
        title = self._queue_event()
        return f"A new game has begun. Event: {title}"

    def _action(self, outcome: ActionOutcome) -> str:
        if outcome.verb == "distribute_food":
            kind = ChronicleKind.FOOD_DISTRIBUTED
        elif outcome.verb.startswith("invest:"):
            kind = ChronicleKind.INVESTMENT
        else:
            kind = ChronicleKind.TRADE
        self._record(kind, verb=outcome.verb, task_completed=outcome.task_completed, **outcome.details)
        return outcome.message

    def _resolve(self, choice_index: int) -> str:
        resolution = resolve_choice(self._state, choice_index)
        self.metrics.inc("events.resolved")
        self._record(
            ChronicleKind.EVENT_RESOLVED,
            event_id=resolution.event.event_id,
            choice_index=choice_index,
            choice=resolution.choice.label,
            stage=EventStage.RESOLVED.value,
        )
        return resolution.choice.message

    def _advance_day(self) -> str:
        report = advance_day(self._state, self.config, self.rng)
        self.last_day_report = report
        self.metrics.inc("days.advanced")
        self._record(
            ChronicleKind.DAY_ADVANCED,
            food_consumed=report.production.consumed_food,
            harmony=round(self._state.metrics["harmony"], 4),
        )

        lines: List[str] = []
        if report.story_message:
            lines.append(report.story_message)

        if report.terminal_cause is not None:
            self._record(ChronicleKind.GAME_OVER, cause=report.terminal_cause.value)
            lines.append(self._game_over_text(report))
            return " ".join(lines)

        if report.level_reward is not None:
            reward = report.level_reward
            self.metrics.inc("levels.completed")
            self._record(
                ChronicleKind.LEVEL_COMPLETE,
                completed_level=reward.completed_level,
                base=reward.base,
                harmony_bonus=reward.harmony_bonus,
                total=reward.total,
            )
            lines.append(
                f"Level {reward.completed_level} complete! Reward: {reward.total:g} wealth "
                f"({reward.base:g} base + {reward.harmony_bonus:g} harmony bonus). "
                f"You have now advanced to Level {self._state.level}."
            )

        if report.queued_event is not None:
            self.metrics.inc("events.queued")
            self._record(
                ChronicleKind.EVENT_QUEUED,
                event_id=report.queued_event.event_id,
                title=report.queued_event.title,
            )
            lines.append(f"Event: {report.queued_event.title}")

        if self._state.at_risk(self.config.harmony_critical):
            self._record(ChronicleKind.HARMONY_WARNING, harmony=round(self._state.metrics["harmony"], 4))
            lines.append("WARNING: Harmony levels critical!")
        elif not lines:
            lines.append(f"Day {self._state.day} begins. Nation is stable")
        return " ".join(lines)

    def _game_over_text(self, report: DayReport) -> str:
        survived = f"You reached Level {self._state.level} and survived for {self._state.day} days."
        if report.terminal_cause is TerminalCause.FAMINE:
            return f"CATASTROPHIC FAMINE: your nation has collapsed due to severe food shortage. {survived}"
        return f"Game Over: your nation has collapsed into chaos. Harmony levels reached critical lows. {survived}"


__all__ = ["CommandResult", "NationController", "RenderCallback"]
