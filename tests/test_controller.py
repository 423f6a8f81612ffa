from typing import List

import pytest

from harmonynation import NationController, RejectionReason, SequenceRandom
from harmonynation.simulation.autoplay import Steward
from harmonynation.simulation.snapshots import NationSnapshot
from harmonynation.world.chronicle import ChronicleKind


def _make_controller(draws=(0.99,), **kwargs) -> NationController:
    return NationController(rng=SequenceRandom(draws), **kwargs)


def _complete_tasks(controller: NationController) -> None:
    for sector in ("agriculture", "infrastructure", "education", "healthcare"):
        assert controller.invest_in_sector(sector).ok


def test_start_queues_opening_event_and_renders() -> None:
    rendered: List[NationSnapshot] = []
    controller = _make_controller(draws=(0.0,), on_render=rendered.append)

    result = controller.start()

    assert result.ok
    assert result.snapshot.paused
    assert result.snapshot.event is not None
    assert result.snapshot.event.title == "Drought Warning"
    assert result.snapshot.event.stage == "DISPLAYED"
    assert rendered == [result.snapshot]
    assert controller.chronicle.last(ChronicleKind.GAME_STARTED) is not None


def test_rejections_do_not_render_or_mutate() -> None:
    rendered: List[NationSnapshot] = []
    controller = _make_controller(on_render=rendered.append)
    controller.state.tasks.completed = 2
    before = controller.state.signature()

    result = controller.advance_day()

    assert not result.ok
    assert result.reason is RejectionReason.TASKS_INCOMPLETE
    assert result.message == "Complete 2 more tasks to advance!"
    assert controller.state.signature() == before
    assert result.snapshot.signature == before
    assert rendered == []
    assert controller.metrics.get("commands.advance_day.rejected") == 1
    entry = controller.chronicle.last(ChronicleKind.COMMAND_REJECTED)
    assert entry is not None and entry.payload["reason"] == "TasksIncomplete"


def test_advance_blocked_while_event_pending() -> None:
    controller = _make_controller(draws=(0.0,))
    controller.start()
    _complete_tasks(controller)

    result = controller.advance_day()

    assert result.reason is RejectionReason.EVENT_PENDING
    assert controller.state.day == 1


def test_event_resolution_is_exactly_once() -> None:
    controller = _make_controller(draws=(0.0,))
    controller.start()

    first = controller.resolve_event_choice(2)
    second = controller.resolve_event_choice(2)

    assert first.ok
    assert first.message.startswith("The drought hit hard")
    assert not first.snapshot.paused
    assert first.snapshot.event is None
    assert not second.ok
    assert second.reason is RejectionReason.NO_ACTIVE_EVENT
    assert controller.metrics.get("events.resolved") == 1
    resolved = controller.chronicle.last(ChronicleKind.EVENT_RESOLVED)
    assert resolved is not None and resolved.payload["stage"] == "RESOLVED"


def test_unavailable_choice_rejected_through_controller() -> None:
    controller = _make_controller(draws=(0.0,))
    controller.start()
    controller.state.resources["food"] = 5.0
    before = controller.state.signature()

    result = controller.resolve_event_choice(0)

    assert result.reason is RejectionReason.CHOICE_UNAVAILABLE
    assert controller.state.signature() == before
    assert result.snapshot.event is not None
    assert [choice.available for choice in result.snapshot.event.choices] == [False, True, True]


def test_full_day_cycle() -> None:
    controller = _make_controller()
    _complete_tasks(controller)

    result = controller.advance_day()

    assert result.ok
    assert result.snapshot.day == 2
    assert result.snapshot.completed_tasks == 0
    assert result.snapshot.treasury == pytest.approx(40.0)
    assert "advisors gather" in result.message
    assert controller.metrics.get("days.advanced") == 1
    assert controller.last_day_report is not None


def test_game_over_blocks_everything_but_reset() -> None:
    controller = _make_controller(draws=(0.99, 0.0))
    controller.state.resources["food"] = 3.0
    controller.state.metrics["agriculture"] = 0.0
    controller.state.tasks.completed = 4

    over = controller.advance_day()
    assert over.ok
    assert over.snapshot.game_over
    assert over.snapshot.terminal_cause == "FAMINE"
    assert "CATASTROPHIC FAMINE" in over.message

    for result in (
        controller.invest_in_sector("agriculture"),
        controller.distribute_food(),
        controller.trade("food_to_wealth"),
        controller.resolve_event_choice(0),
        controller.advance_day(),
        controller.start(),
    ):
        assert result.reason is RejectionReason.TERMINAL

    reset = controller.reset_game()
    assert reset.ok
    assert not reset.snapshot.game_over
    assert reset.snapshot.level == 1
    assert reset.snapshot.day == 1
    assert reset.snapshot.resources["food"] == pytest.approx(50.0)
    assert reset.snapshot.event is not None
    assert reset.snapshot.paused


def test_reset_replaces_state_object() -> None:
    controller = _make_controller(draws=(0.5,))
    old_state = controller.state
    controller.reset_game()
    assert controller.state is not old_state
    assert controller.chronicle.last(ChronicleKind.GAME_RESET) is not None


def test_seeded_games_are_reproducible() -> None:
    def play(seed: int) -> str:
        controller = NationController(seed=seed)
        controller.start()
        Steward(controller).play(12)
        return controller.state.signature()

    assert play(11) == play(11)


def test_steward_plays_without_breaking_invariants() -> None:
    controller = NationController(seed=5)
    controller.start()

    report = Steward(controller).play(20)

    assert report.days_played >= 1
    snapshot = report.final
    if not snapshot.game_over:
        assert 1 <= snapshot.day <= snapshot.days_per_level
        assert all(0.0 <= v <= 1000.0 for v in snapshot.resources.values())
    assert snapshot.paused == (snapshot.event is not None)


def test_steward_keeps_trades_and_food_reserve() -> None:
    controller = _make_controller()
    controller.state.treasury = 0.0
    controller.state.resources["food"] = 5.0
    controller.state.resources["wealth"] = 20.0

    issued = Steward(controller, food_reserve=30.0).work_toward_task()

    assert [result.command for result in issued] == ["trade"]
    assert controller.state.resources["food"] == pytest.approx(30.0)
    assert controller.state.tasks.completed == 0

    results = Steward(controller).play_day()
    assert [result.command for result in results] == ["advance_day"]
    assert results[-1].reason is RejectionReason.TASKS_INCOMPLETE


def test_steward_shares_food_once_trade_lifts_the_pantry() -> None:
    controller = _make_controller()
    controller.state.treasury = 0.0
    controller.state.resources["food"] = 20.0
    controller.state.resources["wealth"] = 20.0

    issued = Steward(controller, food_reserve=30.0).work_toward_task()

    assert [result.command for result in issued] == ["trade", "distribute_food"]
    assert all(result.ok for result in issued)
    assert controller.state.resources["food"] == pytest.approx(35.0)
    assert controller.state.tasks.completed == 1
