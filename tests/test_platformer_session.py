from __future__ import annotations

from dataclasses import replace

import pytest

from minigames.app.input_tracker import InputTracker
from minigames.app.platformer_session import DEATH_OVERLAY_DELAY_MS, PlatformerSession
from minigames.domain.game_state import Hazard, initial_state
from minigames.domain.input_state import InputAction, InputState


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def session(field, scheduler, events) -> PlatformerSession:
    return PlatformerSession(
        field=field,
        scheduler=scheduler,
        on_died=lambda: events.append("died"),
        on_level_complete=lambda: events.append("level-complete"),
    )


def _about_to_die(session: PlatformerSession) -> None:
    s = session.state
    session.state = replace(
        s,
        actor=replace(s.actor, x=380.0, y=-99.0, vy=-3.0, grounded=False, falling=True),
        hazard=Hazard(triggered=True, width=100.0),
    )


def test_death_overlay_is_deferred(session, scheduler, events, far_goal) -> None:
    _about_to_die(session)

    session.tick(InputState(), far_goal)

    assert session.state.actor.dead
    assert session.finished
    assert events == []
    assert scheduler.delays() == [DEATH_OVERLAY_DELAY_MS]

    scheduler.run_all()
    assert events == ["died"]


def test_reset_cancels_pending_death_overlay(session, scheduler, events, field, far_goal) -> None:
    _about_to_die(session)
    session.tick(InputState(), far_goal)

    session.reset()

    assert scheduler.pending == {}
    assert session.state == initial_state(field)
    scheduler.run_all()
    assert events == []


def test_level_complete_is_reported_immediately(session, scheduler, events, goal) -> None:
    session.state = replace(session.state, actor=replace(session.state.actor, x=610.0))

    session.tick(InputState(), goal)

    assert events == ["level-complete"]
    assert session.state.completed
    assert scheduler.pending == {}


def test_ticks_after_finish_change_nothing(session, goal) -> None:
    session.state = replace(session.state, actor=replace(session.state.actor, x=610.0))
    session.tick(InputState(), goal)
    done = session.state

    session.tick(InputState(right_held=True), goal)

    assert session.state is done


def test_jump_command_is_immediate(session) -> None:
    session.jump()

    assert session.state.actor.vy == 12.0
    session.jump()
    assert session.state.jump_cooldown == 10


def test_jump_pressed_during_an_idle_wakeup_is_applied_by_next_tick(session, far_goal) -> None:
    tracker = InputTracker()
    tracker.press(InputAction.JUMP)

    # Nothing due on this wake-up: input must not be sampled.
    assert session.run_ticks(0, tracker.sample, far_goal) == 0
    assert session.run_ticks(1, tracker.sample, far_goal) == 1

    assert session.state.actor.vy == pytest.approx(12.0 - 0.4)
    assert not session.state.actor.grounded


def test_run_ticks_samples_once_per_tick(session, far_goal) -> None:
    tracker = InputTracker()
    tracker.press(InputAction.JUMP)
    tracker.press(InputAction.MOVE_RIGHT)

    assert session.run_ticks(3, tracker.sample, far_goal) == 3

    # One jump, then gravity for three ticks.
    assert session.state.actor.vy == pytest.approx(12.0 - 3 * 0.4)
    assert session.state.jump_cooldown == 10 - 3
    assert session.state.actor.vx > 0


def test_run_ticks_stops_at_terminal_state(session, goal) -> None:
    session.state = replace(session.state, actor=replace(session.state.actor, x=610.0))
    samples: list[InputState] = []

    def sample() -> InputState:
        samples.append(InputState())
        return samples[-1]

    assert session.run_ticks(5, sample, goal) == 1
    assert session.state.completed
    assert len(samples) == 1
