from __future__ import annotations

from dataclasses import replace

import pytest

from minigames.domain.exceptions import LevelCompleted, PlayerDied
from minigames.domain.game_state import Actor, Hazard, Tuning, initial_state
from minigames.domain.input_state import InputState
from minigames.domain.world import World

IDLE = InputState()
RIGHT = InputState(right_held=True)
LEFT = InputState(left_held=True)


def _with_actor(state, **changes):
    return replace(state, actor=replace(state.actor, **changes))


def test_initial_state_matches_reset_values(field) -> None:
    s = initial_state(field)
    assert s.actor == Actor(x=20.0, y=0.0, vx=0.0, vy=0.0, grounded=True, dead=False, falling=False)
    assert s.hazard == Hazard(triggered=False, width=0.0)
    assert s.jump_cooldown == 0
    assert not s.completed


def test_idle_tick_keeps_actor_at_rest(field, far_goal) -> None:
    s = World().step(initial_state(field), IDLE, far_goal)

    assert (s.actor.x, s.actor.y) == (20.0, 0.0)
    assert (s.actor.vx, s.actor.vy) == (0.0, 0.0)
    assert s.actor.grounded


def test_jump_then_tick_leaves_ground(field, far_goal) -> None:
    world = World()
    s = world.jump(initial_state(field))
    assert s.actor.vy == 12.0
    assert s.jump_cooldown == 10

    s = world.step(s, IDLE, far_goal)

    assert s.actor.vy == pytest.approx(12.0 - 0.4)
    assert s.actor.y == pytest.approx(11.6)
    assert not s.actor.grounded
    assert s.jump_cooldown == 9


def test_jump_request_in_input_is_applied_before_integration(field, far_goal) -> None:
    s = World().step(initial_state(field), InputState(jump_requested=True), far_goal)

    assert s.actor.vy == pytest.approx(11.6)
    assert not s.actor.grounded


@pytest.mark.parametrize(
    "actor_changes, cooldown",
    [
        ({"grounded": False}, 0),
        ({"vy": 0.5}, 0),
        ({"vy": -0.2}, 0),
        ({}, 3),
    ],
)
def test_jump_is_a_noop_when_not_allowed(field, actor_changes, cooldown) -> None:
    s = replace(_with_actor(initial_state(field), **actor_changes), jump_cooldown=cooldown)

    assert World().jump(s) is s


def test_cooldown_blocks_second_jump_until_it_expires(field, far_goal) -> None:
    world = World()
    s = world.jump(initial_state(field))

    # Ride the jump out until landing.
    for _ in range(200):
        s = world.step(s, IDLE, far_goal)
        if s.actor.grounded:
            break
    assert s.actor.grounded
    assert s.jump_cooldown == 0
    assert world.jump(s).actor.vy == 12.0


def test_gravity_is_applied_every_tick_before_collision(field, far_goal) -> None:
    s = _with_actor(initial_state(field), y=50.0, vy=3.0, grounded=False)

    s2 = World().step(s, IDLE, far_goal)

    assert s2.actor.vy == pytest.approx(3.0 - 0.4)
    assert s2.actor.y == pytest.approx(52.6)


def test_held_direction_accelerates_with_ground_friction(field, far_goal) -> None:
    s = World().step(initial_state(field), RIGHT, far_goal)

    assert s.actor.vx == pytest.approx(0.5 * 0.85)
    assert s.actor.x == pytest.approx(20.0 + 0.5 * 0.85)


def test_airborne_without_input_keeps_drifting(field, far_goal) -> None:
    s = _with_actor(initial_state(field), x=100.0, y=50.0, vx=2.0, grounded=False)

    s2 = World().step(s, IDLE, far_goal)

    assert s2.actor.vx == pytest.approx(2.0 * 0.98)


def test_speed_never_exceeds_max(field, far_goal) -> None:
    s = _with_actor(initial_state(field), x=100.0, vx=-4.0)

    s2 = World().step(s, LEFT, far_goal)

    assert abs(s2.actor.vx) <= Tuning().max_speed


def test_hazard_triggers_at_midpoint_and_grows_to_cap(field, far_goal) -> None:
    world = World()
    # Parked at the right wall: centre stays clear of the split at full width.
    s = _with_actor(initial_state(field), x=field.max_x)

    widths = []
    for _ in range(150):
        s = world.step(s, IDLE, far_goal)
        widths.append(s.hazard.width)

    assert s.hazard.triggered
    assert widths == sorted(widths)
    assert max(widths) == field.split_max_width
    assert widths[0] == 5.0


def test_hazard_growth_is_clamped_to_cap_when_step_overshoots(field, far_goal) -> None:
    world = World()
    # 400 is not a multiple of 7, so the last step would overshoot to 406.
    s = _with_actor(initial_state(field, Tuning(split_growth=7.0)), x=field.max_x)

    for _ in range(100):
        s = world.step(s, IDLE, far_goal)
        assert s.hazard.width <= field.split_max_width

    assert s.hazard.width == field.split_max_width


def test_hazard_stays_closed_before_trigger(field, far_goal) -> None:
    s = World().step(initial_state(field), IDLE, far_goal)

    assert not s.hazard.triggered
    assert s.hazard.width == 0.0


def test_actor_falls_into_wide_enough_split(field, far_goal) -> None:
    s = replace(
        _with_actor(initial_state(field), x=380.0, vx=2.0),
        hazard=Hazard(triggered=True, width=40.0),
    )

    s2 = World().step(s, IDLE, far_goal)

    # grounded decel + friction, then halved on entering the pit
    assert s2.actor.falling
    assert s2.actor.vx == pytest.approx((2.0 - 0.3) * 0.85 * 0.5)
    assert not s2.actor.grounded
    assert s2.rotation == pytest.approx(0.4 * 5)


def test_narrow_split_does_not_swallow_actor(field, far_goal) -> None:
    s = replace(
        _with_actor(initial_state(field), x=380.0),
        hazard=Hazard(triggered=True, width=0.0),
    )

    s2 = World().step(s, IDLE, far_goal)

    assert not s2.actor.falling


def test_falling_is_one_way_until_death(field, far_goal) -> None:
    world = World()
    s = replace(
        _with_actor(initial_state(field), x=380.0),
        hazard=Hazard(triggered=True, width=40.0),
    )

    seen_falling = False
    with pytest.raises(PlayerDied) as info:
        for _ in range(100):
            # Try to steer out; falling ignores input.
            s = world.step(s, LEFT, far_goal)
            if seen_falling:
                assert s.actor.falling
            seen_falling = seen_falling or s.actor.falling

    assert seen_falling
    dead = info.value.state
    assert dead.actor.dead
    assert dead.actor.falling
    assert dead.actor.y < -Tuning().fall_death_depth
    assert dead.rotation == Tuning().max_spin


def test_dead_state_ignores_further_ticks(field, far_goal) -> None:
    s = _with_actor(initial_state(field), dead=True)

    assert World().step(s, RIGHT, far_goal) is s


@pytest.mark.parametrize("wall_stop", [False, True])
def test_right_wall_clamp(field, far_goal, wall_stop) -> None:
    tuning = Tuning(wall_stops_momentum=wall_stop)
    s = _with_actor(initial_state(field, tuning), x=field.max_x - 1.0, vx=4.0)

    s2 = World().step(s, RIGHT, far_goal)

    assert s2.actor.x == field.max_x
    if wall_stop:
        assert s2.actor.vx == 0.0
    else:
        assert s2.actor.vx == pytest.approx(4.0 * 0.85)


def test_left_wall_clamp(field, far_goal) -> None:
    s = _with_actor(initial_state(field), x=0.5, vx=-4.0)

    s2 = World().step(s, LEFT, far_goal)

    assert s2.actor.x == 0.0


def test_position_stays_in_field_for_long_input_runs(field, far_goal) -> None:
    world = World()
    s = initial_state(field)
    script = [RIGHT] * 350 + [InputState(right_held=True, jump_requested=True)] + [LEFT] * 350 + [IDLE] * 50

    for inp in script:
        try:
            s = world.step(s, inp, far_goal)
        except PlayerDied:
            break
        assert 0.0 <= s.actor.x <= field.max_x


def test_walking_into_door_completes_level(field, goal) -> None:
    s = _with_actor(initial_state(field), x=610.0)

    with pytest.raises(LevelCompleted) as info:
        World().step(s, IDLE, goal)

    done = info.value.state
    assert done.completed
    assert done.actor.grounded
    assert World().step(done, RIGHT, goal) is done


def test_landing_on_door_top_does_not_complete(field, goal) -> None:
    s = _with_actor(initial_state(field), x=610.0, y=81.0, vy=-2.0, grounded=False)

    s2 = World().step(s, IDLE, goal)

    assert s2.actor.y == goal.height
    assert s2.actor.vy == 0.0
    assert s2.actor.grounded
    assert not s2.completed


def test_resting_on_door_top_stays_put(field, goal) -> None:
    world = World()
    s = _with_actor(initial_state(field), x=610.0, y=goal.height, grounded=True)

    for _ in range(5):
        s = world.step(s, IDLE, goal)

    assert s.actor.y == goal.height
    assert s.actor.grounded


def test_door_does_not_trigger_when_centre_is_outside(field, goal) -> None:
    # Right edge overlaps the door, centre does not.
    s = _with_actor(initial_state(field), x=570.0)

    s2 = World().step(s, IDLE, goal)

    assert not s2.completed
