from __future__ import annotations

import logging

from minigames.domain.exceptions import LevelCompleted, PlayerDied
from minigames.domain.game_state import Actor, GameState, GoalRegion, Hazard
from minigames.domain.input_state import InputState

logger = logging.getLogger(__name__)

GROUND_LEVEL = 0.0


class World:
    def jump(self, state: GameState) -> GameState:
        # No air jumps, no jumping while still moving vertically, no spam.
        a = state.actor
        t = state.tuning
        if not (a.grounded and abs(a.vy) < t.jump_vy_epsilon and state.jump_cooldown == 0):
            return state

        actor = Actor(
            x=a.x, y=a.y, vx=a.vx, vy=t.jump_power,
            grounded=a.grounded, dead=a.dead, falling=a.falling,
        )
        return GameState(
            actor=actor,
            hazard=state.hazard,
            field=state.field,
            tuning=t,
            jump_cooldown=t.jump_cooldown_ticks,
            rotation=state.rotation,
            completed=state.completed,
        )

    def step(self, state: GameState, inp: InputState, goal: GoalRegion) -> GameState:
        if state.actor.dead or state.completed:
            return state

        if inp.jump_requested:
            state = self.jump(state)

        t = state.tuning
        field = state.field
        a = state.actor

        cooldown = max(0, state.jump_cooldown - 1)

        # ----- Ground split -----
        triggered = state.hazard.triggered or a.x >= field.split_trigger_x
        if triggered and not state.hazard.triggered:
            logger.debug("ground split triggered at x=%.1f", a.x)
        split_width = state.hazard.width
        if triggered and split_width < field.split_max_width:
            split_width = min(field.split_max_width, split_width + t.split_growth)
        hazard = Hazard(triggered=triggered, width=split_width)

        # ----- Horizontal input + friction -----
        vx = a.vx
        if not a.falling:
            if inp.right_held:
                vx = min(t.max_speed, vx + t.acceleration)
            elif inp.left_held:
                vx = max(-t.max_speed, vx - t.acceleration)
            elif a.grounded:
                if abs(vx) < t.deceleration:
                    vx = 0.0
                elif vx > 0:
                    vx = max(0.0, vx - t.deceleration)
                else:
                    vx = min(0.0, vx + t.deceleration)

            vx *= t.ground_friction if a.grounded else t.air_friction

        # ----- Integrate -----
        vy = a.vy - t.gravity
        x = a.x + vx
        y = a.y + vy

        # Only collision resolution below may set this again.
        grounded = False
        falling = a.falling

        split_left, split_right = hazard.span(field)
        center = field.actor_center(x)
        in_split = split_left <= center <= split_right

        if not falling and y <= GROUND_LEVEL and in_split and hazard.width > t.split_min_fall_width:
            logger.debug("actor fell into the split at x=%.1f", x)
            falling = True
            vx *= 0.5

        if falling:
            rotation = min(t.max_spin, abs(y) * t.fall_spin_rate)
            if y < -t.fall_death_depth:
                dead = GameState(
                    actor=Actor(x=x, y=y, vx=vx, vy=vy, grounded=False, dead=True, falling=True),
                    hazard=hazard,
                    field=field,
                    tuning=t,
                    jump_cooldown=cooldown,
                    rotation=rotation,
                    completed=False,
                )
                raise PlayerDied(dead)
        else:
            rotation = 0.0

        # ----- Ground + play area bounds -----
        if y <= GROUND_LEVEL and not in_split and not falling:
            y = GROUND_LEVEL
            vy = 0.0
            grounded = True

        if x < 0.0 or x > field.max_x:
            x = min(max(x, 0.0), field.max_x)
            if t.wall_stops_momentum:
                vx = 0.0

        # ----- Door platform (landing from above / resting on top) -----
        center = field.actor_center(x)
        over_goal = goal.contains_x(center)
        previous_y = y - vy

        if over_goal and previous_y >= goal.height and y <= goal.height and vy < 0.0:
            y = goal.height
            vy = 0.0
            grounded = True

        if over_goal and abs(y - goal.height) < t.surface_snap and vy <= 0.0:
            y = goal.height
            grounded = True

        p2 = Actor(x=x, y=y, vx=vx, vy=vy, grounded=grounded, dead=False, falling=falling)
        next_state = GameState(
            actor=p2,
            hazard=hazard,
            field=field,
            tuning=t,
            jump_cooldown=cooldown,
            rotation=rotation,
            completed=False,
        )

        # ----- Door entry: only from the side, at ground level -----
        if self._enters_goal_from_side(next_state, goal):
            raise LevelCompleted(
                GameState(
                    actor=p2,
                    hazard=hazard,
                    field=field,
                    tuning=t,
                    jump_cooldown=cooldown,
                    rotation=rotation,
                    completed=True,
                )
            )

        return next_state

    def _enters_goal_from_side(self, state: GameState, goal: GoalRegion) -> bool:
        a = state.actor
        field = state.field
        at_ground_level = abs(a.y - GROUND_LEVEL) < state.tuning.surface_snap
        horizontal_overlap = goal.contains_x(field.actor_center(a.x))
        within_door_height = a.y + field.actor_height > GROUND_LEVEL and a.y < goal.height
        return at_ground_level and horizontal_overlap and within_door_height and a.grounded
