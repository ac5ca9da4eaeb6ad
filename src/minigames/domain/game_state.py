from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tuning:
    # Horizontal movement
    max_speed: float = 4.0
    acceleration: float = 0.5
    deceleration: float = 0.3       # only applied when grounded and no key held
    ground_friction: float = 0.85   # higher = less friction
    air_friction: float = 0.98

    # Vertical movement
    jump_power: float = 12.0
    gravity: float = 0.4
    jump_cooldown_ticks: int = 10
    jump_vy_epsilon: float = 0.1

    # Ground split
    split_growth: float = 5.0       # px per tick
    split_min_fall_width: float = 10.0

    # Falling into the pit
    fall_death_depth: float = 100.0
    fall_spin_rate: float = 5.0     # degrees per px fallen
    max_spin: float = 360.0

    surface_snap: float = 2.0
    start_x: float = 20.0
    wall_stops_momentum: bool = False


@dataclass(frozen=True)
class Field:
    width: float
    height: float
    actor_width: float
    actor_height: float

    @property
    def split_center(self) -> float:
        return self.width / 2.0

    @property
    def split_trigger_x(self) -> float:
        return self.width / 2.0

    @property
    def split_max_width(self) -> float:
        return self.width / 2.0

    @property
    def max_x(self) -> float:
        return self.width - self.actor_width

    def actor_center(self, x: float) -> float:
        return x + self.actor_width / 2.0


@dataclass(frozen=True)
class Actor:
    x: float
    y: float  # measured upward from the ground surface
    vx: float
    vy: float
    grounded: bool
    dead: bool
    falling: bool


@dataclass(frozen=True)
class Hazard:
    triggered: bool
    width: float

    def span(self, field: Field) -> tuple[float, float]:
        half = self.width / 2.0
        return field.split_center - half, field.split_center + half


@dataclass(frozen=True)
class GoalRegion:
    """Exit door rectangle, bottom on the ground plane. Owned by the view."""
    x: float
    width: float
    height: float

    def contains_x(self, x: float) -> bool:
        return self.x < x < self.x + self.width


@dataclass(frozen=True)
class GameState:
    actor: Actor
    hazard: Hazard
    field: Field
    tuning: Tuning

    jump_cooldown: int
    rotation: float    # degrees, visual only
    completed: bool


def initial_state(field: Field, tuning: Tuning | None = None) -> GameState:
    tuning = tuning or Tuning()
    return GameState(
        actor=Actor(
            x=tuning.start_x,
            y=0.0,
            vx=0.0,
            vy=0.0,
            grounded=True,
            dead=False,
            falling=False,
        ),
        hazard=Hazard(triggered=False, width=0.0),
        field=field,
        tuning=tuning,
        jump_cooldown=0,
        rotation=0.0,
        completed=False,
    )
