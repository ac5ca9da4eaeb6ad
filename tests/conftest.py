from __future__ import annotations

from collections.abc import Callable

import pytest

from minigames.domain.game_state import Field, GoalRegion


class ManualScheduler:
    """Collects delayed callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.pending: dict[int, tuple[int, Callable[[], None]]] = {}
        self._next = 0

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> int:
        self._next += 1
        self.pending[self._next] = (delay_ms, fn)
        return self._next

    def cancel(self, handle: int) -> None:
        self.pending.pop(handle, None)

    def delays(self) -> list[int]:
        return [d for d, _ in self.pending.values()]

    def run_all(self) -> None:
        while self.pending:
            handle = min(self.pending)
            _, fn = self.pending.pop(handle)
            fn()


class ScriptedRandom:
    def __init__(self, values: list[float]) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def field() -> Field:
    return Field(width=800.0, height=450.0, actor_width=40.0, actor_height=40.0)


@pytest.fixture
def goal() -> GoalRegion:
    return GoalRegion(x=600.0, width=60.0, height=80.0)


@pytest.fixture
def far_goal() -> GoalRegion:
    # Off the field, never reachable.
    return GoalRegion(x=-500.0, width=10.0, height=80.0)


@pytest.fixture
def make_rng() -> Callable[..., ScriptedRandom]:
    def _make(*values: float) -> ScriptedRandom:
        return ScriptedRandom(list(values))

    return _make
