from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Uniform choice driven by a single ``random()`` draw."""
    if not options:
        raise ValueError("cannot pick from an empty sequence")
    i = int(rng.random() * len(options))
    # Guard against a source that returns exactly 1.0.
    return options[min(i, len(options) - 1)]
