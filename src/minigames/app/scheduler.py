from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class Scheduler(Protocol):
    """One-shot delayed callbacks. Handles are opaque to callers."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...
