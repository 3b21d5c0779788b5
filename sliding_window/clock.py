from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of the instants stamped on recorded events.

    ``SlidingWindow`` reads this once per call, under its lock, so the
    readings must not go backwards if event order is to match call order.
    """

    def now(self) -> float:
        """Return the current instant in seconds."""


class RealClock:
    """Production clock: monotonic seconds from time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


class FakeClock:
    """Hand-driven clock for deterministic window tests.

    Reads ``start`` (zero by default) until a test calls :meth:`set` to jump
    to an instant or :meth:`advance` to step forward.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def set(self, instant: float) -> None:
        self._now = float(instant)

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        self._now += seconds
