"""Thread-safe sliding-time-window event counter.

``SlidingWindow`` keeps the timestamp of every recorded event and answers
how many of them happened within the trailing ``duration_s`` seconds.
Expired events are dropped lazily, on every ``record_event`` and ``count``
call, so no background thread is needed.

An event recorded at ``t`` is counted while ``now - t < duration_s``; once
its age reaches the window length it is evicted and never comes back.

Time comes from an injected :class:`~sliding_window.clock.Clock`.  Pass a
``FakeClock`` in tests to control time explicitly.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

from .clock import Clock, RealClock

logger = logging.getLogger(__name__)


class SlidingWindow:
    """Exact event counter over a trailing time window.

    - Timestamps are stored oldest first in a deque.
    - Every public method holds the instance lock, including ``count``,
      which evicts as a side effect.
    """

    def __init__(self, duration_s: float, *, clock: Clock | None = None) -> None:
        if duration_s <= 0:
            raise ValueError("duration_s must be > 0")

        self._duration_s = float(duration_s)
        self._clock: Clock = clock if clock is not None else RealClock()
        self._events: deque[float] = deque()
        self._lock = threading.Lock()
        logger.debug(
            "Sliding window created: duration_s=%s clock=%s",
            self._duration_s,
            type(self._clock).__name__,
        )

    @property
    def duration_s(self) -> float:
        return self._duration_s

    def record_event(self) -> None:
        """Record one event at the current instant."""
        with self._lock:
            now = self._clock.now()
            self._events.append(now)
            self._evict(now)

    def count(self) -> int:
        """Return the number of events inside the window as of now."""
        with self._lock:
            now = self._clock.now()
            self._evict(now)
            return len(self._events)

    def _evict(self, now: float) -> None:
        # Caller holds the lock. Events are non-decreasing, so stop at the first live one.
        # Compare ages, not against now - duration_s, which rounds on large instants.
        evicted = 0
        while self._events and now - self._events[0] >= self._duration_s:
            self._events.popleft()
            evicted += 1
        if evicted:
            logger.debug("Evicted %d expired events, %d remain", evicted, len(self._events))
