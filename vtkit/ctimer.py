"""A monotonic stopwatch with microsecond resolution."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta


class Timer:
    """Measures time elapsed since creation or the last :meth:`reset`.

    ``clock`` returns monotonic nanoseconds; it defaults to
    :func:`time.monotonic_ns`.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or time.monotonic_ns
        self._epoch_us = self._now_us()

    def _now_us(self) -> int:
        return self._clock() // 1000

    def reset(self) -> None:
        """Restart the timer from now."""
        self._epoch_us = self._now_us()

    def elapsed(self) -> timedelta:
        """Time passed since the epoch, truncated to microseconds."""
        return timedelta(microseconds=self._now_us() - self._epoch_us)

    def compare(self, threshold: timedelta | float) -> int:
        """Return 1 if elapsed time exceeds ``threshold``, 0 if equal, else -1.

        ``threshold`` is a timedelta or a number of seconds.
        """
        if not isinstance(threshold, timedelta):
            threshold = timedelta(seconds=threshold)
        elapsed = self.elapsed()
        if elapsed > threshold:
            return 1
        if elapsed == threshold:
            return 0
        return -1