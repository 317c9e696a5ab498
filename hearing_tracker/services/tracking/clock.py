"""Time sources for the tracking state machine.

Every tracking operation reads "now" exactly once from a ``Clock`` so that
a segment's ``end`` and ``duration`` always agree. Production code uses
``SystemClock``; tests and replays drive a ``ManualClock``.
"""

import math
import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current wall-clock time in milliseconds."""

    def now_ms(self) -> int: ...


class SystemClock:
    """Wall clock backed by ``time.time()``."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)


class ManualClock:
    """Deterministic clock that only moves when told to.

    Args:
        start_ms: Initial reading in milliseconds since the epoch.
    """

    def __init__(self, start_ms: float = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        """Move the clock by ``ms`` milliseconds (negative moves it backward)."""
        self._now += ms

    def advance_minutes(self, minutes: float) -> None:
        self.advance(minutes * 60_000)

    def set(self, ms: float) -> None:
        self._now = ms


def read_now(clock: Clock) -> int:
    """Read ``clock`` once and return an integral millisecond timestamp.

    Raises:
        ValueError: If the clock reports a non-finite value.
    """
    value = clock.now_ms()
    if not math.isfinite(value):
        raise ValueError(f"Clock returned a non-finite time: {value!r}")
    return int(value)
