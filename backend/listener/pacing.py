"""
Adaptive pacing.

The listener mirrors the speaker's pace: before processing each head entry
it waits as long as elapsed since it last started processing one, capped
at a ceiling.
"""

from __future__ import annotations

import time
from typing import Callable

from constants import MAX_PACING_DELAY_MS


ClockMs = Callable[[], int]


def monotonic_ms() -> int:
    """Monotonic milliseconds; default pacing clock."""
    return time.monotonic_ns() // 1_000_000


def next_delay_ms(
    now_ms: int,
    last_received_ms: int,
    ceiling_ms: int = MAX_PACING_DELAY_MS,
) -> int:
    """
    Delay before the next entry: min(now - last, ceiling), floored at 0.

    A clock that moved backwards yields 0.
    """
    return max(0, min(now_ms - last_received_ms, ceiling_ms))


class PacingController:
    """
    Owns the single pacing timestamp of one runtime.

    next_delay_ms() computes the delay and advances last_received_ms
    in the same call, so elapsed time is never counted twice.
    """

    def __init__(
        self,
        *,
        clock_ms: ClockMs = monotonic_ms,
        ceiling_ms: int = MAX_PACING_DELAY_MS,
    ) -> None:
        if ceiling_ms < 0:
            raise ValueError("ceiling_ms must be >= 0")
        self._clock_ms = clock_ms
        self._ceiling_ms = ceiling_ms
        self._last_received_ms = clock_ms()

    @property
    def last_received_ms(self) -> int:
        return self._last_received_ms

    @property
    def ceiling_ms(self) -> int:
        return self._ceiling_ms

    def next_delay_ms(self) -> int:
        now = self._clock_ms()
        delay = next_delay_ms(now, self._last_received_ms, self._ceiling_ms)
        self._last_received_ms = now
        return delay
