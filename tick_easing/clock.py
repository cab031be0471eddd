"""Millisecond host clocks."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class MonotonicClock:
    """Milliseconds elapsed since construction, from ``time.monotonic``."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> int:
        return int((time.monotonic() - self._origin) * 1000)


class ManualClock:
    """Clock that only moves when told to. Used by tests and stepped hosts."""

    def __init__(self, start_ms: int = 0) -> None:
        if start_ms < 0:
            raise ValueError(f"start_ms must be >= 0, got {start_ms}")
        self._now = start_ms

    def now(self) -> int:
        return self._now

    def set(self, ms: int) -> None:
        if ms < self._now:
            raise ValueError(f"clock cannot go backwards ({ms} < {self._now})")
        self._now = ms

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError(f"advance must be >= 0, got {ms}")
        self._now += ms
        return self._now
