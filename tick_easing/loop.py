"""FrameLoop - per-frame host loop, pacing, and lifecycle hooks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from tick_easing.clock import Clock, MonotonicClock


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    now_ms: int
    dt: float
    request_stop: Callable[[], None]


FrameSystem = Callable[[FrameContext], None]


class FrameLoop:
    def __init__(self, fps: int = 60, clock: Clock | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._frame_number = 0
        self._systems: list[FrameSystem] = []
        self._start_hooks: list[FrameSystem] = []
        self._stop_hooks: list[FrameSystem] = []
        self._stop_requested: bool = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def add_system(self, system: FrameSystem) -> None:
        self._systems.append(system)

    def on_start(self, hook: FrameSystem) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: FrameSystem) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            now_ms=self._clock.now(),
            dt=self._dt,
            request_stop=self._request_stop,
        )

    def _frame(self) -> None:
        self._frame_number += 1
        ctx = self._context()
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _run_hooks(self, hooks: list[FrameSystem]) -> None:
        ctx = self._context()
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        """Run ``n`` frames back to back, without pacing."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        """Run frames at ``fps`` until a system calls ``request_stop``."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        dt = self._dt
        while not self._stop_requested:
            start = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
