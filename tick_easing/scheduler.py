"""Interpolator - registry of named, clock-driven interpolations."""
from __future__ import annotations

import logging
import math

from tick_easing.clock import Clock, MonotonicClock
from tick_easing.config import TweenConfig
from tick_easing.types import (
    BlendFn,
    EndCallback,
    Interpolation,
    InvalidTweenError,
    RepeatMode,
    ValueCallback,
)

logger = logging.getLogger(__name__)


class Interpolator:
    """Owns the name -> Interpolation registry and advances it once per frame.

    Unknown names are never an error: ``cancel``, ``exists`` and
    ``on_complete`` quietly do nothing for them, and ``start`` on a name
    that is already running leaves the running instance alone.
    """

    def __init__(
        self, clock: Clock | None = None, config: TweenConfig | None = None
    ) -> None:
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._config = config if config is not None else TweenConfig()
        self._active: dict[str, Interpolation] = {}

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> TweenConfig:
        return self._config

    # --- Registration ---

    def start(
        self,
        name: str,
        start_value: float,
        end_value: float,
        duration_ms: int,
        blend: BlendFn,
        callback: ValueCallback,
        repeat_mode: RepeatMode = RepeatMode.NONE,
        on_end: EndCallback | None = None,
    ) -> bool:
        """Register an interpolation unless ``name`` is taken.

        Returns True if a new interpolation was registered, False if one
        was already running under ``name``.
        """
        if name in self._active:
            logger.debug("interpolation %r already running, start ignored", name)
            return False

        duration_ms = self._check_duration(name, duration_ms)
        for label, value in (("start_value", start_value), ("end_value", end_value)):
            if not math.isfinite(value):
                raise InvalidTweenError(name, f"{label} must be finite, got {value!r}")

        self._active[name] = Interpolation(
            name=name,
            start_value=start_value,
            end_value=end_value,
            duration_ms=duration_ms,
            blend=blend,
            callback=callback,
            repeat_mode=RepeatMode(repeat_mode),
            start_ms=self._clock.now(),
            on_end=on_end,
        )
        logger.debug(
            "started %r: %s -> %s over %dms (%s)",
            name, start_value, end_value, duration_ms, RepeatMode(repeat_mode).name,
        )
        return True

    def cancel(self, name: str) -> None:
        """Drop ``name`` immediately. No final value, no on_end."""
        if self._active.pop(name, None) is not None:
            logger.debug("cancelled %r", name)

    def clear(self) -> None:
        """Cancel every running interpolation."""
        self._active.clear()

    def on_complete(self, name: str, handler: EndCallback) -> None:
        """Replace the end handler of a running interpolation.

        Only completions after this call are affected: an interpolation
        that already finished (even earlier in the same tick) is gone and
        the call is a no-op.
        """
        interp = self._active.get(name)
        if interp is not None:
            interp.on_end = handler

    # --- Queries ---

    def exists(self, name: str) -> bool:
        return name in self._active

    def get(self, name: str) -> Interpolation | None:
        return self._active.get(name)

    def names(self) -> list[str]:
        return list(self._active)

    def __contains__(self, name: object) -> bool:
        return name in self._active

    def __len__(self) -> int:
        return len(self._active)

    # --- Per-frame ---

    def tick(self) -> None:
        """Advance every interpolation registered when the tick began.

        Callbacks may start, cancel or re-handle interpolations. Entries
        cancelled mid-tick are skipped, and entries started mid-tick (even
        under a name that was cancelled this tick) wait for the next tick.
        """
        now = self._clock.now()
        for name, interp in list(self._active.items()):
            if self._active.get(name) is not interp:
                continue
            if now - interp.start_ms >= interp.duration_ms:
                self._finish(interp, now)
            else:
                interp.deliver(interp.progress(now))

    def _finish(self, interp: Interpolation, now: int) -> None:
        interp.deliver(1.0)
        # The final callback may have cancelled or replaced this entry.
        if self._active.get(interp.name) is not interp:
            return

        if interp.repeat_mode is RepeatMode.NONE:
            del self._active[interp.name]
            logger.debug("completed %r", interp.name)
            if interp.on_end is not None:
                interp.on_end(interp.name)
        elif interp.repeat_mode is RepeatMode.REVERSE:
            interp.start_ms = now
            interp.reversed = not interp.reversed
            logger.debug("reversed %r (reversed=%s)", interp.name, interp.reversed)
        else:
            interp.start_ms = now
            logger.debug("restarted %r", interp.name)

    def _check_duration(self, name: str, duration_ms: int) -> int:
        minimum = self._config.min_duration_ms
        if duration_ms >= minimum:
            return duration_ms
        if not self._config.clamp_duration:
            raise InvalidTweenError(
                name, f"duration_ms must be >= {minimum}, got {duration_ms}"
            )
        logger.debug("clamped duration of %r from %s to %dms", name, duration_ms, minimum)
        return minimum
