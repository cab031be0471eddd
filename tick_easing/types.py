"""Shared types for tween interpolation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

ShapingFn = Callable[[float], float]
BlendFn = Callable[[float, float, float], float]
ValueCallback = Callable[[float], None]
EndCallback = Callable[[str], None]


class RepeatMode(IntEnum):
    """What an interpolation does once its duration has elapsed."""

    NONE = 0  # deliver the end value, fire on_end, unregister
    REVERSE = 1  # ping-pong: run the next leg backwards
    RESTART = 2  # jump back to the start value and run again


class InvalidTweenError(ValueError):
    """Raised when an interpolation is started with unusable arguments."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


@dataclass
class Interpolation:
    """One named, running interpolation.

    Only ``start_ms``, ``reversed`` and ``on_end`` change after creation.
    """

    name: str
    start_value: float
    end_value: float
    duration_ms: int
    blend: BlendFn
    callback: ValueCallback
    repeat_mode: RepeatMode
    start_ms: int
    reversed: bool = False
    on_end: EndCallback | None = None

    def progress(self, now_ms: int) -> float:
        """Raw elapsed fraction of the current leg, not clamped."""
        return (now_ms - self.start_ms) / self.duration_ms

    def deliver(self, t: float) -> None:
        if self.reversed:
            t = 1 - t
        self.callback(self.blend(self.start_value, self.end_value, t))
