"""Interpolator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TweenConfig:
    """Immutable validation policy for an ``Interpolator``.

    Attributes:
        min_duration_ms: Smallest duration accepted, in milliseconds.
        clamp_duration: When True, durations below ``min_duration_ms`` are
            raised to it. When False, they are rejected with
            ``InvalidTweenError``.
    """

    min_duration_ms: int = 1
    clamp_duration: bool = False

    def __post_init__(self) -> None:
        if self.min_duration_ms < 1:
            raise ValueError(f"min_duration_ms must be >= 1, got {self.min_duration_ms}")
