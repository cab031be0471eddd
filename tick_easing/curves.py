"""Shaping functions for tween interpolation.

Every curve here is an "ease in" curve over normalized time t in [0, 1].
Ease-out and ease-in-out variants are derived in ``tick_easing.blends``.
``back`` and ``elastic`` overshoot [0, 1] on purpose; callers must not clamp.
"""
from __future__ import annotations

import math

from tick_easing.types import ShapingFn

_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1
_ELASTIC_C4 = (2 * math.pi) / 3


def sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def sq1(t: float) -> float:
    return t


def sq2(t: float) -> float:
    return t * t


def sq3(t: float) -> float:
    return t * t * t


def sq4(t: float) -> float:
    return t * t * t * t


def sq5(t: float) -> float:
    return t * t * t * t * t


def expo(t: float) -> float:
    if t == 0:
        return 0.0
    return 2 ** (10 * t - 10)


def circ(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t**2)


def back(t: float) -> float:
    """Cubic that dips below 0 before accelerating to 1."""
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def elastic(t: float) -> float:
    """Damped spring. Endpoints are exact; the middle oscillates around 0."""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * _ELASTIC_C4)


CURVES: dict[str, ShapingFn] = {
    "sine": sine,
    "sq1": sq1,
    "sq2": sq2,
    "sq3": sq3,
    "sq4": sq4,
    "sq5": sq5,
    "expo": expo,
    "circ": circ,
    "back": back,
    "elastic": elastic,
}
