"""Blend operators: turn a shaping function into ``(a, b, t) -> value``."""
from __future__ import annotations

from tick_easing.types import BlendFn, ShapingFn


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def flip(t: float) -> float:
    return 1 - t


def linear() -> BlendFn:
    """Plain linear interpolation. Takes no curve."""
    return lerp


def snap(threshold: float) -> BlendFn:
    """Step blend: ``a`` until t reaches ``threshold``, then ``b``."""

    def snap_blend(a: float, b: float, t: float) -> float:
        return a if t < threshold else b

    return snap_blend


def ease_in(fn: ShapingFn) -> BlendFn:
    def ease_in_blend(a: float, b: float, t: float) -> float:
        return lerp(a, b, fn(t))

    return ease_in_blend


def ease_out(fn: ShapingFn) -> BlendFn:
    """Mirror of ``ease_in``: the curve is run backwards from the end."""

    def ease_out_blend(a: float, b: float, t: float) -> float:
        return lerp(a, b, flip(fn(flip(t))))

    return ease_out_blend


def ease_in_out(fn: ShapingFn) -> BlendFn:
    """Blend the ease-in and ease-out shapes, weighted by t itself.

    This is not the half-and-mirror construction found in most easing
    tables; ``ease_in_out(sq2)(0, 1, 0.25)`` is 0.15625, not 0.125.
    """

    def ease_in_out_blend(a: float, b: float, t: float) -> float:
        shaped = lerp(fn(t), flip(fn(flip(t))), t)
        return lerp(a, b, shaped)

    return ease_in_out_blend
