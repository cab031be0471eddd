"""Selector catalog: pick a blend by curve kind and ease kind."""
from __future__ import annotations

from enum import Enum

from tick_easing import blends, curves
from tick_easing.scheduler import Interpolator
from tick_easing.types import BlendFn, RepeatMode, ShapingFn, ValueCallback


class CurveType(Enum):
    NONE = "none"
    SINE = "sine"
    SQ1 = "sq1"
    SQ2 = "sq2"
    SQ3 = "sq3"
    SQ4 = "sq4"
    SQ5 = "sq5"
    EXPO = "expo"
    CIRC = "circ"
    BACK = "back"
    ELASTIC = "elastic"


class EaseType(Enum):
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"


_EASES = {
    EaseType.EASE_IN: blends.ease_in,
    EaseType.EASE_OUT: blends.ease_out,
    EaseType.EASE_IN_OUT: blends.ease_in_out,
}


def shaping_fn(curve: CurveType | str) -> ShapingFn | None:
    """Shaping function for ``curve``; None for ``CurveType.NONE``."""
    curve = CurveType(curve)
    if curve is CurveType.NONE:
        return None
    return curves.CURVES[curve.value]


def make_blend(curve: CurveType | str, ease: EaseType | str) -> BlendFn:
    """Resolve a (curve, ease) pair to a blend function.

    ``EaseType.LINEAR`` ignores the curve, and so does ``CurveType.NONE``:
    with no curve to shape, every ease kind is plain linear interpolation.
    Unknown names raise ``ValueError``.
    """
    ease = EaseType(ease)
    fn = shaping_fn(curve)
    if ease is EaseType.LINEAR or fn is None:
        return blends.linear()
    return _EASES[ease](fn)


def interpolate(
    interpolator: Interpolator,
    name: str,
    start_value: float,
    end_value: float,
    duration_ms: int,
    curve: CurveType | str,
    ease: EaseType | str,
    repeat_mode: RepeatMode,
    callback: ValueCallback,
) -> bool:
    """Start ``name`` on ``interpolator`` using a catalog blend.

    A name that is already running is left alone before the blend is even
    resolved. Attach an end handler afterwards with ``on_complete``.
    """
    if interpolator.exists(name):
        return False
    return interpolator.start(
        name,
        start_value,
        end_value,
        duration_ms,
        make_blend(curve, ease),
        callback,
        repeat_mode,
    )
