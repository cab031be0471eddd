"""tick-easing - Named, frame-driven value interpolation with easing curves."""
from __future__ import annotations

from tick_easing.blends import ease_in, ease_in_out, ease_out, flip, lerp, linear, snap
from tick_easing.catalog import CurveType, EaseType, interpolate, make_blend
from tick_easing.clock import Clock, ManualClock, MonotonicClock
from tick_easing.config import TweenConfig
from tick_easing.curves import CURVES
from tick_easing.loop import FrameContext, FrameLoop
from tick_easing.scheduler import Interpolator
from tick_easing.systems import make_interpolation_system
from tick_easing.types import Interpolation, InvalidTweenError, RepeatMode

__all__ = [
    "Interpolator",
    "Interpolation",
    "RepeatMode",
    "InvalidTweenError",
    "TweenConfig",
    "CURVES",
    "lerp",
    "flip",
    "linear",
    "snap",
    "ease_in",
    "ease_out",
    "ease_in_out",
    "CurveType",
    "EaseType",
    "make_blend",
    "interpolate",
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "FrameLoop",
    "FrameContext",
    "make_interpolation_system",
]
