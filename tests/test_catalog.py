"""Tests for the curve/ease selector catalog."""

import pytest
from tick_easing import (
    CurveType,
    EaseType,
    Interpolator,
    ManualClock,
    RepeatMode,
    interpolate,
    lerp,
    make_blend,
)
from tick_easing.catalog import shaping_fn
from tick_easing.curves import CURVES, sq2


class TestShapingFn:
    """Test curve selector resolution."""

    def test_every_curve_type_resolves(self):
        """Every CurveType except NONE maps onto the CURVES table."""
        for curve in CurveType:
            if curve is CurveType.NONE:
                assert shaping_fn(curve) is None
            else:
                assert shaping_fn(curve) is CURVES[curve.value]

    def test_accepts_names(self):
        """Lower-case names resolve like enum members."""
        assert shaping_fn("sq2") is sq2

    def test_unknown_name_raises(self):
        """An unknown curve name is a ValueError."""
        with pytest.raises(ValueError):
            shaping_fn("wobble")


class TestMakeBlend:
    """Test (curve, ease) -> blend dispatch."""

    def test_linear_ignores_curve(self):
        """EaseType.LINEAR always gives plain lerp."""
        for curve in CurveType:
            assert make_blend(curve, EaseType.LINEAR) is lerp

    def test_none_curve_is_linear(self):
        """CurveType.NONE gives plain lerp for every ease kind."""
        for ease in EaseType:
            assert make_blend(CurveType.NONE, ease) is lerp

    def test_ease_kinds(self):
        """sq2 under each ease kind at t=0.5."""
        assert make_blend(CurveType.SQ2, EaseType.EASE_IN)(0.0, 100.0, 0.5) == 25.0
        assert make_blend(CurveType.SQ2, EaseType.EASE_OUT)(0.0, 100.0, 0.5) == 75.0
        assert make_blend(CurveType.SQ2, EaseType.EASE_IN_OUT)(0.0, 100.0, 0.5) == pytest.approx(50.0)

    def test_string_selectors(self):
        """String names work for both selectors."""
        blend = make_blend("sq2", "ease_in")
        assert blend(0.0, 100.0, 0.5) == 25.0

    def test_unknown_ease_raises(self):
        """An unknown ease name is a ValueError."""
        with pytest.raises(ValueError):
            make_blend(CurveType.SINE, "ease_sideways")


class TestInterpolate:
    """Test the one-call interpolate helper."""

    def test_interpolate_starts_named_interpolation(self):
        """interpolate resolves the blend and registers the interpolation."""
        clock = ManualClock()
        interp = Interpolator(clock=clock)
        values = []

        started = interpolate(
            interp, "fade", 0.0, 100.0, 1000,
            CurveType.SQ2, EaseType.EASE_IN, RepeatMode.NONE, values.append,
        )
        assert started is True

        clock.set(500)
        interp.tick()
        assert values == [25.0]

    def test_interpolate_ignores_running_name(self):
        """A running name is left alone and the call reports False."""
        interp = Interpolator(clock=ManualClock())
        first = interpolate(
            interp, "x", 0.0, 1.0, 100, "sine", "ease_out", RepeatMode.REVERSE, lambda v: None,
        )
        second = interpolate(
            interp, "x", 5.0, 6.0, 100, "bogus", "bogus", RepeatMode.NONE, lambda v: None,
        )
        assert first is True
        assert second is False
        assert interp.get("x").start_value == 0.0

    def test_on_complete_attaches_after_interpolate(self):
        """End handlers are attached separately with on_complete."""
        clock = ManualClock()
        interp = Interpolator(clock=clock)
        ended = []
        interpolate(
            interp, "x", 0.0, 1.0, 100, CurveType.ELASTIC, EaseType.EASE_OUT,
            RepeatMode.NONE, lambda v: None,
        )
        interp.on_complete("x", ended.append)

        clock.set(100)
        interp.tick()
        assert ended == ["x"]
