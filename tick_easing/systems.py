"""System factory wiring an Interpolator into a FrameLoop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_easing.scheduler import Interpolator

if TYPE_CHECKING:
    from tick_easing.loop import FrameContext


def make_interpolation_system(
    interpolator: Interpolator,
) -> Callable[[FrameContext], None]:
    def interpolation_system(ctx: FrameContext) -> None:
        interpolator.tick()

    return interpolation_system
