"""Easing Gallery - every curve side by side, driven by tick-easing.

One lane per curve. Each lane runs a named interpolation on a shared
Interpolator whose host clock is ``pygame.time.get_ticks`` and whose
frame hook is this render loop.

Controls:
  1-4     Select ease type (linear / in / out / in-out)
  R       Toggle repeat mode (reverse / restart)
  Space   Restart every lane
  +/-     Adjust duration
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_easing import CurveType, EaseType, Interpolator, RepeatMode, interpolate
from tick_easing.catalog import make_blend

# Timing
FPS = 60
MIN_DURATION = 250
MAX_DURATION = 4000

# Layout dimensions
CURVES = [c for c in CurveType if c is not CurveType.NONE]
LANE_H = 48
LABEL_W = 100
CURVE_W = 80
TRACK_W = 480
STATUS_H = 36
TRACK_PAD = 20
ORB_RADIUS = 8

SCREEN_W = LABEL_W + CURVE_W + TRACK_W
SCREEN_H = LANE_H * len(CURVES) + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_RAIL = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
ORB_COLOR = (0, 220, 220)
PLOT_COLOR = (255, 160, 40)

EASE_KEYS = {
    pygame.K_1: EaseType.LINEAR,
    pygame.K_2: EaseType.EASE_IN,
    pygame.K_3: EaseType.EASE_OUT,
    pygame.K_4: EaseType.EASE_IN_OUT,
}

logger = logging.getLogger("easing_gallery")


class PygameClock:
    """Host clock backed by pygame's millisecond ticks."""

    def now(self) -> int:
        return pygame.time.get_ticks()


class GalleryState:
    """Holds the interpolator and the latest value of every lane."""

    def __init__(self) -> None:
        self.interpolator = Interpolator(clock=PygameClock())
        self.ease = EaseType.EASE_IN_OUT
        self.repeat_mode = RepeatMode.REVERSE
        self.duration = 1500
        self.progress: dict[str, float] = {}
        self.restart()

    def restart(self) -> None:
        """Cancel every lane and start them again with current settings."""
        self.interpolator.clear()
        for curve in CURVES:
            name = curve.value
            self.progress[name] = 0.0
            interpolate(
                self.interpolator,
                name,
                0.0,
                1.0,
                self.duration,
                curve,
                self.ease,
                self.repeat_mode,
                lambda v, name=name: self.progress.__setitem__(name, v),
            )
        logger.info(
            "lanes restarted: ease=%s repeat=%s duration=%dms",
            self.ease.value, self.repeat_mode.name, self.duration,
        )

    def toggle_repeat(self) -> None:
        if self.repeat_mode is RepeatMode.REVERSE:
            self.repeat_mode = RepeatMode.RESTART
        else:
            self.repeat_mode = RepeatMode.REVERSE
        self.restart()


def draw_curve_plot(
    surface: pygame.Surface, curve: CurveType, ease: EaseType, x: int, y: int, w: int, h: int
) -> None:
    """Plot the lane's blend over t in [0, 1]. Overshoot leaves the box."""
    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))
    blend = make_blend(curve, ease)
    points = []
    for i in range(w):
        t = i / (w - 1)
        v = blend(0.0, 1.0, t)
        points.append((x + i, int(y + h - v * h)))
    pygame.draw.lines(surface, PLOT_COLOR, False, points, 1)


def draw(surface: pygame.Surface, font: pygame.font.Font, state: GalleryState) -> None:
    surface.fill(BG_COLOR)
    track_x = LABEL_W + CURVE_W

    for i, curve in enumerate(CURVES):
        lane_y = i * LANE_H
        pygame.draw.rect(surface, LANE_BG, (0, lane_y, SCREEN_W, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (SCREEN_W, lane_y + LANE_H - 1))

        label = font.render(curve.value, True, TEXT_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        draw_curve_plot(surface, curve, state.ease, LABEL_W, lane_y + 6, CURVE_W - 8, LANE_H - 12)

        rail_y = lane_y + LANE_H // 2
        rail_left = track_x + TRACK_PAD
        rail_right = track_x + TRACK_W - TRACK_PAD
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        ox = int(rail_left + (rail_right - rail_left) * state.progress[curve.value])
        pygame.draw.circle(surface, ORB_COLOR, (ox, rail_y), ORB_RADIUS)

    status_y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, status_y, SCREEN_W, STATUS_H))
    text = (
        f"ease={state.ease.value}  repeat={state.repeat_mode.name.lower()}  "
        f"duration={state.duration}ms  [1-4] ease  [R] repeat  [+/-] duration"
    )
    status = font.render(text, True, TEXT_COLOR)
    surface.blit(status, (10, status_y + STATUS_H // 2 - status.get_height() // 2))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tick-easing demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key in EASE_KEYS:
                    state.ease = EASE_KEYS[event.key]
                    state.restart()

                elif event.key == pygame.K_r:
                    state.toggle_repeat()

                elif event.key == pygame.K_SPACE:
                    state.restart()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration = min(state.duration + 250, MAX_DURATION)
                    state.restart()

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration = max(state.duration - 250, MIN_DURATION)
                    state.restart()

        # --- Tick ---
        state.interpolator.tick()

        # --- Render ---
        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
