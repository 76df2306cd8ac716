"""
Pygame stand-in for the LED matrix hardware.

PygameMatrix exposes the same two binary lines a real matrix does. While a row
is selected it counts, per column, how many sub-level scans drove the column
on; when the row is released that count becomes the row's duty cycle. After the
last row of a pass the LEDs are painted with the measured duty cycles.

Optimizations (same approach as the old board cache):
- Static background (panel + unlit LED sockets) is pre-rendered once.
- One LED sprite per brightness step is pre-rendered and blitted.
- Window flips are capped at WINDOW_FPS; events are pumped every pass.
"""
from __future__ import annotations
import logging
import sys
from typing import List

import pygame

from ledtris_config import CONFIG, HEIGHT, LEVELS, WIDTH
from ledtris_layout import Dims, led_center

logger = logging.getLogger(__name__)

OFF_COLOR = (38, 10, 12)
ON_COLOR = (255, 52, 40)
PANEL_COLOR = (12, 12, 16)


def led_color(level: int):
    t = level / (LEVELS - 1)
    return tuple(int(o + (n - o) * t) for o, n in zip(OFF_COLOR, ON_COLOR))


class PygameMatrix:
    def __init__(self, screen: pygame.Surface, dims: Dims):
        self.screen = screen
        self.dims = dims
        self.active_row = None
        self.on_counts: List[List[int]] = [[0] * WIDTH for _ in range(HEIGHT)]
        self.duty: List[List[int]] = [[0] * WIDTH for _ in range(HEIGHT)]
        self.last_flip = -1
        self._make_static()
        self._make_leds()

    # ---------- Pre-rendered assets ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(PANEL_COLOR)
        for row in range(HEIGHT):
            for col in range(WIDTH):
                pygame.draw.circle(self.bg, led_color(0), led_center(d, col, row), d.radius)

    def _make_leds(self):
        r = self.dims.radius
        self.led_surf = []
        for level in range(LEVELS):
            s = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(s, led_color(level), (r, r), r)
            self.led_surf.append(s)

    # ---------- Actuation lines ----------
    def row_select(self, row: int, active: bool) -> None:
        if active:
            self.active_row = row
            self.on_counts[row] = [0] * WIDTH
            return
        if self.active_row != row:
            return
        self.active_row = None
        # Each sub-level scan drives every column once.
        self.duty[row] = [min(n, LEVELS - 1) for n in self.on_counts[row]]
        if row == HEIGHT - 1:
            self.present()

    def column_drive(self, col: int, active: bool) -> None:
        if active and self.active_row is not None:
            self.on_counts[self.active_row][col] += 1

    # ---------- Window ----------
    def present(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                logger.info("window closed")
                pygame.quit(); sys.exit()
        now = pygame.time.get_ticks()
        if self.last_flip >= 0 and now - self.last_flip < 1000 // CONFIG["WINDOW_FPS"]:
            return
        self.last_flip = now
        self.screen.blit(self.bg, (0, 0))
        r = self.dims.radius
        for row in range(HEIGHT):
            for col in range(WIDTH):
                level = self.duty[row][col]
                if level:
                    cx, cy = led_center(self.dims, col, row)
                    self.screen.blit(self.led_surf[level], (cx - r, cy - r))
        pygame.display.flip()
