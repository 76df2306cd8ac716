"""Monotonic millisecond ticks and a busy microsecond delay"""
import time

import pygame


class Clock:
    """Wall clock backed by pygame's tick counter (requires pygame.init())."""

    def ticks_ms(self) -> int:
        return pygame.time.get_ticks()

    def delay_us(self, us: int) -> None:
        # Busy wait: the sub-level holds are far below the scheduler's resolution.
        end = time.perf_counter() + us / 1_000_000
        while time.perf_counter() < end:
            pass
