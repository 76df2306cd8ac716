"""Piece factory: LCG draws, no immediate repeats, bounded rejection"""
import logging
from typing import Optional

import pygame

from ledtris_config import CONFIG
from ledtris_piece import KINDS, ActiveBlock

logger = logging.getLogger(__name__)

RAND_RANGE = 0x8000  # 15-bit draws


class PieceFactory:
    """
    Picks the next piece kind uniformly among the kinds other than the previous one.

    Draws come from a 32-bit LCG (multiplier 0x41C64E6D, increment 0x3039),
    taking the high 15 bits. A draw is only accepted below the largest multiple
    of the candidate count that fits in the 15-bit range, so the modulo that
    follows is unbiased. The loop gives up after RNG_MAX_DRAWS rejections and
    falls back to the kind following the previous one in catalog order.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        return (self._lcg_next() >> 16) & 0x7FFF

    def next(self, previous: Optional[str] = None) -> str:
        candidates = [k for k in KINDS if k != previous]
        n = len(candidates)
        limit = RAND_RANGE - RAND_RANGE % n
        for _ in range(CONFIG["RNG_MAX_DRAWS"]):
            r = self._rand()
            if r < limit:
                return candidates[r % n]
        if previous is None:
            fallback = KINDS[0]
        else:
            fallback = KINDS[(KINDS.index(previous) + 1) % len(KINDS)]
        logger.debug("rejection sampling exhausted, falling back to %s", fallback)
        return fallback

    def spawn(self, previous: Optional[str] = None) -> ActiveBlock:
        return ActiveBlock.spawn(self.next(previous))
