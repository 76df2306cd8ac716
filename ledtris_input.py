"""Input intents and the pygame keyboard source"""
from dataclasses import dataclass
from typing import Protocol

import pygame

from ledtris_config import CONFIG


@dataclass(frozen=True)
class Intents:
    move_left: bool = False
    move_right: bool = False
    soft_drop: bool = False
    rotate: bool = False


NO_INTENTS = Intents()


class InputSource(Protocol):
    def poll(self, now: int) -> Intents: ...


class KeyboardInput:
    """
    Arrow keys through pygame.

    Directions are sampled no faster than INPUT_INTERVAL_MS so a held key steps
    at a steady rate. Rotate (Up or Space) fires once per press.
    """
    def __init__(self):
        self.last_sample = None
        self.rotate_held = False

    def poll(self, now: int) -> Intents:
        keys = pygame.key.get_pressed()
        held = bool(keys[pygame.K_UP] or keys[pygame.K_SPACE])
        rotate = held and not self.rotate_held
        self.rotate_held = held
        if self.last_sample is not None and now - self.last_sample < CONFIG["INPUT_INTERVAL_MS"]:
            return Intents(rotate=rotate)
        self.last_sample = now
        return Intents(
            move_left=bool(keys[pygame.K_LEFT]),
            move_right=bool(keys[pygame.K_RIGHT]),
            soft_drop=bool(keys[pygame.K_DOWN]),
            rotate=rotate,
        )
