import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from ledtris_config import CONFIG, HEIGHT, WIDTH
from ledtris_input import NO_INTENTS
from ledtris_render import MultiplexDriver
from ledtris_rng import PieceFactory


class FakeClock:
    """Manual clock; every busy delay advances it."""
    def __init__(self):
        self.us = 0

    def ticks_ms(self):
        return self.us // 1000

    def delay_us(self, us):
        self.us += us

    def advance_ms(self, ms):
        self.us += ms * 1000


class RecordingDisplay:
    """Tracks line states and counts lit samples per element."""
    def __init__(self):
        self.rows = [False] * HEIGHT
        self.cols = [False] * WIDTH
        self.lit = [[0] * WIDTH for _ in range(HEIGHT)]
        self.selected_order = []
        self.max_rows_selected = 0

    def row_select(self, row, active):
        self.rows[row] = active
        if active:
            self.selected_order.append(row)
        self.max_rows_selected = max(self.max_rows_selected, sum(self.rows))

    def column_drive(self, col, active):
        self.cols[col] = active
        if active:
            for row, on in enumerate(self.rows):
                if on:
                    self.lit[row][col] += 1

    def all_off(self):
        return not any(self.rows) and not any(self.cols)


class ScriptedInput:
    def __init__(self, *intents):
        self.script = list(intents)
        self.polls = 0

    def poll(self, now):
        self.polls += 1
        if self.script:
            return self.script.pop(0)
        return NO_INTENTS


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def driver(display, clock):
    return MultiplexDriver(display, clock)


@pytest.fixture
def source():
    return ScriptedInput()


@pytest.fixture
def game(driver, source, clock):
    from ledtris_game import Game
    return Game(driver, source, clock, PieceFactory(seed=1234))
