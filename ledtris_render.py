"""
Rendering for the LED matrix.

compose() merges the locked board and the falling block into one brightness
frame. MultiplexDriver pushes a frame onto the row-select / column-drive lines.

Brightness from binary lines:
- One row is selected at a time.
- Each row is scanned LEVELS times (sub-levels 0..15, ascending). On sub-level
  n a column is driven iff the cell brightness is greater than n, so a cell of
  brightness b is lit during exactly b of the LEVELS passes.
- After the sub-levels every column and the row are released, so the matrix is
  dark between drive() calls. Callers must keep driving to keep it lit; hold()
  is the only way the game waits.
"""
from __future__ import annotations
from typing import List, Optional, Protocol

from ledtris_board import Board
from ledtris_config import CONFIG, HEIGHT, LEVELS, WIDTH
from ledtris_piece import ActiveBlock

Frame = List[List[int]]


class Display(Protocol):
    def row_select(self, row: int, active: bool) -> None: ...
    def column_drive(self, col: int, active: bool) -> None: ...


class Clock(Protocol):
    def ticks_ms(self) -> int: ...
    def delay_us(self, us: int) -> None: ...


def blank_frame() -> Frame:
    return [[0] * WIDTH for _ in range(HEIGHT)]


def compose(board: Board, block: Optional[ActiveBlock]) -> Frame:
    frame = [row[:] for row in board]
    if block is not None:
        for x, y in block.cells:
            if y >= 0:
                frame[y][x] = CONFIG["ACTIVE_BRIGHTNESS"]
    return frame


class MultiplexDriver:
    def __init__(self, display: Display, clock: Clock):
        self.display = display
        self.clock = clock
        self.passes = 0

    def drive(self, frame: Frame) -> None:
        """One full refresh pass; leaves every element off."""
        hold_us = CONFIG["SUBLEVEL_HOLD_US"]
        for row in range(HEIGHT):
            self.display.row_select(row, True)
            cells = frame[row]
            for level in range(LEVELS):
                for col in range(WIDTH):
                    self.display.column_drive(col, cells[col] > level)
                self.clock.delay_us(hold_us)
            for col in range(WIDTH):
                self.display.column_drive(col, False)
            self.display.row_select(row, False)
        self.passes += 1

    def hold(self, frame: Frame, ms: int) -> None:
        """Keep refreshing frame for at least ms milliseconds (one pass minimum)."""
        start = self.clock.ticks_ms()
        self.drive(frame)
        while self.clock.ticks_ms() - start < ms:
            self.drive(frame)
