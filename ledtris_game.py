"""
LEDtris game engine.

One Game object owns the GameState and runs the loop forever:

  poll input -> move / rotate (only if collision free) -> gravity ->
  lock delay -> line clear -> game over check -> compose -> drive

Every wait (row flash, game-over blink, the wipe) is a MultiplexDriver.hold()
so the matrix keeps refreshing. Nothing here sleeps.

Game over is not an error: the board blinks, is wiped row by row from the
bottom, and a fresh game starts immediately.
"""
from __future__ import annotations
import logging
from typing import Optional

from ledtris_board import (blank_row, clear_board, collide, eliminate_row,
                           grounded, merge, row_full, top_row_occupied)
from ledtris_config import CONFIG, HEIGHT
from ledtris_input import NO_INTENTS, InputSource, Intents
from ledtris_piece import try_rotate
from ledtris_render import Clock, MultiplexDriver, blank_frame, compose
from ledtris_rng import PieceFactory
from ledtris_state import GameMode, GameState

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, driver: MultiplexDriver, source: InputSource, clock: Clock,
                 factory: Optional[PieceFactory] = None):
        self.driver = driver
        self.source = source
        self.clock = clock
        self.factory = factory or PieceFactory(CONFIG["RNG_SEED"])
        self.state = GameState(block=self.factory.spawn())
        self.state.last_fall = clock.ticks_ms()
        self.games = 1

    # ---------- Movement ----------
    def try_move(self, dx: int, dy: int) -> bool:
        st = self.state
        if collide(st.board, st.block.cells, (dx, dy)):
            return False
        st.block = st.block.moved(dx, dy)
        return True

    def rotate(self) -> bool:
        st = self.state
        rotated = try_rotate(st.board, st.block)
        if rotated is None:
            logger.debug("rotation of %s at %s rejected", st.block.kind, st.block.pivot)
            return False
        st.block = rotated
        return True

    def apply_intents(self, intents: Intents) -> None:
        if intents.move_left:
            self.try_move(-1, 0)
        elif intents.move_right:
            self.try_move(1, 0)
        if intents.soft_drop:
            self.try_move(0, 1)
        if intents.rotate:
            self.rotate()

    def apply_gravity(self, now: int) -> None:
        st = self.state
        if now - st.last_fall >= CONFIG["GRAVITY_MS"]:
            st.last_fall = now
            self.try_move(0, 1)

    # ---------- Lock / clear / game over ----------
    def spawn(self) -> None:
        st = self.state
        st.block = self.factory.spawn(st.block.kind)
        st.lock.reset()
        st.last_fall = self.clock.ticks_ms()

    def lock_block(self) -> None:
        st = self.state
        logger.info("locked %s at %s", st.block.kind, st.block.cells)
        merge(st.board, st.block.cells)

    def eliminate(self, y: int, flash: bool = True) -> None:
        st = self.state
        blank_row(st.board, y)
        if flash:
            self.driver.hold(compose(st.board, None), CONFIG["FLASH_MS"])
        eliminate_row(st.board, y)

    def clear_lines(self) -> int:
        """Clear full rows bottom to top, re-checking a row after each shift."""
        st = self.state
        cleared = 0
        y = HEIGHT - 1
        while y >= 0:
            if not row_full(st.board, y):
                y -= 1
                continue
            st.mode = GameMode.CLEARING
            self.eliminate(y)
            cleared += 1
        if cleared:
            logger.info("cleared %d row(s)", cleared)
        st.mode = GameMode.PLAYING
        return cleared

    def game_over(self) -> None:
        st = self.state
        st.mode = GameMode.ENDING
        logger.info("game over after game #%d", self.games)
        cycles = CONFIG["BLINK_CYCLES"]
        if cycles:
            half = CONFIG["BLINK_MS"] // (cycles * 2)
            for _ in range(cycles):
                self.driver.hold(blank_frame(), half)
                self.driver.hold(compose(st.board, None), half)
        for _ in range(HEIGHT):
            self.eliminate(HEIGHT - 1, flash=False)
            self.driver.drive(compose(st.board, None))
        self.reset()

    def reset(self) -> None:
        st = self.state
        clear_board(st.board)
        self.spawn()
        st.mode = GameMode.PLAYING
        self.games += 1
        logger.info("starting game #%d with %s", self.games, st.block.kind)

    # ---------- Loop ----------
    def tick(self) -> None:
        st = self.state
        now = self.clock.ticks_ms()
        intents = self.source.poll(now) if st.mode is GameMode.PLAYING else NO_INTENTS
        self.apply_intents(intents)
        self.apply_gravity(now)
        if st.lock.update(grounded(st.board, st.block.cells), now):
            self.lock_block()
            self.clear_lines()
            if top_row_occupied(st.board):
                self.game_over()
            else:
                self.spawn()
        self.driver.drive(compose(st.board, st.block))

    def run(self) -> None:
        while True:
            self.tick()
