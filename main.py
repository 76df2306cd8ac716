import argparse
import logging
import sys

import pygame

from ledtris_config import CONFIG, validate
from ledtris_display import PygameMatrix
from ledtris_game import Game
from ledtris_input import KeyboardInput
from ledtris_layout import compute_dims
from ledtris_render import MultiplexDriver
from ledtris_rng import PieceFactory
from ledtris_timing import Clock

logger = logging.getLogger("ledtris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block game on an emulated 8x8 LED matrix")
    p.add_argument("--seed", type=int, default=None, help="piece generator seed (default: tick counter)")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="pixels per LED")
    p.add_argument("--hold-us", type=int, default=CONFIG["SUBLEVEL_HOLD_US"],
                   help="microseconds each brightness sub-level is held")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    CONFIG["RNG_SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["SUBLEVEL_HOLD_US"] = args.hold_us
    try:
        validate()
    except ValueError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("LEDtris - 8x8 matrix")

    clock = Clock()
    driver = MultiplexDriver(PygameMatrix(screen, dims), clock)
    game = Game(driver, KeyboardInput(), clock, PieceFactory(CONFIG["RNG_SEED"]))
    logger.info("running on %dx%d window, first piece %s", dims.total_w, dims.total_h, game.state.block.kind)

    try:
        game.run()
    except KeyboardInterrupt:
        logger.info("interrupted after %d game(s)", game.games)
    finally:
        pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
