import random

import pytest

from ledtris_board import collide, new_board
from ledtris_config import CONFIG, HEIGHT, WIDTH
from ledtris_piece import KINDS, OFFSETS, SPAWN_PIVOT, ActiveBlock, rotate_cells, try_rotate

LOCKED = 4


def test_catalog_shapes():
    assert sorted(OFFSETS) == sorted(KINDS)
    for kind, offsets in OFFSETS.items():
        assert len(set(offsets)) == 4, kind
        assert (0, 0) in offsets, kind


def test_spawn_top_center_above_grid():
    block = ActiveBlock.spawn("I")
    assert block.pivot == SPAWN_PIVOT == (3, -1)
    assert block.cells == [(2, -1), (3, -1), (4, -1), (5, -1)]


def test_o_rotation_is_identity():
    block = ActiveBlock.spawn("O").moved(0, 4)
    assert try_rotate(new_board(), block) is block


def test_rotate_in_open_space():
    block = ActiveBlock.spawn("I").moved(0, 4)
    rotated = try_rotate(new_board(), block)
    assert rotated.pivot == block.pivot
    assert rotated.cells == [(3, 2), (3, 3), (3, 4), (3, 5)]


def test_counter_clockwise_configuration():
    CONFIG["ROTATE_CW"] = False
    block = ActiveBlock.spawn("I").moved(0, 4)
    rotated = try_rotate(new_board(), block)
    assert rotated.cells == [(3, 4), (3, 3), (3, 2), (3, 1)]
    assert rotate_cells([(1, 0)], (0, 0), cw=False) == [(0, -1)]


def test_wall_kick_pushes_away_from_wall():
    block = ActiveBlock("I", (0, 3), [(0, 2), (0, 3), (0, 4), (0, 5)])
    rotated = try_rotate(new_board(), block)
    assert sorted(rotated.cells) == [(0, 3), (1, 3), (2, 3), (3, 3)]
    assert rotated.pivot == (2, 3)


def test_first_free_kick_wins():
    board = new_board()
    board[2][3] = LOCKED
    block = ActiveBlock.spawn("T").moved(0, 4)
    rotated = try_rotate(board, block)
    # both (-1, 0) and (1, 0) fit; the left kick is tried first
    assert rotated.pivot == (2, 3)


def test_boxed_in_rotation_is_rejected():
    block = ActiveBlock.spawn("T").moved(0, 4)
    board = [[LOCKED] * WIDTH for _ in range(HEIGHT)]
    for x, y in block.cells:
        board[y][x] = 0
    assert try_rotate(board, block) is None


@pytest.mark.parametrize("seed", range(20))
def test_rotation_never_lands_in_collision(seed):
    rnd = random.Random(seed)
    board = [[LOCKED if rnd.random() < 0.3 else 0 for _ in range(WIDTH)] for _ in range(HEIGHT)]
    for kind in KINDS:
        for _ in range(10):
            block = ActiveBlock.spawn(kind, (rnd.randrange(1, WIDTH - 2), rnd.randrange(-1, HEIGHT - 1)))
            if collide(board, block.cells):
                continue
            rotated = try_rotate(board, block)
            if rotated is not None:
                assert not collide(board, rotated.cells)
                assert len(rotated.cells) == 4
