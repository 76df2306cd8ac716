"""Board helpers: collide, grounded, merge, row elimination"""
from typing import Iterable, List, Tuple

from ledtris_config import CONFIG, HEIGHT, WIDTH

Cell = Tuple[int, int]
Board = List[List[int]]


def new_board() -> Board:
    return [[0] * WIDTH for _ in range(HEIGHT)]


def collide(board: Board, cells: Iterable[Cell], offset: Cell = (0, 0)) -> bool:
    """True if any shifted cell leaves the grid sideways/below or hits a locked cell.

    Cells above the grid (y < 0) are never checked against the board.
    """
    ox, oy = offset
    for x, y in cells:
        bx, by = x + ox, y + oy
        if bx < 0 or bx >= WIDTH or by >= HEIGHT:
            return True
        if by >= 0 and board[by][bx]:
            return True
    return False


def grounded(board: Board, cells: Iterable[Cell]) -> bool:
    return collide(board, cells, (0, 1))


def merge(board: Board, cells: Iterable[Cell]) -> None:
    for x, y in cells:
        if y >= 0:
            board[y][x] = CONFIG["LOCKED_BRIGHTNESS"]


def row_full(board: Board, y: int) -> bool:
    return all(board[y][x] for x in range(WIDTH))


def top_row_occupied(board: Board) -> bool:
    return any(board[0])


def blank_row(board: Board, y: int) -> None:
    board[y] = [0] * WIDTH


def eliminate_row(board: Board, y: int) -> None:
    """Drop every row above y by one and empty row 0."""
    for r in range(y, 0, -1):
        board[r] = board[r - 1][:]
    blank_row(board, 0)


def clear_board(board: Board) -> None:
    for y in range(HEIGHT):
        blank_row(board, y)
