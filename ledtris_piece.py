"""Piece model, offset tables, pivot rotation with kicks"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ledtris_board import Board, Cell, collide
from ledtris_config import CONFIG, WIDTH

KINDS = ["I", "J", "L", "O", "S", "T", "Z"]

# Offsets from the pivot, y grows downward. The pivot itself is always a cell.
OFFSETS: Dict[str, List[Cell]] = {
    "I": [(-1, 0), (0, 0), (1, 0), (2, 0)],
    "J": [(-1, 0), (0, 0), (1, 0), (1, 1)],
    "L": [(-1, 0), (0, 0), (1, 0), (-1, 1)],
    "O": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "S": [(0, 0), (1, 0), (-1, 1), (0, 1)],
    "T": [(-1, 0), (0, 0), (1, 0), (0, 1)],
    "Z": [(-1, 0), (0, 0), (0, 1), (1, 1)],
}

# Top-center, one row above the grid.
SPAWN_PIVOT: Cell = (WIDTH // 2 - 1, -1)

# Tried in order after the in-place rotation fails; first free one wins.
KICKS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, 1), (-2, 0), (2, 0), (0, 2)]


@dataclass
class ActiveBlock:
    kind: str
    pivot: Cell
    cells: List[Cell]

    @staticmethod
    def spawn(kind: str, pivot: Cell = SPAWN_PIVOT) -> "ActiveBlock":
        px, py = pivot
        return ActiveBlock(kind, pivot, [(px + dx, py + dy) for dx, dy in OFFSETS[kind]])

    def moved(self, dx: int, dy: int) -> "ActiveBlock":
        px, py = self.pivot
        return ActiveBlock(self.kind, (px + dx, py + dy), [(x + dx, y + dy) for x, y in self.cells])

# rotation

def rotate_cells(cells: List[Cell], pivot: Cell, cw: bool = True) -> List[Cell]:
    px, py = pivot
    out = []
    for x, y in cells:
        rx, ry = x - px, y - py
        rx, ry = (-ry, rx) if cw else (ry, -rx)
        out.append((px + rx, py + ry))
    return out


def try_rotate(board: Board, block: ActiveBlock) -> Optional[ActiveBlock]:
    """Rotate about the pivot, falling back to KICKS; None if nothing fits."""
    if block.kind == "O":
        return block
    rotated = ActiveBlock(block.kind, block.pivot, rotate_cells(block.cells, block.pivot, CONFIG["ROTATE_CW"]))
    if not collide(board, rotated.cells):
        return rotated
    for dx, dy in KICKS:
        if not collide(board, rotated.cells, (dx, dy)):
            return rotated.moved(dx, dy)
    return None
