# ledtris_layout.py
from dataclasses import dataclass
from ledtris_config import CONFIG, HEIGHT, WIDTH

@dataclass
class Dims:
    cell: int
    margin: int
    radius: int
    grid_w: int
    grid_h: int
    total_w: int
    total_h: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = max(8, cell // 3)
    radius = max(2, cell * 2 // 5)

    grid_w = WIDTH * cell
    grid_h = HEIGHT * cell

    return Dims(
        cell=cell, margin=margin, radius=radius,
        grid_w=grid_w, grid_h=grid_h,
        total_w=margin + grid_w + margin,
        total_h=margin + grid_h + margin,
    )

def led_center(d: Dims, col: int, row: int):
    return (d.margin + col * d.cell + d.cell // 2,
            d.margin + row * d.cell + d.cell // 2)
