"""
Field layout – maps a logical rows × cols grid onto pixel geometry.

The layout itself knows nothing about cells or rules; it only:
    1. Splits the canvas evenly across columns / rows.
    2. Leaves `padding` pixels before the first cell and between cells.
    3. Picks a cell size / canvas size that fits the window.
"""
from __future__ import annotations
from typing import List, NamedTuple, Tuple


class CellGeometry(NamedTuple):
    x: float
    y: float
    width: float
    height: float


def layout(
    rows: int,
    cols: int,
    canvas_width: float,
    canvas_height: float,
    padding: float = 0,
) -> List[List[CellGeometry]]:
    """
    Return row‑major geometry for every cell of a rows × cols field.

    `canvas_width - padding` is divided evenly across `cols` and
    `canvas_height - padding` across `rows`. Cell (r, c) starts at
    (c*cell_w + padding, r*cell_h + padding) and is
    (cell_w - padding) × (cell_h - padding) in size.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"layout needs rows, cols >= 1, got {rows}x{cols}")
    cell_w = (canvas_width - padding) / cols
    cell_h = (canvas_height - padding) / rows
    return [
        [
            CellGeometry(c * cell_w + padding, r * cell_h + padding,
                         cell_w - padding, cell_h - padding)
            for c in range(cols)
        ]
        for r in range(rows)
    ]


# ───────────────────────────── sizing ────────────────────────────────
def canvas_size(rows: int, cols: int, cell_size: int, padding: int = 0) -> Tuple[int, int]:
    """Canvas that makes `layout` produce cells spaced `cell_size` apart."""
    return cols * cell_size + padding, rows * cell_size + padding


def fit_cell_size(rows: int, cols: int, max_w: int, max_h: int, preferred: int) -> int:
    """Shrink the preferred cell size until the field fits max_w × max_h."""
    return max(1, min(preferred, max_w // cols, max_h // rows))
