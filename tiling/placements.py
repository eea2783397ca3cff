"""
Placement enumeration: every position of a piece on a board.

Each placement is a pair of a bit mask (for collision tests) and a
board-sized colored patch (to build the solution grid).
"""

from typing import List, NamedTuple

import numpy as np

from .bitboard import coord_to_bit
from .pieces import shape_to_offsets
from .variants import piece_variants


class Placement(NamedTuple):
    """A shape anchored at one board offset."""
    mask: int
    patch: np.ndarray


def placement_mask(shape: np.ndarray, board_cols: int, offset_row: int, offset_col: int) -> int:
    """Bit mask of a shape anchored with its top-left corner at the offset."""
    mask = 0
    for r, c in shape_to_offsets(shape):
        mask |= coord_to_bit(offset_row + r, offset_col + c, board_cols)
    return mask


def generate_placements(shape: np.ndarray, fill: int, rows: int, cols: int) -> List[Placement]:
    """
    Generate every legal placement of one oriented shape on a board.

    Args:
        shape: Oriented occupancy grid
        fill: Value written into occupied cells of the patch (tagged color)
        rows: Board height
        cols: Board width

    Returns:
        Placements in row-major order of the top-left offset; empty when the
        shape does not fit the board in either dimension
    """
    shape_rows, shape_cols = shape.shape
    if shape_rows > rows or shape_cols > cols:
        return []

    colored = shape.astype(np.int64) * fill
    placements = []
    for start_row in range(rows - shape_rows + 1):
        for start_col in range(cols - shape_cols + 1):
            mask = placement_mask(shape, cols, start_row, start_col)

            patch = np.zeros((rows, cols), dtype=np.int64)
            patch[start_row:start_row + shape_rows, start_col:start_col + shape_cols] = colored
            patch.setflags(write=False)

            placements.append(Placement(mask, patch))
    return placements


def piece_placements(shape: np.ndarray, fill: int, rows: int, cols: int) -> List[Placement]:
    """
    All placements of every orientation of a shape, sorted by mask.

    Placements of different orientations that cover the same cells are
    reported once.
    """
    by_mask = {}
    for variant in piece_variants(shape):
        for placement in generate_placements(variant, fill, rows, cols):
            by_mask.setdefault(placement.mask, placement)
    return [by_mask[mask] for mask in sorted(by_mask)]
