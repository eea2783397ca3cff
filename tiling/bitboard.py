"""
Bitboard utilities for tiling boards.

A board of ``rows x cols`` cells is encoded as an integer where bit
``row * cols + col`` is set when the cell is occupied (row-major order).
Python integers are unbounded, so the 64-bit limit of the mask is enforced
explicitly with ``check_capacity``.
"""

from typing import Iterable, List, Tuple

from .errors import BoardCapacityError

MASK_WIDTH = 64


def coord_to_index(row: int, col: int, cols: int) -> int:
    """
    Convert board coordinates to a linear index.

    Args:
        row: Row coordinate (0-based)
        col: Column coordinate (0-based)
        cols: Board width

    Returns:
        Linear index in [0, rows * cols)
    """
    return row * cols + col


def index_to_coord(index: int, cols: int) -> Tuple[int, int]:
    """Convert a linear index back to (row, col) on a board ``cols`` wide."""
    return (index // cols, index % cols)


def coord_to_bit(row: int, col: int, cols: int) -> int:
    """Single-bit mask for the cell at (row, col)."""
    return 1 << coord_to_index(row, col, cols)


def coords_to_mask(coords: Iterable[Tuple[int, int]], cols: int) -> int:
    """
    Convert a collection of coordinates to a bitmask.

    Args:
        coords: Iterable of (row, col) tuples
        cols: Board width

    Returns:
        Bitmask with bits set for each coordinate
    """
    mask = 0
    for row, col in coords:
        mask |= coord_to_bit(row, col, cols)
    return mask


def mask_to_coords(mask: int, cols: int) -> List[Tuple[int, int]]:
    """
    Convert a bitmask back into a list of coordinates, lowest bit first.

    Useful for debugging and testing.
    """
    coords = []
    index = 0
    while mask != 0:
        if mask & 1:
            coords.append(index_to_coord(index, cols))
        mask >>= 1
        index += 1
    return coords


def full_mask(cells: int) -> int:
    """Mask with the lowest ``cells`` bits set."""
    return (1 << cells) - 1


def check_capacity(cells: int, max_cells: int = MASK_WIDTH) -> None:
    """
    Reject boards that cannot be represented by the bit mask.

    Raises:
        BoardCapacityError: if ``cells`` exceeds ``max_cells``
    """
    if cells > min(max_cells, MASK_WIDTH):
        raise BoardCapacityError(cells, max_cells)
