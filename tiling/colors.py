"""
Per-piece color tagging.

Colors are 24-bit RGB values. When a piece is placed on the board its color
is tagged with a 1-based piece identifier in the high 8 bits so that pieces
sharing the same RGB color stay distinguishable in a solution grid.
"""

from collections import Counter
from typing import Dict, Optional, Tuple

import numpy as np

from .errors import PieceIdOverflowError

COLOR_MASK = 0x00FFFFFF
PIECE_ID_SHIFT = 24
MAX_PIECE_ID = 0xFF
EMPTY = 0


def tag_color(color: int, piece_index: int) -> int:
    """
    Inject the piece index (stored 1-based) into the high bits of a color.

    Args:
        color: 24-bit RGB color
        piece_index: 0-based index of the piece in its puzzle

    Returns:
        Tagged color value

    Raises:
        PieceIdOverflowError: if the identifier does not fit in 8 bits
        ValueError: if the color uses bits reserved for the identifier
    """
    if color & ~COLOR_MASK:
        raise ValueError(f"Color {color:#x} does not fit in 24 bits")
    piece_id = piece_index + 1
    if piece_id < 1 or piece_id > MAX_PIECE_ID:
        raise PieceIdOverflowError(
            f"Piece index {piece_index} cannot be tagged, at most {MAX_PIECE_ID} pieces are supported"
        )
    return color | (piece_id << PIECE_ID_SHIFT)


def split_color(value: int) -> Tuple[Optional[int], int]:
    """Split a tagged cell value into (1-based piece id or None, rgb)."""
    value = int(value)
    piece_id = value >> PIECE_ID_SHIFT
    return (piece_id or None, value & COLOR_MASK)


def to_rgb(color: int) -> Tuple[int, int, int]:
    """Red, green and blue channels of a (possibly tagged) color."""
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def piece_index_at(grid: np.ndarray, row: int, col: int) -> Optional[int]:
    """
    Recover which piece occupies a solution cell.

    Returns:
        0-based piece index, or None for an empty cell
    """
    piece_id, _ = split_color(grid[row, col])
    if piece_id is None:
        return None
    return piece_id - 1


def cells_by_piece(grid: np.ndarray) -> Dict[int, int]:
    """Count occupied cells per 0-based piece index in a board grid."""
    counts = Counter(int(v) >> PIECE_ID_SHIFT for v in grid.flat if v != EMPTY)
    return {piece_id - 1: n for piece_id, n in counts.items()}
