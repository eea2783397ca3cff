"""
Piece definitions for tiling puzzles.

A shape is a 2D numpy array of 0/1 values; a piece is a shape plus the color
used to paint it on solution grids.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np

from .colors import COLOR_MASK


def as_shape(cells) -> np.ndarray:
    """
    Build a read-only occupancy grid from nested sequences or an array.

    Raises:
        ValueError: if the grid is not 2D, not binary, or has no occupied cell
    """
    shape = np.array(cells, dtype=int)
    if shape.ndim != 2 or shape.size == 0:
        raise ValueError("Shape must be a non-empty 2D grid")
    if not np.isin(shape, (0, 1)).all():
        raise ValueError("Shape cells must be 0 or 1")
    if not shape.any():
        raise ValueError("Shape must have at least one occupied cell")
    shape.setflags(write=False)
    return shape


def shape_to_offsets(shape: np.ndarray) -> List[Tuple[int, int]]:
    """
    Convert a shape array to a list of (row, col) offsets, row-major.

    Args:
        shape: 2D numpy array with 1s where cells are occupied

    Returns:
        List of (row, col) tuples for occupied cells
    """
    return [(int(r), int(c)) for r, c in np.argwhere(shape == 1)]


def shape_key(shape: np.ndarray) -> Tuple[int, int, Tuple[int, ...]]:
    """Structural identity of a shape: dimensions plus row-major cells."""
    rows, cols = shape.shape
    return (rows, cols, tuple(int(v) for v in shape.flat))


@dataclass(frozen=True, eq=False)
class Piece:
    """A puzzle piece: an occupancy grid and its colors."""
    shape: np.ndarray
    color: int
    display_color: Optional[int] = None

    def __post_init__(self):
        """Validate piece after initialization."""
        object.__setattr__(self, "shape", as_shape(self.shape))
        if self.color < 0 or self.color & ~COLOR_MASK:
            raise ValueError(f"Piece color {self.color:#x} must be a 24-bit RGB value")

    @property
    def cells(self) -> int:
        """Number of occupied cells."""
        return int(self.shape.sum())

    @property
    def rows(self) -> int:
        return self.shape.shape[0]

    @property
    def cols(self) -> int:
        return self.shape.shape[1]

    def with_shape(self, shape: np.ndarray) -> "Piece":
        return replace(self, shape=shape)

    def __eq__(self, other):
        if not isinstance(other, Piece):
            return NotImplemented
        return (shape_key(self.shape) == shape_key(other.shape)
                and self.color == other.color
                and self.display_color == other.display_color)

    def __hash__(self):
        return hash((shape_key(self.shape), self.color, self.display_color))

    def __repr__(self):
        return f"Piece(shape={self.shape.tolist()}, color={self.color:#08x})"
