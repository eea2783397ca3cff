"""
Rotation and reflection variants of piece shapes.
"""

from typing import List, Tuple

import numpy as np

from .pieces import Piece, shape_key


def rotate(shape: np.ndarray) -> np.ndarray:
    """
    Rotate a shape 90 degrees clockwise.

    Row i of the input becomes column i counted from the last, i.e. the
    input rows are laid out right to left as columns.
    """
    return np.rot90(shape, k=-1)


def piece_variants(shape: np.ndarray) -> List[np.ndarray]:
    """
    Get all distinct orientations of a shape.

    The eight candidates are the four clockwise rotations of the shape and
    the four rotations of its transpose. Candidates that are structurally
    equal (same dimensions, same cells) collapse to one.

    Args:
        shape: 2D occupancy grid

    Returns:
        Unique orientations sorted by (rows, cols, cells) so that the order
        is reproducible across calls
    """
    candidates = [shape]
    for _ in range(3):
        candidates.append(rotate(candidates[-1]))

    candidates.append(shape.T)
    for _ in range(3):
        candidates.append(rotate(candidates[-1]))

    unique = {}
    for candidate in candidates:
        unique.setdefault(shape_key(candidate), candidate)

    variants = []
    for key in sorted(unique):
        variant = np.ascontiguousarray(unique[key])
        variant.setflags(write=False)
        variants.append(variant)
    return variants


def variants_of(piece: Piece) -> List[Piece]:
    """Clone a piece once per distinct orientation of its shape."""
    return [piece.with_shape(variant) for variant in piece_variants(piece.shape)]


def canonical_key(piece: Piece) -> Tuple:
    """
    Identity of a piece up to rotation and reflection.

    Two pieces with the same key are interchangeable on a board.
    """
    return (shape_key(piece_variants(piece.shape)[0]), piece.color, piece.display_color)
