"""
Exception types raised by the tiling engine.

Invalid puzzles (cell-count mismatch, fewer than two pieces) are not errors:
the solver simply returns no solutions for them.
"""


class TilingError(Exception):
    """Base class for tiling engine errors."""


class BoardCapacityError(TilingError):
    """The board has more cells than a bit mask can represent."""

    def __init__(self, cells: int, max_cells: int):
        self.cells = cells
        self.max_cells = max_cells
        super().__init__(
            f"Board of {cells} cells exceeds the {max_cells}-cell bit mask capacity"
        )


class PieceIdOverflowError(TilingError, OverflowError):
    """Too many pieces to fit their identifiers into the color tag bits."""


class PieceNotFoundError(TilingError, LookupError):
    """A piece index does not exist in the puzzle."""


class SearchCancelled(TilingError):
    """The caller cancelled a running search."""
