"""
Puzzle definition: a board width and the ordered list of pieces to place.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import PieceNotFoundError
from .pieces import Piece


@dataclass(frozen=True)
class Puzzle:
    """
    A tiling puzzle.

    The board has ``columns`` columns and as many rows as the pieces' total
    cell count allows. A puzzle whose cells do not fill whole rows, or that
    has fewer than two pieces, is invalid and has no solution.
    """
    columns: int
    pieces: Tuple[Piece, ...]

    def __post_init__(self):
        if self.columns < 1:
            raise ValueError(f"Puzzle needs at least one column, got {self.columns}")
        object.__setattr__(self, "pieces", tuple(self.pieces))

    @property
    def cells(self) -> int:
        """Total number of piece cells."""
        return sum(piece.cells for piece in self.pieces)

    @property
    def rows(self) -> int:
        return self.cells // self.columns

    def is_valid(self) -> bool:
        return self.cells == self.rows * self.columns and len(self.pieces) > 1

    def missing_cells(self) -> int:
        """Number of cells still needed to complete the next full row."""
        if self.is_valid():
            return 0
        return (self.rows + 1) * self.columns - self.cells

    def piece_ids(self) -> List[int]:
        return list(range(len(self.pieces)))

    def piece(self, piece_id: int) -> Optional[Piece]:
        """Get a piece by its index, or None if there is no such piece."""
        if 0 <= piece_id < len(self.pieces):
            return self.pieces[piece_id]
        return None

    def subset(self, piece_ids: Iterable[int]) -> "Puzzle":
        """
        Build a puzzle with the same width from a selection of pieces.

        Raises:
            PieceNotFoundError: if an index does not exist
        """
        pieces = []
        for piece_id in piece_ids:
            piece = self.piece(piece_id)
            if piece is None:
                raise PieceNotFoundError(f"No piece with id {piece_id} (puzzle has {len(self.pieces)})")
            pieces.append(piece)
        return Puzzle(self.columns, tuple(pieces))
