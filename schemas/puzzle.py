"""
Pydantic schemas for puzzle input and solver output.
"""

from typing import List, Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator

from tiling.pieces import Piece
from tiling.puzzle import Puzzle


class PieceSpec(BaseModel):
    """A piece as sent by a caller: occupancy rows and colors."""
    shape: List[List[int]] = Field(..., min_length=1, description="Rows of 0/1 cells")
    color: int = Field(..., ge=0, le=0xFFFFFF, description="24-bit RGB fill color")
    display_color: Optional[int] = Field(default=None, ge=0, description="Secondary color for display")

    @field_validator("shape")
    @classmethod
    def check_shape(cls, shape: List[List[int]]) -> List[List[int]]:
        width = len(shape[0])
        if width == 0 or any(len(row) != width for row in shape):
            raise ValueError("shape rows must be non-empty and of equal length")
        if any(cell not in (0, 1) for row in shape for cell in row):
            raise ValueError("shape cells must be 0 or 1")
        if not any(cell for row in shape for cell in row):
            raise ValueError("shape must have at least one occupied cell")
        return shape

    def to_piece(self) -> Piece:
        return Piece(self.shape, self.color, self.display_color)


class PuzzleSpec(BaseModel):
    """Board width and the ordered list of pieces."""
    columns: int = Field(..., ge=1, description="Board width in cells")
    pieces: List[PieceSpec]

    class Config:
        json_schema_extra = {
            "example": {
                "columns": 2,
                "pieces": [
                    {"shape": [[1, 1]], "color": 0xF1955A},
                    {"shape": [[1, 1]], "color": 0xEB700F}
                ]
            }
        }

    def to_puzzle(self) -> Puzzle:
        return Puzzle(self.columns, tuple(spec.to_piece() for spec in self.pieces))


class PageRequest(BaseModel):
    """Which page of solutions to return."""
    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, ge=1)


class PuzzleSummary(BaseModel):
    """Introspection of a puzzle before solving it."""
    is_valid: bool
    rows: int
    columns: int
    cells: int
    missing_cells: int

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "PuzzleSummary":
        return cls(
            is_valid=puzzle.is_valid(),
            rows=puzzle.rows,
            columns=puzzle.columns,
            cells=puzzle.cells,
            missing_cells=puzzle.missing_cells(),
        )


class SolutionPage(BaseModel):
    """A page of solution grids; each cell holds a tagged color or 0."""
    page_index: int
    page_size: int
    solutions: List[List[List[int]]]

    @classmethod
    def from_grids(cls, page_index: int, page_size: int, grids: List[np.ndarray]) -> "SolutionPage":
        return cls(
            page_index=page_index,
            page_size=page_size,
            solutions=[grid.tolist() for grid in grids],
        )
