"""
Polyomino tiling solver.

This package contains the exact-cover engine, including:
- Piece shapes and puzzle definitions
- Rotation/reflection variants
- Placement enumeration as bit masks and colored patches
- The resolver (all solutions, solution count, paged solutions)
"""

from .catalog import CATALOG, PieceName, game_with_all_pieces, sample_game
from .colors import piece_index_at, split_color, tag_color
from .config import SolverConfig
from .errors import (
    BoardCapacityError, PieceIdOverflowError, PieceNotFoundError,
    SearchCancelled, TilingError
)
from .pieces import Piece
from .placements import Placement, generate_placements, piece_placements
from .puzzle import Puzzle
from .resolver import GameResolver
from .variants import piece_variants, variants_of

__all__ = [
    'Piece', 'Puzzle', 'Placement',
    'piece_variants', 'variants_of', 'generate_placements', 'piece_placements',
    'GameResolver', 'SolverConfig',
    'tag_color', 'split_color', 'piece_index_at',
    'PieceName', 'CATALOG', 'game_with_all_pieces', 'sample_game',
    'TilingError', 'BoardCapacityError', 'PieceIdOverflowError',
    'PieceNotFoundError', 'SearchCancelled',
]
