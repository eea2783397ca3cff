"""
Catalog of the Gagne Ton Papa pieces.

https://www.gigamic-adds.com/game/gagne-ton-papa
"""

from enum import Enum
from typing import Dict

from .pieces import Piece
from .puzzle import Puzzle


class PieceName(Enum):
    """Named pieces of the box set: (shape, color)."""
    RED_SQUARE_1 = ([[1]], 0xDA0022)
    TAN_BAR_2 = ([[1], [1]], 0xF1955A)
    BROWN_L_3 = ([[1, 0], [1, 1]], 0x571C11)
    ORANGE_BAR_3 = ([[1], [1], [1]], 0xEB700F)
    PINK_BAR_4 = ([[1], [1], [1], [1]], 0xE16BA4)
    GREEN_L_4 = ([[1, 0], [1, 0], [1, 1]], 0x8DC69E)
    BLUE_T_4 = ([[1, 0], [1, 1], [1, 0]], 0x36B0EA)
    YELLOW_ZIGZAG_4 = ([[0, 1], [1, 1], [1, 0]], 0xFEDA3C)
    VIOLET_SQUARE_4 = ([[1, 1], [1, 1]], 0xA36FAD)
    ORANGE_L_5 = ([[1, 0], [1, 0], [1, 0], [1, 1]], 0xE06000)
    BROWN_T_5 = ([[0, 1], [1, 1], [0, 1], [0, 1]], 0x570C01)
    VIOLET_ZIGZAG_5 = ([[0, 1], [0, 1], [1, 1], [1, 0]], 0x036F0D)
    BLUE_L_5 = ([[1, 0, 0], [1, 0, 0], [1, 1, 1]], 0x063679)
    PINK_NOT_SQUARE_5 = ([[0, 1], [1, 1], [1, 1]], 0xE00BA4)
    YELLOW_U_5 = ([[1, 1], [1, 0], [1, 1]], 0xEECA2C)
    BLUE_S_5 = ([[0, 1, 1], [0, 1, 0], [1, 1, 0]], 0x26A0EA)

    def piece(self) -> Piece:
        shape, color = self.value
        return Piece(shape, color)


CATALOG: Dict[str, Piece] = {name.name: name.piece() for name in PieceName}

BOARD_COLUMNS = 5


def game_with_all_pieces() -> Puzzle:
    """The full box: every piece, with the square and the 2-bar twice."""
    names = [
        PieceName.RED_SQUARE_1,
        PieceName.RED_SQUARE_1,
        PieceName.TAN_BAR_2,
        PieceName.TAN_BAR_2,
        PieceName.BROWN_L_3,
        PieceName.ORANGE_BAR_3,
        PieceName.PINK_BAR_4,
        PieceName.GREEN_L_4,
        PieceName.BLUE_T_4,
        PieceName.YELLOW_ZIGZAG_4,
        PieceName.VIOLET_SQUARE_4,
        PieceName.ORANGE_L_5,
        PieceName.BROWN_T_5,
        PieceName.VIOLET_ZIGZAG_5,
        PieceName.BLUE_L_5,
        PieceName.PINK_NOT_SQUARE_5,
        PieceName.YELLOW_U_5,
        PieceName.BLUE_S_5,
    ]
    return Puzzle(BOARD_COLUMNS, tuple(name.piece() for name in names))


def sample_game() -> Puzzle:
    """A 5x5 puzzle made of seven pieces."""
    names = [
        PieceName.RED_SQUARE_1,
        PieceName.ORANGE_BAR_3,
        PieceName.BROWN_L_3,
        PieceName.YELLOW_ZIGZAG_4,
        PieceName.BLUE_T_4,
        PieceName.BLUE_S_5,
        PieceName.ORANGE_L_5,
    ]
    return Puzzle(BOARD_COLUMNS, tuple(name.piece() for name in names))
