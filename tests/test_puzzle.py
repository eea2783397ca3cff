"""
Tests for puzzle introspection and piece lookup.
"""

import unittest

from tiling.errors import PieceNotFoundError
from tiling.pieces import Piece
from tiling.puzzle import Puzzle


def bar(length, color=0xF1955A):
    return Piece([[1] * length], color)


class TestPuzzle(unittest.TestCase):
    """Test derived puzzle values."""

    def test_valid_puzzle(self):
        puzzle = Puzzle(2, (bar(2), bar(2)))
        self.assertEqual(puzzle.cells, 4)
        self.assertEqual(puzzle.rows, 2)
        self.assertTrue(puzzle.is_valid())
        self.assertEqual(puzzle.missing_cells(), 0)

    def test_single_piece_is_invalid(self):
        puzzle = Puzzle(2, (Piece([[1, 1], [1, 1]], 1),))
        self.assertFalse(puzzle.is_valid())
        self.assertEqual(puzzle.missing_cells(), 2)

    def test_incomplete_row(self):
        puzzle = Puzzle(5, (bar(3), bar(4)))
        self.assertEqual(puzzle.rows, 1)
        self.assertFalse(puzzle.is_valid())
        self.assertEqual(puzzle.missing_cells(), 3)

    def test_pieces_stored_as_tuple(self):
        puzzle = Puzzle(2, [bar(2), bar(2)])
        self.assertIsInstance(puzzle.pieces, tuple)

    def test_columns_must_be_positive(self):
        with self.assertRaises(ValueError):
            Puzzle(0, (bar(2), bar(2)))

    def test_piece_lookup(self):
        first, second = bar(2, 1), bar(3, 2)
        puzzle = Puzzle(5, (first, second))
        self.assertEqual(puzzle.piece_ids(), [0, 1])
        self.assertIs(puzzle.piece(1), second)
        self.assertIsNone(puzzle.piece(2))
        self.assertIsNone(puzzle.piece(-1))

    def test_subset(self):
        pieces = (bar(1, 1), bar(2, 2), bar(3, 3))
        puzzle = Puzzle(3, pieces)
        subset = puzzle.subset([1, 0])
        self.assertEqual(subset.columns, 3)
        self.assertEqual(subset.pieces, (pieces[1], pieces[0]))
        self.assertTrue(subset.is_valid())

    def test_subset_unknown_piece(self):
        puzzle = Puzzle(3, (bar(1), bar(2)))
        with self.assertRaises(PieceNotFoundError):
            puzzle.subset([0, 5])


if __name__ == "__main__":
    unittest.main()
