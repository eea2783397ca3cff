"""
Tests for the named piece catalog.
"""

import unittest

from tiling.catalog import CATALOG, PieceName, game_with_all_pieces, sample_game
from tiling.errors import BoardCapacityError
from tiling.resolver import GameResolver
from tiling.variants import piece_variants


class TestCatalog(unittest.TestCase):

    def test_cell_counts_match_names(self):
        """The trailing number of each name is the piece's cell count."""
        for name in PieceName:
            expected = int(name.name.rsplit("_", 1)[1])
            self.assertEqual(name.piece().cells, expected, name.name)

    def test_catalog_mapping(self):
        self.assertEqual(len(CATALOG), 16)
        self.assertEqual(CATALOG["VIOLET_SQUARE_4"].color, 0xA36FAD)
        self.assertEqual(len(piece_variants(CATALOG["VIOLET_SQUARE_4"].shape)), 1)
        self.assertEqual(len(piece_variants(CATALOG["PINK_BAR_4"].shape)), 2)

    def test_sample_game(self):
        puzzle = sample_game()
        self.assertEqual(len(puzzle.pieces), 7)
        self.assertEqual(puzzle.cells, 25)
        self.assertEqual(puzzle.rows, 5)
        self.assertTrue(puzzle.is_valid())

    def test_game_with_all_pieces(self):
        puzzle = game_with_all_pieces()
        self.assertEqual(len(puzzle.pieces), 18)
        self.assertEqual(puzzle.cells, 67)
        self.assertFalse(puzzle.is_valid())
        self.assertEqual(puzzle.missing_cells(), 3)
        with self.assertRaises(BoardCapacityError):
            GameResolver().solve(puzzle)

    def test_small_game_from_box(self):
        """A subset of the box pieces can be solved on its own."""
        box = game_with_all_pieces()
        # 2-bar, 2-bar, 3-bar, 3-cell L: 10 cells on 5 columns
        puzzle = box.subset([2, 3, 5, 4])
        self.assertTrue(puzzle.is_valid())
        resolver = GameResolver()
        self.assertEqual(resolver.solve_count(puzzle), len(resolver.solve(puzzle)))


if __name__ == "__main__":
    unittest.main()
