"""
Tests for color tagging and piece identity lookup.
"""

import unittest

import numpy as np

from tiling.colors import (
    cells_by_piece, piece_index_at, split_color, tag_color, to_rgb
)
from tiling.errors import PieceIdOverflowError


class TestColorTagging(unittest.TestCase):

    def test_tag_color(self):
        self.assertEqual(tag_color(0x36B0EA, 0), 0x36B0EA | (1 << 24))
        self.assertEqual(tag_color(0, 254), 0xFF << 24)

    def test_tag_overflow(self):
        with self.assertRaises(PieceIdOverflowError):
            tag_color(0x36B0EA, 255)
        with self.assertRaises(OverflowError):
            tag_color(0x36B0EA, 1000)

    def test_tag_rejects_wide_color(self):
        with self.assertRaises(ValueError):
            tag_color(0x1000000, 0)

    def test_split_color(self):
        self.assertEqual(split_color(tag_color(0xABCDEF, 4)), (5, 0xABCDEF))
        self.assertEqual(split_color(0), (None, 0))

    def test_to_rgb(self):
        self.assertEqual(to_rgb(0xF1955A), (0xF1, 0x95, 0x5A))
        self.assertEqual(to_rgb(tag_color(0xF1955A, 3)), (0xF1, 0x95, 0x5A))

    def test_same_color_pieces_distinguishable(self):
        grid = np.array([[tag_color(0x111111, 0), tag_color(0x111111, 1)],
                         [0, tag_color(0x111111, 1)]], dtype=np.int64)
        self.assertEqual(piece_index_at(grid, 0, 0), 0)
        self.assertEqual(piece_index_at(grid, 0, 1), 1)
        self.assertIsNone(piece_index_at(grid, 1, 0))
        self.assertEqual(cells_by_piece(grid), {0: 1, 1: 2})


if __name__ == "__main__":
    unittest.main()
