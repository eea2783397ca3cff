"""
Basic tests for bitboard helpers.
"""

import unittest

from tiling.bitboard import (
    MASK_WIDTH, check_capacity, coord_to_bit, coord_to_index, coords_to_mask,
    full_mask, index_to_coord, mask_to_coords
)
from tiling.errors import BoardCapacityError


class TestBitboardUtilities(unittest.TestCase):
    """Test bitboard utility functions."""

    def test_coord_to_index(self):
        """Indexes are row-major for the given board width."""
        self.assertEqual(coord_to_index(0, 0, 5), 0)
        self.assertEqual(coord_to_index(0, 1, 5), 1)
        self.assertEqual(coord_to_index(1, 0, 5), 5)
        self.assertEqual(coord_to_index(2, 3, 4), 11)

    def test_index_to_coord(self):
        self.assertEqual(index_to_coord(0, 5), (0, 0))
        self.assertEqual(index_to_coord(5, 5), (1, 0))
        self.assertEqual(index_to_coord(11, 4), (2, 3))

    def test_coord_to_bit(self):
        self.assertEqual(coord_to_bit(0, 0, 3), 1)
        self.assertEqual(coord_to_bit(1, 1, 3), 1 << 4)

    def test_coords_to_mask(self):
        """A bar at (1, 1) on a 3x3 board sets bits 4 and 5."""
        mask = coords_to_mask([(1, 1), (1, 2)], 3)
        self.assertEqual(mask, (1 << 4) | (1 << 5))

    def test_mask_to_coords(self):
        coords = [(0, 0), (0, 1), (1, 0)]
        mask = coords_to_mask(coords, 2)
        self.assertEqual(set(mask_to_coords(mask, 2)), set(coords))
        self.assertEqual(mask_to_coords(0, 2), [])

    def test_full_mask(self):
        self.assertEqual(full_mask(4), 0b1111)
        self.assertEqual(full_mask(MASK_WIDTH), (1 << 64) - 1)


class TestCapacity(unittest.TestCase):
    """Test the 64-cell board limit."""

    def test_within_capacity(self):
        check_capacity(64)
        check_capacity(4, max_cells=4)

    def test_over_capacity(self):
        with self.assertRaises(BoardCapacityError) as ctx:
            check_capacity(65)
        self.assertEqual(ctx.exception.cells, 65)
        self.assertEqual(ctx.exception.max_cells, 64)

    def test_custom_limit(self):
        with self.assertRaises(BoardCapacityError):
            check_capacity(5, max_cells=4)


if __name__ == "__main__":
    unittest.main()
