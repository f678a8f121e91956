"""Tests for Side transforms, parsing and tiles."""

import unittest

from tilt2048.side import DIRECTION_NAMES, Side
from tilt2048.tile import Tile, is_tile_value


class SideTransformTests(unittest.TestCase):
    """Each perspective is a rotation of the grid."""

    def test_transforms_are_permutations_of_the_grid(self) -> None:
        n = 4
        cells = {(c, r) for c in range(n) for r in range(n)}
        for side in Side:
            with self.subTest(side=side):
                mapped = {(side.col(c, r, n), side.row(c, r, n)) for c, r in cells}
                self.assertEqual(mapped, cells)

    def test_increasing_logical_row_walks_toward_the_side(self) -> None:
        n = 4
        step = {
            Side.NORTH: (0, 1),
            Side.EAST: (1, 0),
            Side.SOUTH: (0, -1),
            Side.WEST: (-1, 0),
        }
        for side, (dc, dr) in step.items():
            with self.subTest(side=side):
                start = (side.col(1, 1, n), side.row(1, 1, n))
                nxt = (side.col(1, 2, n), side.row(1, 2, n))
                self.assertEqual((nxt[0] - start[0], nxt[1] - start[1]), (dc, dr))


class SideParseTests(unittest.TestCase):
    def test_names_and_aliases(self) -> None:
        self.assertIs(Side.parse(Side.EAST), Side.EAST)
        self.assertIs(Side.parse("north"), Side.NORTH)
        self.assertEqual(
            [Side.parse(name) for name in DIRECTION_NAMES],
            [Side.NORTH, Side.EAST, Side.SOUTH, Side.WEST],
        )
        self.assertIs(Side.parse(" down "), Side.SOUTH)

    def test_unknown_direction(self) -> None:
        with self.assertRaises(ValueError):
            Side.parse("UPWARD")


class TileTests(unittest.TestCase):
    def test_values_must_be_powers_of_two(self) -> None:
        self.assertTrue(is_tile_value(2))
        self.assertTrue(is_tile_value(2048))
        self.assertFalse(is_tile_value(1))
        self.assertFalse(is_tile_value(6))
        with self.assertRaises(ValueError):
            Tile.create(0, 0, 0)

    def test_move_and_merge_return_new_tiles(self) -> None:
        tile = Tile.create(4, 0, 0)

        self.assertEqual(tile.move(0, 3), Tile(4, 0, 3))
        self.assertEqual(tile.merge(0, 3, Tile(4, 0, 3)), Tile(8, 0, 3))
        self.assertEqual(tile, Tile(4, 0, 0))
        with self.assertRaises(ValueError):
            tile.merge(0, 3, Tile(8, 0, 3))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
