"""Board storage for the tilt engine.

Tiles live in a ``(size, size)`` numpy object array indexed ``[col][row]`` in
the NORTH frame, with row 0 at the bottom. Every read and write goes through
the current viewing perspective, so the engine can treat any side as north.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .side import Side
from .tile import Tile, is_tile_value

logger = logging.getLogger(__name__)


class Board:
    """An N×N grid of optional tiles seen through a Side perspective."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._grid = np.full((size, size), None, dtype=object)
        self._perspective = Side.NORTH

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]]) -> "Board":
        """Build a board from a ``values[col][row]`` grid, 0 meaning empty."""
        arr = np.array(values)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Expected a square grid, received shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Expected integer tile values, received dtype {arr.dtype}")
        arr = arr.astype(np.int64)
        board = cls(arr.shape[0])
        for col, row in zip(*np.nonzero(arr)):
            value = int(arr[col, row])
            if not is_tile_value(value):
                raise ValueError(f"Invalid tile value {value} at ({col}, {row})")
            board.add_tile(Tile.create(value, int(col), int(row)))
        return board

    @property
    def size(self) -> int:
        return self._size

    @property
    def perspective(self) -> Side:
        return self._perspective

    def set_viewing_perspective(self, side: Side) -> None:
        """Route later tile() and move() calls through SIDE's frame."""
        if side is not self._perspective:
            logger.debug("Viewing perspective %s -> %s", self._perspective.name, side.name)
        self._perspective = side

    def _check_range(self, col: int, row: int) -> None:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise IndexError(f"Cell ({col}, {row}) outside a {self._size}x{self._size} board")

    def _physical(self, col: int, row: int):
        self._check_range(col, row)
        side = self._perspective
        return side.col(col, row, self._size), side.row(col, row, self._size)

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """The tile at logical (COL, ROW), or None when the cell is empty."""
        return self._grid[self._physical(col, row)]

    def add_tile(self, tile: Tile) -> None:
        """Place TILE at its own physical position, which must be empty."""
        self._check_range(tile.col, tile.row)
        if self._grid[tile.col, tile.row] is not None:
            raise ValueError(f"Cell ({tile.col}, {tile.row}) is already occupied")
        self._grid[tile.col, tile.row] = tile

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Move TILE to logical (COL, ROW), vacating its old cell.

        Landing on another tile merges the two into one of double value and
        returns True. Moving a tile onto its own cell does nothing.
        """
        pcol, prow = self._physical(col, row)
        if (tile.col, tile.row) == (pcol, prow):
            return False
        target = self._grid[pcol, prow]
        if target is None:
            placed = tile.move(pcol, prow)
        else:
            placed = tile.merge(pcol, prow, target)
        self._grid[tile.col, tile.row] = None
        self._grid[pcol, prow] = placed
        return target is not None

    def clear(self) -> None:
        self._grid = np.full((self._size, self._size), None, dtype=object)
        self._perspective = Side.NORTH

    def values(self) -> np.ndarray:
        """Tile values as an int array indexed ``[col][row]``, 0 for empty."""
        return np.array(
            [[0 if t is None else t.value for t in column] for column in self._grid],
            dtype=np.int64,
        ).reshape(self._size, self._size)

    def copy(self) -> "Board":
        board = Board.from_values(self.values())
        board.set_viewing_perspective(self._perspective)
        return board


__all__ = ["Board"]
