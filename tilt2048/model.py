"""Game state and the tilt rules.

Coordinates are (col, row) with (0, 0) at the lower-left corner, like (x, y).
Every tilt is run as a tilt toward NORTH: the board's viewing perspective is
switched to the requested side, the north-bound algorithm runs, and the
perspective goes back to NORTH.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .board import Board
from .config import DEFAULT_MAX_PIECE, resolve_board_size, resolve_max_piece
from .side import Side
from .tile import Tile, is_tile_value

logger = logging.getLogger(__name__)

MAX_PIECE = DEFAULT_MAX_PIECE

Observer = Callable[["Model"], None]


def empty_space_exists(board: Board) -> bool:
    return bool(np.any(board.values() == 0))


def max_tile_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    return bool(np.any(board.values() == max_piece))


def _equal_neighbours(values: np.ndarray) -> bool:
    along_cols = (values[:, 1:] == values[:, :-1]) & (values[:, 1:] != 0)
    along_rows = (values[1:, :] == values[:-1, :]) & (values[1:, :] != 0)
    return bool(along_cols.any() or along_rows.any())


def at_least_one_move_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """True if the board has an empty cell (and no winning tile yet), or
    two orthogonally adjacent tiles of the same value."""
    if empty_space_exists(board) and not max_tile_exists(board, max_piece):
        return True
    return _equal_neighbours(board.values())


class Model:
    """The state of one game: board, score, max score and game-over flag."""

    def __init__(self, size: Optional[int] = None, max_piece: Optional[int] = None) -> None:
        self._board = Board(resolve_board_size() if size is None else size)
        if max_piece is None:
            max_piece = resolve_max_piece()
        elif not is_tile_value(max_piece):
            raise ValueError(f"max_piece must be a power of two, got {max_piece!r}")
        self._max_piece = max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._observers: List[Observer] = []
        self._changed = False

    @classmethod
    def from_values(
        cls,
        values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        max_piece: Optional[int] = None,
    ) -> "Model":
        """Rebuild a game from a ``values[col][row]`` snapshot (0 = empty)."""
        if score < 0 or max_score < 0:
            raise ValueError(f"Scores must be non-negative, got {score} and {max_score}")
        board = Board.from_values(values)
        model = cls(board.size, max_piece)
        model._board = board
        model._score = score
        model._max_score = max_score
        model._check_game_over()
        return model

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def max_score(self) -> int:
        """Best score so far; only updated once a game is over."""
        return self._max_score

    @property
    def max_piece(self) -> int:
        return self._max_piece

    @property
    def game_over(self) -> bool:
        return self._game_over

    def tile(self, col: int, row: int) -> Optional[Tile]:
        return self._board.tile(col, row)

    def values(self) -> np.ndarray:
        return self._board.values()

    def copy(self) -> "Model":
        return type(self).from_values(self.values(), self._score, self._max_score, self._max_piece)

    def clear(self) -> None:
        """Empty the board and reset the score. The max score is kept."""
        self._score = 0
        self._game_over = False
        self._board.clear()
        self._set_changed()

    def add_tile(self, value: int, col: int, row: int) -> None:
        """Put a new tile on an empty cell. Spawning policy belongs to the caller."""
        self._board.add_tile(Tile.create(value, col, row))
        self._check_game_over()
        self._set_changed()

    def tilt(self, side: Union[Side, str]) -> bool:
        """Tilt the board toward SIDE and return True if any tile moved or merged.

        1. Two tiles adjacent in the direction of motion with the same value
           merge into one tile of twice the value, and that value is added
           to the score.
        2. A tile produced by a merge does not merge again on the same tilt.
        3. Of three equal tiles in a line, the leading two merge and the
           trailing one does not.
        """
        side = Side.parse(side)
        before = self._board.values()
        self._board.set_viewing_perspective(side)
        try:
            self._compact()
            gain = self._merge()
        finally:
            self._board.set_viewing_perspective(Side.NORTH)

        changed = not np.array_equal(before, self._board.values())
        self._score += gain
        logger.debug("tilt %s: changed=%s gain=%d score=%d", side.name, changed, gain, self._score)

        self._check_game_over()
        if changed:
            self._set_changed()
        return changed

    def _compact(self) -> None:
        # [_, 2, _, 2] -> [_, _, 2, 2] toward the top, no merging yet.
        board = self._board
        top = board.size - 1
        for col in range(board.size):
            for row in range(top - 1, -1, -1):
                tile = board.tile(col, row)
                if tile is None:
                    continue
                dest = row
                while dest < top and board.tile(col, dest + 1) is None:
                    dest += 1
                board.move(col, dest, tile)

    def _merge(self) -> int:
        # [_, 2, 2, 2] -> [_, 2, _, 4] -> [_, _, 2, 4]
        board = self._board
        top = board.size - 1
        gain = 0
        for col in range(board.size):
            for row in range(top - 1, -1, -1):
                tile = board.tile(col, row)
                if tile is None:
                    continue
                dest = row
                closed_gap = False
                # A gap above means the tile above was just merged.
                while dest < top and board.tile(col, dest + 1) is None:
                    dest += 1
                    closed_gap = True
                if not closed_gap and dest < top and board.tile(col, dest + 1).value == tile.value:
                    dest += 1
                    gain += 2 * tile.value
                board.move(col, dest, tile)
        return gain

    def _check_game_over(self) -> None:
        was_over = self._game_over
        self._game_over = (
            max_tile_exists(self._board, self._max_piece)
            or not at_least_one_move_exists(self._board, self._max_piece)
        )
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
            if not was_over:
                logger.info("Game over: score=%d max=%d", self._score, self._max_score)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def has_changed(self) -> bool:
        return self._changed

    def _set_changed(self) -> None:
        self._changed = True

    def notify_observers(self) -> None:
        """Call every observer with this model if it changed since the last call."""
        if not self._changed:
            return
        self._changed = False
        for observer in list(self._observers):
            observer(self)

    def __str__(self) -> str:
        lines = ["", "["]
        for row in range(self.size - 1, -1, -1):
            cells = []
            for col in range(self.size):
                tile = self.tile(col, row)
                cells.append("|    " if tile is None else f"|{tile.value:4d}")
            lines.append("".join(cells) + "|")
        over = "over" if self.game_over else "not over"
        lines.append(f"] {self.score} (max: {self.max_score}) (game is {over}) ")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Model(size={self.size}, score={self.score}, max_score={self.max_score}, game_over={self.game_over})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            np.array_equal(self.values(), other.values())
            and self._score == other._score
            and self._max_score == other._max_score
            and self._game_over == other._game_over
        )

    __hash__ = None  # type: ignore[assignment]


def simulate_tilt(model: Model, side: Union[Side, str]) -> Tuple[Model, bool]:
    """Tilt a copy of MODEL, leaving MODEL itself untouched."""
    preview = model.copy()
    changed = preview.tilt(side)
    return preview, changed


def valid_moves(model: Model) -> List[Side]:
    return [side for side in Side if simulate_tilt(model, side)[1]]


__all__ = [
    "MAX_PIECE",
    "Model",
    "at_least_one_move_exists",
    "empty_space_exists",
    "max_tile_exists",
    "simulate_tilt",
    "valid_moves",
]
