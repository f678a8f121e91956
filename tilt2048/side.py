"""The four sides a board can be tilted toward."""

from enum import Enum
from typing import Dict, Sequence, Union

DIRECTION_NAMES: Sequence[str] = ("UP", "RIGHT", "DOWN", "LEFT")


class Side(Enum):
    """A side of the board, doubling as a viewing perspective.

    Each member carries ``(col0, row0, dcol, drow)``. Under a perspective the
    logical cell ``(c, r)`` lives at physical ``(col(c, r, n), row(c, r, n))``
    so that increasing the logical row always walks toward this side.
    """

    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0: int, row0: int, dcol: int, drow: int) -> None:
        self.col0 = col0
        self.row0 = row0
        self.dcol = dcol
        self.drow = drow

    def col(self, c: int, r: int, size: int) -> int:
        return self.col0 * (size - 1) + c * self.drow + r * self.dcol

    def row(self, c: int, r: int, size: int) -> int:
        return self.row0 * (size - 1) - c * self.dcol + r * self.drow

    @classmethod
    def parse(cls, value: Union["Side", str]) -> "Side":
        """Accept a Side, its name, or one of UP/RIGHT/DOWN/LEFT (any case)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown direction: {value}")


_ALIASES: Dict[str, Side] = dict(
    zip(DIRECTION_NAMES, (Side.NORTH, Side.EAST, Side.SOUTH, Side.WEST))
)


__all__ = ["DIRECTION_NAMES", "Side"]
