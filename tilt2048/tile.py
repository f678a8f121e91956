from dataclasses import dataclass


def is_tile_value(value: int) -> bool:
    """True for powers of two from 2 upward."""
    return isinstance(value, int) and value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """A numbered tile at a physical (NORTH-frame) column and row."""

    value: int
    col: int
    row: int

    def __post_init__(self) -> None:
        if not is_tile_value(self.value):
            raise ValueError(f"Tile value must be a power of two >= 2, got {self.value!r}")

    @classmethod
    def create(cls, value: int, col: int, row: int) -> "Tile":
        return cls(int(value), col, row)

    def move(self, col: int, row: int) -> "Tile":
        return Tile(self.value, col, row)

    def merge(self, col: int, row: int, other: "Tile") -> "Tile":
        """The tile left at (col, row) when this tile lands on OTHER."""
        if other.value != self.value:
            raise ValueError(f"Cannot merge {self.value} with {other.value}")
        return Tile(2 * self.value, col, row)


__all__ = ["Tile", "is_tile_value"]
