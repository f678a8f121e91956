"""Rules engine for the 2048 sliding-tile puzzle."""

from .board import Board
from .model import (
    MAX_PIECE,
    Model,
    at_least_one_move_exists,
    empty_space_exists,
    max_tile_exists,
    simulate_tilt,
    valid_moves,
)
from .side import DIRECTION_NAMES, Side
from .tile import Tile

__all__ = [
    "Board",
    "DIRECTION_NAMES",
    "MAX_PIECE",
    "Model",
    "Side",
    "Tile",
    "at_least_one_move_exists",
    "empty_space_exists",
    "max_tile_exists",
    "simulate_tilt",
    "valid_moves",
]
