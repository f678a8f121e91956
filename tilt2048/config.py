import os

from .tile import is_tile_value

DEFAULT_SIZE = 4
DEFAULT_MAX_PIECE = 2048

SIZE_ENV = "TILT2048_SIZE"
MAX_PIECE_ENV = "TILT2048_MAX_PIECE"
LOG_LEVEL_ENV = "TILT2048_LOG_LEVEL"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def resolve_board_size() -> int:
    size = _int_from_env(SIZE_ENV, DEFAULT_SIZE)
    if size < 2:
        raise ValueError(f"{SIZE_ENV} must be at least 2, got {size}")
    return size


def resolve_max_piece() -> int:
    """Winning tile value; reaching it ends the game."""
    max_piece = _int_from_env(MAX_PIECE_ENV, DEFAULT_MAX_PIECE)
    if max_piece < 4 or not is_tile_value(max_piece):
        raise ValueError(f"{MAX_PIECE_ENV} must be a power of two >= 4, got {max_piece}")
    return max_piece


def resolve_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()


__all__ = [
    "DEFAULT_MAX_PIECE",
    "DEFAULT_SIZE",
    "resolve_board_size",
    "resolve_log_level",
    "resolve_max_piece",
]
