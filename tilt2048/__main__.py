'''Manual harness: python -m tilt2048 prints a sample board and what each tilt does.'''

import logging

import numpy as np

from .config import resolve_log_level
from .model import Model, simulate_tilt, valid_moves
from .side import Side

# Rows as drawn on screen, top row first.
SAMPLE = [
    [2, 0, 0, 2],
    [4, 4, 0, 0],
    [0, 0, 8, 8],
    [16, 0, 16, 0],
]


def main() -> None:
    logging.basicConfig(level=resolve_log_level(), format="%(levelname)s %(name)s: %(message)s")
    # values[col][row] with row 0 at the bottom
    model = Model.from_values(np.flipud(np.array(SAMPLE)).T)
    print(model)
    print("Valid moves:", [side.name for side in valid_moves(model)])
    for side in Side:
        preview, changed = simulate_tilt(model, side)
        print(f"After {side.name} (changed={changed}):")
        print(preview)


if __name__ == "__main__":
    main()
