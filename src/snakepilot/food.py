from __future__ import annotations

import random

from . import config


def spawn_food(snake, rng=random) -> tuple[int, int]:
    """Uniform random free cell.

    Rejection sampling with no retry limit: a board with no free cell never
    returns.
    """
    occupied = set(snake)
    while True:
        pos = (rng.randrange(config.TILE_COUNT), rng.randrange(config.TILE_COUNT))
        if pos not in occupied:
            return pos
