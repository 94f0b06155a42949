from __future__ import annotations

import enum
import random
from collections import namedtuple

from . import config
from .food import spawn_food

State = namedtuple(
    "State",
    [
        "snake",
        "direction",
        "heading",
        "food",
        "score",
        "high_score",
        "paused",
        "game_over",
        "mode",
        "target",
        "blink",
    ],
)
# snake: list[(x, y)], head is first element.
# direction: (dx, dy) to apply on the next move.
# heading: (dx, dy) applied on the last move.
# food: (x, y)
# target: (x, y) pointer cell, or None.
# blink: food pulse counter, 0 <= blink < BLINK_PERIOD.

UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
DIRECTIONS = (UP, DOWN, RIGHT, LEFT)


class InputMode(enum.Enum):
    NORMAL = "normal"
    ACCELERATED = "accelerated"
    POINTER = "pointer"


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def is_reverse(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return add_vectors(a, b) == (0, 0)


def new_state(high_score: int = 0, rng=random, paused: bool = False) -> State:
    snake = [config.START_POS]
    return State(
        snake=snake,
        direction=config.START_DIRECTION,
        heading=config.START_DIRECTION,
        food=spawn_food(snake, rng),
        score=0,
        high_score=high_score,
        paused=paused,
        game_over=False,
        mode=InputMode.NORMAL,
        target=None,
        blink=0,
    )


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
