from __future__ import annotations

from .grid import hits_snake, out_of_bounds
from .state import DIRECTIONS, add_vectors, is_reverse

APPROACH_BASE = 1000
ALIGN_BONUS = 500


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def candidate_directions(direction: tuple[int, int]) -> list[tuple[int, int]]:
    # Evaluation order up, down, right, left decides ties.
    return [d for d in DIRECTIONS if not is_reverse(d, direction)]


def score_move(cell: tuple[int, int], move: tuple[int, int], target: tuple[int, int]) -> int:
    score = APPROACH_BASE - manhattan(cell, target)
    dx, dy = move
    if dx == 1 and cell[0] < target[0] or dx == -1 and cell[0] > target[0]:
        score += ALIGN_BONUS
    elif dy == 1 and cell[1] < target[1] or dy == -1 and cell[1] > target[1]:
        score += ALIGN_BONUS
    return score


def choose_direction(
    head: tuple[int, int],
    direction: tuple[int, int],
    snake,
    target: tuple[int, int],
) -> tuple[int, int] | None:
    """Greedy one-step steer toward target.

    A move is unsafe if it leaves the board or lands on any cell of the
    current snake, tail included. Returns None when nothing is safe.
    """
    best = None
    best_score = None
    for move in candidate_directions(direction):
        cell = add_vectors(head, move)
        if out_of_bounds(cell) or hits_snake(cell, snake):
            continue
        score = score_move(cell, move, target)
        if best_score is None or score > best_score:
            best, best_score = move, score
    return best
