from __future__ import annotations

import logging
import random

from . import config
from .autopilot import choose_direction
from .food import spawn_food
from .grid import hits_snake, out_of_bounds
from .state import Functor, InputMode, State, add_vectors, new_state

logger = logging.getLogger(__name__)


def advance_blink(state: State) -> State:
    return state._replace(blink=(state.blink + 1) % config.BLINK_PERIOD)


def steer(state: State) -> State:
    if state.mode is not InputMode.POINTER or state.target is None:
        return state
    new_dir = choose_direction(state.snake[0], state.direction, state.snake, state.target)
    if new_dir is None:
        return state
    return state._replace(direction=new_dir)


def record_high_score(state: State, persist=None) -> State:
    if state.score <= state.high_score:
        return state
    logger.info("New high score: %d", state.score)
    if persist is not None:
        persist(state.score)
    return state._replace(high_score=state.score)


def end_game(state: State, persist=None) -> State:
    logger.info("Game over with score %d", state.score)
    return record_high_score(state._replace(game_over=True), persist)


def move_snake(state: State, rng=random, persist=None) -> State:
    new_head = add_vectors(state.snake[0], state.direction)
    # Whole pre-move body counts, so stepping onto the tail cell ends the game.
    if out_of_bounds(new_head) or hits_snake(new_head, state.snake):
        return end_game(state, persist)

    new_snake = [new_head] + state.snake
    state = state._replace(heading=state.direction)
    if new_head != state.food:
        return state._replace(snake=new_snake[:-1])

    state = state._replace(snake=new_snake, score=state.score + config.FOOD_POINTS)
    state = record_high_score(state, persist)
    return state._replace(food=spawn_food(new_snake, rng))


def game_tick(state: State, rng=random, persist=None) -> State:
    if state.paused or state.game_over:
        return state
    return (
        Functor(state)
        .map(advance_blink)
        .map(steer)
        .map(lambda s: move_snake(s, rng, persist))
        .get()
    )


def reset(state: State, rng=random) -> State:
    return new_state(high_score=state.high_score, rng=rng)
