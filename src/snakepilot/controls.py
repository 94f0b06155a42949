from __future__ import annotations

import pygame

from .grid import pixel_to_cell
from .state import DOWN, LEFT, RIGHT, UP, InputMode, State, is_reverse

# pygame reports letter keys as lower-case codes whatever the shift state.
KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
}
PAUSE_KEY = pygame.K_SPACE


def select_mode(held, pointer_active: bool) -> InputMode:
    if pointer_active:
        return InputMode.POINTER
    if held:
        return InputMode.ACCELERATED
    return InputMode.NORMAL


class Controls:
    """Held-key and pointer tracking.

    Handlers take the current State and return one with updated
    direction, pause, mode and target. Snake and food are never touched.
    """

    def __init__(self):
        self.held: set[int] = set()
        self.pointer_active = False

    @property
    def mode(self) -> InputMode:
        return select_mode(self.held, self.pointer_active)

    def _sync(self, state: State) -> State:
        return state._replace(mode=self.mode)

    def key_down(self, state: State, key: int) -> State:
        new_dir = KEY_DIRECTIONS.get(key)
        if new_dir is not None:
            self.held.add(key)
            if not state.game_over and not is_reverse(new_dir, state.heading):
                state = state._replace(direction=new_dir)
        elif key == PAUSE_KEY:
            state = self.toggle_pause(state)
        return self._sync(state)

    def key_up(self, state: State, key: int) -> State:
        self.held.discard(key)
        return self._sync(state)

    def pointer_move(self, state: State, pos: tuple[int, int]) -> State:
        cell = pixel_to_cell(pos)
        if cell is None:
            return self.pointer_leave(state)
        self.pointer_active = True
        return self._sync(state._replace(target=cell))

    def pointer_leave(self, state: State) -> State:
        self.pointer_active = False
        return self._sync(state._replace(target=None))

    def toggle_pause(self, state: State) -> State:
        if state.game_over:
            return state
        return state._replace(paused=not state.paused)

    def resume(self, state: State) -> State:
        if state.game_over or not state.paused:
            return state
        return state._replace(paused=False)

    def reset(self) -> None:
        self.held.clear()
        self.pointer_active = False
