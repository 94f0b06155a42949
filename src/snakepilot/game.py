from __future__ import annotations

import logging
import random

import pygame

from . import config
from .controls import Controls
from .logic import game_tick, reset
from .render import button_at, draw_state, make_fonts
from .scheduler import TICK_EVENT, TickScheduler
from .score import HighScoreStore
from .state import new_state

logger = logging.getLogger(__name__)


def main(store: HighScoreStore | None = None, seed: int | None = None, fps: int = config.FPS) -> None:
    store = store or HighScoreStore()
    rng = random.Random(seed)

    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("SnakePilot")
    clock = pygame.time.Clock()
    fonts = make_fonts()

    controls = Controls()
    scheduler = TickScheduler()
    state = new_state(high_score=store.get(), rng=rng, paused=True)
    scheduler.arm(state.mode)

    def restart(old):
        controls.reset()
        fresh = reset(old, rng)
        scheduler.arm(fresh.mode)
        logger.info("New game started")
        return fresh

    running = True
    while running:
        for event in pygame.event.get():
            mode = state.mode
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and state.game_over:
                state = restart(state)
                continue
            elif event.type == pygame.KEYDOWN:
                state = controls.key_down(state, event.key)
            elif event.type == pygame.KEYUP:
                state = controls.key_up(state, event.key)
            elif event.type == pygame.MOUSEMOTION:
                state = controls.pointer_move(state, event.pos)
            elif event.type == pygame.WINDOWLEAVE:
                state = controls.pointer_leave(state)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = button_at(event.pos)
                if action == "start":
                    state = controls.resume(state)
                elif action == "pause":
                    state = controls.toggle_pause(state)
                elif action == "reset":
                    state = restart(state)
                    continue
                elif event.pos[1] < config.BOARD_SIZE:
                    state = controls.toggle_pause(state)
            elif event.type == TICK_EVENT:
                state = game_tick(state, rng, store.set)
                if state.game_over:
                    scheduler.cancel()

            if state.mode is not mode and not state.game_over:
                logger.debug("Input mode %s -> %s", mode.value, state.mode.value)
                scheduler.arm(state.mode)

        draw_state(screen, state, fonts)
        clock.tick(fps)

    scheduler.cancel()
    pygame.quit()
    print("Game Over! Score:", state.score)
