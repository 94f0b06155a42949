from __future__ import annotations

import math

import pygame

from . import config
from .state import State

BUTTON_W, BUTTON_H, BUTTON_GAP = 80, 30, 10
BUTTON_NAMES = ("start", "pause", "reset")

_cache: dict[str, pygame.Surface] = {}


def button_rects() -> dict[str, pygame.Rect]:
    top = config.BOARD_SIZE + (config.HUD_HEIGHT - BUTTON_H) // 2
    right = config.WIDTH - BUTTON_GAP
    rects = {}
    for name in reversed(BUTTON_NAMES):
        right -= BUTTON_W
        rects[name] = pygame.Rect(right, top, BUTTON_W, BUTTON_H)
        right -= BUTTON_GAP
    return rects


def button_at(pos: tuple[int, int]) -> str | None:
    for name, rect in button_rects().items():
        if rect.collidepoint(pos):
            return name
    return None


def make_fonts() -> dict[str, pygame.font.Font]:
    return {
        "title": pygame.font.Font(None, 54),
        "large": pygame.font.Font(None, 34),
        "body": pygame.font.Font(None, 24),
        "small": pygame.font.Font(None, 20),
    }


def _background() -> pygame.Surface:
    if "background" not in _cache:
        surf = pygame.Surface((config.BOARD_SIZE, config.BOARD_SIZE))
        for i in range(config.BOARD_SIZE):
            t = i / max(1, config.BOARD_SIZE - 1)
            color = [round(a + (b - a) * t) for a, b in zip(config.BG_TOP, config.BG_BOTTOM)]
            pygame.draw.line(surf, color, (0, i), (config.BOARD_SIZE, i))

        grid = pygame.Surface((config.BOARD_SIZE, config.BOARD_SIZE), pygame.SRCALPHA)
        line = (*config.GRID_COLOR, config.GRID_ALPHA)
        for n in range(config.TILE_COUNT + 1):
            p = min(n * config.CELL_SIZE, config.BOARD_SIZE - 1)
            pygame.draw.line(grid, line, (p, 0), (p, config.BOARD_SIZE))
            pygame.draw.line(grid, line, (0, p), (config.BOARD_SIZE, p))
        surf.blit(grid, (0, 0))
        _cache["background"] = surf
    return _cache["background"]


def _head_point(cell, heading, forward: float, side: float) -> tuple[float, float]:
    # Local frame: forward along heading, side perpendicular to it.
    dx, dy = heading
    cx = cell[0] + 0.5 + forward * dx - side * dy
    cy = cell[1] + 0.5 + forward * dy + side * dx
    return (cx * config.CELL_SIZE, cy * config.CELL_SIZE)


def draw_snake(screen: pygame.Surface, state: State) -> None:
    cs = config.CELL_SIZE
    for i, (x, y) in enumerate(state.snake[1:]):
        green = max(128, 200 - i * 2)
        rect = pygame.Rect(x * cs, y * cs, cs, cs)
        pygame.draw.rect(screen, (76, green, 80), rect, border_radius=2)

    head, heading = state.snake[0], state.heading
    tri = [_head_point(head, heading, *p) for p in ((0.5, 0.0), (-0.2, -0.5), (-0.2, 0.5))]
    pygame.draw.polygon(screen, config.HEAD_COLOR, tri)

    eye = max(1, round(cs / 6))
    for side in (-0.2, 0.2):
        center = _head_point(head, heading, -0.1, side)
        pygame.draw.circle(screen, config.WHITE, center, eye)
        pygame.draw.circle(screen, config.BLACK, center, max(1, eye // 2))

    tip = _head_point(head, heading, 0.5, 0.0)
    for side in (-0.1, 0.1):
        pygame.draw.line(screen, config.TONGUE_COLOR, tip, _head_point(head, heading, 0.7, side))


def draw_food(screen: pygame.Surface, state: State) -> None:
    cs = config.CELL_SIZE
    size = cs - 2 + math.sin(state.blink * 0.2)
    fx, fy = state.food
    center = (fx * cs + cs / 2, fy * cs + cs / 2)
    pygame.draw.circle(screen, config.FOOD_RIM, center, size / 2)
    pygame.draw.circle(screen, config.FOOD_COLOR, center, size / 2 - 2)
    pygame.draw.circle(screen, (255, 200, 200), (fx * cs + cs / 3, fy * cs + cs / 3), size / 6)


def draw_hud(screen: pygame.Surface, state: State, fonts) -> None:
    hud = pygame.Rect(0, config.BOARD_SIZE, config.WIDTH, config.HUD_HEIGHT)
    pygame.draw.rect(screen, config.HUD_COLOR, hud)
    text = f"Score: {state.score}   Best: {state.high_score}   Mode: {state.mode.value}"
    label = fonts["body"].render(text, True, config.WHITE)
    screen.blit(label, label.get_rect(midleft=(12, hud.centery)))

    for name, rect in button_rects().items():
        pygame.draw.rect(screen, config.BUTTON_COLOR, rect, border_radius=4)
        caption = fonts["body"].render(name.capitalize(), True, config.BUTTON_TEXT)
        screen.blit(caption, caption.get_rect(center=rect.center))


def _overlay(screen: pygame.Surface, alpha: int) -> None:
    shade = pygame.Surface((config.BOARD_SIZE, config.BOARD_SIZE), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    screen.blit(shade, (0, 0))


def _centered(screen, font, text, color, dy) -> None:
    label = font.render(text, True, color)
    mid = config.BOARD_SIZE // 2
    screen.blit(label, label.get_rect(center=(mid, mid + dy)))


def draw_paused(screen: pygame.Surface, fonts) -> None:
    _overlay(screen, 128)
    _centered(screen, fonts["title"], "Paused", config.WHITE, 0)
    _centered(screen, fonts["body"], "Click or press Space to continue", config.WHITE, 40)
    _centered(screen, fonts["small"], "Arrows / WASD to move, mouse to autopilot", config.WHITE, 70)


def draw_game_over(screen: pygame.Surface, state: State, fonts) -> None:
    _overlay(screen, 180)
    _centered(screen, fonts["title"], "Game Over", config.GAME_OVER_COLOR, -60)
    _centered(screen, fonts["large"], f"Score: {state.score}", config.WHITE, 0)
    _centered(screen, fonts["large"], f"High score: {state.high_score}", config.WHITE, 30)
    _centered(screen, fonts["body"], "Press Reset or R to play again", config.WHITE, 70)
    _centered(screen, fonts["small"], "Arrows / WASD to move, mouse to autopilot", config.WHITE, 100)


def draw_state(screen: pygame.Surface, state: State, fonts) -> None:
    screen.blit(_background(), (0, 0))
    draw_snake(screen, state)
    draw_food(screen, state)
    if state.game_over:
        draw_game_over(screen, state, fonts)
    elif state.paused:
        draw_paused(screen, fonts)
    draw_hud(screen, state, fonts)
    pygame.display.flip()
