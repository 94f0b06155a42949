from __future__ import annotations

import os
from pathlib import Path

TILE_COUNT = 40
CELL_SIZE = 15
BOARD_SIZE = TILE_COUNT * CELL_SIZE
HUD_HEIGHT = 48
WIDTH, HEIGHT = BOARD_SIZE, BOARD_SIZE + HUD_HEIGHT
FPS = 60

# Tick intervals in milliseconds.
NORMAL_INTERVAL = 150
FAST_INTERVAL = 70
POINTER_INTERVAL = 75

START_POS = (20, 20)
START_DIRECTION = (1, 0)
FOOD_POINTS = 10
BLINK_PERIOD = 20

HIGH_SCORE_FILE = Path(
    os.environ.get("SNAKEPILOT_HIGH_SCORE", Path.home() / ".snakepilot" / "highscore")
)

BG_TOP = (236, 240, 241)
BG_BOTTOM = (189, 195, 199)
GRID_COLOR = (52, 73, 94)
GRID_ALPHA = 50
HEAD_COLOR = (46, 125, 50)
FOOD_COLOR = (255, 107, 107)
FOOD_RIM = (255, 64, 129)
TONGUE_COLOR = (255, 107, 107)
HUD_COLOR = (44, 62, 80)
BUTTON_COLOR = (52, 152, 219)
BUTTON_TEXT = (255, 255, 255)
GAME_OVER_COLOR = (231, 76, 60)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
