from __future__ import annotations

from . import config


def out_of_bounds(cell: tuple[int, int]) -> bool:
    x, y = cell
    return x < 0 or x >= config.TILE_COUNT or y < 0 or y >= config.TILE_COUNT


def hits_snake(cell: tuple[int, int], snake) -> bool:
    return cell in snake


def pixel_to_cell(pos: tuple[int, int]) -> tuple[int, int] | None:
    """Board cell under a pixel position, or None off the board."""
    px, py = pos
    if px < 0 or py < 0 or px >= config.BOARD_SIZE or py >= config.BOARD_SIZE:
        return None
    return (px // config.CELL_SIZE, py // config.CELL_SIZE)
