import pygame
import pytest

from snakepilot import config, game
from snakepilot.render import button_rects
from snakepilot.scheduler import TICK_EVENT, TickScheduler
from snakepilot.score import HighScoreStore
from snakepilot.state import InputMode


def key(event_type, code):
    return pygame.event.Event(event_type, key=code)


def motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def tick():
    return pygame.event.Event(TICK_EVENT)


@pytest.fixture
def run_game(monkeypatch, tmp_path):
    """Drive game.main with one scripted event per frame.

    Returns (timer intervals, drawn states) once the script ends in a quit.
    """
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

    def run(events):
        intervals = []
        frames = []
        batches = [[event] for event in events] + [[pygame.event.Event(pygame.QUIT)]]

        monkeypatch.setattr(pygame.event, "get", lambda: batches.pop(0))
        monkeypatch.setattr(
            game, "TickScheduler", lambda: TickScheduler(set_timer=lambda ev, ms: intervals.append(ms))
        )
        monkeypatch.setattr(game, "make_fonts", lambda: {})
        monkeypatch.setattr(game, "draw_state", lambda screen, state, fonts: frames.append(state))

        game.main(store=HighScoreStore(tmp_path / "highscore"), seed=0, fps=0)
        return intervals, frames

    return run


def test_timer_follows_mode_changes_game_over_and_restart(run_game):
    hud_y = config.BOARD_SIZE + 5
    events = [
        key(pygame.KEYDOWN, pygame.K_SPACE),
        motion((300, 300)),
        motion((300, hud_y)),
        key(pygame.KEYDOWN, pygame.K_LEFT),
    ]
    events += [tick() for _ in range(30)]
    events += [key(pygame.KEYDOWN, pygame.K_r)]

    intervals, frames = run_game(events)

    assert intervals == [150, 75, 150, 70, 0, 150, 0]
    assert not frames[0].paused
    assert frames[1].mode is InputMode.POINTER
    assert frames[3].mode is InputMode.ACCELERATED
    # Left is the reverse of the start heading and is ignored.
    assert frames[3].direction == config.START_DIRECTION
    assert frames[-3].game_over
    fresh = frames[-2]
    assert not fresh.game_over
    assert fresh.snake == [config.START_POS]
    assert fresh.mode is InputMode.NORMAL


def test_r_key_only_restarts_after_game_over(run_game):
    events = [key(pygame.KEYDOWN, pygame.K_SPACE), tick(), key(pygame.KEYDOWN, pygame.K_r)]
    intervals, frames = run_game(events)
    assert intervals == [150, 0]
    assert frames[-1].snake == frames[1].snake
    assert frames[-1].snake != [config.START_POS]


def test_buttons_and_board_click(run_game):
    rects = button_rects()
    events = [
        click(rects["start"].center),
        click(rects["pause"].center),
        click((10, 10)),
        tick(),
        click(rects["reset"].center),
    ]
    intervals, frames = run_game(events)

    assert not frames[0].paused
    assert frames[1].paused
    assert not frames[2].paused
    assert frames[3].snake != [config.START_POS]
    assert frames[4].snake == [config.START_POS]
    # Initial arm, re-arm on reset, cancel on quit.
    assert intervals == [150, 150, 0]


def test_paused_game_ignores_ticks(run_game):
    intervals, frames = run_game([tick(), tick()])
    assert frames[0].paused
    assert frames[-1].snake == [config.START_POS]
    assert frames[-1].blink == 0
