from __future__ import annotations

import logging

import pygame

from . import config
from .state import InputMode

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

INTERVALS = {
    InputMode.NORMAL: config.NORMAL_INTERVAL,
    InputMode.ACCELERATED: config.FAST_INTERVAL,
    InputMode.POINTER: config.POINTER_INTERVAL,
}


def interval_for(mode: InputMode) -> int:
    return INTERVALS[mode]


class TickScheduler:
    """Repeating pygame timer posting TICK_EVENT.

    Re-arming replaces the running timer, so the first tick after a mode
    change comes a full new interval later.
    """

    def __init__(self, set_timer=None):
        self._set_timer = set_timer or pygame.time.set_timer
        self.interval: int | None = None

    def arm(self, mode: InputMode) -> None:
        self.interval = interval_for(mode)
        logger.debug("Tick interval %d ms (%s)", self.interval, mode.value)
        self._set_timer(TICK_EVENT, self.interval)

    def cancel(self) -> None:
        if self.interval is None:
            return
        self.interval = None
        self._set_timer(TICK_EVENT, 0)
