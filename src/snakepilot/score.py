from __future__ import annotations

import logging
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Best score kept as a plain integer in a text file.

    Reads fall back to 0 and writes are best-effort: I/O failures are logged
    and dropped.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else config.HIGH_SCORE_FILE

    def get(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0
        try:
            return max(int(text.strip() or "0"), 0)
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return 0

    def set(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(max(value, 0)), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
