from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .game import main as run_game
from .score import HighScoreStore


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="snakepilot", add_help=True)
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=config.HIGH_SCORE_FILE,
        help="Where the best score is kept (env: SNAKEPILOT_HIGH_SCORE).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Redraw rate limit.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    run_game(store=HighScoreStore(args.high_score_file), seed=args.seed, fps=args.fps)


if __name__ == "__main__":
    main()
