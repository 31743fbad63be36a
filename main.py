"""
main.py — Entry point.

Run with:
    python main.py [--size 20 | --width W --height H] [--difficulty medium]

Requires:
    pip install pygame
"""

import argparse
import logging
import random

from classic_snake.config import (
    DEFAULT_DIFFICULTY, DEFAULT_GRID_SIZE, DIFFICULTIES,
    HIGHSCORE_FILE, MIN_GRID_SIZE, MAX_GRID_SIZE,
)
from classic_snake.storage import HighScoreStore, MemoryHighScoreStore


def grid_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise argparse.ArgumentTypeError(
            f"grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {size}"
        )
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classic single-player Snake.")
    parser.add_argument("--size", type=grid_size, default=DEFAULT_GRID_SIZE,
                        help="square grid edge in cells (default: %(default)s)")
    parser.add_argument("--width", type=grid_size, default=None,
                        help="grid width in cells, overrides --size")
    parser.add_argument("--height", type=grid_size, default=None,
                        help="grid height in cells, overrides --size")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default=DEFAULT_DIFFICULTY)
    parser.add_argument("--highscore-file", default=HIGHSCORE_FILE,
                        help="where the high score is kept (default: %(default)s)")
    parser.add_argument("--no-save", action="store_true",
                        help="keep the high score in memory only")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed food placement for a reproducible game")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # pygame is only needed once we actually open a window
    from classic_snake.app import SnakeApp

    store = MemoryHighScoreStore() if args.no_save else HighScoreStore(args.highscore_file)
    rng = random.Random(args.seed) if args.seed is not None else None
    SnakeApp(
        grid_width=args.width or args.size,
        grid_height=args.height or args.size,
        difficulty=args.difficulty,
        store=store,
        rng=rng,
    ).run()


if __name__ == "__main__":
    main()
