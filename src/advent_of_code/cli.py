"""Command-line runner shared by every day's solver."""

import argparse
from typing import Callable, List, Tuple

from loguru import logger

from .config import Config, load_config
from .errors import PuzzleInputError, SourceNotFoundError
from .logs import setup_logging

Solver = Callable[[Config, bool], Tuple[int, int]]


def parse_args(description: str, argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log a diagnostic line for every step",
    )
    return parser.parse_args(argv)


def run(title: str, solve: Solver, argv: List[str] | None = None) -> int:
    """Run ``solve`` with the loaded config and print both answers.

    Returns the process exit code: 0 on success, 1 when the config or the
    puzzle input is missing or malformed.
    """
    args = parse_args(title, argv)
    setup_logging(args.debug)

    try:
        config = load_config()
    except (SourceNotFoundError, ValueError) as e:
        logger.error(f"Bad config: {e}")
        return 1
    setup_logging(args.debug, config.log_level, config.log_file)

    print(title)
    print("-" * 23)

    try:
        part_one, part_two = solve(config, args.debug)
    except (SourceNotFoundError, PuzzleInputError) as e:
        logger.error(str(e))
        return 1

    print(f"Part One: {part_one}")
    print(f"Part Two: {part_two}")
    return 0
