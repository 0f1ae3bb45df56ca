"""Day 3 - Lobby

Each line is a bank of batteries, one joltage digit per battery. Turning on
``n`` batteries yields the number formed by their digits in bank order; find
the largest such number per bank and sum them (n=2 for Part One, n=12 for
Part Two).
"""

import sys
from typing import Callable, List

from loguru import logger

from .cli import run
from .config import Config
from .errors import MalformedInstructionError
from .puzzle_input import read_input, split_lines

TITLE = "Day 3 - Lobby"

PART_ONE_BATTERIES = 2
PART_TWO_BATTERIES = 12


def max_joltage(
    joltages: str, n_batteries: int, sink: Callable[[str], None] | None = None
) -> int:
    """Largest number made of ``n_batteries`` digits taken in order from ``joltages``.

    Greedy: for each output digit pick the first largest digit in the window
    that still leaves room for the digits still to be picked.
    """
    if n_batteries <= 0 or n_batteries > len(joltages):
        return 0

    picked = []
    start = 0
    for index in range(n_batteries):
        remaining = n_batteries - index - 1
        end = len(joltages) - remaining
        window = joltages[start:end]
        digit = max(window)
        position = start + window.index(digit)
        if sink is not None:
            sink(
                f"Digit {index + 1}: searched {start}..{end - 1}, "
                f"selected {digit!r} at {position}"
            )
        picked.append(digit)
        start = position + 1

    result = int("".join(picked))
    if sink is not None:
        sink(f"Final result: {result}")
    return result


class BatteryBank:
    def __init__(self, line: str):
        if not line or not line.strip():
            raise MalformedInstructionError(line, "battery bank is empty")
        joltages = line.strip()
        if not (joltages.isascii() and joltages.isdigit()):
            raise MalformedInstructionError(line, "battery bank must contain only digits")
        self.joltages = joltages

    def max_joltage(self, n_batteries: int, sink: Callable[[str], None] | None = None) -> int:
        return max_joltage(self.joltages, n_batteries, sink)

    def __str__(self) -> str:
        return self.joltages


def load_banks(filename) -> List[BatteryBank]:
    return [BatteryBank(line) for line in split_lines(read_input(filename))]


def solve(config: Config, debug: bool = False):
    banks = load_banks(config.input_path("day3"))
    logger.info(f"Info - number of battery banks: {len(banks)}")
    sink = logger.debug if debug else None

    part_one = 0
    part_two = 0
    for bank in banks:
        if sink is not None:
            sink(f"Processing Battery Bank: {bank}")
        part_one += bank.max_joltage(PART_ONE_BATTERIES, sink)
        part_two += bank.max_joltage(PART_TWO_BATTERIES, sink)
    return part_one, part_two


def main(argv: List[str] | None = None) -> None:
    sys.exit(run(TITLE, solve, argv))


if __name__ == "__main__":
    main()
