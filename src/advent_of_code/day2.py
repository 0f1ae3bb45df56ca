"""Day 2 - Gift Shop

Walk every product ID in a list of ``START-END`` ranges and sum the invalid
ones. Part One: an ID is invalid when it is some digits repeated twice
(``6464``). Part Two: invalid when it is any digit pattern repeated at least
twice (``123123123``).
"""

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, List

from loguru import logger

from .cli import run
from .config import Config
from .errors import MalformedInstructionError
from .puzzle_input import read_input, split_commas

TITLE = "Day 2 - Gift Shop"


@dataclass(frozen=True)
class ProductIDRange:
    start: int
    end: int

    def __iter__(self):
        return iter(range(self.start, self.end + 1))


def parse_range(token: str) -> ProductIDRange:
    """Parse ``"11-22"`` into an inclusive ProductIDRange."""
    if not token or not token.strip():
        raise MalformedInstructionError(token, "ID range is empty")
    parts = [part.strip() for part in token.strip().split("-")]
    if len(parts) != 2:
        raise MalformedInstructionError(token, "ID range must be in the format 'START-END'")
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise MalformedInstructionError(token, "start and end IDs must be integers")
    if any(part.startswith("0") for part in parts):
        raise MalformedInstructionError(token, "IDs must not start with 0")
    start, end = int(parts[0]), int(parts[1])
    if start > end:
        raise MalformedInstructionError(token, "start ID cannot be greater than end ID")
    return ProductIDRange(start, end)


def load_ranges(filename) -> List[ProductIDRange]:
    return [parse_range(token) for token in split_commas(read_input(filename))]


def is_repeated_twice(product_id: str) -> bool:
    """True if the ID is two identical halves."""
    length = len(product_id)
    # Odd length cannot be made of two equal halves
    if length % 2:
        return False
    half = length // 2
    return product_id[:half] == product_id[half:]


def is_repeated_pattern(product_id: str) -> bool:
    """True if the ID is a shorter digit pattern repeated two or more times."""
    length = len(product_id)
    for pattern_length in range(1, length // 2 + 1):
        if length % pattern_length:
            continue
        if product_id[:pattern_length] * (length // pattern_length) == product_id:
            return True
    return False


@dataclass(frozen=True)
class ValidationResult:
    product_id: int
    valid_part_one: bool
    valid_part_two: bool


def validate(product_id: int) -> ValidationResult:
    text = str(product_id)
    return ValidationResult(
        product_id=product_id,
        valid_part_one=not is_repeated_twice(text),
        valid_part_two=not is_repeated_pattern(text),
    )


class ValidationStatistics:
    def __init__(self):
        self.valid_part_one = 0
        self.invalid_part_one = 0
        self.invalid_sum_part_one = 0
        self.valid_part_two = 0
        self.invalid_part_two = 0
        self.invalid_sum_part_two = 0

    def update(self, result: ValidationResult) -> None:
        if result.valid_part_one:
            self.valid_part_one += 1
        else:
            self.invalid_part_one += 1
            self.invalid_sum_part_one += result.product_id

        if result.valid_part_two:
            self.valid_part_two += 1
        else:
            self.invalid_part_two += 1
            self.invalid_sum_part_two += result.product_id


class GiftShop:
    def __init__(self, sink: Callable[[str], None] | None = None):
        self.statistics = ValidationStatistics()
        self.sink = sink

    def process_range(self, id_range: ProductIDRange) -> None:
        for product_id in id_range:
            result = validate(product_id)
            self.statistics.update(result)
            if self.sink is not None and not (result.valid_part_one and result.valid_part_two):
                self.sink(f"Invalid Product ID: {product_id}")

    def process_ranges(self, ranges: Iterable[ProductIDRange]) -> None:
        for id_range in ranges:
            self.process_range(id_range)


def solve(config: Config, debug: bool = False):
    ranges = load_ranges(config.input_path("day2"))
    logger.info(f"Processing {len(ranges)} Product ID ranges...")

    shop = GiftShop(sink=logger.debug if debug else None)
    shop.process_ranges(ranges)

    stats = shop.statistics
    print(f"Part One - valid IDs: {stats.valid_part_one}; invalid IDs: {stats.invalid_part_one}")
    print(f"Part Two - valid IDs: {stats.valid_part_two}; invalid IDs: {stats.invalid_part_two}")
    return stats.invalid_sum_part_one, stats.invalid_sum_part_two


def main(argv: List[str] | None = None) -> None:
    sys.exit(run(TITLE, solve, argv))


if __name__ == "__main__":
    main()
