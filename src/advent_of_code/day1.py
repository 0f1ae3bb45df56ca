"""Day 1 - Secret Entrance (rotation/dial problem)

The dial has ``positions`` marks (0..99 by default) and starts at 50.
Part One counts how often a rotation ends on 0; Part Two counts every time
the dial points at 0, including passes during a rotation.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List

import numpy as np
from loguru import logger

from .cli import run
from .config import DIAL_POSITIONS, INITIAL_DIAL_POSITION, Config
from .errors import MalformedInstructionError
from .puzzle_input import read_input, split_lines

TITLE = "Day 1 - Secret Entrance"


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    magnitude: int

    def __post_init__(self):
        if self.magnitude < 0:
            raise MalformedInstructionError(str(self), "steps must be non-negative")

    @property
    def step(self) -> int:
        """Signed step: negative for L, positive for R."""
        return -self.magnitude if self.direction is Direction.LEFT else self.magnitude

    def __str__(self) -> str:
        return f"{self.direction.value}{self.magnitude}"


@dataclass(frozen=True)
class MovementResult:
    old_position: int
    new_position: int
    crossings: int
    landed: bool


def parse_instruction(token: str) -> Instruction:
    """Parse ``"L25"`` / ``"R10"`` into an Instruction."""
    line = token.strip() if token else ""
    if not line:
        raise MalformedInstructionError(token, "instruction is empty")
    if len(line) < 2:
        raise MalformedInstructionError(token, "instruction must be at least two characters")
    try:
        direction = Direction(line[0])
    except ValueError:
        raise MalformedInstructionError(token, f"invalid direction {line[0]!r}") from None
    # isdigit() alone would accept "²" and friends
    digits = line[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedInstructionError(token, "steps must be a non-negative integer")
    return Instruction(direction, int(digits))


def load_instructions(filename) -> List[Instruction]:
    """Load one instruction per line; blank lines are skipped."""
    return [parse_instruction(line) for line in split_lines(read_input(filename))]


def count_zero_crossings(
    raw_target: int, step: int, old_position: int, new_position: int,
    n_position: int = DIAL_POSITIONS,
) -> int:
    """Times the dial passes over or lands on 0 during one rotation."""
    crossings = 0
    if raw_target < 0:
        crossings = (-raw_target - 1) // n_position + 1
        # Leaving 0 to the left is not a pass
        if old_position == 0:
            crossings -= 1
    elif raw_target >= n_position:
        crossings = raw_target // n_position
        # The landing is added back below
        if new_position == 0:
            crossings -= 1

    if new_position == 0 and step != 0:
        crossings += 1
    return crossings


def move(position: int, step: int, n_position: int = DIAL_POSITIONS) -> MovementResult:
    """Rotate the dial from ``position`` by ``step`` marks."""
    raw_target = position + step
    # Python's % is already non-negative for a positive modulus
    new_position = raw_target % n_position
    crossings = count_zero_crossings(raw_target, step, position, new_position, n_position)
    return MovementResult(
        old_position=position,
        new_position=new_position,
        crossings=crossings,
        landed=new_position == 0 and step != 0,
    )


class SecretEntrance:
    """Dial state folded over a sequence of instructions."""

    def __init__(
        self,
        n_position: int = DIAL_POSITIONS,
        initial_position: int = INITIAL_DIAL_POSITION,
        sink: Callable[[str], None] | None = None,
    ):
        self.n_position = n_position
        self.initial_position = initial_position
        self.sink = sink
        self.reset()

    def reset(self) -> None:
        self._position = self.initial_position
        self._landings = 0
        self._crossings = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def landings(self) -> int:
        """Rotations that ended on 0 (Part One)."""
        return self._landings

    @property
    def crossings(self) -> int:
        """Every time the dial pointed at 0, landings included (Part Two)."""
        return self._crossings

    def apply_one(self, instruction: Instruction) -> MovementResult:
        result = move(self._position, instruction.step, self.n_position)
        self._position = result.new_position
        if result.landed:
            self._landings += 1
        self._crossings += result.crossings

        if self.sink is not None:
            self.sink(
                f"The dial is rotated {instruction} from {result.old_position} "
                f"to point at {result.new_position} - crossings: {result.crossings}, "
                f"landed: {result.landed}, total landings: {self._landings}, "
                f"total crossings: {self._crossings}"
            )
        return result

    def apply_all(self, instructions: Iterable[Instruction]) -> None:
        for instruction in instructions:
            self.apply_one(instruction)


def summarize(instructions: List[Instruction]) -> None:
    if not instructions:
        logger.info("Info - number of rotations: 0")
        return
    # object dtype keeps arbitrarily large steps exact
    steps = np.array([instruction.step for instruction in instructions], dtype=object)
    logger.info(f"Info - number of rotations: {steps.size}")
    logger.info(f"Info - max rotations: {steps.max()}; min rotations: {steps.min()}")


def solve(config: Config, debug: bool = False):
    instructions = load_instructions(config.input_path("day1"))
    summarize(instructions)

    entrance = SecretEntrance(
        config.positions,
        config.initial_position,
        sink=logger.debug if debug else None,
    )
    logger.info(f"The dial starts by pointing at {entrance.position}")
    entrance.apply_all(instructions)
    return entrance.landings, entrance.crossings


def main(argv: List[str] | None = None) -> None:
    sys.exit(run(TITLE, solve, argv))


if __name__ == "__main__":
    main()
