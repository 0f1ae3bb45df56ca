"""Config loading for the puzzle solvers.

Settings live in ``aoc_config.toml`` (or the file named by ``AOC_CONFIG``).
Every key is optional; anything missing falls back to the defaults below.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .errors import SourceNotFoundError

CONFIG_FILE = "aoc_config.toml"
CONFIG_ENV_VAR = "AOC_CONFIG"

DIAL_POSITIONS = 100
INITIAL_DIAL_POSITION = 50

DEFAULT_INPUTS = {
    "day1": "inputs/day1.txt",
    "day2": "inputs/day2.txt",
    "day3": "inputs/day3.txt",
}

LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
    positions: int = DIAL_POSITIONS
    initial_position: int = INITIAL_DIAL_POSITION
    inputs: dict | None = None
    log_level: str = LOG_LEVEL
    log_file: str = ""

    def __post_init__(self):
        if self.positions < 1:
            raise ValueError(f"dial.positions must be >= 1, got {self.positions}")
        if not 0 <= self.initial_position < self.positions:
            raise ValueError(
                f"dial.initial_position must be in [0, {self.positions}), "
                f"got {self.initial_position}"
            )
        if self.inputs is None:
            object.__setattr__(self, "inputs", dict(DEFAULT_INPUTS))

    def input_path(self, day: str) -> Path:
        """Path of the puzzle input for ``day`` (e.g. ``"day1"``)."""
        return Path(self.inputs.get(day, DEFAULT_INPUTS[day]))


def _table(cfg: dict, name: str) -> dict:
    table = cfg.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table, got {table!r}")
    return table


def load_config(path: str | Path | None = None) -> Config:
    """Load settings from TOML.

    An explicit ``path`` must exist. Without one, ``$AOC_CONFIG`` or
    ``./aoc_config.toml`` is used when present, otherwise the defaults.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
        else:
            path = Path(CONFIG_FILE)
            if not path.exists():
                return Config()
    path = Path(path)
    if not path.exists():
        raise SourceNotFoundError(path)

    with open(path, "rb") as f:
        cfg = tomllib.load(f)

    d = _table(cfg, "dial")
    i = _table(cfg, "inputs")
    o = _table(cfg, "output")

    inputs = dict(DEFAULT_INPUTS)
    inputs.update({day: str(p) for day, p in i.items()})

    return Config(
        positions=int(d.get("positions", DIAL_POSITIONS)),
        initial_position=int(d.get("initial_position", INITIAL_DIAL_POSITION)),
        inputs=inputs,
        log_level=str(o.get("log_level", LOG_LEVEL)).upper(),
        log_file=str(o.get("log_file", "")),
    )
