"""Reading puzzle input files and splitting them into tokens."""

import re
from pathlib import Path
from typing import List

from .errors import SourceNotFoundError, UndecodableInputError

LINE_BREAKS = re.compile(r"\r\n|\r|\n")
COMMAS_OR_LINE_BREAKS = re.compile(r",|\r\n|\r|\n")


def read_input(path: str | Path) -> str:
    """Return the whole input file as text. Raises SourceNotFoundError if missing."""
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path)
    try:
        with open(path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError as e:
        raise UndecodableInputError(path, str(e)) from e


def split_lines(text: str) -> List[str]:
    """Split on any line ending, dropping blank lines."""
    return [line for line in LINE_BREAKS.split(text) if line.strip()]


def split_commas(text: str) -> List[str]:
    """Split a comma-separated list (newlines allowed), dropping blank entries."""
    return [token for token in COMMAS_OR_LINE_BREAKS.split(text) if token.strip()]
