"""Errors raised while loading and parsing puzzle input."""


class PuzzleInputError(ValueError):
    """Base class for puzzle input that cannot be parsed."""


class MalformedInstructionError(PuzzleInputError):
    """A token in the puzzle input does not match the expected grammar."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed token {token!r}: {reason}")


class SourceNotFoundError(FileNotFoundError):
    """The puzzle input (or config) file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class UndecodableInputError(PuzzleInputError):
    """The puzzle input file is not valid UTF-8 text."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Input file {path} is not UTF-8 text: {reason}")
