"""Config loading and input file splitting."""

from __future__ import annotations

from pathlib import Path

import pytest

from advent_of_code.config import Config, load_config
from advent_of_code.errors import PuzzleInputError, SourceNotFoundError, UndecodableInputError
from advent_of_code.puzzle_input import read_input, split_commas, split_lines


def test_defaults_without_config_file(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AOC_CONFIG", raising=False)
    config = load_config()
    assert config == Config()
    assert config.positions == 100
    assert config.initial_position == 50
    assert config.input_path("day1") == Path("inputs/day1.txt")


def test_load_config_file(tmp_path) -> None:
    path = tmp_path / "aoc.toml"
    path.write_text(
        '[dial]\npositions = 10\ninitial_position = 5\n'
        '[inputs]\nday2 = "data/ids.txt"\n'
        '[output]\nlog_level = "debug"\n'
    )
    config = load_config(path)
    assert config.positions == 10
    assert config.initial_position == 5
    assert config.input_path("day1") == Path("inputs/day1.txt")
    assert config.input_path("day2") == Path("data/ids.txt")
    assert config.log_level == "DEBUG"


def test_load_config_from_env(tmp_path, monkeypatch) -> None:
    path = tmp_path / "other.toml"
    path.write_text("[dial]\ninitial_position = 7\n")
    monkeypatch.setenv("AOC_CONFIG", str(path))
    assert load_config().initial_position == 7


def test_load_config_missing_explicit_file(tmp_path) -> None:
    with pytest.raises(SourceNotFoundError):
        load_config(tmp_path / "missing.toml")


@pytest.mark.parametrize("positions, initial_position", [(0, 0), (100, 100), (100, -1)])
def test_config_rejects_bad_dial(positions: int, initial_position: int) -> None:
    with pytest.raises(ValueError):
        Config(positions=positions, initial_position=initial_position)


def test_read_input(tmp_path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("abc\n")
    assert read_input(path) == "abc\n"


def test_read_input_missing(tmp_path) -> None:
    with pytest.raises(SourceNotFoundError, match="missing.txt"):
        read_input(tmp_path / "missing.txt")


def test_read_input_directory_is_not_a_source(tmp_path) -> None:
    with pytest.raises(SourceNotFoundError):
        read_input(tmp_path)


def test_split_lines() -> None:
    assert split_lines("a\r\nb\rc\n\n  \nd") == ["a", "b", "c", "d"]
    assert split_lines("") == []


def test_split_commas() -> None:
    assert split_commas("1-2,3-4,\n5-6\n") == ["1-2", "3-4", "5-6"]


def test_read_input_not_utf8(tmp_path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"R10\n\xff\xfe\n")
    with pytest.raises(UndecodableInputError, match="input.txt") as exc:
        read_input(path)
    assert isinstance(exc.value, PuzzleInputError)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize("config_text", ["dial = 5\n", 'output = "loud"\n', "inputs = [1, 2]\n"])
def test_load_config_rejects_non_table_sections(tmp_path, config_text: str) -> None:
    path = tmp_path / "aoc.toml"
    path.write_text(config_text)
    with pytest.raises(ValueError, match="must be a table"):
        load_config(path)
