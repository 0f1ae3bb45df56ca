"""Advent of Code daily puzzle solvers."""

__version__ = "0.1.0"
