from __future__ import annotations

from dataclasses import dataclass

from .spans import LineCol, Position


@dataclass(slots=True)
class LexError(Exception):
    """A lexical failure at ``position`` (resolved to ``line_col``)."""

    position: Position
    line_col: LineCol

    def describe(self) -> str:
        return "Lexical error"

    def __str__(self) -> str:
        return f"{self.describe()} at {self.line_col}"


@dataclass(slots=True)
class InvalidChar(LexError):
    char: str

    def describe(self) -> str:
        return f"Invalid character {self.char!r}"


@dataclass(slots=True)
class InvalidNum(LexError):
    text: str
    error: ValueError

    def describe(self) -> str:
        return f"Invalid number {self.text!r} ({self.error})"
