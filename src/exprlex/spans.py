from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """An absolute 0-based character offset into the input."""

    offset: int


@dataclass(frozen=True, slots=True)
class LineCol:
    """A 1-based line/column pair, for user-facing messages only."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) of the input."""

    start: Position
    end: Position

    def slice(self, text: str) -> str:
        return text[self.start.offset : self.end.offset]


def _span_of(v: object) -> Span:
    # Tokens and AST nodes both carry .span.
    sp = getattr(v, "span", None)
    if sp is None:
        raise TypeError(f"value has no span: {type(v)!r}")
    return sp


def join_span(*vals: object) -> Span:
    """Join spans of tokens/nodes into a single span (from first to last)."""
    real = [v for v in vals if v is not None]
    if not real:
        raise ValueError("join_span() requires at least one value")
    return Span(start=_span_of(real[0]).start, end=_span_of(real[-1]).end)
