from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from .spans import LineCol, Position


class Cursor:
    """Character buffer over a single-pass source with one slot of pushback.

    The cursor remembers where every newline it pulled from the source was,
    so ``line_col`` works even when the source cannot be replayed.
    """

    __slots__ = ("_chars", "_offset", "_pending", "_newlines")

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars: Iterator[str] = iter(chars)
        self._offset = 0  # characters pulled from the source so far
        self._pending: str | None = None
        self._newlines: list[int] = []

    def next(self) -> str | None:
        if self._pending is not None:
            c, self._pending = self._pending, None
            return c
        c = next(self._chars, None)
        if c is None:
            return None
        if c == "\n":
            self._newlines.append(self._offset)
        self._offset += 1
        return c

    def put_back(self, c: str) -> None:
        if self._pending is not None:
            raise RuntimeError(f"cannot put back {c!r}: {self._pending!r} is already pending")
        self._pending = c

    def pos(self) -> Position:
        if self._pending is not None:
            return Position(self._offset - 1)
        return Position(self._offset)

    def line_col(self, pos: Position) -> LineCol:
        # Only meaningful for positions at or before the read frontier.
        k = bisect_left(self._newlines, pos.offset)
        if k == 0:
            return LineCol(line=1, column=pos.offset + 1)
        return LineCol(line=k + 1, column=pos.offset - self._newlines[k - 1])
