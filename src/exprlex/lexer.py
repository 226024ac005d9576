from __future__ import annotations

import logging
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .cursor import Cursor
from .errors import InvalidChar, InvalidNum
from .spans import Position, Span
from .tokens import Token, TokenKind


log = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_NUM_CHARS = _DIGITS | {"."}
_SYMBOL_START = frozenset(string.ascii_letters + "_")
_SYMBOL_CHARS = _SYMBOL_START | _DIGITS
# ASCII whitespace minus "\n", which is a token of its own.
_SPACE_CHARS = frozenset(" \t\r\f")

_SINGLE = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    ",": TokenKind.COMMA,
    "\n": TokenKind.NEWLINE,
}


def _not_newline(c: str) -> bool:
    return c != "\n"


@dataclass(slots=True)
class Tokenizer:
    """Pull-based tokenizer over a :class:`Cursor`.

    Iterating a tokenizer yields tokens lazily until the input is exhausted.
    A lexical failure raises :class:`~exprlex.errors.LexError` from the pull
    that found it; the offending input is already consumed, so pulling again
    resumes right after it.
    """

    cursor: Cursor

    def __post_init__(self) -> None:
        log.debug("tokenizer created over %s", type(self.cursor).__name__)

    @classmethod
    def from_source(cls, chars: Iterable[str]) -> "Tokenizer":
        return cls(cursor=Cursor(chars))

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok is None:
            raise StopIteration
        return tok

    def next_token(self) -> Token | None:
        cur = self.cursor
        start = cur.pos()
        c = cur.next()
        if c is None:
            return None

        value: float | str | None = None
        kind = _SINGLE.get(c)
        if kind is not None:
            pass
        elif c == "#":
            kind = TokenKind.COMMENT
            value = self._take_while("", _not_newline)
        elif c in _NUM_CHARS:
            kind = TokenKind.NUM
            value = self._parse_num(start, self._take_while(c, _NUM_CHARS.__contains__))
        elif c in _SYMBOL_START:
            kind = TokenKind.SYMBOL
            value = self._take_while(c, _SYMBOL_CHARS.__contains__)
        elif c in _SPACE_CHARS:
            kind = TokenKind.SPACE
            self._take_while(c, _SPACE_CHARS.__contains__)
        else:
            err = InvalidChar(position=start, line_col=cur.line_col(start), char=c)
            log.debug("%s", err)
            raise err

        return Token(kind, value, Span(start=start, end=cur.pos()))

    def _take_while(self, first: str, accept: Callable[[str], bool]) -> str:
        # Consume a maximal run; the first rejected character goes back.
        buf = [first]
        while True:
            c = self.cursor.next()
            if c is None:
                break
            if not accept(c):
                self.cursor.put_back(c)
                break
            buf.append(c)
        return "".join(buf)

    def _parse_num(self, start: Position, text: str) -> float:
        try:
            return float(text)
        except ValueError as e:
            err = InvalidNum(position=start, line_col=self.cursor.line_col(start), text=text, error=e)
            log.debug("%s", err)
            raise err from e
