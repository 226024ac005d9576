from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Literals and names
    NUM = "NUM"
    SYMBOL = "SYMBOL"

    # Punctuation / operators
    LPAREN = "("
    RPAREN = ")"
    EQUAL = "="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    COMMA = ","

    # Layout
    NEWLINE = "NEWLINE"
    SPACE = "SPACE"
    COMMENT = "COMMENT"


TRIVIA = frozenset({TokenKind.SPACE, TokenKind.COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: float | str | None
    span: Span

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA

    def __repr__(self) -> str:
        sp = self.span
        where = f"{sp.start.offset}..{sp.end.offset}"
        if self.value is None:
            return f"Token({self.kind.name}, {where})"
        return f"Token({self.kind.name}, {self.value!r}, {where})"
