from __future__ import annotations

from .api import scan, tokenize_file, tokenize_source
from .cursor import Cursor
from .errors import InvalidChar, InvalidNum, LexError
from .format import format_expr, format_item, format_items
from .lexer import Tokenizer
from .spans import LineCol, Position, Span, join_span
from .tokens import Token, TokenKind

__all__ = [
    "Cursor",
    "InvalidChar",
    "InvalidNum",
    "LexError",
    "LineCol",
    "Position",
    "Span",
    "Token",
    "TokenKind",
    "Tokenizer",
    "format_expr",
    "format_item",
    "format_items",
    "join_span",
    "scan",
    "tokenize_file",
    "tokenize_source",
]
