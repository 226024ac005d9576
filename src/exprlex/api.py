from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .cursor import Cursor
from .errors import LexError
from .lexer import Tokenizer
from .tokens import Token


log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def tokenize_source(src: str, *, skip_trivia: bool = False) -> list[Token]:
    """Tokenize an in-memory string. The first lexical error propagates."""
    return _collect(Tokenizer(Cursor(src)), skip_trivia)


def iter_file_chars(fh: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the characters of a text file, reading ``chunk_size`` at a time."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    while True:
        chunk = fh.read(chunk_size)
        if not chunk:
            return
        yield from chunk


def tokenize_file(
    path: str | Path,
    *,
    skip_trivia: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[Token]:
    p = Path(path).expanduser()
    log.debug("tokenizing %s", p)
    # newline="" leaves "\r\n" untranslated; "\r" lexes as whitespace.
    with p.open(encoding="utf-8", newline="") as fh:
        toks = _collect(Tokenizer(Cursor(iter_file_chars(fh, chunk_size))), skip_trivia)
    log.debug("tokenized %s: %d tokens", p, len(toks))
    return toks


def scan(tz: Tokenizer) -> Iterator[Token | LexError]:
    """Yield every token of ``tz``, and every lexical error in place of raising it.

    Scanning continues after an error from the first character the failed
    pull did not consume.
    """
    while True:
        try:
            tok = tz.next_token()
        except LexError as e:
            yield e
            continue
        if tok is None:
            return
        yield tok


def _collect(tokens: Iterable[Token], skip_trivia: bool) -> list[Token]:
    if skip_trivia:
        return [t for t in tokens if not t.is_trivia]
    return list(tokens)
