from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import iter_file_chars, scan
from .cursor import Cursor
from .errors import LexError
from .lexer import Tokenizer
from .tokens import Token


log = logging.getLogger(__name__)


def _token_jsonable(tok: Token, cursor: Cursor) -> dict[str, object]:
    lc = cursor.line_col(tok.span.start)
    return {
        "kind": tok.kind.name,
        "value": tok.value,
        "start": tok.span.start.offset,
        "end": tok.span.end.offset,
        "line": lc.line,
        "column": lc.column,
    }


def _error_jsonable(err: LexError) -> dict[str, object]:
    return {
        "message": str(err),
        "offset": err.position.offset,
        "line": err.line_col.line,
        "column": err.line_col.column,
    }


def _token_line(tok: Token, cursor: Cursor) -> str:
    lc = cursor.line_col(tok.span.start)
    if tok.value is None:
        return f"{lc} {tok.kind.name}"
    return f"{lc} {tok.kind.name} {tok.value!r}"


def _lex_path(path: Path, *, keep_going: bool) -> tuple[Cursor, list[Token | LexError]]:
    out: list[Token | LexError] = []
    with path.open(encoding="utf-8", newline="") as fh:
        tz = Tokenizer(Cursor(iter_file_chars(fh)))
        if keep_going:
            out.extend(scan(tz))
        else:
            out.extend(tz)
    return tz.cursor, out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="exprlex", description="Tokenize expression-language source files")
    ap.add_argument("files", nargs="+", help="Source files to tokenize")
    ap.add_argument("--json", action="store_true", help="Print tokens as JSON")
    ap.add_argument("--skip-trivia", action="store_true", help="Drop SPACE and COMMENT tokens")
    ap.add_argument(
        "--keep-going",
        action="store_true",
        help="Report every lexical error and keep scanning after it",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    status = 0
    payload: dict[str, object] = {}
    for name in args.files:
        path = Path(name)
        try:
            cursor, items = _lex_path(path, keep_going=args.keep_going)
        except LexError as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
            continue
        except OSError as e:
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            status = 1
            continue
        except UnicodeDecodeError as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
            continue

        toks = [t for t in items if isinstance(t, Token) and not (args.skip_trivia and t.is_trivia)]
        errors = [e for e in items if isinstance(e, LexError)]
        for e in errors:
            print(f"{path}: {e}", file=sys.stderr)
        if errors:
            status = 1
        log.debug("%s: %d tokens, %d errors", path, len(toks), len(errors))

        if args.json:
            entry: dict[str, object] = {"tokens": [_token_jsonable(t, cursor) for t in toks]}
            if args.keep_going:
                entry["errors"] = [_error_jsonable(e) for e in errors]
            payload[name] = entry
        else:
            for t in toks:
                print(_token_line(t, cursor))

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    return status
