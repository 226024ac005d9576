from __future__ import annotations

import json
from pathlib import Path

import pytest

from exprlex.cli import main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_plain_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.expr", "x = 1\n# done\n")
    assert main([str(p)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "1:1 SYMBOL 'x'",
        "1:2 SPACE",
        "1:3 EQUAL",
        "1:4 SPACE",
        "1:5 NUM 1.0",
        "1:6 NEWLINE",
        "2:1 COMMENT ' done'",
        "2:7 NEWLINE",
    ]


def test_json_output_skip_trivia(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.expr", "f(2)\n")
    assert main(["--json", "--skip-trivia", str(p)]) == 0
    payload = json.loads(capsys.readouterr().out)
    toks = payload[str(p)]["tokens"]
    assert [t["kind"] for t in toks] == ["SYMBOL", "LPAREN", "NUM", "RPAREN", "NEWLINE"]
    assert toks[2] == {"kind": "NUM", "value": 2.0, "start": 2, "end": 3, "line": 1, "column": 3}


def test_error_stops_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "bad.expr", "a\nb $ c $\n")
    assert main([str(p)]) == 1
    err = capsys.readouterr().err
    assert f"{p}: Invalid character '$' at 2:3" in err
    assert "2:7" not in err


def test_keep_going_reports_every_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "bad.expr", "a\nb $ c 1..2\n")
    assert main(["--keep-going", "--json", str(p)]) == 1
    captured = capsys.readouterr()
    assert f"{p}: Invalid character '$' at 2:3" in captured.err
    assert f"{p}: Invalid number '1..2'" in captured.err
    entry = json.loads(captured.out)[str(p)]
    assert [e["column"] for e in entry["errors"]] == [3, 7]
    assert [t["value"] for t in entry["tokens"] if t["kind"] == "SYMBOL"] == ["a", "b", "c"]


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.expr")]) == 1
    assert "nope.expr" in capsys.readouterr().err


@pytest.mark.parametrize("flags", [[], ["--keep-going"], ["--json"]])
def test_non_utf8_file(tmp_path: Path, capsys: pytest.CaptureFixture[str], flags: list[str]) -> None:
    p = tmp_path / "latin1.expr"
    p.write_bytes("x = 1 # café\n".encode("latin-1"))
    assert main([*flags, str(p)]) == 1
    err = capsys.readouterr().err
    assert f"{p}: " in err
    assert "can't decode byte 0xe9" in err


def test_bad_file_does_not_stop_later_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.expr"
    bad.write_bytes(b"\xff\n")
    good = _write(tmp_path, "good.expr", "y\n")
    assert main([str(bad), str(good)]) == 1
    assert capsys.readouterr().out.splitlines() == ["1:1 SYMBOL 'y'", "1:2 NEWLINE"]
