from __future__ import annotations

import io

import pytest

from calcpy import (
    Error,
    InterpreterError,
    LexError,
    Loc,
    ParseError,
    evaluate_source,
    format_diagnostic,
    format_trace,
    lex,
    parse_source,
    show_diagnostic,
    show_trace,
)
from calcpy.diagnostics import format_annot


def _error_for(src: str) -> Error:
    with pytest.raises(Error) as e:
        parse_source(src)
    return e.value


def test_format_annot() -> None:
    assert format_annot("1 + 2", Loc(2, 3)) == "1 + 2\n  ^"
    assert format_annot("abc", Loc(3, 4)) == "abc\n   ^"
    assert format_annot("abc", Loc(0, 3)) == "abc\n^^^"


def test_composite_wraps_lexer_error() -> None:
    err = _error_for("1+$")
    assert err.is_lexer and not err.is_parser
    assert isinstance(err.error, LexError)
    assert err.source() is err.error
    assert err.__cause__ is err.error
    assert str(err) == "parser error"
    assert err.loc("1+$") == Loc(2, 3)


def test_composite_wraps_parser_error() -> None:
    err = _error_for("(1+2")
    assert err.is_parser
    assert isinstance(err.error, ParseError)
    assert err.loc("(1+2") == Loc(0, 1)


def test_from_error_rejects_other_errors() -> None:
    with pytest.raises(TypeError):
        Error.from_error(ValueError("nope"))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("1+$", "2-3: invalid char '$'\n1+$\n  ^"),
        ("(1+2", "0-1: '(' is not closed\n(1+2\n^"),
        ("1 2", "2-3: expression after '2' is redundant\n1 2\n  ^"),
        ("1 2 3", "2-3: expression after '2' is redundant\n1 2 3\n  ^^^"),
        ("1+", "End of file\n1+\n  ^"),
        ("*", "0-1: '*' is not a start of expression\n*\n^"),
    ],
)
def test_format_diagnostic(src: str, expected: str) -> None:
    assert format_diagnostic(_error_for(src), src) == expected


def test_format_diagnostic_for_bare_errors() -> None:
    with pytest.raises(LexError) as le:
        lex("#")
    assert format_diagnostic(le.value, "#") == "0-1: invalid char '#'\n#\n^"

    src = "2 * (1/0)"
    with pytest.raises(InterpreterError) as ie:
        evaluate_source(src)
    assert format_diagnostic(ie.value, src) == "division by zero\n2 * (1/0)\n    ^^^^^"


def test_show_diagnostic_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    src = "1/0"
    with pytest.raises(InterpreterError) as e:
        evaluate_source(src)
    show_diagnostic(e.value, src)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "division by zero\n1/0\n^^^\n"


def test_show_diagnostic_to_stream() -> None:
    buf = io.StringIO()
    show_diagnostic(_error_for("1 $"), "1 $", file=buf)
    assert buf.getvalue() == "2-3: invalid char '$'\n1 $\n  ^\n"


def test_trace_walks_cause_chain() -> None:
    err = _error_for("1+$")
    assert format_trace(err) == "parser error\ncaused by 2-3: invalid char '$'"

    buf = io.StringIO()
    show_trace(_error_for("1 2"), file=buf)
    assert buf.getvalue() == "parser error\ncaused by 2-3: expression after '2' is redundant\n"


def test_trace_of_leaf_error_is_single_line() -> None:
    with pytest.raises(InterpreterError) as e:
        evaluate_source("5/0")
    assert format_trace(e.value) == "division by zero"


def test_trace_falls_back_to_python_causes() -> None:
    try:
        try:
            raise KeyError("inner")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as outer:
        assert format_trace(outer) == "outer\ncaused by 'inner'"
