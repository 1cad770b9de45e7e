from __future__ import annotations

import sys
from typing import TextIO

from .errors import Error, InterpreterError, LexError, ParseError
from .spans import Loc


Diagnosable = Error | LexError | ParseError | InterpreterError


def format_annot(input: str, loc: Loc) -> str:
    """Render ``input`` with a caret line underneath ``loc``."""
    return f"{input}\n{' ' * loc.start}{'^' * (loc.end - loc.start)}"


def diagnostic_loc(error: Diagnosable, input: str) -> Loc:
    if isinstance(error, Error):
        return error.loc(input)
    if isinstance(error, ParseError):
        return error.loc_in(input)
    if isinstance(error, (LexError, InterpreterError)):
        return error.loc
    raise TypeError(f"no location for {type(error).__name__}")


def format_diagnostic(error: Diagnosable, input: str) -> str:
    # The composite error only says "parser error"; show what actually failed.
    shown = error.error if isinstance(error, Error) else error
    return f"{shown}\n{format_annot(input, diagnostic_loc(error, input))}"


def show_diagnostic(error: Diagnosable, input: str, file: TextIO | None = None) -> None:
    print(format_diagnostic(error, input), file=sys.stderr if file is None else file)


def format_trace(error: BaseException) -> str:
    lines = [str(error)]
    source = _source_of(error)
    while source is not None:
        lines.append(f"caused by {source}")
        source = _source_of(source)
    return "\n".join(lines)


def show_trace(error: BaseException, file: TextIO | None = None) -> None:
    print(format_trace(error), file=sys.stderr if file is None else file)


def _source_of(error: BaseException) -> BaseException | None:
    source = getattr(error, "source", None)
    if callable(source):
        return source()
    return error.__cause__
