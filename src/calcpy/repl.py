from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TextIO

from .api import lex_source, parse_source
from .diagnostics import format_annot, show_diagnostic, show_trace
from .digits import int_to_str
from .errors import Error, InterpreterError
from .format import format_expr
from .interpreter import evaluate
from .spans import Loc


logger = logging.getLogger(__name__)


class Mode(str, Enum):
    EVAL = "eval"
    TOKENS = "tokens"
    AST = "ast"


def process_line(line: str, mode: Mode | str = Mode.EVAL) -> str:
    """Run one line through the pipeline and return the text to print."""
    mode = Mode(mode)
    if mode is Mode.TOKENS:
        return " ".join(f"{tok.value}@{tok.loc}" for tok in lex_source(line))
    expr = parse_source(line)
    if mode is Mode.AST:
        return format_expr(expr)
    return int_to_str(evaluate(expr))


def run_repl(
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
    *,
    prompt: str = "> ",
    mode: Mode | str = Mode.EVAL,
    trace: bool = False,
) -> int:
    """Read-eval-print until ``lines`` is exhausted.

    A failing line is reported on ``err`` and the loop moves on. Returns the
    number of lines that failed.
    """
    failures = 0
    for line in _prompted(lines, out, prompt):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            result = process_line(line, mode)
        except Error as e:
            failures += 1
            logger.debug("line %r failed: %s", line, e.error)
            if trace:
                show_trace(e, file=err)
            show_diagnostic(e, line, file=err)
        except InterpreterError as e:
            failures += 1
            logger.debug("line %r failed: %s", line, e.description)
            show_diagnostic(e, line, file=err)
        except RecursionError:
            # Parenthesised nesting is parsed recursively; too deep a line is
            # reported against the whole input.
            failures += 1
            logger.debug("line %r nests too deeply", line)
            print(f"expression nests too deeply\n{format_annot(line, Loc(0, len(line)))}", file=err)
        else:
            print(result, file=out)
    return failures


def _prompted(lines: Iterable[str], out: TextIO, prompt: str) -> Iterator[str]:
    it = iter(lines)
    while True:
        if prompt:
            out.write(prompt)
            out.flush()
        try:
            yield next(it)
        except StopIteration:
            if prompt:
                out.write("\n")
            return
