from __future__ import annotations

from .ast import Expr
from .errors import Error, LexError, ParseError
from .interpreter import evaluate
from .lexer import lex
from .parser import parse
from .tokens import Token


def lex_source(src: str) -> list[Token]:
    try:
        return lex(src)
    except LexError as e:
        raise Error.from_error(e) from e


def parse_source(src: str) -> Expr:
    """Lex and parse one line, wrapping lexer/parser failures in ``Error``."""
    try:
        return parse(lex(src))
    except (LexError, ParseError) as e:
        raise Error.from_error(e) from e


def evaluate_source(src: str) -> int:
    """Run the whole pipeline on one line.

    Raises ``Error`` for lexer/parser failures and ``InterpreterError`` when
    evaluation fails.
    """
    return evaluate(parse_source(src))
