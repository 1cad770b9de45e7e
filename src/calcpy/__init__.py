from __future__ import annotations

from .api import evaluate_source, lex_source, parse_source
from .ast import BinOp, BinOpKind, Expr, Num, UniOp, UniOpKind
from .diagnostics import format_diagnostic, format_trace, show_diagnostic, show_trace
from .errors import (
    Error,
    InterpreterError,
    InterpreterErrorKind,
    InvalidChar,
    LexError,
    NotExpression,
    NotOperator,
    ParseError,
    RedundantExpression,
    UnclosedOpenParen,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .format import format_expr
from .interpreter import Interpreter, evaluate
from .lexer import lex
from .parser import parse
from .repl import Mode, run_repl
from .spans import Annot, Loc
from .tokens import Asterisk, LParen, Minus, Number, Plus, RParen, Slash, Token

__all__ = [
    "Annot",
    "Asterisk",
    "BinOp",
    "BinOpKind",
    "Error",
    "Expr",
    "Interpreter",
    "InterpreterError",
    "InterpreterErrorKind",
    "InvalidChar",
    "LParen",
    "LexError",
    "Loc",
    "Minus",
    "Mode",
    "NotExpression",
    "NotOperator",
    "Num",
    "Number",
    "ParseError",
    "Plus",
    "RParen",
    "RedundantExpression",
    "Slash",
    "Token",
    "UnclosedOpenParen",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UniOp",
    "UniOpKind",
    "evaluate",
    "evaluate_source",
    "format_diagnostic",
    "format_expr",
    "format_trace",
    "lex",
    "lex_source",
    "parse",
    "parse_source",
    "run_repl",
    "show_diagnostic",
    "show_trace",
]
