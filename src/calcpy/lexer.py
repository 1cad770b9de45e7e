from __future__ import annotations

import logging
from dataclasses import dataclass

from .digits import str_to_int
from .errors import InvalidChar, LexError, UnexpectedEndOfInput
from .spans import Annot, Loc
from .tokens import PUNCTUATION, Number, Token


logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n\r\x0c")
_DIGITS = frozenset("0123456789")


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self) -> str:
        if self.eof():
            return ""
        return self.src[self.i]

    def bump(self) -> str:
        """Consume one character; running out here means a lexeme was cut short."""
        if self.eof():
            n = len(self.src)
            raise LexError(UnexpectedEndOfInput(), Loc(n, n + 1))
        ch = self.src[self.i]
        self.i += 1
        return ch


def lex(input: str) -> list[Token]:
    cur = _Cursor(src=input)
    tokens: list[Token] = []

    while not cur.eof():
        ch = cur.peek()
        start = cur.i

        if ch in _WHITESPACE:
            cur.bump()
            continue

        if ch in _DIGITS:
            tokens.append(_lex_number(cur))
            continue

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            cur.bump()
            tokens.append(Annot(kind, Loc(start, cur.i)))
            continue

        raise LexError(InvalidChar(ch), Loc(start, start + 1))

    logger.debug("lexed %d token(s) from %r", len(tokens), input)
    return tokens


def _lex_number(cur: _Cursor) -> Token:
    start = cur.i
    cur.bump()
    while cur.peek() in _DIGITS:
        cur.bump()
    digits = cur.src[start : cur.i]
    try:
        value = str_to_int(digits)
    except ValueError as e:
        raise RuntimeError(f"digit run {digits!r} is not an integer literal") from e
    return Annot(Number(value), Loc(start, cur.i))
