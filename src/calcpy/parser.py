from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .ast import BinOpAnnot, BinOpKind, Expr, UniOpAnnot, UniOpKind, binop, num, relocate, uniop
from .errors import (
    NotExpression,
    NotOperator,
    ParseError,
    RedundantExpression,
    UnclosedOpenParen,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .spans import Annot
from .tokens import Asterisk, LParen, Minus, Number, Plus, RParen, Slash, Token


logger = logging.getLogger(__name__)

_BINOPS: dict[type, BinOpKind] = {
    Plus: BinOpKind.ADD,
    Minus: BinOpKind.SUB,
    Asterisk: BinOpKind.MUL,
    Slash: BinOpKind.DIV,
}


def parse(tokens: Sequence[Token]) -> Expr:
    """Parse a whole line of tokens into one expression.

    Grammar, loosest binding first::

        expr    := addsub
        addsub  := muldiv (('+' | '-') muldiv)*
        muldiv  := unary (('*' | '/') unary)*
        unary   := '-' unary | primary
        primary := NUMBER | '(' expr ')'

    Every token must be consumed; leftovers raise ``RedundantExpression``.
    """
    p = _Parser(tuple(tokens))
    expr = p.expr()
    rest = p.peek()
    if rest is not None:
        raise ParseError(RedundantExpression(rest))
    logger.debug("parsed %d token(s) into an expression at %s", len(p.tokens), expr.loc)
    return expr


def binop_of(tok: Token) -> BinOpAnnot:
    kind = _BINOPS.get(type(tok.value))
    if kind is None:
        raise ParseError(NotOperator(tok))
    return Annot(kind, tok.loc)


def uniop_of(tok: Token) -> UniOpAnnot:
    if not isinstance(tok.value, Minus):
        raise ParseError(UnexpectedToken(tok))
    return Annot(UniOpKind.MINUS, tok.loc)


@dataclass(slots=True)
class _Parser:
    tokens: tuple[Token, ...]
    i: int = 0

    def peek(self) -> Token | None:
        if self.i >= len(self.tokens):
            return None
        return self.tokens[self.i]

    def next(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError(UnexpectedEndOfInput())
        self.i += 1
        return tok

    def next_if(self, *kinds: type) -> Token | None:
        tok = self.peek()
        if tok is not None and isinstance(tok.value, kinds):
            self.i += 1
            return tok
        return None

    def expect(self, kind: type) -> Token:
        tok = self.next()
        if not isinstance(tok.value, kind):
            raise ParseError(UnexpectedToken(tok))
        return tok

    def expr(self) -> Expr:
        return self.addsub()

    def addsub(self) -> Expr:
        return self._left_assoc(self.muldiv, Plus, Minus)

    def muldiv(self) -> Expr:
        return self._left_assoc(self.unary, Asterisk, Slash)

    def _left_assoc(self, operand: Callable[[], Expr], *ops: type) -> Expr:
        left = operand()
        while (tok := self.next_if(*ops)) is not None:
            op = binop_of(tok)
            right = operand()
            left = binop(op, left, right)
        return left

    def unary(self) -> Expr:
        # Collected iteratively: a long run of "-" must not deepen the call stack.
        ops: list[UniOpAnnot] = []
        while (tok := self.peek()) is not None and isinstance(tok.value, Minus):
            ops.append(uniop_of(self.expect(Minus)))
        expr = self.primary()
        for op in reversed(ops):
            expr = uniop(op, expr)
        return expr

    def primary(self) -> Expr:
        tok = self.next()
        match tok.value:
            case Number(value):
                return num(value, tok.loc)
            case LParen():
                inner = self.expr()
                close = self.peek()
                if close is None or not isinstance(close.value, RParen):
                    raise ParseError(UnclosedOpenParen(tok))
                self.i += 1
                return relocate(inner, tok.loc.merge(close.loc))
            case _:
                raise ParseError(NotExpression(tok))
