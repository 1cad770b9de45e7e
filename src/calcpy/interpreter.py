from __future__ import annotations

import logging
from typing import assert_never

from .ast import BinOp, BinOpKind, Expr, Num, UniOp, UniOpKind
from .errors import InterpreterError, InterpreterErrorKind
from .spans import Loc


logger = logging.getLogger(__name__)


class Interpreter:
    """Tree-walking evaluator over unbounded integers."""

    def eval(self, expr: Expr) -> int:
        # The left/operand spine is walked with a stack; only right operands recurse.
        spine: list[Expr] = []
        node = expr
        while not isinstance(node.value, Num):
            match node.value:
                case UniOp(_, e):
                    spine.append(node)
                    node = e
                case BinOp(_, l, _):
                    spine.append(node)
                    node = l
                case _:
                    assert_never(node.value)

        acc = node.value.value
        for outer in reversed(spine):
            match outer.value:
                case UniOp(op, _):
                    acc = self.eval_uniop(op.value, acc)
                case BinOp(op, _, r):
                    acc = self.eval_binop(op.value, acc, self.eval(r), outer.loc)
                case _:
                    raise AssertionError(outer.value)
        return acc

    def eval_uniop(self, op: UniOpKind, n: int) -> int:
        match op:
            case UniOpKind.MINUS:
                return -n
            case _:
                assert_never(op)

    def eval_binop(self, op: BinOpKind, l: int, r: int, loc: Loc) -> int:  # noqa: E741
        match op:
            case BinOpKind.ADD:
                return l + r
            case BinOpKind.SUB:
                return l - r
            case BinOpKind.MUL:
                return l * r
            case BinOpKind.DIV:
                if r == 0:
                    raise InterpreterError(InterpreterErrorKind.DIVISION_BY_ZERO, loc)
                return _div_trunc(l, r)
            case _:
                assert_never(op)


def _div_trunc(l: int, r: int) -> int:  # noqa: E741
    # Rounds toward zero, unlike Python's floor division.
    q = abs(l) // abs(r)
    return q if (l < 0) == (r < 0) else -q


def evaluate(expr: Expr) -> int:
    value = Interpreter().eval(expr)
    logger.debug("evaluated expression at %s", expr.loc)
    return value
