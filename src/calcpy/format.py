from __future__ import annotations

from typing import assert_never

from . import ast as A
from .digits import int_to_str


def format_expr(expr: A.Expr) -> str:
    """Canonical text for ``expr``.

    Binary operators get one space on each side and only the parentheses
    needed to rebuild the same tree are emitted. Locations are not preserved.
    """
    match expr.value:
        case A.Num(value):
            return int_to_str(value)
        case A.UniOp():
            return _format_uniops(expr)
        case A.BinOp():
            return _format_binops(expr)
        case _:
            assert_never(expr.value)


def _format_uniops(expr: A.Expr) -> str:
    prefix: list[str] = []
    node = expr
    while isinstance(node.value, A.UniOp):
        prefix.append(node.value.op.value.value)
        node = node.value.e
    operand = format_expr(node)
    if isinstance(node.value, A.BinOp):
        operand = f"({operand})"
    return "".join(prefix) + operand


def _format_binops(expr: A.Expr) -> str:
    # Left spine first, then fold back up; only right operands recurse.
    spine: list[A.BinOp] = []
    node = expr
    while isinstance(node.value, A.BinOp):
        spine.append(node.value)
        node = node.value.l

    text = format_expr(node)
    text_prec = _binop_prec(node)
    for b in reversed(spine):
        prec = b.op.value.precedence
        if text_prec < prec:
            text = f"({text})"
        right = format_expr(b.r)
        # Same precedence on the right must be grouped to stay left-associative.
        if _binop_prec(b.r) <= prec:
            right = f"({right})"
        text = f"{text} {b.op.value.value} {right}"
        text_prec = prec
    return text


def _binop_prec(e: A.Expr) -> int:
    if isinstance(e.value, A.BinOp):
        return e.value.op.value.precedence
    # Literals and unary expressions bind tighter than any binary operator.
    return 3
