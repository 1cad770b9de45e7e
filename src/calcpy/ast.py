from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .spans import Annot, Loc


class UniOpKind(str, Enum):
    MINUS = "-"


class BinOpKind(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        # Higher binds tighter; all binary operators are left-associative.
        if self in (BinOpKind.MUL, BinOpKind.DIV):
            return 2
        return 1


UniOpAnnot: TypeAlias = Annot[UniOpKind]
BinOpAnnot: TypeAlias = Annot[BinOpKind]


@dataclass(frozen=True, slots=True)
class Num:
    value: int


@dataclass(frozen=True, slots=True)
class UniOp:
    op: UniOpAnnot
    e: Expr


@dataclass(frozen=True, slots=True)
class BinOp:
    op: BinOpAnnot
    l: Expr  # noqa: E741
    r: Expr


ExprKind: TypeAlias = Num | UniOp | BinOp
Expr: TypeAlias = Annot[ExprKind]


def num(value: int, loc: Loc) -> Expr:
    return Annot(Num(value), loc)


def uniop(op: UniOpAnnot, e: Expr) -> Expr:
    """Unary node spanning from the operator through its operand."""
    return Annot(UniOp(op, e), op.loc.merge(e.loc))


def binop(op: BinOpAnnot, l: Expr, r: Expr) -> Expr:  # noqa: E741
    return Annot(BinOp(op, l, r), l.loc.merge(r.loc))


def relocate(expr: Expr, loc: Loc) -> Expr:
    return Annot(expr.value, loc)
