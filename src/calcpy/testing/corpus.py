from __future__ import annotations

import random


_SPACES = ["", "", "", " ", "  ", "\t"]


def generate_expressions(*, seed: int, count: int, allow_division: bool = False, max_depth: int = 4) -> list[str]:
    """Deterministic well-formed expressions.

    Without division every generated line is also a valid Python expression
    with the same value, which the tests use as an oracle.
    """
    r = random.Random(seed)
    ops = "+-*/" if allow_division else "+-*"
    return [_gen_expr(r, ops, depth=r.randint(0, max_depth)) for _ in range(count)]


def _ws(r: random.Random) -> str:
    return r.choice(_SPACES)


def _gen_expr(r: random.Random, ops: str, *, depth: int) -> str:
    if depth <= 0:
        return _gen_atom(r)
    k = r.random()
    if k < 0.6:
        left = _gen_expr(r, ops, depth=depth - 1)
        right = _gen_expr(r, ops, depth=depth - 1)
        return f"{left}{_ws(r)}{r.choice(ops)}{_ws(r)}{right}"
    if k < 0.8:
        return "(" + _ws(r) + _gen_expr(r, ops, depth=depth - 1) + _ws(r) + ")"
    return "-" + _ws(r) + _gen_expr(r, ops, depth=depth - 1)


def _gen_atom(r: random.Random) -> str:
    if r.random() < 0.1:
        return str(r.randint(10**6, 10**12))
    return str(r.randint(0, 99))
