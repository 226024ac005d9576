from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from . import ast as A


# Binding strength; higher binds tighter.
_PREC: dict[A.BinOp, int] = {
    A.BinOp.ADD: 1,
    A.BinOp.SUB: 1,
    A.BinOp.MUL: 2,
    A.BinOp.DIV: 2,
    A.BinOp.MOD: 2,
}
_UNARY_PREC = 3
_ATOM_PREC = 4


def format_items(items: Iterable[A.Item]) -> str:
    out = [format_item(it) for it in items]
    return "".join(line + "\n" for line in out)


def format_item(item: A.Item) -> str:
    if isinstance(item, A.Assign):
        return f"{item.name} = {format_expr(item.value)}"
    if isinstance(item, A.ExprItem):
        return format_expr(item.expr)
    raise TypeError(f"not an item: {type(item)!r}")


def format_expr(expr: A.Expr) -> str:
    if isinstance(expr, A.Num):
        return _format_num(expr.value)
    if isinstance(expr, A.Var):
        return expr.name
    if isinstance(expr, A.Call):
        return f"{expr.name}(" + ", ".join(format_expr(a) for a in expr.args) + ")"
    if isinstance(expr, A.UnaryOp):
        return expr.op.value + _wrap(expr.operand, _UNARY_PREC)
    if isinstance(expr, A.BinaryOp):
        prec = _PREC[expr.op]
        left = _wrap(expr.left, prec)
        # Left associative: an equal-precedence right operand needs parens.
        right = _wrap(expr.right, prec + 1)
        return f"{left} {expr.op.value} {right}"
    raise TypeError(f"not an expression: {type(expr)!r}")


def _prec_of(expr: A.Expr) -> int:
    if isinstance(expr, A.BinaryOp):
        return _PREC[expr.op]
    if isinstance(expr, A.UnaryOp):
        return _UNARY_PREC
    return _ATOM_PREC


def _wrap(expr: A.Expr, min_prec: int) -> str:
    s = format_expr(expr)
    if _prec_of(expr) < min_prec:
        return f"({s})"
    return s


def _format_num(value: float) -> str:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot render {value!r} as a number literal")
    # Literals carry no sign; a parser puts negation in a UnaryOp.
    if math.copysign(1.0, value) < 0:
        raise ValueError(f"cannot render negative {value!r} as a number literal")
    if value.is_integer():
        return str(int(value))
    # repr() is the shortest round-tripping form but may use an exponent.
    return format(Decimal(repr(value)), "f")
