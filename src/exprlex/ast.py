from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class UnOp(str, Enum):
    PLUS = "+"
    MINUS = "-"


class BinOp(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


@dataclass(frozen=True, slots=True)
class Node:
    span: Span


@dataclass(frozen=True, slots=True)
class Num(Node):
    value: float


@dataclass(frozen=True, slots=True)
class Var(Node):
    name: str


@dataclass(frozen=True, slots=True)
class UnaryOp(Node):
    op: UnOp
    operand: "Expr"


@dataclass(frozen=True, slots=True)
class BinaryOp(Node):
    op: BinOp
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True, slots=True)
class Call(Node):
    name: str
    args: tuple["Expr", ...] = ()


Expr = Num | Var | UnaryOp | BinaryOp | Call


@dataclass(frozen=True, slots=True)
class Assign(Node):
    """``name = value`` statement."""

    name: str
    value: Expr


@dataclass(frozen=True, slots=True)
class ExprItem(Node):
    """A bare expression statement."""

    expr: Expr


Item = Assign | ExprItem
