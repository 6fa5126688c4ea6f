"""
WHILE+ Abstract Syntax

Expressions:
- Var: variable reference
- Val: literal value
- Op: binary operator applied to two subexpressions

Statements:
- Assign, If, While, Sequence, Print, Throw, Try, Skip

Nodes are immutable dataclasses; the same subtree may be shared between
several parents (While re-runs its body without copying it).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from whileplus.runtime.values import Value


class Bop(Enum):
    PLUS = "Plus"
    MINUS = "Minus"
    TIMES = "Times"
    DIVIDE = "Divide"
    GT = "Gt"
    GE = "Ge"
    LT = "Lt"
    LE = "Le"


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Val:
    value: Value


@dataclass(frozen=True)
class Op:
    bop: Bop
    left: "Expression"
    right: "Expression"


Expression = Union[Var, Val, Op]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Assign:
    var: str
    expr: Expression


@dataclass(frozen=True)
class If:
    cond: Expression
    then_branch: "Statement"
    else_branch: "Statement"


@dataclass(frozen=True)
class While:
    cond: Expression
    body: "Statement"


@dataclass(frozen=True)
class Sequence:
    first: "Statement"
    second: "Statement"


@dataclass(frozen=True)
class Print:
    message: str
    expr: Expression


@dataclass(frozen=True)
class Throw:
    expr: Expression


@dataclass(frozen=True)
class Try:
    body: "Statement"
    var: str
    handler: "Statement"


@dataclass(frozen=True)
class Skip:
    """Statement that does nothing."""


Statement = Union[Assign, If, While, Sequence, Print, Throw, Try, Skip]


def seq(*statements: "Statement") -> "Statement":
    """
    Chain statements into a right-nested Sequence.

    seq() is Skip, seq(s) is s, seq(a, b, c) is Sequence(a, Sequence(b, c)).
    """
    if not statements:
        return Skip()
    result = statements[-1]
    for stmt in reversed(statements[:-1]):
        result = Sequence(stmt, result)
    return result


def iter_statements(stmt: "Statement") -> Iterator["Statement"]:
    """Yield every statement node of a tree, parents before children."""
    stack = [stmt]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Sequence):
            stack.extend((node.second, node.first))
        elif isinstance(node, If):
            stack.extend((node.else_branch, node.then_branch))
        elif isinstance(node, While):
            stack.append(node.body)
        elif isinstance(node, Try):
            stack.extend((node.handler, node.body))
