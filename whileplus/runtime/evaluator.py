"""
WHILE+ Expression Evaluator

Evaluates expression kinds:
- Var: read from the store (unbound -> IntVal 0)
- Val: literal value
- Op: strict left-to-right binary operation

Operators only accept integer operands; anything else raises IntVal 2.
Expressions never modify the store or the log.
"""

from __future__ import annotations

import operator
from typing import Callable, Dict

from whileplus.runtime.state import EvalContext
from whileplus.runtime.syntax import Bop, Expression, Op, Val, Var
from whileplus.runtime.values import (
    BoolVal,
    DIVISION_BY_ZERO,
    EvalResult,
    IntVal,
    TYPE_MISMATCH,
    Value,
)

ARITHMETIC: Dict[Bop, Callable[[int, int], int]] = {
    Bop.PLUS: operator.add,
    Bop.MINUS: operator.sub,
    Bop.TIMES: operator.mul,
    # Rounds towards negative infinity, like the reference's `div`
    Bop.DIVIDE: operator.floordiv,
}

COMPARISON: Dict[Bop, Callable[[int, int], bool]] = {
    Bop.GT: operator.gt,
    Bop.GE: operator.ge,
    Bop.LT: operator.lt,
    Bop.LE: operator.le,
}


def apply_bop(bop: Bop, left: Value, right: Value) -> EvalResult:
    """Apply a binary operator to two already-evaluated operands."""
    if not (isinstance(left, IntVal) and isinstance(right, IntVal)):
        return EvalResult.throw(TYPE_MISMATCH)

    if bop in COMPARISON:
        return EvalResult.normal(BoolVal(COMPARISON[bop](left.value, right.value)))

    if bop is Bop.DIVIDE and right.value == 0:
        return EvalResult.throw(DIVISION_BY_ZERO)

    return EvalResult.normal(IntVal(ARITHMETIC[bop](left.value, right.value)))


class ExpressionEvaluator:
    """Evaluates expressions against an evaluation context."""

    def __init__(self, context: EvalContext):
        self.context = context

    def evaluate(self, expr: Expression) -> EvalResult:
        """
        Evaluate an expression.

        Returns:
            EvalResult carrying the value, or the raised value if evaluation
            failed.
        """
        if isinstance(expr, Var):
            return self.context.read_var(expr.name)
        elif isinstance(expr, Val):
            return EvalResult.normal(expr.value)
        elif isinstance(expr, Op):
            return self._eval_op(expr)
        else:
            raise TypeError(f"Unknown expression kind: {type(expr).__name__}")

    def _eval_op(self, expr: Op) -> EvalResult:
        left = self.evaluate(expr.left)
        if not left.success:
            return left

        right = self.evaluate(expr.right)
        if not right.success:
            return right

        return apply_bop(expr.bop, left.value, right.value)
