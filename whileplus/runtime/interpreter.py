"""
WHILE+ Statement Interpreter

Executes statements against an EvalContext. Each statement either completes
normally or returns the raised value to its parent, which unwinds until a Try
intercepts it or it escapes the top-level statement.

Key classes:
- Interpreter: statement dispatcher with explicit loops for While and Sequence
"""

from __future__ import annotations

import logging
from typing import Optional

from whileplus.errors import StepLimitExceeded
from whileplus.runtime.evaluator import ExpressionEvaluator
from whileplus.runtime.state import EvalContext
from whileplus.runtime.syntax import (
    Assign,
    Expression,
    If,
    Print,
    Sequence,
    Skip,
    Statement,
    Throw,
    Try,
    While,
)
from whileplus.runtime.values import BoolVal, COMPLETED, EvalResult, TYPE_MISMATCH

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Statement interpreter for WHILE+.

    Args:
        context: Store and log mutated by the run
        max_steps: Optional cap on executed statements (None means unbounded)
    """

    def __init__(self, context: EvalContext, max_steps: Optional[int] = None):
        self.context = context
        self.evaluator = ExpressionEvaluator(context)
        self.max_steps = max_steps
        self.steps = 0

    def execute(self, stmt: Statement) -> EvalResult:
        """Execute a statement and report normal completion or the raised value."""
        self._tick()

        if isinstance(stmt, Assign):
            return self._exec_assign(stmt)
        elif isinstance(stmt, If):
            return self._exec_if(stmt)
        elif isinstance(stmt, While):
            return self._exec_while(stmt)
        elif isinstance(stmt, Sequence):
            return self._exec_sequence(stmt)
        elif isinstance(stmt, Print):
            return self._exec_print(stmt)
        elif isinstance(stmt, Throw):
            return self._exec_throw(stmt)
        elif isinstance(stmt, Try):
            return self._exec_try(stmt)
        elif isinstance(stmt, Skip):
            return COMPLETED
        # Anything else is a no-op
        return COMPLETED

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise StepLimitExceeded(self.max_steps, self.context)

    def _eval_condition(self, cond: Expression) -> EvalResult:
        """Evaluate a branch/loop condition; non-boolean results raise IntVal 2."""
        result = self.evaluator.evaluate(cond)
        if not result.success:
            return result
        if not isinstance(result.value, BoolVal):
            return EvalResult.throw(TYPE_MISMATCH)
        return result

    def _exec_assign(self, stmt: Assign) -> EvalResult:
        result = self.evaluator.evaluate(stmt.expr)
        if not result.success:
            return result
        self.context.write_var(stmt.var, result.value)
        return COMPLETED

    def _exec_if(self, stmt: If) -> EvalResult:
        cond = self._eval_condition(stmt.cond)
        if not cond.success:
            return cond
        if cond.value.value:
            return self.execute(stmt.then_branch)
        return self.execute(stmt.else_branch)

    def _exec_while(self, stmt: While) -> EvalResult:
        """
        Run the loop iteratively.

        Each iteration re-checks the condition (including its type) before
        running the body; a raise from either aborts the remaining iterations.
        """
        while True:
            cond = self._eval_condition(stmt.cond)
            if not cond.success:
                return cond
            if not cond.value.value:
                return COMPLETED
            body = self.execute(stmt.body)
            if not body.success:
                return body

    def _exec_sequence(self, stmt: Sequence) -> EvalResult:
        # Walk the right spine iteratively so long chains do not recurse
        current: Statement = stmt
        while isinstance(current, Sequence):
            result = self.execute(current.first)
            if not result.success:
                return result
            current = current.second
        return self.execute(current)

    def _exec_print(self, stmt: Print) -> EvalResult:
        result = self.evaluator.evaluate(stmt.expr)
        if not result.success:
            return result
        self.context.append_log(stmt.message + result.value.show())
        return COMPLETED

    def _exec_throw(self, stmt: Throw) -> EvalResult:
        result = self.evaluator.evaluate(stmt.expr)
        if not result.success:
            return result
        return EvalResult.throw(result.value)

    def _exec_try(self, stmt: Try) -> EvalResult:
        result = self.execute(stmt.body)
        if result.success:
            return result
        logger.debug(f"Caught {result.raised.show()}, binding to {stmt.var!r}")
        self.context.write_var(stmt.var, result.raised)
        return self.execute(stmt.handler)
