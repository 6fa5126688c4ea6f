"""
WHILE+ Runtime Engine

This module provides the core runtime for executing WHILE+ programs:
- Values: IntVal / BoolVal and the built-in fault values
- Syntax: Expression and statement AST
- State: Evaluation context (store + log)
- Evaluator: Expression evaluation
- Interpreter: Statement execution with exception propagation
- Executor: Runs a program and returns (store, exception, log)
"""

from whileplus.runtime.values import (
    IntVal,
    BoolVal,
    Value,
    ValueType,
    EvalResult,
    UNBOUND_VARIABLE,
    DIVISION_BY_ZERO,
    TYPE_MISMATCH,
)
from whileplus.runtime.syntax import (
    Bop,
    Var,
    Val,
    Op,
    Expression,
    Assign,
    If,
    While,
    Sequence,
    Print,
    Throw,
    Try,
    Skip,
    Statement,
    seq,
)
from whileplus.runtime.state import EvalContext
from whileplus.runtime.evaluator import ExpressionEvaluator
from whileplus.runtime.interpreter import Interpreter
from whileplus.runtime.executor import Executor, ExecutionConfig, ExecutionResult, execute

__all__ = [
    "IntVal",
    "BoolVal",
    "Value",
    "ValueType",
    "EvalResult",
    "UNBOUND_VARIABLE",
    "DIVISION_BY_ZERO",
    "TYPE_MISMATCH",
    "Bop",
    "Var",
    "Val",
    "Op",
    "Expression",
    "Assign",
    "If",
    "While",
    "Sequence",
    "Print",
    "Throw",
    "Try",
    "Skip",
    "Statement",
    "seq",
    "EvalContext",
    "ExpressionEvaluator",
    "Interpreter",
    "Executor",
    "ExecutionConfig",
    "ExecutionResult",
    "execute",
]
