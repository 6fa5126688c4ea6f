"""
WHILE+ - an imperative toy language with exceptions

Exports:
- execute: run a statement from an initial store
- Executor / ExecutionConfig / ExecutionResult: configurable driver
- Errors: WhilePlusError, ProgramFormatError, StepLimitExceeded
"""

from whileplus.runtime import (
    execute,
    Executor,
    ExecutionConfig,
    ExecutionResult,
    IntVal,
    BoolVal,
)
from whileplus.errors import WhilePlusError, ProgramFormatError, StepLimitExceeded

__version__ = "1.0.0"

__all__ = [
    "execute",
    "Executor",
    "ExecutionConfig",
    "ExecutionResult",
    "IntVal",
    "BoolVal",
    "WhilePlusError",
    "ProgramFormatError",
    "StepLimitExceeded",
]
