"""
WHILE+ host-level errors

These are ordinary Python exceptions raised by the collaborators around the
evaluator (document decoding, step budgets). They are never WHILE+ values:
runtime faults inside a program travel through EvalResult instead.
"""

from __future__ import annotations

from typing import Any, Optional


class WhilePlusError(Exception):
    """Base class for host-level WHILE+ errors."""


class ProgramFormatError(WhilePlusError, ValueError):
    """A program, store or value document could not be decoded."""

    def __init__(self, message: str, path: str = "$"):
        super().__init__(f"{path}: {message}")
        self.message = message
        self.path = path


class StepLimitExceeded(WhilePlusError):
    """
    Raised when a run executes more statements than ExecutionConfig.max_steps.

    The context reached so far is attached so callers can still inspect the
    partial store and log.
    """

    def __init__(self, max_steps: int, context: Optional[Any] = None):
        super().__init__(f"Step limit of {max_steps} statements exceeded")
        self.max_steps = max_steps
        self.context = context
