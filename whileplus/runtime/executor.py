"""
WHILE+ Program Executor

Builds a fresh context, runs one statement and extracts the
(store, uncaught exception, log) triple.

Key classes:
- ExecutionConfig: Configuration for a run
- ExecutionResult: Final store, uncaught value and rendered log
- Executor: Main execution engine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional

from whileplus.runtime.interpreter import Interpreter
from whileplus.runtime.state import EvalContext, Store
from whileplus.runtime.syntax import Statement
from whileplus.runtime.values import Value

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Configuration for program execution."""
    max_steps: Optional[int] = None


@dataclass
class ExecutionResult:
    """
    Result of running a program.

    Unpacks as the triple (store, exception, log):

        store, exception, log = execute({}, program)
    """
    store: Store = field(default_factory=dict)
    exception: Optional[Value] = None
    log: str = ""
    steps: int = 0

    @property
    def success(self) -> bool:
        """True when no exception escaped the top-level statement."""
        return self.exception is None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.store, self.exception, self.log))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "store": {name: value.to_dict() for name, value in self.store.items()},
            "exception": self.exception.to_dict() if self.exception is not None else None,
            "log": self.log,
        }


class Executor:
    """
    WHILE+ execution engine.

    Each call to execute() owns a brand new EvalContext; nothing is shared
    between runs.
    """

    def __init__(self, config: ExecutionConfig = None):
        self.config = config or ExecutionConfig()

    def execute(self, initial_store: Mapping[str, Value], stmt: Statement) -> ExecutionResult:
        """
        Execute a statement from an initial store.

        Args:
            initial_store: Variable bindings visible at the start of the run
            stmt: Statement to execute

        Returns:
            ExecutionResult with the final store, the uncaught value (if any)
            and the newline-terminated log

        Raises:
            StepLimitExceeded: if config.max_steps is set and exceeded
        """
        store = dict(initial_store)
        context = EvalContext(store=store, log=[])
        interpreter = Interpreter(context, max_steps=self.config.max_steps)

        logger.debug(f"Executing {type(stmt).__name__} with {len(store)} initial bindings")
        outcome = interpreter.execute(stmt)

        result = ExecutionResult(
            store=context.store,
            exception=outcome.raised,
            log=context.rendered_log(),
            steps=interpreter.steps,
        )

        if not outcome.success:
            logger.info(f"Uncaught exception {outcome.raised.show()} after {interpreter.steps} steps")
        else:
            logger.debug(f"Completed after {interpreter.steps} steps")

        return result


def execute(initial_store: Mapping[str, Value],
            stmt: Statement,
            config: ExecutionConfig = None) -> ExecutionResult:
    """Run a statement with a one-off Executor."""
    return Executor(config).execute(initial_store, stmt)
