"""
WHILE+ Evaluation Context

The context is the only mutable state of a run: the store (variable
bindings) and the output log. Writes and prints take effect immediately and
are never rolled back when an exception is raised later.

Key classes:
- EvalContext: store + log with the read/write/print primitives
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from whileplus.runtime.values import EvalResult, UNBOUND_VARIABLE, Value

Store = Dict[str, Value]


@dataclass
class EvalContext:
    """
    Store and log threaded through one evaluation.

    The store is replaced wholesale on every write, so a mapping handed out
    by snapshot() always shows a fully-updated state and never changes later.
    """
    store: Store = field(default_factory=dict)
    log: List[str] = field(default_factory=list)

    def read_var(self, name: str) -> EvalResult:
        """Look up a variable; unbound names raise IntVal 0."""
        value = self.store.get(name)
        if value is None:
            return EvalResult.throw(UNBOUND_VARIABLE)
        return EvalResult.normal(value)

    def write_var(self, name: str, value: Value) -> None:
        store = dict(self.store)
        store[name] = value
        self.store = store

    def append_log(self, message: str) -> None:
        self.log.append(message)

    def rendered_log(self) -> str:
        """Log entries in emission order, one per line, each newline-terminated."""
        return "".join(line + "\n" for line in self.log)

    def snapshot(self) -> Mapping[str, Value]:
        """Read-only view of the current store."""
        return MappingProxyType(self.store)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "store": {name: value.to_dict() for name, value in self.store.items()},
            "log": list(self.log),
        }
