"""
WHILE+ Runtime Values

Key classes:
- ValueType: Tag of a runtime value (IntVal / BoolVal)
- IntVal, BoolVal: The two runtime value variants
- EvalResult: Outcome of evaluating an expression or statement

Values are immutable. Integers behave like a 64-bit signed machine integer:
every IntVal is normalised into [-2**63, 2**63 - 1] by two's complement
wraparound.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def wrap_int(n: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    n &= (1 << INT_BITS) - 1
    if n > INT_MAX:
        n -= 1 << INT_BITS
    return n


class ValueType(Enum):
    INT = "IntVal"
    BOOL = "BoolVal"


@dataclass(frozen=True)
class IntVal:
    """Integer-tagged value."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"IntVal requires an int, got {type(self.value).__name__}")
        object.__setattr__(self, "value", wrap_int(self.value))

    @property
    def value_type(self) -> ValueType:
        return ValueType.INT

    def show(self) -> str:
        # Negative payloads are parenthesised, as a derived Show instance does
        if self.value < 0:
            return f"IntVal ({self.value})"
        return f"IntVal {self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {"IntVal": self.value}

    def __str__(self) -> str:
        return self.show()


@dataclass(frozen=True)
class BoolVal:
    """Boolean-tagged value."""
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"BoolVal requires a bool, got {type(self.value).__name__}")

    @property
    def value_type(self) -> ValueType:
        return ValueType.BOOL

    def show(self) -> str:
        return f"BoolVal {self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {"BoolVal": self.value}

    def __str__(self) -> str:
        return self.show()


Value = Union[IntVal, BoolVal]

# Built-in fault values, raised through the same channel as Throw
UNBOUND_VARIABLE = IntVal(0)
DIVISION_BY_ZERO = IntVal(1)
TYPE_MISMATCH = IntVal(2)


@dataclass(frozen=True)
class EvalResult:
    """
    Result of evaluating an expression or a statement.

    Either the evaluation completed normally (success=True, with a value for
    expressions and None for statements) or it raised a WHILE+ value that is
    propagating towards the nearest enclosing Try.
    """
    success: bool
    value: Optional[Value] = None
    raised: Optional[Value] = None

    @classmethod
    def normal(cls, value: Optional[Value] = None) -> "EvalResult":
        return cls(success=True, value=value)

    @classmethod
    def throw(cls, value: Value) -> "EvalResult":
        return cls(success=False, raised=value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "value": self.value.to_dict() if self.value is not None else None,
            "raised": self.raised.to_dict() if self.raised is not None else None,
        }


# Shared result for statements that complete normally
COMPLETED = EvalResult.normal()
