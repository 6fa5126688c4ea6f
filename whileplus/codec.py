"""
WHILE+ JSON Document Codec

Converts between JSON-compatible dictionaries and runtime objects:

- Value:      {"IntVal": 3} | {"BoolVal": true}
- Store:      {"x": Value, ...}
- Expression: {"kind": "Var", "name": "x"}
              {"kind": "Val", "value": Value}
              {"kind": "Op", "op": "Plus", "left": Expression, "right": Expression}
- Statement:  {"kind": "Assign", "var": "x", "expr": Expression}
              {"kind": "If", "cond": Expression, "then": Statement, "else": Statement}
              {"kind": "While", "cond": Expression, "body": Statement}
              {"kind": "Sequence", "first": Statement, "second": Statement}
              {"kind": "Sequence", "statements": [Statement, ...]}
              {"kind": "Print", "message": "...", "expr": Expression}
              {"kind": "Throw", "expr": Expression}
              {"kind": "Try", "body": Statement, "var": "e", "handler": Statement}
              {"kind": "Skip"}
- Program:    {"store": Store, "program": Statement}

Decoding failures raise ProgramFormatError carrying the location of the
offending node.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from whileplus.errors import ProgramFormatError
from whileplus.runtime.state import Store
from whileplus.runtime.syntax import (
    Assign,
    Bop,
    Expression,
    If,
    Op,
    Print,
    Sequence,
    Skip,
    Statement,
    Throw,
    Try,
    Val,
    Var,
    While,
    seq,
)
from whileplus.runtime.values import BoolVal, IntVal, Value

BOPS = {bop.value: bop for bop in Bop}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_object(data: Any, path: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ProgramFormatError(f"expected an object, got {type(data).__name__}", path)
    return data


def _require_field(data: Dict[str, Any], name: str, path: str) -> Any:
    if name not in data:
        raise ProgramFormatError(f"missing required field '{name}'", path)
    return data[name]


def _require_str(data: Dict[str, Any], name: str, path: str) -> str:
    value = _require_field(data, name, path)
    if not isinstance(value, str):
        raise ProgramFormatError(f"field '{name}' must be a string", f"{path}.{name}")
    return value


# ---------------------------------------------------------------------------
# Values and stores
# ---------------------------------------------------------------------------

def decode_value(data: Any, path: str = "$") -> Value:
    data = _require_object(data, path)
    if len(data) != 1:
        raise ProgramFormatError("value must have exactly one of 'IntVal' or 'BoolVal'", path)

    tag, payload = next(iter(data.items()))
    if tag == "IntVal":
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise ProgramFormatError("IntVal payload must be an integer", f"{path}.IntVal")
        return IntVal(payload)
    if tag == "BoolVal":
        if not isinstance(payload, bool):
            raise ProgramFormatError("BoolVal payload must be a boolean", f"{path}.BoolVal")
        return BoolVal(payload)
    raise ProgramFormatError(f"unknown value tag '{tag}'", path)


def encode_value(value: Value) -> Dict[str, Any]:
    return value.to_dict()


def decode_store(data: Any, path: str = "$") -> Store:
    data = _require_object(data, path)
    return {name: decode_value(value, f"{path}.{name}") for name, value in data.items()}


def encode_store(store: Mapping[str, Value]) -> Dict[str, Any]:
    return {name: encode_value(value) for name, value in store.items()}


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def decode_expression(data: Any, path: str = "$") -> Expression:
    data = _require_object(data, path)
    kind = data.get("kind")

    if kind == "Var":
        return Var(_require_str(data, "name", path))
    elif kind == "Val":
        return Val(decode_value(_require_field(data, "value", path), f"{path}.value"))
    elif kind == "Op":
        op_name = _require_str(data, "op", path)
        bop = BOPS.get(op_name)
        if bop is None:
            raise ProgramFormatError(f"unknown operator '{op_name}'", f"{path}.op")
        return Op(
            bop,
            decode_expression(_require_field(data, "left", path), f"{path}.left"),
            decode_expression(_require_field(data, "right", path), f"{path}.right"),
        )
    raise ProgramFormatError(f"unknown expression kind {kind!r}", path)


def encode_expression(expr: Expression) -> Dict[str, Any]:
    if isinstance(expr, Var):
        return {"kind": "Var", "name": expr.name}
    if isinstance(expr, Val):
        return {"kind": "Val", "value": encode_value(expr.value)}
    if isinstance(expr, Op):
        return {
            "kind": "Op",
            "op": expr.bop.value,
            "left": encode_expression(expr.left),
            "right": encode_expression(expr.right),
        }
    raise TypeError(f"Cannot encode expression of type {type(expr).__name__}")


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def decode_statement(data: Any, path: str = "$") -> Statement:
    data = _require_object(data, path)
    kind = data.get("kind")

    def sub(name: str) -> Statement:
        return decode_statement(_require_field(data, name, path), f"{path}.{name}")

    def expr(name: str) -> Expression:
        return decode_expression(_require_field(data, name, path), f"{path}.{name}")

    if kind == "Assign":
        return Assign(_require_str(data, "var", path), expr("expr"))
    elif kind == "If":
        return If(expr("cond"), sub("then"), sub("else"))
    elif kind == "While":
        return While(expr("cond"), sub("body"))
    elif kind == "Sequence":
        if "statements" in data:
            statements = data["statements"]
            if not isinstance(statements, list):
                raise ProgramFormatError("field 'statements' must be a list", f"{path}.statements")
            return seq(*(decode_statement(s, f"{path}.statements[{i}]")
                         for i, s in enumerate(statements)))
        return Sequence(sub("first"), sub("second"))
    elif kind == "Print":
        return Print(_require_str(data, "message", path), expr("expr"))
    elif kind == "Throw":
        return Throw(expr("expr"))
    elif kind == "Try":
        return Try(sub("body"), _require_str(data, "var", path), sub("handler"))
    elif kind == "Skip":
        return Skip()
    raise ProgramFormatError(f"unknown statement kind {kind!r}", path)


def encode_statement(stmt: Statement) -> Dict[str, Any]:
    if isinstance(stmt, Assign):
        return {"kind": "Assign", "var": stmt.var, "expr": encode_expression(stmt.expr)}
    if isinstance(stmt, If):
        return {
            "kind": "If",
            "cond": encode_expression(stmt.cond),
            "then": encode_statement(stmt.then_branch),
            "else": encode_statement(stmt.else_branch),
        }
    if isinstance(stmt, While):
        return {"kind": "While", "cond": encode_expression(stmt.cond), "body": encode_statement(stmt.body)}
    if isinstance(stmt, Sequence):
        return {"kind": "Sequence", "first": encode_statement(stmt.first), "second": encode_statement(stmt.second)}
    if isinstance(stmt, Print):
        return {"kind": "Print", "message": stmt.message, "expr": encode_expression(stmt.expr)}
    if isinstance(stmt, Throw):
        return {"kind": "Throw", "expr": encode_expression(stmt.expr)}
    if isinstance(stmt, Try):
        return {
            "kind": "Try",
            "body": encode_statement(stmt.body),
            "var": stmt.var,
            "handler": encode_statement(stmt.handler),
        }
    if isinstance(stmt, Skip):
        return {"kind": "Skip"}
    raise TypeError(f"Cannot encode statement of type {type(stmt).__name__}")


# ---------------------------------------------------------------------------
# Program documents
# ---------------------------------------------------------------------------

def decode_program(data: Any) -> Tuple[Store, Statement]:
    """Decode a program document into (initial store, statement)."""
    data = _require_object(data, "$")
    store = decode_store(data.get("store", {}), "$.store")
    stmt = decode_statement(_require_field(data, "program", "$"), "$.program")
    return store, stmt


def encode_program(store: Mapping[str, Value], stmt: Statement) -> Dict[str, Any]:
    return {"store": encode_store(store), "program": encode_statement(stmt)}


def _read_json(path: Union[str, Path]) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except UnicodeDecodeError as e:
            raise ProgramFormatError(f"file is not valid UTF-8 - {e}") from e
        except json.JSONDecodeError as e:
            raise ProgramFormatError(f"invalid JSON - {e}") from e


def load_program(path: Union[str, Path]) -> Tuple[Store, Statement]:
    """Read and decode a program document from a UTF-8 JSON file."""
    return decode_program(_read_json(path))


def load_store(path: Union[str, Path]) -> Store:
    """Read and decode a store document from a UTF-8 JSON file."""
    return decode_store(_read_json(path))
