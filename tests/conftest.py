"""Test fixtures for WHILE+ test suite."""
import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from whileplus.runtime.state import EvalContext
from whileplus.runtime.syntax import Assign, Bop, Op, Print, Throw, Try, Val, Var, While, seq
from whileplus.runtime.values import IntVal


@pytest.fixture
def empty_context() -> EvalContext:
    """Context with an empty store and log."""
    return EvalContext()


@pytest.fixture
def countdown_program():
    """
    n := 3; while n > 0 { print "n = " n; n := n - 1 }; print "done " n
    """
    return seq(
        Assign("n", Val(IntVal(3))),
        While(
            Op(Bop.GT, Var("n"), Val(IntVal(0))),
            seq(
                Print("n = ", Var("n")),
                Assign("n", Op(Bop.MINUS, Var("n"), Val(IntVal(1)))),
            ),
        ),
        Print("done ", Var("n")),
    )


@pytest.fixture
def catching_program():
    """Try(Throw 5, e, print "caught " e)."""
    return Try(Throw(Val(IntVal(5))), "e", Print("caught ", Var("e")))


@pytest.fixture
def countdown_document() -> Dict[str, Any]:
    """JSON program document equivalent to countdown_program."""
    return {
        "store": {},
        "program": {
            "kind": "Sequence",
            "statements": [
                {"kind": "Assign", "var": "n", "expr": {"kind": "Val", "value": {"IntVal": 3}}},
                {
                    "kind": "While",
                    "cond": {
                        "kind": "Op", "op": "Gt",
                        "left": {"kind": "Var", "name": "n"},
                        "right": {"kind": "Val", "value": {"IntVal": 0}},
                    },
                    "body": {
                        "kind": "Sequence",
                        "first": {"kind": "Print", "message": "n = ", "expr": {"kind": "Var", "name": "n"}},
                        "second": {
                            "kind": "Assign", "var": "n",
                            "expr": {
                                "kind": "Op", "op": "Minus",
                                "left": {"kind": "Var", "name": "n"},
                                "right": {"kind": "Val", "value": {"IntVal": 1}},
                            },
                        },
                    },
                },
                {"kind": "Print", "message": "done ", "expr": {"kind": "Var", "name": "n"}},
            ],
        },
    }


@pytest.fixture
def uncaught_document() -> Dict[str, Any]:
    """x := 1; throw 9; x := 2"""
    return {
        "program": {
            "kind": "Sequence",
            "statements": [
                {"kind": "Assign", "var": "x", "expr": {"kind": "Val", "value": {"IntVal": 1}}},
                {"kind": "Throw", "expr": {"kind": "Val", "value": {"IntVal": 9}}},
                {"kind": "Assign", "var": "x", "expr": {"kind": "Val", "value": {"IntVal": 2}}},
            ],
        },
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(data: Any, name: str = "program.json") -> str:
        path = tmp_path / name
        with open(path, "w") as f:
            json.dump(data, f)
        return str(path)
    return _write


@pytest.fixture
def nested_try_text():
    """
    JSON text of a program with `depth` nested Try statements.

    Built as a string so producing it does not recurse.
    """
    def _build(depth: int) -> str:
        text = '{"kind": "Skip"}'
        for _ in range(depth):
            text = '{"kind": "Try", "body": ' + text + ', "var": "e", "handler": {"kind": "Skip"}}'
        return '{"program": ' + text + '}'
    return _build
