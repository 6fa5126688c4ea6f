"""Test JSON document codec."""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from whileplus.codec import (
    decode_expression,
    decode_program,
    decode_statement,
    decode_store,
    decode_value,
    encode_program,
    encode_statement,
    load_program,
    load_store,
)
from whileplus.errors import ProgramFormatError
from whileplus.runtime.executor import execute
from whileplus.runtime.syntax import Assign, Bop, Op, Print, Sequence, Skip, Throw, Try, Val, Var, While
from whileplus.runtime.values import BoolVal, IntVal


class TestValueCodec:
    """Tests for value and store documents."""

    def test_decode_values(self):
        assert decode_value({"IntVal": -4}) == IntVal(-4)
        assert decode_value({"BoolVal": False}) == BoolVal(False)

    @pytest.mark.parametrize("doc", [
        {"IntVal": True},
        {"IntVal": "3"},
        {"BoolVal": 1},
        {"Float": 1.0},
        {"IntVal": 1, "BoolVal": True},
        [1],
    ])
    def test_decode_invalid_values(self, doc):
        with pytest.raises(ProgramFormatError):
            decode_value(doc)

    def test_decode_store(self):
        assert decode_store({"x": {"IntVal": 1}, "b": {"BoolVal": True}}) == {
            "x": IntVal(1),
            "b": BoolVal(True),
        }

    def test_store_error_path(self):
        with pytest.raises(ProgramFormatError) as excinfo:
            decode_store({"x": {"IntVal": "no"}})
        assert excinfo.value.path == "$.x.IntVal"


class TestStatementCodec:
    """Tests for expression and statement documents."""

    def test_decode_op(self):
        expr = decode_expression({
            "kind": "Op", "op": "Divide",
            "left": {"kind": "Var", "name": "x"},
            "right": {"kind": "Val", "value": {"IntVal": 2}},
        })
        assert expr == Op(Bop.DIVIDE, Var("x"), Val(IntVal(2)))

    def test_unknown_operator(self):
        with pytest.raises(ProgramFormatError) as excinfo:
            decode_expression({
                "kind": "Op", "op": "Mod",
                "left": {"kind": "Var", "name": "x"},
                "right": {"kind": "Var", "name": "y"},
            })
        assert excinfo.value.path == "$.op"

    def test_decode_try(self):
        stmt = decode_statement({
            "kind": "Try",
            "body": {"kind": "Throw", "expr": {"kind": "Val", "value": {"IntVal": 5}}},
            "var": "e",
            "handler": {"kind": "Print", "message": "caught ", "expr": {"kind": "Var", "name": "e"}},
        })
        assert stmt == Try(Throw(Val(IntVal(5))), "e", Print("caught ", Var("e")))

    def test_sequence_list_folds_right(self):
        stmt = decode_statement({
            "kind": "Sequence",
            "statements": [{"kind": "Skip"}, {"kind": "Assign", "var": "x", "expr": {"kind": "Var", "name": "y"}}, {"kind": "Skip"}],
        })
        assert stmt == Sequence(Skip(), Sequence(Assign("x", Var("y")), Skip()))

    def test_missing_field_reports_path(self):
        with pytest.raises(ProgramFormatError) as excinfo:
            decode_statement({"kind": "While", "cond": {"kind": "Val", "value": {"BoolVal": True}}})
        assert "missing required field 'body'" in str(excinfo.value)

    def test_unknown_statement_kind(self):
        with pytest.raises(ProgramFormatError) as excinfo:
            decode_statement({"kind": "Sequence", "first": {"kind": "Goto"}, "second": {"kind": "Skip"}})
        assert excinfo.value.path == "$.first"

    def test_encode_matches_document(self, countdown_program):
        doc = encode_statement(countdown_program)
        assert doc["kind"] == "Sequence"
        assert doc["first"] == {"kind": "Assign", "var": "n", "expr": {"kind": "Val", "value": {"IntVal": 3}}}
        assert decode_statement(doc) == countdown_program


class TestProgramDocuments:
    """Tests for whole program documents."""

    def test_decode_program(self, countdown_document, countdown_program):
        store, stmt = decode_program(countdown_document)
        assert store == {}
        assert stmt == countdown_program

    def test_store_is_optional(self, uncaught_document):
        store, stmt = decode_program(uncaught_document)
        assert store == {}
        result = execute(store, stmt)
        assert result.exception == IntVal(9)
        assert result.store == {"x": IntVal(1)}

    def test_program_is_required(self):
        with pytest.raises(ProgramFormatError):
            decode_program({"store": {}})

    def test_encode_program(self):
        doc = encode_program({"x": IntVal(1)}, While(Var("b"), Skip()))
        assert doc == {
            "store": {"x": {"IntVal": 1}},
            "program": {"kind": "While", "cond": {"kind": "Var", "name": "b"}, "body": {"kind": "Skip"}},
        }

    def test_load_program(self, write_json, countdown_document):
        store, stmt = load_program(write_json(countdown_document))
        assert execute(store, stmt).log == "n = IntVal 3\nn = IntVal 2\nn = IntVal 1\ndone IntVal 0\n"

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("not valid json")
        with pytest.raises(ProgramFormatError):
            load_program(path)

    def test_load_store(self, write_json):
        assert load_store(write_json({"n": {"IntVal": 2}}, "store.json")) == {"n": IntVal(2)}

    def test_load_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"program": {"kind": "Print", "message": "caf\xe9", "expr": {"kind": "Val", "value": {"IntVal": 1}}}}')
        with pytest.raises(ProgramFormatError, match="UTF-8"):
            load_program(path)

    def test_load_utf8_file(self, tmp_path):
        path = tmp_path / "utf8.json"
        path.write_bytes('{"program": {"kind": "Print", "message": "café ", "expr": {"kind": "Val", "value": {"IntVal": 1}}}}'.encode("utf-8"))
        store, stmt = load_program(path)
        assert execute(store, stmt).log == "café IntVal 1\n"
