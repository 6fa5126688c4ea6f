"""Integration tests: program documents run end to end."""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from whileplus.codec import decode_program, encode_program, load_program
from whileplus.runtime.executor import execute
from whileplus.runtime.syntax import Assign, Bop, If, Op, Print, Throw, Try, Val, Var, While, seq
from whileplus.runtime.values import BoolVal, IntVal


def lit(n):
    return Val(IntVal(n))


class TestProgramExecution:
    """Programs that mix loops, faults and handlers."""

    def test_factorial(self):
        stmt = seq(
            Assign("acc", lit(1)),
            While(
                Op(Bop.GT, Var("n"), lit(1)),
                seq(
                    Assign("acc", Op(Bop.TIMES, Var("acc"), Var("n"))),
                    Assign("n", Op(Bop.MINUS, Var("n"), lit(1))),
                ),
            ),
            Print("fact = ", Var("acc")),
        )
        result = execute({"n": IntVal(10)}, stmt)
        assert result.success
        assert result.log == "fact = IntVal 3628800\n"

    def test_faults_caught_in_loop(self):
        """Each iteration divides by a shrinking divisor; the zero is caught."""
        stmt = seq(
            Assign("d", lit(2)),
            Try(
                While(
                    Val(BoolVal(True)),
                    seq(
                        Print("q = ", Op(Bop.DIVIDE, lit(10), Var("d"))),
                        Assign("d", Op(Bop.MINUS, Var("d"), lit(1))),
                    ),
                ),
                "err",
                If(Op(Bop.LE, Var("err"), lit(1)), Print("fault ", Var("err")), Throw(Var("err"))),
            ),
        )
        result = execute({}, stmt)
        assert result.success
        assert result.log == "q = IntVal 5\nq = IntVal 10\nfault IntVal 1\n"
        assert result.store == {"d": IntVal(0), "err": IntVal(1)}

    def test_type_error_from_condition(self):
        stmt = seq(Print("start", lit(0)), While(Var("flag"), Print("never", lit(0))), Print("end", lit(0)))
        result = execute({"flag": IntVal(1)}, stmt)
        assert result.exception == IntVal(2)
        assert result.log == "startIntVal 0\n"

    def test_document_round_trip_execution(self, write_json):
        stmt = Try(Assign("x", Var("y")), "e", Print("e = ", Var("e")))
        path = write_json(encode_program({}, stmt))

        store, decoded = load_program(path)
        result = execute(store, decoded)
        assert result.log == "e = IntVal 0\n"
        assert result.store == {"e": IntVal(0)}

    def test_negative_values_render_in_log(self, countdown_document):
        store, stmt = decode_program(countdown_document)
        result = execute(store, seq(stmt, Print("neg ", Op(Bop.MINUS, Var("n"), lit(5)))))
        assert result.log.endswith("neg IntVal (-5)\n")
