"""Health check endpoints."""

from fastapi import APIRouter

from whileplus import __version__
from whileplus.runtime.executor import execute
from whileplus.runtime.syntax import Print, Try, Throw, Val, Var, seq
from whileplus.runtime.values import IntVal

router = APIRouter()

# Exercises printing, throwing and catching in one run
READINESS_PROGRAM = seq(
    Print("", Val(IntVal(0))),
    Try(Throw(Val(IntVal(7))), "e", Print("caught ", Var("e"))),
)
READINESS_LOG = "IntVal 0\ncaught IntVal 7\n"


@router.get("/health")
async def health_check():
    """Liveness: the service is up."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "whileplus-api",
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness: run a tiny program and compare its log with the expected one."""
    result = execute({}, READINESS_PROGRAM)
    runtime_ok = result.success and result.log == READINESS_LOG
    return {
        "ready": runtime_ok,
        "checks": {
            "runtime": runtime_ok,
        },
        "log": result.log,
    }
