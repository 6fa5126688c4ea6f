"""Execute endpoint for program execution."""

import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from whileplus.codec import decode_statement, decode_store, encode_store
from whileplus.errors import ProgramFormatError, StepLimitExceeded
from whileplus.runtime.executor import Executor, ExecutionConfig

router = APIRouter()

# Requests that do not ask for a budget still get one
DEFAULT_MAX_STEPS = 10000


class ExecuteRequest(BaseModel):
    """Request body for program execution."""
    program: Dict[str, Any]
    store: Dict[str, Any] = Field(default_factory=dict)
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1)


class ExecuteResponse(BaseModel):
    """Response body for program execution."""
    success: bool
    store: Dict[str, Any]
    exception: Optional[Dict[str, Any]] = None
    log: str = ""
    steps: int = 0
    execution_time_ms: float


@router.post("/execute", response_model=ExecuteResponse)
def execute_program(request: ExecuteRequest):
    """Execute a WHILE+ program."""
    start_time = time.time()

    try:
        store = decode_store(request.store, "$.store")
        stmt = decode_statement(request.program, "$.program")
    except ProgramFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RecursionError:
        raise HTTPException(status_code=422, detail="Program nesting too deep to decode")

    executor = Executor(ExecutionConfig(max_steps=request.max_steps))
    try:
        result = executor.execute(store, stmt)
    except StepLimitExceeded as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RecursionError:
        raise HTTPException(status_code=422, detail="Program nesting too deep to execute")

    return ExecuteResponse(
        success=result.success,
        store=encode_store(result.store),
        exception=result.exception.to_dict() if result.exception is not None else None,
        log=result.log,
        steps=result.steps,
        execution_time_ms=(time.time() - start_time) * 1000,
    )
