"""Validate endpoint for program validation."""

from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

from whileplus.codec import decode_statement
from whileplus.errors import ProgramFormatError
from whileplus.runtime.syntax import iter_statements

router = APIRouter()


class ValidateRequest(BaseModel):
    """Request body for program validation."""
    program: Dict[str, Any]


class ValidateResponse(BaseModel):
    """Response body for program validation."""
    valid: bool
    statement_count: int = 0
    errors: List[str] = []


@router.post("/validate", response_model=ValidateResponse)
async def validate_program(request: ValidateRequest):
    """Decode a WHILE+ program without running it."""
    try:
        stmt = decode_statement(request.program, "$.program")
    except ProgramFormatError as e:
        return ValidateResponse(valid=False, errors=[str(e)])
    except RecursionError:
        return ValidateResponse(valid=False, errors=["Program nesting too deep to decode"])

    return ValidateResponse(
        valid=True,
        statement_count=sum(1 for _ in iter_statements(stmt)),
    )
