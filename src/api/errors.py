"""
Exception handlers - map domain errors to HTTP responses.

Unauthorized always becomes 401 with an empty JSON object, whichever
internal branch raised it. Validation failures, from the domain or from
FastAPI's request parsing, become 400 with an "errors" list.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import ConflictError, Unauthorized, ValidationError

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    """Last named part of a pydantic error location, e.g. ("body", "email") -> "email"."""
    for part in reversed(loc):
        if isinstance(part, str):
            return part
    return "body"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [{"field": e.field, "message": e.message} for e in exc.errors]},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [{"field": _field_name(err["loc"]), "message": err["msg"]} for err in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def unauthorized_handler(request: Request, exc: Unauthorized) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={})


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    # Generic message - the email is not echoed back
    logger.info("Rejected duplicate registration")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": "Registration failed"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on an application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Unauthorized, unauthorized_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
