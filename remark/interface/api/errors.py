"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from remark.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    logfire.info("Not found", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    logfire.info("Conflict", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def _bad_request(request: Request, exc: Exception) -> JSONResponse:
    logfire.warn("Rejected request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers for errors raised by use cases.

    Conflict, NotFound and invalid input each get their own status;
    anything else propagates as a 500.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(BusinessRuleViolationError, _bad_request)
    app.add_exception_handler(ValidationError, _bad_request)
    # Malformed IDs (UUID parsing) and invalid filter combinations
    app.add_exception_handler(ValueError, _bad_request)
