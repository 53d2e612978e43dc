"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from commentfield.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ThreadingRejectedError,
    ValidationError,
)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def threading_rejected_handler(
    request: Request, exc: ThreadingRejectedError
) -> JSONResponse:
    logfire.warn(
        "Comment threading rejected",
        path=request.url.path,
        reasons=list(exc.reasons),
    )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "reasons": list(exc.reasons)},
    )


async def business_rule_handler(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    logfire.warn("Business rule violation", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers so routes can let domain errors propagate."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ThreadingRejectedError, threading_rejected_handler)
    app.add_exception_handler(BusinessRuleViolationError, business_rule_handler)
    app.add_exception_handler(ValidationError, validation_handler)
