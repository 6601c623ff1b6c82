"""
API error handling.

Maps domain exceptions to JSON error bodies of the form
{"error": <message>, "details": <optional context>}.

Dependencies: fastapi, visualsuite.core.exceptions
System role: Uniform error responses across routers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from visualsuite.core.exceptions import (
    ImageCredentialMissingError,
    UpstreamModelError,
    ValidationError,
    VisualNotFoundError,
    VisualSuiteException,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, details=None) -> JSONResponse:
    """Build a JSON error response, omitting empty details."""
    content = {"error": error}
    if details:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"{__name__}:handle_validation_error - {request.url.path}: {exc}")
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"{__name__}:handle_request_validation_error - {request.url.path}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", exc.errors())


async def handle_credential_missing(
    request: Request, exc: ImageCredentialMissingError
) -> JSONResponse:
    logger.error(f"{__name__}:handle_credential_missing - image provider={exc.provider}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def handle_upstream_error(request: Request, exc: UpstreamModelError) -> JSONResponse:
    logger.error(
        f"{__name__}:handle_upstream_error - provider={exc.provider} "
        f"status={exc.status_code} details={exc.upstream_details}"
    )
    details = dict(exc.upstream_details)
    if exc.status_code is not None:
        details.setdefault("upstream_status", exc.status_code)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, details)


async def handle_not_found(request: Request, exc: VisualNotFoundError) -> JSONResponse:
    logger.warning(f"{__name__}:handle_not_found - {exc}")
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_domain_error(request: Request, exc: VisualSuiteException) -> JSONResponse:
    logger.error(f"{__name__}:handle_domain_error - {type(exc).__name__}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain exception handlers to an application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ImageCredentialMissingError, handle_credential_missing)
    app.add_exception_handler(UpstreamModelError, handle_upstream_error)
    app.add_exception_handler(VisualNotFoundError, handle_not_found)
    app.add_exception_handler(VisualSuiteException, handle_domain_error)
