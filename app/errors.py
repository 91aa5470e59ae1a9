"""
Error taxonomy root and the HTTP error boundary.

Every failure reaching the HTTP surface is logged and answered with the
same generic 500 body, whatever its kind.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


class ServiceError(Exception):
    """Base exception for errors raised by the service."""
    pass


def internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def setup_error_handlers(app: FastAPI) -> None:
    """Register the uniform error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.error(f"Invalid request to {request.url.path}: {exc.errors()}")
        return internal_error_response()

    @app.exception_handler(ServiceError)
    async def service_error_handler(
        request: Request, exc: ServiceError
    ) -> JSONResponse:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
        return internal_error_response()

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(f"Unexpected error on {request.url.path}: {exc}")
        return internal_error_response()
