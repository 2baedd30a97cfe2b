"""
Centralized error handlers for FastAPI.

Maps pokedex domain errors to HTTP responses through the error table.
No stack traces or upstream payloads are exposed to clients.
All error responses use the {code, message} ErrorResponse shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.pokedex.errors import PokedexDomainError
from app.shared.errors.translator import (
    CODE_BAD_REQUEST,
    HTTP_400,
    HTTP_500,
    INTERNAL_API_ERROR,
    ApiError,
    status_to_api_error,
    to_api_error,
)

logger = logging.getLogger(__name__)


def _error_response(
    error: ApiError, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=error.status_code, content=error.to_body(), headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PokedexDomainError)
    async def handle_pokedex_domain(
        _request: Request, exc: PokedexDomainError
    ) -> JSONResponse:
        """Handle every error raised by the upstream clients."""
        error = to_api_error(exc)
        if error.status_code >= HTTP_500:
            logger.error("Upstream failure: %s", exc.message)
        else:
            logger.warning("Client error %s: %s", error.code, exc.message)
        return _error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle errors raised by routing, such as unknown paths or methods."""
        logger.warning("HTTP error %d raised by the framework", exc.status_code)
        return _error_response(status_to_api_error(exc.status_code), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request input."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return _error_response(ApiError(HTTP_400, CODE_BAD_REQUEST, "invalid request"))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(INTERNAL_API_ERROR)
