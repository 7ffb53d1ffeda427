"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the {"Error": <message>} body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from usersearch.domain.search.errors import (
    INTERNAL_ERROR_MESSAGE,
    AccessDeniedError,
    DatasetError,
    InvalidSearchRequestError,
    SearchDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_500 = 500


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"Error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AccessDeniedError)
    async def handle_access_denied(
        _request: Request, exc: AccessDeniedError
    ) -> JSONResponse:
        """Handle missing or unknown access tokens."""
        logger.warning("Rejected request with a missing or unknown AccessToken")
        return error_response(HTTP_401, exc.message)

    @app.exception_handler(InvalidSearchRequestError)
    async def handle_invalid_request(
        _request: Request, exc: InvalidSearchRequestError
    ) -> JSONResponse:
        """Handle validation and sorting errors with their wire sentinel."""
        logger.warning("Invalid search request (%s): %s", exc.kind.value, exc.message)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(DatasetError)
    async def handle_dataset_error(
        _request: Request, exc: DatasetError
    ) -> JSONResponse:
        """Handle dataset read/parse failures. Detail is logged, not returned."""
        logger.error("Dataset error: %s", exc.reason)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(SearchDomainError)
    async def handle_search_domain(
        _request: Request, exc: SearchDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled search domain errors."""
        logger.error("Unhandled search domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
