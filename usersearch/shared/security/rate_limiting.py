"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects the dataset scan against resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from usersearch.core.config import Settings

RATE_LIMIT_MESSAGE = "Rate limit exceeded"


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        settings: Application settings holding the default limit.

    Returns:
        A limiter with in-memory storage, disabled if configured so.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error body.

    Kept synchronous: SlowAPIMiddleware calls it directly, without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return JSONResponse(status_code=429, content={"Error": RATE_LIMIT_MESSAGE})
