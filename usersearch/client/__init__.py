"""
Typed client for the user search endpoint.

Usage:
    with SearchClient(url="http://localhost:8000/api/v1/users", access_token=token) as client:
        page = client.find_users(SearchRequest(limit=10, offset=0, order_by=1))
"""

from usersearch.client.errors import (
    BadAccessTokenError,
    BadRequestError,
    LimitBelowZeroError,
    OffsetBelowZeroError,
    ResponseDecodeError,
    SearchClientError,
    SearchTimeoutError,
    SearchTransportError,
    ServerFatalError,
    UnknownBadRequestError,
    UsersNotFoundError,
)
from usersearch.client.search_client import SearchClient

__all__ = [
    "BadAccessTokenError",
    "BadRequestError",
    "LimitBelowZeroError",
    "OffsetBelowZeroError",
    "ResponseDecodeError",
    "SearchClient",
    "SearchClientError",
    "SearchTimeoutError",
    "SearchTransportError",
    "ServerFatalError",
    "UnknownBadRequestError",
    "UsersNotFoundError",
]
