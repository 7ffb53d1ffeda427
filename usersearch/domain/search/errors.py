"""
Domain-specific errors for the search bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer, and the
client maps the same wire messages back to its own error types.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed taxonomy of failures shared by the server and the client."""

    BAD_LIMIT = "BadLimit"
    LIMIT_BELOW_ZERO = "LimitBelowZero"
    BAD_OFFSET = "BadOffset"
    OFFSET_BELOW_ZERO = "OffsetBelowZero"
    BAD_ORDER_BY = "BadOrderBy"
    BAD_ORDER_FIELD = "BadOrderField"
    BAD_ACCESS_TOKEN = "BadAccessToken"
    NOT_FOUND = "NotFound"
    SERVER_FATAL = "ServerFatal"
    TRANSPORT = "Transport"
    TIMEOUT = "Timeout"


# Wire sentinels. These exact strings travel in the {"Error": ...} body.
BAD_LIMIT_MESSAGE = "limit must be an integer"
LIMIT_BELOW_ZERO_MESSAGE = "limit must be > 0"
BAD_OFFSET_MESSAGE = "offset must be an integer"
OFFSET_BELOW_ZERO_MESSAGE = "offset must be >= 0"
BAD_ORDER_BY_MESSAGE = "OrderBy invalid"
BAD_ORDER_FIELD_MESSAGE = "OrderField invalid"
ACCESS_DENIED_MESSAGE = "wrong AccessToken"
INTERNAL_ERROR_MESSAGE = "Internal server error"

BAD_REQUEST_SENTINELS: dict[str, ErrorKind] = {
    BAD_LIMIT_MESSAGE: ErrorKind.BAD_LIMIT,
    LIMIT_BELOW_ZERO_MESSAGE: ErrorKind.LIMIT_BELOW_ZERO,
    BAD_OFFSET_MESSAGE: ErrorKind.BAD_OFFSET,
    OFFSET_BELOW_ZERO_MESSAGE: ErrorKind.OFFSET_BELOW_ZERO,
    BAD_ORDER_BY_MESSAGE: ErrorKind.BAD_ORDER_BY,
    BAD_ORDER_FIELD_MESSAGE: ErrorKind.BAD_ORDER_FIELD,
}


class SearchDomainError(Exception):
    """Base error for all search domain errors."""

    kind: ErrorKind = ErrorKind.SERVER_FATAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidSearchRequestError(SearchDomainError):
    """Base for every error caused by the caller's query parameters."""


class BadLimitError(InvalidSearchRequestError):
    """Raised when ``limit`` is missing or not an integer."""

    kind = ErrorKind.BAD_LIMIT

    def __init__(self, raw: str | None) -> None:
        super().__init__(BAD_LIMIT_MESSAGE)
        self.raw = raw


class LimitBelowZeroError(InvalidSearchRequestError):
    """Raised when ``limit`` is zero or negative."""

    kind = ErrorKind.LIMIT_BELOW_ZERO

    def __init__(self, limit: int) -> None:
        super().__init__(LIMIT_BELOW_ZERO_MESSAGE)
        self.limit = limit


class BadOffsetError(InvalidSearchRequestError):
    """Raised when ``offset`` is missing or not an integer."""

    kind = ErrorKind.BAD_OFFSET

    def __init__(self, raw: str | None) -> None:
        super().__init__(BAD_OFFSET_MESSAGE)
        self.raw = raw


class OffsetBelowZeroError(InvalidSearchRequestError):
    """Raised when ``offset`` is negative."""

    kind = ErrorKind.OFFSET_BELOW_ZERO

    def __init__(self, offset: int) -> None:
        super().__init__(OFFSET_BELOW_ZERO_MESSAGE)
        self.offset = offset


class BadOrderByError(InvalidSearchRequestError):
    """Raised when ``order_by`` is not an integer or not one of -1, 0, 1."""

    kind = ErrorKind.BAD_ORDER_BY

    def __init__(self, raw: object) -> None:
        super().__init__(BAD_ORDER_BY_MESSAGE)
        self.raw = raw


class BadOrderFieldError(InvalidSearchRequestError):
    """Raised when ``order_field`` names a field that cannot be sorted on."""

    kind = ErrorKind.BAD_ORDER_FIELD

    def __init__(self, order_field: str) -> None:
        super().__init__(BAD_ORDER_FIELD_MESSAGE)
        self.order_field = order_field


class AccessDeniedError(SearchDomainError):
    """Raised when the request carries a missing or unknown access token."""

    kind = ErrorKind.BAD_ACCESS_TOKEN

    def __init__(self) -> None:
        super().__init__(ACCESS_DENIED_MESSAGE)


class DatasetError(SearchDomainError):
    """Raised when the user dataset cannot be read or parsed.

    ``reason`` carries internal detail (paths, parser output) and is only
    ever logged, never sent to the caller.
    """

    kind = ErrorKind.SERVER_FATAL

    def __init__(self, reason: str) -> None:
        super().__init__(f"Dataset unavailable: {reason}")
        self.reason = reason


class MalformedRecordError(DatasetError):
    """Raised when a single dataset row has a missing or undecodable field."""

    def __init__(self, field_name: str, value: str | None) -> None:
        super().__init__(f"incorrect {field_name}: {value!r}")
        self.field_name = field_name
        self.value = value
