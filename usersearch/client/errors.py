"""
Errors raised by the search client.

Every outcome of ``SearchClient.find_users`` other than a decoded page is
one of these. Each carries the ``ErrorKind`` it corresponds to, so callers
can branch on the same taxonomy the server uses.
"""

from usersearch.domain.search.errors import ErrorKind


class SearchClientError(Exception):
    """Base error for all search client failures."""

    kind: ErrorKind = ErrorKind.SERVER_FATAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class LimitBelowZeroError(SearchClientError):
    """The request's limit was rejected before any network call."""

    kind = ErrorKind.LIMIT_BELOW_ZERO

    def __init__(self) -> None:
        super().__init__("limit must be > 0")


class OffsetBelowZeroError(SearchClientError):
    """The request's offset was rejected before any network call."""

    kind = ErrorKind.OFFSET_BELOW_ZERO

    def __init__(self) -> None:
        super().__init__("offset must be >= 0")


class SearchTimeoutError(SearchClientError):
    """The request did not complete within the client timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, query_string: str) -> None:
        super().__init__(f"timeout for {query_string}")
        self.query_string = query_string


class SearchTransportError(SearchClientError):
    """The request could not be sent (bad URL, DNS, connection refused)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, detail: str, query_string: str) -> None:
        super().__init__(f"unknown error {detail}")
        self.detail = detail
        self.query_string = query_string


class BadAccessTokenError(SearchClientError):
    """The server rejected the access token (HTTP 401)."""

    kind = ErrorKind.BAD_ACCESS_TOKEN

    def __init__(self) -> None:
        super().__init__("bad AccessToken")


class BadRequestError(SearchClientError):
    """The server rejected a parameter (HTTP 400 with a known sentinel).

    The server's exact wording is not exposed; ``kind`` says which
    parameter check failed.
    """

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__("request invalid")
        self.kind = kind


class UnknownBadRequestError(SearchClientError):
    """HTTP 400 whose error message is not one the client knows."""

    def __init__(self, server_message: str) -> None:
        super().__init__(f"unknown bad request error: {server_message}")
        self.server_message = server_message


class UsersNotFoundError(SearchClientError):
    """The server reported no users for the request (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__("users not found")


class ServerFatalError(SearchClientError):
    """HTTP 500 or any other unexpected status."""

    kind = ErrorKind.SERVER_FATAL

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"SearchServer fatal error. Body: {body}")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(SearchClientError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, what: str, detail: str) -> None:
        super().__init__(f"cant unpack {what} json: {detail}")
        self.detail = detail
