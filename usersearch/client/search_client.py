"""
HTTP client for the user search endpoint.

Sends a ``SearchRequest`` and turns every possible outcome into either a
``SearchResponse`` or exactly one ``SearchClientError``:

    pre-validation -> transport -> status code -> body decoding

No other exception type escapes ``find_users``. Single shot: no retries.
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from usersearch.client.errors import (
    BadAccessTokenError,
    BadRequestError,
    LimitBelowZeroError,
    OffsetBelowZeroError,
    ResponseDecodeError,
    SearchTimeoutError,
    SearchTransportError,
    ServerFatalError,
    UnknownBadRequestError,
    UsersNotFoundError,
)
from usersearch.domain.search.entities import SearchRequest, SearchResponse, User
from usersearch.domain.search.errors import BAD_REQUEST_SENTINELS
from usersearch.interfaces.search.schemas import ErrorResponse, UserItem

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1.0
ACCESS_TOKEN_HEADER = "AccessToken"

_users_adapter = TypeAdapter(list[UserItem])


class SearchClient:
    """Client for ``GET /users`` on a search server.

    Args:
        url: Full URL of the search endpoint.
        access_token: Value sent in the ``AccessToken`` header.
        timeout: Per-request timeout in seconds.
        http_client: Optional preconfigured ``httpx.Client`` (e.g. a
            FastAPI ``TestClient`` or one with a mock transport). When
            omitted, a client is created and owned by this instance.
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_users(self, request: SearchRequest) -> SearchResponse:
        """Run a search and return the decoded page.

        Args:
            request: Search parameters.

        Returns:
            The users on the page, plus ``next_page`` which is True when
            the page is exactly ``request.limit`` long.

        Raises:
            SearchClientError: One subclass per failure mode; see
                ``usersearch.client.errors``.
        """
        if request.limit <= 0:
            raise LimitBelowZeroError()
        if request.offset < 0:
            raise OffsetBelowZeroError()

        params = httpx.QueryParams(
            {
                "limit": int(request.limit),
                "offset": int(request.offset),
                "order_by": int(request.order_by),
                "order_field": request.order_field,
                "query": request.query,
            }
        )
        query_string = str(params)

        try:
            response = self._http.get(
                self.url,
                params=params,
                headers={ACCESS_TOKEN_HEADER: self.access_token},
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Search request timed out: %s", query_string)
            raise SearchTimeoutError(query_string) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Search request failed: %s", exc)
            raise SearchTransportError(str(exc), query_string) from exc

        return self._handle_response(request, response)

    def _handle_response(
        self, request: SearchRequest, response: httpx.Response
    ) -> SearchResponse:
        status = response.status_code

        if status == httpx.codes.UNAUTHORIZED:
            raise BadAccessTokenError()

        if status == httpx.codes.BAD_REQUEST:
            server_message = _decode_error_message(response)
            kind = BAD_REQUEST_SENTINELS.get(server_message)
            if kind is None:
                raise UnknownBadRequestError(server_message)
            raise BadRequestError(kind)

        if status == httpx.codes.NOT_FOUND:
            raise UsersNotFoundError()

        if not response.is_success:
            logger.error("Search server returned HTTP %d", status)
            raise ServerFatalError(status, response.text)

        try:
            items = _users_adapter.validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError("result", str(exc)) from exc

        users = [
            User(
                id=item.id,
                name=item.name,
                age=item.age,
                about=item.about,
                gender=item.gender,
            )
            for item in items
        ]
        return SearchResponse(users=users, next_page=len(users) == request.limit)


def _decode_error_message(response: httpx.Response) -> str:
    try:
        return ErrorResponse.model_validate_json(response.content).error
    except ValidationError as exc:
        raise ResponseDecodeError("error", str(exc)) from exc

