"""
Validation of raw search parameters.

Turns the string-valued query parameters of a search request into a
``SearchRequest``. Checks run in a fixed order (limit, offset, order_by)
and the first failure wins, so callers can rely on which error a request
with several bad parameters produces.
"""

from usersearch.domain.search.entities import SearchRequest, parse_int
from usersearch.domain.search.errors import (
    BadLimitError,
    BadOffsetError,
    BadOrderByError,
    LimitBelowZeroError,
    OffsetBelowZeroError,
)


def parse_search_params(
    limit: str | None,
    offset: str | None,
    order_by: str | None,
    query: str | None = None,
    order_field: str | None = None,
) -> SearchRequest:
    """Validate raw parameters and build a ``SearchRequest``.

    The range of ``order_by`` is not checked here: the sorter reports an
    unknown ``order_field`` before an out-of-range ``order_by``.

    Raises:
        BadLimitError: ``limit`` is missing or not an integer.
        LimitBelowZeroError: ``limit`` <= 0.
        BadOffsetError: ``offset`` is missing or not an integer.
        OffsetBelowZeroError: ``offset`` < 0.
        BadOrderByError: ``order_by`` is missing or not an integer.
    """
    parsed_limit = parse_int(limit)
    if parsed_limit is None:
        raise BadLimitError(limit)
    if parsed_limit <= 0:
        raise LimitBelowZeroError(parsed_limit)

    parsed_offset = parse_int(offset)
    if parsed_offset is None:
        raise BadOffsetError(offset)
    if parsed_offset < 0:
        raise OffsetBelowZeroError(parsed_offset)

    parsed_order_by = parse_int(order_by)
    if parsed_order_by is None:
        raise BadOrderByError(order_by)

    return SearchRequest(
        limit=parsed_limit,
        offset=parsed_offset,
        query=query or "",
        order_field=order_field or "",
        order_by=parsed_order_by,
    )
