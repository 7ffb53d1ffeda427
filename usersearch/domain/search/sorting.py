"""
Sorting of filtered users by a field and a direction.

One key function per field, combined with the requested direction.
"""

from collections.abc import Callable
from operator import attrgetter

from usersearch.domain.search.entities import OrderBy, OrderField, User
from usersearch.domain.search.errors import BadOrderByError, BadOrderFieldError

SORT_KEYS: dict[OrderField, Callable[[User], object]] = {
    OrderField.ID: attrgetter("id"),
    OrderField.AGE: attrgetter("age"),
    OrderField.NAME: attrgetter("name"),
}


def resolve_order_field(raw: str) -> OrderField:
    """Map a raw ``order_field`` to an ``OrderField``; empty means Name.

    Raises:
        BadOrderFieldError: If the field is not sortable.
    """
    if raw == "":
        return OrderField.NAME
    try:
        return OrderField(raw)
    except ValueError as exc:
        raise BadOrderFieldError(raw) from exc


def resolve_order_by(raw: int) -> OrderBy:
    """Map a raw ``order_by`` to an ``OrderBy``.

    Raises:
        BadOrderByError: If the value is not -1, 0 or 1.
    """
    try:
        return OrderBy(raw)
    except ValueError as exc:
        raise BadOrderByError(raw) from exc


def sort_users(users: list[User], order_field: str, order_by: int) -> list[User]:
    """Return ``users`` ordered by ``order_field`` in the ``order_by`` direction.

    The field is resolved before the direction, so an unknown field is
    reported even when the direction is out of range as well.

    Raises:
        BadOrderFieldError: Unknown ``order_field``.
        BadOrderByError: ``order_by`` not in {-1, 0, 1}.
    """
    field = resolve_order_field(order_field)
    direction = resolve_order_by(order_by)
    if direction is OrderBy.AS_IS:
        return list(users)
    return sorted(users, key=SORT_KEYS[field], reverse=direction is OrderBy.DESC)
