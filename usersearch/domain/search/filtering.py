"""
Substring filtering over the user dataset.

The scan is bounded: once ``budget`` matches have been collected no
further rows are pulled from the source, however large it is.
"""

from collections.abc import Generator, Iterable

from usersearch.domain.search.entities import User, UserRow


def filter_users(rows: Iterable[UserRow], query: str, budget: int) -> list[User]:
    """Collect at most ``budget`` users whose text fields contain ``query``.

    Args:
        rows: Raw dataset rows in storage order. Consumed lazily; a
            generator source is closed before returning.
        query: Case-sensitive substring. An empty query matches every row.
        budget: Maximum number of matches to collect (``limit + offset``).

    Returns:
        Matching users in scan order.

    Raises:
        DatasetError: If the source fails or a matching row is malformed.
    """
    users: list[User] = []
    if budget <= 0:
        return users
    iterator = iter(rows)
    try:
        for row in iterator:
            if row.matches(query):
                users.append(row.to_user())
                if len(users) == budget:
                    break
    finally:
        if isinstance(iterator, Generator):
            iterator.close()
    return users
