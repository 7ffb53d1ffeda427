"""Offset pagination of sorted search results."""

from usersearch.domain.search.entities import User


def paginate(users: list[User], offset: int) -> list[User]:
    """Return the page starting at ``offset``.

    An offset at or past the end yields an empty page, not an error.
    No upper bound is applied here: the filter's scan budget already
    caps the result at ``limit`` users past the offset.
    """
    if offset >= len(users):
        return []
    return users[offset:]
