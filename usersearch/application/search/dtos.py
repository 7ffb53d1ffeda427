"""
Data Transfer Objects for the search application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchUsersQuery:
    """Input DTO carrying the raw, unvalidated query parameters.

    Every field is exactly what arrived on the wire; ``None`` means
    the parameter was absent.
    """

    limit: str | None = None
    offset: str | None = None
    query: str | None = None
    order_field: str | None = None
    order_by: str | None = None


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user on the returned page."""

    id: int
    name: str
    age: int
    about: str
    gender: str
