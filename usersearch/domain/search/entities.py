"""
Domain entities for the search bounded context.

Entities represent core business objects.
They contain no framework imports and no IO operations.
"""

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from usersearch.domain.search.errors import MalformedRecordError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str | None) -> int | None:
    """Return ``raw`` as an int, or None if it is absent or not a plain integer.

    Only an optional sign followed by ASCII digits is accepted. Digit
    strings too long for ``int()`` count as not an integer.
    """
    if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class OrderField(Enum):
    """User attribute a search result can be sorted by."""

    ID = "Id"
    AGE = "Age"
    NAME = "Name"


class OrderBy(IntEnum):
    """Sort direction. ``AS_IS`` keeps the scan order."""

    DESC = -1
    AS_IS = 0
    ASC = 1


@dataclass(frozen=True)
class User:
    """A single person record as returned by the search endpoint."""

    id: int
    name: str
    age: int
    about: str
    gender: str


@dataclass(frozen=True)
class UserRow:
    """A raw dataset row, before its numeric fields are decoded.

    Matching only needs the text fields, so rows that do not match a
    query never have their ``id``/``age`` parsed.
    """

    id: str
    first_name: str
    last_name: str
    age: str
    about: str
    gender: str

    def matches(self, query: str) -> bool:
        """Return True if ``query`` occurs in the first name, last name or about text."""
        return (
            query in self.first_name
            or query in self.last_name
            or query in self.about
        )

    def to_user(self) -> User:
        """Decode the row into a ``User``.

        Raises:
            MalformedRecordError: If ``id`` or ``age`` is not an integer.
        """
        return User(
            id=_decode_int("id", self.id),
            name=f"{self.first_name} {self.last_name}",
            age=_decode_int("age", self.age),
            about=self.about,
            gender=self.gender,
        )


def _decode_int(field_name: str, value: str) -> int:
    parsed = parse_int(value)
    if parsed is None:
        raise MalformedRecordError(field_name, value)
    return parsed


@dataclass(frozen=True)
class SearchRequest:
    """A validated search request.

    Attributes:
        limit: Maximum page size, always > 0 once validated.
        offset: Number of sorted matches to skip, always >= 0.
        query: Case-sensitive substring to look for.
        order_field: Raw field name; resolved by the sorter.
        order_by: Raw direction; range-checked by the sorter.
    """

    limit: int
    offset: int
    query: str = ""
    order_field: str = ""
    order_by: int = 0

    @property
    def budget(self) -> int:
        """Number of matches the filter may collect before it stops scanning."""
        return self.limit + self.offset


@dataclass(frozen=True)
class SearchResponse:
    """A decoded page of users as seen by the client."""

    users: list[User] = field(default_factory=list)
    next_page: bool = False
