"""
Port interfaces (ABCs) for the search bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from usersearch.domain.search.entities import UserRow


class UserRepository(ABC):
    """Port for reading the user dataset."""

    @abstractmethod
    def iter_rows(self) -> Iterator[UserRow]:
        """Yield raw rows lazily, in storage order.

        Consumers may stop iterating at any point; the adapter must not
        read further than what has been pulled.

        Raises:
            DatasetError: If the source cannot be read or parsed.
        """
        raise NotImplementedError


class TokenStore(ABC):
    """Port for checking access tokens."""

    @abstractmethod
    def is_valid(self, token: str | None) -> bool:
        """Return True if ``token`` grants access to the search endpoint."""
        raise NotImplementedError
