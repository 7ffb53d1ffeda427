"""
Adapter: Static token store.

Implements the TokenStore port with an immutable set of accepted tokens.
"""

from collections.abc import Iterable

from usersearch.domain.search.ports import TokenStore


class StaticTokenStore(TokenStore):
    """Accepts exactly the tokens it was built with."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = frozenset(tokens)

    def is_valid(self, token: str | None) -> bool:
        return token is not None and token in self._tokens
