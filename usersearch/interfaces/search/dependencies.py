"""
Dependency injection for the search bounded context.

Provides FastAPI dependency functions that hand the adapters built in
``create_app`` (kept on ``app.state``) to use cases and guards.
"""

from fastapi import Header, Request

from usersearch.application.search.search_users import SearchUsersUseCase
from usersearch.domain.search.errors import AccessDeniedError
from usersearch.domain.search.ports import TokenStore


def get_search_users_use_case(request: Request) -> SearchUsersUseCase:
    """Build SearchUsersUseCase with the application's user repository."""
    return SearchUsersUseCase(user_repo=request.app.state.user_repository)


def require_access_token(
    request: Request,
    access_token: str | None = Header(default=None, alias="AccessToken"),
) -> None:
    """Reject the request unless its ``AccessToken`` header is known.

    Raises:
        AccessDeniedError: If the header is missing or not accepted.
    """
    token_store: TokenStore = request.app.state.token_store
    if not token_store.is_valid(access_token):
        raise AccessDeniedError()
