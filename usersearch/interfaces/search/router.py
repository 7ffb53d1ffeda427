"""
FastAPI router for the search bounded context.

All routes delegate to use cases. No business logic here.
Query parameters arrive as raw strings: validation, with its fixed
order and wire messages, is done by the domain validator.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query

from usersearch.application.search.dtos import SearchUsersQuery
from usersearch.application.search.search_users import SearchUsersUseCase
from usersearch.interfaces.search.dependencies import (
    get_search_users_use_case,
    require_access_token,
)
from usersearch.interfaces.search.schemas import ErrorResponse, UserItem

router = APIRouter(tags=["search"])


@router.get(
    "/users",
    response_model=list[UserItem],
    dependencies=[Depends(require_access_token)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Search users",
    description=(
        "Filter users by a substring of their name or about text, "
        "sort by Id, Age or Name, and return the page after offset."
    ),
)
def search_users(
    limit: str | None = Query(default=None, description="Page size, > 0"),
    offset: str | None = Query(default=None, description="Matches to skip, >= 0"),
    query: str | None = Query(default=None, description="Case-sensitive substring"),
    order_field: str | None = Query(default=None, description="Id, Age or Name"),
    order_by: str | None = Query(default=None, description="-1 desc, 0 as is, 1 asc"),
    use_case: SearchUsersUseCase = Depends(get_search_users_use_case),
) -> list[UserItem]:
    """Search users and return one page."""
    results = use_case.execute(
        SearchUsersQuery(
            limit=limit,
            offset=offset,
            query=query,
            order_field=order_field,
            order_by=order_by,
        )
    )
    return [
        UserItem(id=r.id, name=r.name, age=r.age, about=r.about, gender=r.gender)
        for r in results
    ]
