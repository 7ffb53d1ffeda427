"""
Use case: Search users with filtering, sorting and pagination.

Input: SearchUsersQuery (raw limit, offset, query, order_field, order_by)
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: InvalidSearchRequestError subclasses, DatasetError.
"""

import logging

from usersearch.application.search.dtos import SearchUsersQuery, UserResult
from usersearch.domain.search.filtering import filter_users
from usersearch.domain.search.pagination import paginate
from usersearch.domain.search.ports import UserRepository
from usersearch.domain.search.sorting import sort_users
from usersearch.domain.search.validator import parse_search_params

logger = logging.getLogger(__name__)


class SearchUsersUseCase:
    """Orchestrates the search pipeline.

    validate -> filter -> sort -> paginate. The first failing stage
    raises and no later stage runs.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        """Initialize the use case.

        Args:
            user_repo: Repository streaming raw dataset rows.
        """
        self._user_repo = user_repo

    def execute(self, query: SearchUsersQuery) -> list[UserResult]:
        """Run the search use case.

        Args:
            query: Raw query parameters as received.

        Returns:
            The requested page of users, at most ``limit`` long.

        Raises:
            InvalidSearchRequestError: A parameter failed validation or sorting.
            DatasetError: The dataset could not be read or is malformed.
        """
        request = parse_search_params(
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            query=query.query,
            order_field=query.order_field,
        )

        logger.info(
            "Searching users: limit=%d, offset=%d, order_field=%r, order_by=%d",
            request.limit,
            request.offset,
            request.order_field,
            request.order_by,
        )

        matches = filter_users(
            self._user_repo.iter_rows(), request.query, request.budget
        )
        ordered = sort_users(matches, request.order_field, request.order_by)
        page = paginate(ordered, request.offset)

        logger.debug("Matched %d users, returning %d", len(matches), len(page))

        return [
            UserResult(
                id=user.id,
                name=user.name,
                age=user.age,
                about=user.about,
                gender=user.gender,
            )
            for user in page
        ]
