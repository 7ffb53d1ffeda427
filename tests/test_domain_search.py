"""
Tests for the search domain layer.

Tests the validator, filter, sorter and paginator in isolation.
No external dependencies or IO required.
"""

import pytest

from usersearch.domain.search.entities import (
    OrderBy,
    OrderField,
    SearchRequest,
    User,
    UserRow,
)
from usersearch.domain.search.errors import (
    BAD_LIMIT_MESSAGE,
    BAD_ORDER_BY_MESSAGE,
    BAD_ORDER_FIELD_MESSAGE,
    BAD_REQUEST_SENTINELS,
    LIMIT_BELOW_ZERO_MESSAGE,
    OFFSET_BELOW_ZERO_MESSAGE,
    AccessDeniedError,
    BadLimitError,
    BadOffsetError,
    BadOrderByError,
    BadOrderFieldError,
    DatasetError,
    ErrorKind,
    LimitBelowZeroError,
    MalformedRecordError,
    OffsetBelowZeroError,
)
from usersearch.domain.search.filtering import filter_users
from usersearch.domain.search.pagination import paginate
from usersearch.domain.search.sorting import resolve_order_field, sort_users
from usersearch.domain.search.validator import parse_search_params


def _row(id: int, first: str, last: str, age: int = 30, about: str = "") -> UserRow:
    return UserRow(
        id=str(id),
        first_name=first,
        last_name=last,
        age=str(age),
        about=about,
        gender="male",
    )


def _user(id: int, name: str, age: int) -> User:
    return User(id=id, name=name, age=age, about="", gender="male")


@pytest.fixture
def users() -> list[User]:
    return [
        _user(2, "Brooks Aguilar", 25),
        _user(0, "Boyd Wolf", 22),
        _user(21, "Johns Whitney", 27),
        _user(19, "Bell Bauer", 26),
    ]


class TestSearchRequest:
    """Tests for the SearchRequest entity."""

    def test_budget_is_limit_plus_offset(self) -> None:
        assert SearchRequest(limit=4, offset=1).budget == 5

    def test_defaults(self) -> None:
        request = SearchRequest(limit=1, offset=0)
        assert request.query == ""
        assert request.order_field == ""
        assert request.order_by == OrderBy.AS_IS
        assert type(request.order_by) is int


class TestUserRow:
    """Tests for matching and decoding raw rows."""

    def test_matches_first_name(self) -> None:
        assert _row(1, "Boyd", "Wolf").matches("oyd")

    def test_matches_last_name(self) -> None:
        assert _row(1, "Boyd", "Wolf").matches("Wol")

    def test_matches_about(self) -> None:
        assert _row(1, "Boyd", "Wolf", about="Nulla cillum").matches("cillum")

    def test_match_is_case_sensitive(self) -> None:
        assert not _row(1, "Boyd", "Wolf", about="Nulla").matches("nulla")

    def test_match_does_not_span_first_and_last_name(self) -> None:
        """Fields are matched separately, not as the joined name."""
        assert not _row(1, "Boyd", "Wolf").matches("d W")

    def test_empty_query_matches_everything(self) -> None:
        assert _row(1, "Boyd", "Wolf").matches("")

    def test_to_user_joins_name(self) -> None:
        user = _row(7, "Boyd", "Wolf", age=22).to_user()
        assert user == User(id=7, name="Boyd Wolf", age=22, about="", gender="male")

    def test_to_user_rejects_bad_id(self) -> None:
        row = UserRow("ghg", "Boyd", "Wolf", "22", "", "male")
        with pytest.raises(MalformedRecordError) as exc_info:
            row.to_user()
        assert exc_info.value.field_name == "id"

    def test_to_user_rejects_bad_age(self) -> None:
        row = UserRow("1", "Boyd", "Wolf", "Twenty", "", "male")
        with pytest.raises(MalformedRecordError) as exc_info:
            row.to_user()
        assert exc_info.value.field_name == "age"

    @pytest.mark.parametrize("raw", [" 22 ", "2_2", "٢٢", "22.0", ""])
    def test_to_user_accepts_only_plain_ascii_integers(self, raw) -> None:
        row = UserRow("1", "Boyd", "Wolf", raw, "", "male")
        with pytest.raises(MalformedRecordError) as exc_info:
            row.to_user()
        assert exc_info.value.field_name == "age"

    def test_to_user_accepts_signed_integers(self) -> None:
        assert UserRow("+1", "Boyd", "Wolf", "-2", "", "male").to_user().age == -2


class TestValidator:
    """Tests for parse_search_params."""

    def test_valid_params(self) -> None:
        request = parse_search_params(
            limit="4", offset="1", order_by="-1", query="Nulla", order_field="Name"
        )
        assert request == SearchRequest(
            limit=4, offset=1, query="Nulla", order_field="Name", order_by=-1
        )

    def test_absent_query_and_order_field_default_to_empty(self) -> None:
        request = parse_search_params(limit="1", offset="0", order_by="0")
        assert request.query == ""
        assert request.order_field == ""

    @pytest.mark.parametrize("raw", ["tr", "", None, "1.5", "1_0", " 3"])
    def test_unparseable_limit(self, raw) -> None:
        with pytest.raises(BadLimitError):
            parse_search_params(limit=raw, offset="0", order_by="1")

    @pytest.mark.parametrize("raw", ["0", "-1"])
    def test_non_positive_limit(self, raw) -> None:
        with pytest.raises(LimitBelowZeroError):
            parse_search_params(limit=raw, offset="0", order_by="1")

    def test_signed_limit_is_accepted(self) -> None:
        assert parse_search_params(limit="+3", offset="0", order_by="1").limit == 3

    def test_unparseable_offset(self) -> None:
        with pytest.raises(BadOffsetError):
            parse_search_params(limit="4", offset="rf", order_by="1")

    def test_negative_offset(self) -> None:
        with pytest.raises(OffsetBelowZeroError):
            parse_search_params(limit="4", offset="-1", order_by="1")

    def test_unparseable_order_by(self) -> None:
        with pytest.raises(BadOrderByError):
            parse_search_params(limit="4", offset="0", order_by="OrderByInvalid")

    def test_out_of_range_order_by_is_left_to_sorter(self) -> None:
        request = parse_search_params(limit="4", offset="0", order_by="10")
        assert request.order_by == 10

    def test_limit_is_checked_before_offset(self) -> None:
        with pytest.raises(BadLimitError):
            parse_search_params(limit="x", offset="y", order_by="z")

    def test_offset_is_checked_before_order_by(self) -> None:
        with pytest.raises(OffsetBelowZeroError):
            parse_search_params(limit="4", offset="-2", order_by="z")

    def test_overlong_limit_is_not_an_integer(self) -> None:
        with pytest.raises(BadLimitError):
            parse_search_params(limit="1" * 5000, offset="0", order_by="0")

    def test_overlong_offset_is_not_an_integer(self) -> None:
        with pytest.raises(BadOffsetError):
            parse_search_params(limit="1", offset="1" * 5000, order_by="0")

    def test_overlong_order_by_is_not_an_integer(self) -> None:
        with pytest.raises(BadOrderByError):
            parse_search_params(limit="1", offset="0", order_by="9" * 5000)


class TestFilter:
    """Tests for filter_users."""

    def test_keeps_scan_order(self) -> None:
        rows = [_row(5, "Zed", "A"), _row(1, "Amy", "A"), _row(3, "Bob", "B")]
        users = filter_users(rows, "A", budget=10)
        assert [u.id for u in users] == [5, 1]

    def test_stops_at_budget(self) -> None:
        rows = [_row(i, "Ann", "Lee") for i in range(10)]
        assert len(filter_users(rows, "Ann", budget=3)) == 3

    def test_stops_pulling_from_source_at_budget(self) -> None:
        """Rows past the budget are never requested from the source."""
        pulled = []

        def source():
            for i in range(100):
                pulled.append(i)
                yield _row(i, "Ann", "Lee")
            raise AssertionError("source exhausted")

        filter_users(source(), "Ann", budget=2)
        assert pulled == [0, 1]

    def test_closes_generator_source_at_budget(self) -> None:
        closed = []

        def source():
            try:
                for i in range(10):
                    yield _row(i, "Ann", "Lee")
            finally:
                closed.append(True)

        filter_users(source(), "Ann", budget=1)
        assert closed == [True]

    def test_source_errors_past_budget_are_never_seen(self) -> None:
        def source():
            yield _row(0, "Ann", "Lee")
            raise DatasetError("broken tail")

        assert [u.id for u in filter_users(source(), "", budget=1)] == [0]

    def test_source_error_before_budget_propagates(self) -> None:
        def source():
            yield _row(0, "Ann", "Lee")
            raise DatasetError("broken tail")

        with pytest.raises(DatasetError):
            filter_users(source(), "", budget=5)

    def test_malformed_non_matching_row_is_skipped(self) -> None:
        rows = [UserRow("ghg", "Bad", "Row", "x", "", "male"), _row(1, "Ann", "Lee")]
        assert [u.id for u in filter_users(rows, "Ann", budget=5)] == [1]

    def test_malformed_matching_row_aborts(self) -> None:
        rows = [_row(1, "Ann", "Lee"), UserRow("ghg", "Ann", "Row", "1", "", "male")]
        with pytest.raises(MalformedRecordError):
            filter_users(rows, "Ann", budget=5)

    def test_no_matches(self) -> None:
        assert filter_users([_row(1, "Ann", "Lee")], "zzz", budget=5) == []


class TestSorter:
    """Tests for sort_users."""

    def test_sort_by_id_ascending(self, users) -> None:
        assert [u.id for u in sort_users(users, "Id", 1)] == [0, 2, 19, 21]

    def test_sort_by_id_descending(self, users) -> None:
        assert [u.id for u in sort_users(users, "Id", -1)] == [21, 19, 2, 0]

    def test_sort_by_age_ascending(self, users) -> None:
        assert [u.age for u in sort_users(users, "Age", 1)] == [22, 25, 26, 27]

    def test_ascending_and_descending_are_reversed(self, users) -> None:
        for field in ("Id", "Age"):
            ascending = sort_users(users, field, 1)
            descending = sort_users(users, field, -1)
            assert descending == list(reversed(ascending))

    def test_sort_by_name_ascending(self, users) -> None:
        assert [u.name for u in sort_users(users, "Name", 1)] == [
            "Bell Bauer",
            "Boyd Wolf",
            "Brooks Aguilar",
            "Johns Whitney",
        ]

    def test_empty_field_sorts_by_name(self, users) -> None:
        assert sort_users(users, "", -1) == sort_users(users, "Name", -1)

    @pytest.mark.parametrize("field", ["Id", "Age", "Name", ""])
    def test_order_by_zero_keeps_scan_order(self, users, field) -> None:
        assert sort_users(users, field, 0) == users

    def test_returns_new_list(self, users) -> None:
        original = list(users)
        sort_users(users, "Id", 1)
        assert users == original

    @pytest.mark.parametrize("field", ["Id", "Age", "Name", ""])
    def test_out_of_range_order_by(self, users, field) -> None:
        with pytest.raises(BadOrderByError):
            sort_users(users, field, 10)

    def test_unknown_field(self, users) -> None:
        with pytest.raises(BadOrderFieldError):
            sort_users(users, "AgeIncorrect", 1)

    def test_unknown_field_wins_over_bad_order_by(self, users) -> None:
        with pytest.raises(BadOrderFieldError):
            sort_users(users, "BadField", 987654)

    def test_field_names_are_case_sensitive(self) -> None:
        with pytest.raises(BadOrderFieldError):
            resolve_order_field("name")

    def test_resolve_order_field(self) -> None:
        assert resolve_order_field("Age") is OrderField.AGE
        assert resolve_order_field("") is OrderField.NAME


class TestPaginator:
    """Tests for paginate."""

    def test_slices_from_offset(self, users) -> None:
        assert paginate(users, 1) == users[1:]

    def test_zero_offset_returns_everything(self, users) -> None:
        assert paginate(users, 0) == users

    @pytest.mark.parametrize("offset", [4, 5, 100])
    def test_offset_at_or_past_end_is_empty(self, users, offset) -> None:
        assert paginate(users, offset) == []

    def test_empty_input(self) -> None:
        assert paginate([], 0) == []


class TestDomainErrors:
    """Tests for domain error classes and wire sentinels."""

    def test_messages_are_wire_sentinels(self) -> None:
        assert BadLimitError("x").message == BAD_LIMIT_MESSAGE
        assert LimitBelowZeroError(0).message == LIMIT_BELOW_ZERO_MESSAGE
        assert OffsetBelowZeroError(-1).message == OFFSET_BELOW_ZERO_MESSAGE
        assert BadOrderByError(10).message == BAD_ORDER_BY_MESSAGE
        assert BadOrderFieldError("x").message == BAD_ORDER_FIELD_MESSAGE

    def test_every_request_error_has_a_sentinel(self) -> None:
        errors = [
            BadLimitError("x"),
            LimitBelowZeroError(0),
            BadOffsetError("x"),
            OffsetBelowZeroError(-1),
            BadOrderByError("x"),
            BadOrderFieldError("x"),
        ]
        for error in errors:
            assert BAD_REQUEST_SENTINELS[error.message] is error.kind

    def test_access_denied_message(self) -> None:
        error = AccessDeniedError()
        assert error.message == "wrong AccessToken"
        assert error.kind is ErrorKind.BAD_ACCESS_TOKEN

    def test_dataset_error_keeps_reason(self) -> None:
        error = DatasetError("couldn't read file /tmp/x.xml")
        assert error.reason == "couldn't read file /tmp/x.xml"
        assert error.kind is ErrorKind.SERVER_FATAL
