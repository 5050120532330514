from datetime import timedelta

from prlens.core.query import filter_pull_requests, sort_pull_requests
from prlens.core.schema import FilterCriteria, SortCriteria, SortDirection, SortField
from tests.fakes import make_pr
from tests.fakes.pull_requests import BASE_TIME


def _sample():
    return [
        make_pr(1, title="Zebra", author="Alice", labels=("bug",), comments=10, review_comments=5),
        make_pr(2, title="Alpha", author="bob", labels=("Feature", "docs"), comments=5),
        make_pr(3, title="Beta", author="alice", comments=2, review_comments=1),
    ]


class TestFilterPullRequests:
    def test_empty_criteria_returns_all(self) -> None:
        items = _sample()

        assert filter_pull_requests(items, FilterCriteria()) == items

    def test_author_is_case_insensitive_exact(self) -> None:
        result = filter_pull_requests(_sample(), FilterCriteria(author="ALICE"))

        assert [pr.number for pr in result] == [1, 3]

    def test_author_is_not_substring(self) -> None:
        assert filter_pull_requests(_sample(), FilterCriteria(author="ali")) == []

    def test_label_matches_any_label(self) -> None:
        result = filter_pull_requests(_sample(), FilterCriteria(label="feature"))

        assert [pr.number for pr in result] == [2]

    def test_min_comments_uses_combined_count(self) -> None:
        result = filter_pull_requests(_sample(), FilterCriteria(min_comments=5))

        assert [pr.number for pr in result] == [1, 2]

    def test_criteria_are_conjunctive(self) -> None:
        criteria = FilterCriteria(author="alice", min_comments=4)

        assert [pr.number for pr in filter_pull_requests(_sample(), criteria)] == [1]

    def test_is_idempotent(self) -> None:
        criteria = FilterCriteria(author="alice")
        once = filter_pull_requests(_sample(), criteria)

        assert filter_pull_requests(once, criteria) == once

    def test_does_not_mutate_input(self) -> None:
        items = _sample()
        snapshot = list(items)

        filter_pull_requests(items, FilterCriteria(author="bob"))

        assert items == snapshot


class TestSortPullRequests:
    def test_title_ascending(self) -> None:
        result = sort_pull_requests(
            _sample(), SortCriteria(SortField.TITLE, SortDirection.ASC)
        )

        assert [pr.title for pr in result] == ["Alpha", "Beta", "Zebra"]

    def test_title_collates_accents_and_case(self) -> None:
        items = [
            make_pr(1, title="Zebra"),
            make_pr(2, title="Éclair"),
            make_pr(3, title="apple"),
        ]

        result = sort_pull_requests(items, SortCriteria(SortField.TITLE, SortDirection.ASC))

        assert [pr.title for pr in result] == ["apple", "Éclair", "Zebra"]

    def test_reversing_direction_reverses_order(self) -> None:
        ascending = sort_pull_requests(
            _sample(), SortCriteria(SortField.TITLE, SortDirection.ASC)
        )
        descending = sort_pull_requests(
            _sample(), SortCriteria(SortField.TITLE, SortDirection.DESC)
        )

        assert descending == list(reversed(ascending))

    def test_comments_descending_uses_combined_count(self) -> None:
        result = sort_pull_requests(
            _sample(), SortCriteria(SortField.COMMENTS, SortDirection.DESC)
        )

        assert [pr.total_comments for pr in result] == [15, 5, 3]

    def test_created_is_chronological(self) -> None:
        items = [
            make_pr(1, created_at=BASE_TIME - timedelta(days=1)),
            make_pr(2, created_at=BASE_TIME - timedelta(days=3)),
            make_pr(3, created_at=BASE_TIME - timedelta(hours=1)),
        ]

        result = sort_pull_requests(items, SortCriteria(SortField.CREATED, SortDirection.ASC))

        assert [pr.number for pr in result] == [2, 1, 3]

    def test_updated_descending(self) -> None:
        items = [
            make_pr(1, updated_at=BASE_TIME - timedelta(days=1)),
            make_pr(2, updated_at=BASE_TIME),
            make_pr(3, updated_at=BASE_TIME - timedelta(days=2)),
        ]

        result = sort_pull_requests(items, SortCriteria(SortField.UPDATED, SortDirection.DESC))

        assert [pr.number for pr in result] == [2, 1, 3]

    def test_is_stable_for_equal_keys(self) -> None:
        items = [make_pr(n, comments=1) for n in (4, 2, 9)]

        for direction in SortDirection:
            result = sort_pull_requests(items, SortCriteria(SortField.COMMENTS, direction))
            assert [pr.number for pr in result] == [4, 2, 9]

    def test_does_not_mutate_input(self) -> None:
        items = _sample()
        snapshot = list(items)

        sort_pull_requests(items, SortCriteria(SortField.TITLE, SortDirection.ASC))

        assert items == snapshot
