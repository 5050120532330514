from functools import cmp_to_key, lru_cache
from typing import Callable, Dict, Iterable, List

from pyuca import Collator

from prlens.core.schema.pr import PullRequest
from prlens.core.schema.query import SortCriteria, SortDirection, SortField

Comparator = Callable[[PullRequest, PullRequest], int]


def sort_pull_requests(
    pull_requests: Iterable[PullRequest],
    criteria: SortCriteria,
) -> List[PullRequest]:
    """Return a new list sorted by ``criteria``.

    The sort is stable: pull requests that compare equal keep their input
    order in both directions.
    """
    ascending = _COMPARATORS[criteria.field]
    if criteria.direction is SortDirection.ASC:
        comparator = ascending
    else:
        comparator = lambda a, b: -ascending(a, b)  # noqa: E731
    return sorted(pull_requests, key=cmp_to_key(comparator))


def _compare_created(a: PullRequest, b: PullRequest) -> int:
    return _sign((a.created_at - b.created_at).total_seconds())


def _compare_updated(a: PullRequest, b: PullRequest) -> int:
    return _sign((a.updated_at - b.updated_at).total_seconds())


def _compare_comments(a: PullRequest, b: PullRequest) -> int:
    return a.total_comments - b.total_comments


def _compare_title(a: PullRequest, b: PullRequest) -> int:
    collator = _collator()
    ordered = _sign_of(collator.sort_key(a.title), collator.sort_key(b.title))
    if ordered:
        return ordered
    return _sign_of(a.title, b.title)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _sign_of(a, b) -> int:  # noqa: ANN001
    return (a > b) - (a < b)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Unicode Collation Algorithm with the default table, independent of process locale
    return Collator()


_COMPARATORS: Dict[SortField, Comparator] = {
    SortField.CREATED: _compare_created,
    SortField.UPDATED: _compare_updated,
    SortField.COMMENTS: _compare_comments,
    SortField.TITLE: _compare_title,
}
