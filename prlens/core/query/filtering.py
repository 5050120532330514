from typing import Iterable, List

from prlens.core.schema.pr import PullRequest
from prlens.core.schema.query import FilterCriteria


def filter_pull_requests(
    pull_requests: Iterable[PullRequest],
    criteria: FilterCriteria,
) -> List[PullRequest]:
    """Keep the pull requests matching every criterion that is set."""
    filtered = list(pull_requests)

    if criteria.author is not None:
        author = criteria.author.lower()
        filtered = [pr for pr in filtered if pr.user.login.lower() == author]

    if criteria.label is not None:
        label = criteria.label.lower()
        filtered = [
            pr
            for pr in filtered
            if any(candidate.name.lower() == label for candidate in pr.labels)
        ]

    if criteria.min_comments is not None:
        filtered = [
            pr for pr in filtered if pr.total_comments >= criteria.min_comments
        ]

    return filtered
