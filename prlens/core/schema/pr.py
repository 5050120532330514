from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True, slots=True)
class GitHubUser:
    login: str
    id: int
    avatar_url: str
    html_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "login": self.login,
            "id": self.id,
            "avatar_url": self.avatar_url,
            "html_url": self.html_url,
        }


@dataclass(frozen=True, slots=True)
class Label:
    id: int
    name: str
    color: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class PullRequest:
    id: int
    number: int
    title: str
    state: str
    user: GitHubUser
    body: Optional[str]
    created_at: datetime
    updated_at: datetime
    closed_at: Optional[datetime]
    merged_at: Optional[datetime]
    html_url: str
    draft: bool
    labels: Tuple[Label, ...] = ()
    requested_reviewers: Tuple[GitHubUser, ...] = ()
    comments: int = 0
    review_comments: int = 0
    commits: int = 0
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0

    @property
    def total_comments(self) -> int:
        return self.comments + self.review_comments

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "number": self.number,
            "title": self.title,
            "state": self.state,
            "user": self.user.to_dict(),
            "body": self.body,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
            "closed_at": _isoformat(self.closed_at),
            "merged_at": _isoformat(self.merged_at),
            "html_url": self.html_url,
            "draft": self.draft,
            "labels": [label.to_dict() for label in self.labels],
            "requested_reviewers": [
                reviewer.to_dict() for reviewer in self.requested_reviewers
            ],
            "comments": self.comments,
            "review_comments": self.review_comments,
            "commits": self.commits,
            "additions": self.additions,
            "deletions": self.deletions,
            "changed_files": self.changed_files,
        }


@dataclass(frozen=True, slots=True)
class PaginationSummary:
    page: int
    per_page: int
    has_next_page: bool
    total_fetched: int


@dataclass(frozen=True, slots=True)
class FetchResult:
    pull_requests: Tuple[PullRequest, ...]
    pagination: PaginationSummary


@dataclass(frozen=True, slots=True)
class PullPage:
    pull_requests: Tuple[PullRequest, ...]
    has_next: bool


@dataclass(frozen=True, slots=True)
class FetchCriteria:
    owner: str
    repo: str
    state: str = "open"
    sort: str = "created"
    direction: str = "desc"
    per_page: int = 30
    max_pages: int = 5

    def cache_suffix(self) -> str:
        # per_page and max_pages are not part of the query identity
        return f"prs-{self.state}-{self.sort}-{self.direction}"


@dataclass(frozen=True, slots=True)
class RateLimit:
    remaining: int
    limit: int
    reset: datetime


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")
