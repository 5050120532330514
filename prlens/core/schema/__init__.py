from prlens.core.schema.cache import CacheEntry, CacheStats, generate_cache_key
from prlens.core.schema.pr import (
    FetchCriteria,
    FetchResult,
    GitHubUser,
    Label,
    PaginationSummary,
    PullPage,
    PullRequest,
    RateLimit,
)
from prlens.core.schema.query import (
    APISort,
    DisplayFormat,
    FilterCriteria,
    PRState,
    SortCriteria,
    SortDirection,
    SortField,
)

__all__ = [
    "GitHubUser",
    "Label",
    "PullRequest",
    "PaginationSummary",
    "FetchResult",
    "FetchCriteria",
    "PullPage",
    "RateLimit",
    "CacheEntry",
    "CacheStats",
    "generate_cache_key",
    "PRState",
    "APISort",
    "SortField",
    "SortDirection",
    "DisplayFormat",
    "FilterCriteria",
    "SortCriteria",
]
