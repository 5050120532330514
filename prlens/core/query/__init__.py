from prlens.core.query.filtering import filter_pull_requests
from prlens.core.query.sorting import sort_pull_requests

__all__ = ["filter_pull_requests", "sort_pull_requests"]
