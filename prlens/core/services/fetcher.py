from typing import List, Optional

from prlens.core.exceptions import (
    InvalidOptionError,
    PRFetchError,
    SourceAuthenticationError,
    SourceError,
    SourceForbiddenError,
    SourceNotFoundError,
    SourceRateLimitError,
    TransportError,
    TransportErrorKind,
)
from prlens.core.ports.cache import Cache
from prlens.core.ports.logger import Logger
from prlens.core.ports.pr_transport import PullRequestTransport
from prlens.core.schema.cache import generate_cache_key
from prlens.core.schema.pr import (
    FetchCriteria,
    FetchResult,
    PaginationSummary,
    PullRequest,
    RateLimit,
)


class PullRequestFetcher:
    """Fetches pull requests page by page and caches the combined result.

    A cached result is keyed by owner, repo, state, sort and direction only,
    so a later call with a different ``per_page`` or ``max_pages`` is served
    the earlier result until it expires.
    """

    def __init__(
        self,
        transport: PullRequestTransport,
        cache: Cache,
        logger: Logger,
        ttl_ms: Optional[int] = None,
    ) -> None:
        self._transport = transport
        self._cache = cache
        self._logger = logger
        self._ttl_ms = ttl_ms

    def verify_credentials(self) -> bool:
        try:
            login = self._transport.get_authenticated_user()
        except TransportError as error:
            self._logger.warning(
                "Credential check failed",
                kind=error.kind.value,
                status=error.status,
            )
            return False
        self._logger.debug("Credential check passed", login=login)
        return True

    def fetch_pull_requests(self, criteria: FetchCriteria) -> FetchResult:
        if criteria.max_pages < 1:
            raise InvalidOptionError(
                "max_pages must be at least 1",
                option="max_pages",
                value=criteria.max_pages,
            )
        if criteria.per_page < 1:
            raise InvalidOptionError(
                "per_page must be at least 1",
                option="per_page",
                value=criteria.per_page,
            )
        cache_key = cache_key_for(criteria)
        cached = self._cache.get(cache_key)
        if cached is not None:
            self._logger.info("Returning cached results", key=cache_key)
            return cached

        self._logger.info(
            "Fetching pull requests",
            owner=criteria.owner,
            repo=criteria.repo,
            state=criteria.state,
            max_pages=criteria.max_pages,
        )
        pull_requests: List[PullRequest] = []
        current_page = 1
        has_next_page = True
        try:
            while has_next_page and current_page <= criteria.max_pages:
                page = self._transport.list_pulls(
                    criteria.owner,
                    criteria.repo,
                    state=criteria.state,
                    sort=criteria.sort,
                    direction=criteria.direction,
                    per_page=criteria.per_page,
                    page=current_page,
                )
                if not page.pull_requests:
                    has_next_page = False
                    break
                pull_requests.extend(page.pull_requests)
                has_next_page = page.has_next
                self._logger.debug(
                    "Fetched page",
                    page=current_page,
                    count=len(page.pull_requests),
                    has_next=has_next_page,
                )
                current_page += 1
        except TransportError as error:
            raise self._classify(error, criteria) from error

        result = FetchResult(
            pull_requests=tuple(pull_requests),
            pagination=PaginationSummary(
                page=current_page - 1,
                per_page=criteria.per_page,
                has_next_page=has_next_page,
                total_fetched=len(pull_requests),
            ),
        )
        self._cache.set(cache_key, result, self._ttl_ms)
        self._logger.info(
            "Fetch complete",
            key=cache_key,
            pages=result.pagination.page,
            total=result.pagination.total_fetched,
            has_next_page=has_next_page,
        )
        return result

    def get_rate_limit(self) -> RateLimit:
        try:
            return self._transport.get_rate_limit()
        except TransportError as error:
            raise PRFetchError(
                f"Failed to get rate limit: {error.message}"
            ) from error

    def _classify(self, error: TransportError, criteria: FetchCriteria) -> SourceError:
        resource = f"{criteria.owner}/{criteria.repo}"
        self._logger.error(
            "Fetch failed",
            resource=resource,
            kind=error.kind.value,
            status=error.status,
        )
        if error.kind is TransportErrorKind.NOT_FOUND:
            return SourceNotFoundError(
                f"Repository {resource} not found or you don't have access",
                resource,
            )
        if error.kind is TransportErrorKind.UNAUTHORIZED:
            return SourceAuthenticationError(
                "Authentication failed. Please check your GitHub token"
            )
        if error.kind is TransportErrorKind.RATE_LIMITED:
            return SourceRateLimitError(
                "GitHub API rate limit exceeded. Please try again later",
                error.reset_at,
            )
        if error.kind is TransportErrorKind.FORBIDDEN:
            return SourceForbiddenError(
                "Access forbidden. Please check your token permissions"
            )
        if error.kind is TransportErrorKind.OTHER:
            return PRFetchError(f"Failed to fetch pull requests: {error.message}")
        raise AssertionError(f"Unhandled transport error kind {error.kind}")


def cache_key_for(criteria: FetchCriteria) -> str:
    return generate_cache_key(criteria.owner, criteria.repo, criteria.cache_suffix())
