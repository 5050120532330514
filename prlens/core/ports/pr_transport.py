from typing import Protocol, runtime_checkable

from prlens.core.schema.pr import PullPage, RateLimit


@runtime_checkable
class PullRequestTransport(Protocol):
    """Raw access to the hosting API.

    Every method raises ``TransportError`` on failure, tagged with one of the
    ``TransportErrorKind`` members.
    """

    def get_authenticated_user(self) -> str:
        ...

    def list_pulls(
        self,
        owner: str,
        repo: str,
        *,
        state: str,
        sort: str,
        direction: str,
        per_page: int,
        page: int,
    ) -> PullPage:
        ...

    def get_rate_limit(self) -> RateLimit:
        ...
