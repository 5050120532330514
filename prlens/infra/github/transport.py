from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from github import GithubException, RateLimitExceededException
from requests import RequestException

from prlens.core.exceptions import TransportError, TransportErrorKind
from prlens.core.ports.pr_transport import PullRequestTransport
from prlens.core.schema.pr import GitHubUser, Label, PullPage, PullRequest, RateLimit
from prlens.infra.github.client import GitHubClient


class GitHubPullRequestTransport(PullRequestTransport):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def get_authenticated_user(self) -> str:
        _, payload = self._request("/user")
        try:
            return payload["login"]
        except (KeyError, TypeError) as error:
            raise TransportError(
                TransportErrorKind.OTHER,
                f"Malformed user payload: {error}",
            ) from error

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
        headers, payload = self._request(
            f"/repos/{owner}/{repo}/pulls",
            {
                "state": state,
                "sort": sort,
                "direction": direction,
                "per_page": per_page,
                "page": page,
            },
        )
        try:
            pull_requests = tuple(self._to_pull_request(raw) for raw in payload)
        except (KeyError, TypeError, ValueError) as error:
            raise TransportError(
                TransportErrorKind.OTHER,
                f"Malformed pull request payload: {error}",
            ) from error
        return PullPage(
            pull_requests=pull_requests,
            has_next=_has_next_link(headers),
        )

    def get_rate_limit(self) -> RateLimit:
        _, payload = self._request("/rate_limit")
        try:
            rate = payload["rate"]
            return RateLimit(
                remaining=int(rate["remaining"]),
                limit=int(rate["limit"]),
                reset=datetime.fromtimestamp(int(rate["reset"]), tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as error:
            raise TransportError(
                TransportErrorKind.OTHER,
                f"Malformed rate limit payload: {error}",
            ) from error

    def _request(self, path: str, parameters: Optional[Dict[str, Any]] = None):
        try:
            return self._client.request_json(path, parameters)
        except GithubException as error:
            raise self._translate_exception(error) from error
        except RequestException as error:
            raise TransportError(TransportErrorKind.OTHER, str(error)) from error

    def _translate_exception(self, error: GithubException) -> TransportError:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", None) or {}
        message = _error_message(error)
        if status == 401:
            kind = TransportErrorKind.UNAUTHORIZED
        elif status == 404:
            kind = TransportErrorKind.NOT_FOUND
        elif isinstance(error, RateLimitExceededException) or (
            status in (403, 429) and "rate limit" in message.lower()
        ):
            kind = TransportErrorKind.RATE_LIMITED
        elif status == 403:
            kind = TransportErrorKind.FORBIDDEN
        else:
            kind = TransportErrorKind.OTHER
        return TransportError(
            kind,
            message,
            status=status,
            reset_at=_reset_from_headers(headers),
        )

    def _to_pull_request(self, raw: Mapping[str, Any]) -> PullRequest:
        return PullRequest(
            id=raw["id"],
            number=raw["number"],
            title=raw.get("title") or "",
            state=raw["state"],
            user=self._to_user(raw["user"]),
            body=raw.get("body"),
            created_at=_parse_timestamp(raw["created_at"]),
            updated_at=_parse_timestamp(raw["updated_at"]),
            closed_at=_parse_optional_timestamp(raw.get("closed_at")),
            merged_at=_parse_optional_timestamp(raw.get("merged_at")),
            html_url=raw["html_url"],
            draft=bool(raw.get("draft", False)),
            labels=tuple(self._to_label(label) for label in raw.get("labels") or ()),
            requested_reviewers=tuple(
                self._to_user(reviewer)
                for reviewer in raw.get("requested_reviewers") or ()
            ),
            comments=raw.get("comments") or 0,
            review_comments=raw.get("review_comments") or 0,
            commits=raw.get("commits") or 0,
            additions=raw.get("additions") or 0,
            deletions=raw.get("deletions") or 0,
            changed_files=raw.get("changed_files") or 0,
        )

    def _to_user(self, raw: Mapping[str, Any]) -> GitHubUser:
        return GitHubUser(
            login=raw["login"],
            id=raw["id"],
            avatar_url=raw.get("avatar_url") or "",
            html_url=raw.get("html_url") or "",
        )

    def _to_label(self, raw: Mapping[str, Any]) -> Label:
        return Label(
            id=raw["id"],
            name=raw["name"],
            color=raw.get("color") or "",
            description=raw.get("description"),
        )


def _has_next_link(headers: Mapping[str, str]) -> bool:
    link = headers.get("link") or headers.get("Link")
    return bool(link) and 'rel="next"' in link


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_optional_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return _parse_timestamp(value)


def _error_message(error: GithubException) -> str:
    data = getattr(error, "data", None)
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(error)


def _reset_from_headers(headers: Mapping[str, str]) -> Optional[datetime]:
    reset = headers.get("x-ratelimit-reset") or headers.get("X-RateLimit-Reset")
    if reset is None:
        return None
    try:
        return datetime.fromtimestamp(float(reset), tz=timezone.utc)
    except (TypeError, ValueError):
        return None
