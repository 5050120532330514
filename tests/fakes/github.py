from typing import Any, Dict, List, Optional, Tuple, Union

Response = Union[Tuple[Dict[str, str], Any], Exception]


class FakeGitHubClient:
    """Stands in for ``GitHubClient``; responses are queued per path."""

    def __init__(self, responses: Optional[Dict[str, List[Response]]] = None) -> None:
        self._responses = {path: list(queue) for path, queue in (responses or {}).items()}
        self.requests: List[Tuple[str, Optional[Dict[str, Any]]]] = []
        self.closed = False

    def request_json(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, str], Any]:
        self.requests.append((path, parameters))
        queue = self._responses.get(path)
        if not queue:
            raise AssertionError(f"Unexpected request to {path}")
        response = queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


def raw_user(login: str = "octocat", user_id: int = 1) -> Dict[str, Any]:
    return {
        "login": login,
        "id": user_id,
        "avatar_url": f"https://avatars.example.com/{login}",
        "html_url": f"https://github.com/{login}",
    }


def raw_pull(number: int = 1, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": 1000 + number,
        "number": number,
        "title": f"PR {number}",
        "state": "open",
        "user": raw_user(),
        "body": "Body text",
        "created_at": "2024-01-15T10:00:00Z",
        "updated_at": "2024-01-15T11:00:00Z",
        "closed_at": None,
        "merged_at": None,
        "html_url": f"https://github.com/owner/repo/pull/{number}",
        "draft": False,
        "labels": [
            {"id": 7, "name": "bug", "color": "ff0000", "description": "Bug fix"},
        ],
        "requested_reviewers": [raw_user("reviewer1", 2)],
    }
    payload.update(overrides)
    return payload
