from typing import Any, Dict, Optional, Tuple

from github import Auth, Github

from prlens.config.settings import DEFAULT_USER_AGENT
from prlens.core.exceptions import MissingCredentialsError


class GitHubClient:
    def __init__(self, token: str, user_agent: str = DEFAULT_USER_AGENT) -> None:
        if not token or not token.strip():
            raise MissingCredentialsError("GitHub token is required")
        self._client = Github(auth=Auth.Token(token.strip()), user_agent=user_agent)

    def request_json(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, Any], Any]:
        """GET ``path`` and return ``(headers, payload)``.

        Header names are lower-cased by PyGithub. Non-2xx responses raise
        ``github.GithubException`` (or one of its subclasses).
        """
        return self._client.requester.requestJsonAndCheck(
            "GET",
            path,
            parameters=parameters,
        )

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
