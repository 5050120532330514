from prlens.infra.github.client import DEFAULT_USER_AGENT, GitHubClient
from prlens.infra.github.transport import GitHubPullRequestTransport

__all__ = ["DEFAULT_USER_AGENT", "GitHubClient", "GitHubPullRequestTransport"]
