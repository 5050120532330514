from prlens.infra.cache import MemoryCache, get_default_cache
from prlens.infra.clock import SystemClock
from prlens.infra.github import GitHubClient, GitHubPullRequestTransport
from prlens.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    'GitHubClient',
    'GitHubPullRequestTransport',
    'MemoryCache',
    'get_default_cache',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
]
