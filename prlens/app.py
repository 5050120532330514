from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, Optional

from prlens.config import Settings
from prlens.core.exceptions import (
    ConfigurationError,
    InvalidCredentialsFormatError,
    MissingCredentialsError,
)
from prlens.core.ports.cache import Cache
from prlens.core.ports.logger import Logger
from prlens.core.services import PullRequestFetcher
from prlens.core.validation import is_valid_token_format
from prlens.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubPullRequestTransport,
    LogfireLogger,
    configure_logfire,
    get_default_cache,
)

FetcherFactory = Callable[['Application'], ContextManager[PullRequestFetcher]]


@dataclass
class Application:
    """Everything a command needs, built once per process."""

    settings: Settings
    logger: Logger
    cache: Cache
    fetcher_factory: Optional[FetcherFactory] = None

    def open_fetcher(self) -> ContextManager[PullRequestFetcher]:
        factory = self.fetcher_factory or open_github_fetcher
        return factory(self)


def build_application(settings: Settings) -> Application:
    return Application(
        settings=settings,
        logger=build_logger(settings),
        cache=get_default_cache(),
    )


def build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but PRLENS_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')


def require_token(settings: Settings) -> str:
    token = settings.github.token
    if not token:
        raise MissingCredentialsError(
            'GitHub token not found. Set the GITHUB_TOKEN environment variable '
            'or add it to a .env file'
        )
    if not is_valid_token_format(token):
        raise InvalidCredentialsFormatError('Invalid GitHub token format')
    return token.strip()


@contextmanager
def open_github_fetcher(app: Application) -> Iterator[PullRequestFetcher]:
    token = require_token(app.settings)
    with GitHubClient(token, app.settings.github.user_agent) as client:
        yield PullRequestFetcher(
            GitHubPullRequestTransport(client),
            app.cache,
            app.logger,
            ttl_ms=app.settings.cache.ttl_ms,
        )
