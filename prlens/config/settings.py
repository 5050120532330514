import os
from dataclasses import dataclass
from typing import Optional

from prlens.core.exceptions import ConfigurationError

VERSION = "1.0.0"
DEFAULT_USER_AGENT = f"prlens/{VERSION}"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]
    user_agent: str


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class CacheSettings:
    ttl_ms: int


@dataclass(frozen=True, slots=True)
class FetchSettings:
    per_page: int
    max_pages: int


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    cache: CacheSettings
    fetch: FetchSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    github_token = _env_or_default("GITHUB_TOKEN")
    user_agent = _env_or_default("PRLENS_USER_AGENT", DEFAULT_USER_AGENT)

    logging_backend = _env_or_default("PRLENS_LOGGER_BACKEND", "console").lower()
    logging_name = _env_or_default("PRLENS_LOGGER_NAME", "prlens")
    logging_level = _env_or_default("PRLENS_LOG_LEVEL", "WARNING").upper()
    logfire_token = _env_or_default("PRLENS_LOGFIRE_TOKEN")

    cache_ttl_ms = _env_int("PRLENS_CACHE_TTL_MS", 5 * 60 * 1000)
    per_page = _env_int("PRLENS_PER_PAGE", 30)
    max_pages = _env_int("PRLENS_MAX_PAGES", 5)

    return Settings(
        github=GitHubSettings(token=github_token, user_agent=user_agent),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
        cache=CacheSettings(ttl_ms=cache_ttl_ms),
        fetch=FetchSettings(per_page=per_page, max_pages=max_pages),
    )


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = _env_or_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from error
