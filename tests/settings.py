from prlens.config.settings import (
    CacheSettings,
    FetchSettings,
    GitHubSettings,
    LoggingSettings,
    Settings,
)

VALID_TOKEN = "ghp_" + "a" * 40


def get_test_settings(token: str | None = VALID_TOKEN) -> Settings:
    return Settings(
        github=GitHubSettings(
            token=token,
            user_agent="prlens-test",
        ),
        logging=LoggingSettings(
            backend="console",
            name="prlens-test",
            level="WARNING",
            logfire_token=None,
        ),
        cache=CacheSettings(ttl_ms=300_000),
        fetch=FetchSettings(per_page=30, max_pages=5),
    )
