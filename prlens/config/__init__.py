from prlens.config.settings import (
    CacheSettings,
    FetchSettings,
    GitHubSettings,
    LoggingSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'CacheSettings',
    'FetchSettings',
    'load_settings',
]
