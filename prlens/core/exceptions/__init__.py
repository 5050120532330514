from prlens.core.exceptions.errors import (
    ConfigurationError,
    InvalidCredentialsFormatError,
    InvalidOptionError,
    InvalidRepositoryError,
    MissingCredentialsError,
    PRFetchError,
    PRLensError,
    SourceAuthenticationError,
    SourceError,
    SourceForbiddenError,
    SourceNotFoundError,
    SourceRateLimitError,
    TransportError,
    TransportErrorKind,
    ValidationError,
)

__all__ = [
    "PRLensError",
    "ConfigurationError",
    "ValidationError",
    "MissingCredentialsError",
    "InvalidCredentialsFormatError",
    "InvalidRepositoryError",
    "InvalidOptionError",
    "TransportError",
    "TransportErrorKind",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "SourceForbiddenError",
    "PRFetchError",
]
