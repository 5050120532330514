from datetime import datetime
from enum import Enum
from typing import Optional


class PRLensError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PRLensError):
    pass


class ValidationError(PRLensError):
    pass


class MissingCredentialsError(ValidationError):
    pass


class InvalidCredentialsFormatError(ValidationError):
    pass


class InvalidRepositoryError(ValidationError):
    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)


class InvalidOptionError(ValidationError):
    def __init__(self, message: str, option: str, value: object) -> None:
        self.option = option
        self.value = value
        super().__init__(message)


class TransportErrorKind(Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    FORBIDDEN = "forbidden"
    OTHER = "other"


class TransportError(PRLensError):
    def __init__(
        self,
        kind: TransportErrorKind,
        message: str,
        status: Optional[int] = None,
        reset_at: Optional[datetime] = None,
    ) -> None:
        self.kind = kind
        self.status = status
        self.reset_at = reset_at
        super().__init__(message)


class SourceError(PRLensError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, reset_at: Optional[datetime] = None) -> None:
        self.reset_at = reset_at
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class SourceForbiddenError(SourceError):
    pass


class PRFetchError(SourceError):
    pass
