import logging
import sys
from typing import Any

from prlens.core.exceptions import ConfigurationError
from prlens.core.ports.logger import Logger


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if context:
            pairs = ' '.join(
                f'{key}={value!r}' for key, value in context.items()
            )
            return f'{base} | {pairs}'
        return base


class ConsoleLogger(Logger):
    """Logger writing ``LEVEL name: message | key=value`` lines to stderr."""

    def __init__(self, name: str, level: str | int = logging.WARNING) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(_coerce_level(level))
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                _KeyValueFormatter('%(levelname)s %(name)s: %(message)s')
            )
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, extra={'context': context})

    def _log(self, level: int, message: str, **context: Any) -> None:
        self._logger.log(level, message, extra={'context': context})


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f'Unknown log level {level}')
    return resolved
