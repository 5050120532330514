"""Predicates and parsers for raw user input.

The ``is_valid_*`` predicates and ``parse_repo`` are pure and never raise for
malformed input. The ``require_*`` variants raise a ``ValidationError``
subclass carrying the user-facing message instead.
"""

import re
from enum import Enum
from typing import Optional, Tuple, Type

from prlens.core.exceptions import InvalidOptionError, InvalidRepositoryError
from prlens.core.schema.query import DisplayFormat, PRState, SortDirection, SortField

MIN_TOKEN_LENGTH = 40
TOKEN_PREFIXES = ("ghp_", "github_pat_")

_HEX_TOKEN = re.compile(r"^[a-f0-9]+$", re.IGNORECASE)
_UNSAFE_CHARACTERS = re.compile(r"[<>\"'&]")

_OPTION_LABELS = {
    DisplayFormat: ("format", "compact, detailed, or json"),
    SortField: ("sort field", "created, updated, comments, or title"),
    SortDirection: ("sort direction", "asc or desc"),
    PRState: ("state", "open, closed, or all"),
}


def is_valid_repo_format(value: object) -> bool:
    if not value or not isinstance(value, str):
        return False
    parts = value.split("/")
    return len(parts) == 2 and all(parts)


def parse_repo(value: object) -> Optional[Tuple[str, str]]:
    """Split ``owner/repo`` into its two halves, or ``None`` if malformed."""
    if not is_valid_repo_format(value):
        return None
    owner, repo = value.split("/")
    return owner, repo


def is_valid_token_format(token: object) -> bool:
    if not token or not isinstance(token, str):
        return False
    trimmed = token.strip()
    return len(trimmed) >= MIN_TOKEN_LENGTH and (
        trimmed.startswith(TOKEN_PREFIXES) or bool(_HEX_TOKEN.match(trimmed))
    )


def is_valid_display_format(value: object) -> bool:
    return _is_member(DisplayFormat, value)


def is_valid_sort_field(value: object) -> bool:
    return _is_member(SortField, value)


def is_valid_sort_direction(value: object) -> bool:
    return _is_member(SortDirection, value)


def is_valid_state(value: object) -> bool:
    return _is_member(PRState, value)


def sanitize_input(value: object) -> str:
    if not value or not isinstance(value, str):
        return ""
    return _UNSAFE_CHARACTERS.sub("", value).strip()


def require_repo(value: object) -> Tuple[str, str]:
    parsed = parse_repo(value)
    if parsed is None:
        raise InvalidRepositoryError(
            "Invalid repository format. Use: owner/repo (e.g., vercel/next.js)",
            value,
        )
    return parsed


def require_option(enum_type: Type[Enum], value: object) -> Enum:
    """Return the ``enum_type`` member for ``value`` or raise ``InvalidOptionError``."""
    option, choices = _OPTION_LABELS[enum_type]
    if not _is_member(enum_type, value):
        raise InvalidOptionError(
            f"Invalid {option}. Use: {choices}", option=option, value=value
        )
    return enum_type(value)


def _is_member(enum_type, value: object) -> bool:  # noqa: ANN001
    return isinstance(value, str) and value in {member.value for member in enum_type}
