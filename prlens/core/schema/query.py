from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PRState(Enum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class APISort(Enum):
    CREATED = "created"
    UPDATED = "updated"
    POPULARITY = "popularity"
    LONG_RUNNING = "long-running"


class SortField(Enum):
    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"
    TITLE = "title"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


class DisplayFormat(Enum):
    COMPACT = "compact"
    DETAILED = "detailed"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    author: Optional[str] = None
    label: Optional[str] = None
    min_comments: Optional[int] = None

    def is_empty(self) -> bool:
        return self.author is None and self.label is None and self.min_comments is None


@dataclass(frozen=True, slots=True)
class SortCriteria:
    field: SortField = SortField.CREATED
    direction: SortDirection = SortDirection.DESC
