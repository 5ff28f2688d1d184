# shelf/models/criteria.py

from dataclasses import dataclass, field
from enum import Enum


class SortKey(str, Enum):
    RELEASE_YEAR = "releaseYear"
    TITLE = "title"
    RATING = "rating"


@dataclass(frozen=True)
class FilterCriteria:
    """
    Active filter selections plus the sort key.

    A filter field left as None matches every item.
    """
    genre: str | None = None
    rating: int | None = None
    media_type: str | None = None
    status: str | None = None
    sort_by: SortKey = SortKey.RATING


@dataclass(frozen=True)
class FilterState:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    page_index: int = 1
