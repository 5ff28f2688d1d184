# shelf/engine/filters.py

from typing import Iterable

from shelf.models import FilterCriteria, MediaItem


def matches(item: MediaItem, criteria: FilterCriteria) -> bool:
    """True when the item satisfies every filter that is set."""
    if criteria.genre is not None and criteria.genre not in item.genres:
        return False
    if criteria.rating is not None and item.rating != criteria.rating:
        return False
    if criteria.media_type is not None and item.media_type != criteria.media_type:
        return False
    if criteria.status is not None and item.status != criteria.status:
        return False
    return True


def apply_filters(catalog: Iterable[MediaItem], criteria: FilterCriteria) -> tuple[MediaItem, ...]:
    return tuple(item for item in catalog if matches(item, criteria))
