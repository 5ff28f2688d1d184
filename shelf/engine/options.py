# shelf/engine/options.py

from dataclasses import dataclass
from typing import Iterable

from shelf.models import MediaItem


@dataclass(frozen=True)
class DerivedOptions:
    """Distinct values present in the catalog, ready to populate filter choices."""
    genres: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    statuses: tuple[str, ...] = ()
    ratings: tuple[int, ...] = ()  # highest first


def derive_options(catalog: Iterable[MediaItem]) -> DerivedOptions:
    genres, types, statuses, ratings = set(), set(), set(), set()
    for item in catalog:
        genres.update(item.genres)
        types.add(item.media_type)
        statuses.add(item.status)
        ratings.add(item.rating)

    return DerivedOptions(
        genres=tuple(sorted(genres)),
        types=tuple(sorted(types)),
        statuses=tuple(sorted(statuses)),
        ratings=tuple(sorted(ratings, reverse=True)),
    )
