"""
Everything the presentation layer needs for one render cycle.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd

from shelf.models import FilterCriteria, FilterState, MediaItem, SortKey
from .filters import apply_filters
from .options import DerivedOptions, derive_options
from .pagination import paginate
from .sorting import sort_content


@dataclass(frozen=True)
class CatalogView:
    page_items: tuple[MediaItem, ...]
    total_items: int  # size of the whole catalog
    filtered_count: int
    page_count: int
    page_index: int
    options: DerivedOptions


@dataclass(frozen=True)
class CatalogStats:
    total: int
    by_type: dict[str, int]

    def count(self, media_type: str) -> int:
        return self.by_type.get(media_type, 0)


def filter_and_sort(catalog: Iterable[MediaItem], criteria: FilterCriteria) -> tuple[MediaItem, ...]:
    return sort_content(apply_filters(catalog, criteria), criteria.sort_by)


def build_view(
    catalog: Sequence[MediaItem],
    state: FilterState,
    page_size: int,
    options: DerivedOptions | None = None,
    ordered: Sequence[MediaItem] | None = None,
) -> CatalogView:
    """
    Run filter -> sort -> paginate for the given state.

    `options` and `ordered` let a caller pass in results it has cached.
    """
    if options is None:
        options = derive_options(catalog)
    if ordered is None:
        ordered = filter_and_sort(catalog, state.criteria)

    page = paginate(ordered, state.page_index, page_size)
    return CatalogView(
        page_items=page.page_items,
        total_items=len(catalog),
        filtered_count=page.total_items,
        page_count=page.page_count,
        page_index=state.page_index,
        options=options,
    )


def active_filter_count(criteria: FilterCriteria) -> int:
    """Number of filters in use; a non-default sort order counts as one."""
    count = sum(
        value is not None
        for value in (criteria.genre, criteria.rating, criteria.media_type, criteria.status)
    )
    if criteria.sort_by != SortKey.RATING:
        count += 1
    return count


def catalog_stats(catalog: Iterable[MediaItem]) -> CatalogStats:
    by_type = Counter(item.media_type for item in catalog)
    return CatalogStats(total=sum(by_type.values()), by_type=dict(by_type))


def items_to_frame(items: Iterable[MediaItem]) -> pd.DataFrame:
    records = [
        {
            "title": item.title,
            "type": item.media_type,
            "rating": item.rating,
            "year": item.release_year,
            "genres": ", ".join(item.genres),
            "status": item.status,
        }
        for item in items
    ]
    return pd.DataFrame(records, columns=["title", "type", "rating", "year", "genres", "status"])
