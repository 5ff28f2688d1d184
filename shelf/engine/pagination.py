# shelf/engine/pagination.py

from dataclasses import dataclass
from typing import Sequence

from shelf.models import MediaItem


@dataclass(frozen=True)
class Page:
    page_items: tuple[MediaItem, ...]
    total_items: int
    page_count: int
    start_offset: int
    end_offset: int


def page_count_for(total_items: int, page_size: int) -> int:
    return (total_items + page_size - 1) // page_size


def paginate(items: Sequence[MediaItem], page_index: int, page_size: int) -> Page:
    """
    Slice one page out of an ordered sequence.

    page_index is 1-based and is not clamped here; an index outside
    1..page_count simply yields an empty page.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total = len(items)
    start = (page_index - 1) * page_size
    end = min(start + page_size, total)

    if start < 0 or start >= total:
        page_items = ()
    else:
        page_items = tuple(items[start:end])

    return Page(
        page_items=page_items,
        total_items=total,
        page_count=page_count_for(total, page_size),
        start_offset=start,
        end_offset=end,
    )
