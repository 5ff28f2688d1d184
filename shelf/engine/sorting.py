"""
Ordering of the filtered catalog by the user's sort key.

Every ordering is stable: items that tie on the key keep the order they
had coming out of the filter step.
"""

import locale
import logging
import re
import unicodedata
from typing import Iterable

from shelf.models import MediaItem, SortKey

logger = logging.getLogger(__name__)

# at most nine digits; longer runs are not years
_LEADING_INT = re.compile(r"\s*([+-]?\d{1,9})(?!\d)")


def parse_year(token: str) -> int | None:
    """
    Read the leading integer of a year token.

    "2020" -> 2020, "2021-03" -> 2021, "TBA" -> None.
    """
    match = _LEADING_INT.match(token or "")
    if not match:
        return None
    return int(match.group(1))


def _year_key(item: MediaItem) -> tuple[bool, int]:
    # unparseable years compare below every real year
    year = parse_year(item.release_year)
    if year is None:
        return (False, 0)
    return (True, year)


def _title_key(item: MediaItem) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", item.title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # strxfrm rejects embedded NULs
    return (base.casefold(), locale.strxfrm(item.title.replace("\x00", "")))


def sort_content(items: Iterable[MediaItem], sort_by: SortKey | str) -> tuple[MediaItem, ...]:
    items = tuple(items)
    try:
        key = SortKey(sort_by)
    except ValueError:
        logger.debug("Unknown sort key %r, keeping filter order", sort_by)
        return items

    if key is SortKey.RELEASE_YEAR:
        return tuple(sorted(items, key=_year_key, reverse=True))
    if key is SortKey.TITLE:
        return tuple(sorted(items, key=_title_key))
    return tuple(sorted(items, key=lambda item: item.rating, reverse=True))
