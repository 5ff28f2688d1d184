"""
Catalog loading.

Records may use the English field names or the Portuguese ones the
catalog was first written with (nome, nota, lancamento, genero, tempo,
tipo). Either way they come out as MediaItem.
"""

import json
import logging
from pathlib import Path
from typing import Any

from shelf.models import MediaItem

logger = logging.getLogger(__name__)

# field -> accepted keys, first match wins
FIELD_KEYS = {
    "title": ("title", "nome"),
    "rating": ("rating", "nota"),
    "release_year": ("releaseYear", "release_year", "year", "lancamento"),
    "genres": ("genres", "genero"),
    "status": ("status", "tempo"),
    "media_type": ("type", "media_type", "tipo"),
    "cover_url": ("coverUrl", "cover_url", "cover"),
    "review_url": ("reviewUrl", "review_url", "review"),
}
OPTIONAL_FIELDS = ("cover_url", "review_url")


class CatalogError(ValueError):
    pass


def _pick(record: dict, field: str) -> Any:
    for key in FIELD_KEYS[field]:
        if key in record and record[key] is not None:
            return record[key]
    return None


def item_from_record(record: dict[str, Any]) -> MediaItem:
    if not isinstance(record, dict):
        raise CatalogError(f"Expected an object, got {type(record).__name__}")

    values = {field: _pick(record, field) for field in FIELD_KEYS}
    missing = [f for f in FIELD_KEYS if f not in OPTIONAL_FIELDS and values[f] is None]
    if missing:
        raise CatalogError(f"Missing fields: {', '.join(missing)}")

    genres = values["genres"]
    if isinstance(genres, str):
        genres = [genres]
    if not isinstance(genres, (list, tuple)):
        raise CatalogError(f"Invalid genres {genres!r}")

    rating = values["rating"]
    if isinstance(rating, bool) or not isinstance(rating, (int, float, str)):
        raise CatalogError(f"Invalid rating {rating!r}")
    if isinstance(rating, float) and not rating.is_integer():
        raise CatalogError(f"Rating {rating!r} is not a whole number")
    try:
        rating = int(rating)
    except ValueError:
        raise CatalogError(f"Invalid rating {rating!r}") from None

    try:
        return MediaItem(
            title=str(values["title"]),
            rating=rating,
            release_year=str(values["release_year"]),
            genres=tuple(str(g) for g in genres),
            status=str(values["status"]),
            media_type=str(values["media_type"]),
            cover_url=values["cover_url"] or None,
            review_url=values["review_url"] or None,
        )
    except ValueError as e:
        raise CatalogError(str(e)) from e


def load_catalog(path: str | Path) -> tuple[MediaItem, ...]:
    """Load a catalog JSON file: a list of records or {"items": [...]}."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: {e}") from e
    records = raw.get("items", raw) if isinstance(raw, dict) else raw
    if not isinstance(records, list):
        raise CatalogError(f"{path}: expected a list of records")

    items = []
    for index, record in enumerate(records):
        try:
            items.append(item_from_record(record))
        except CatalogError as e:
            raise CatalogError(f"{path}: record {index}: {e}") from e

    logger.info("Loaded %d items from %s", len(items), path)
    return tuple(items)
