"""
Builds catalog records from TMDb movies.
The output file is the same shape load_catalog() reads.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .loader import item_from_record
from .tmdb_client import TMDbClient

logger = logging.getLogger(__name__)


class TMDbImporter:
    def __init__(self, client: TMDbClient | None = None):
        self.tmdb = client or TMDbClient()
        self.collected = []
        self.errors = []
        self.skipped = []
        self.seen_ids = set()

    # =========================================
    # One film
    # =========================================

    def import_film(self, tmdb_id):
        """Pull details for one film and turn them into a catalog record, or None."""
        raw = self.tmdb.movie(tmdb_id)
        return self._build_record(raw)

    def _build_record(self, raw):
        genres = [g["name"] for g in raw.get("genres", []) if g.get("name")]
        if not genres:
            return None

        # vote_average is 0-10 with one decimal
        rating = min(10, max(0, round(raw.get("vote_average", 0))))

        release_date = raw.get("release_date") or ""
        runtime = raw.get("runtime") or 0
        poster = raw.get("poster_path")

        record = {
            "title": raw.get("title", ""),
            "rating": rating,
            "releaseYear": release_date[:4],
            "genres": genres,
            "status": self._runtime_label(runtime),
            "type": "Movie",
            "coverUrl": f"{self.tmdb.IMAGE_URL}{poster}" if poster else None,
        }
        # raises CatalogError on anything the loader would reject
        item_from_record(record)
        return record

    @staticmethod
    def _runtime_label(minutes):
        if not minutes:
            return "Unknown"
        hours, mins = divmod(int(minutes), 60)
        if not hours:
            return f"{mins}min"
        return f"{hours}h {mins:02d}min"

    # =========================================
    # Batch collection
    # =========================================

    def import_list(self, list_name, pages=5):
        """Import every movie on the first `pages` pages of a TMDb list."""
        logger.info("Importing %s movies (%d pages)", list_name, pages)
        for page in range(1, pages + 1):
            self._process_page(self.tmdb.movie_list(list_name, page))

    def import_popular(self, pages=5):
        self.import_list("popular", pages)

    def import_top_rated(self, pages=5):
        self.import_list("top_rated", pages)

    def _process_page(self, response):
        for movie in response.get("results", []):
            tmdb_id = movie["id"]
            title = movie.get("title", "?")

            if tmdb_id in self.seen_ids:
                continue
            self.seen_ids.add(tmdb_id)

            try:
                record = self.import_film(tmdb_id)
            except Exception as e:
                self.errors.append({"tmdb_id": tmdb_id, "title": title, "error": str(e)})
                logger.warning("Failed to import %s (%s): %s", title, tmdb_id, e)
                continue

            if record is None:
                self.skipped.append(title)
                logger.debug("Skipping %s: no genres", title)
                continue

            self.collected.append(record)

    # =========================================
    # Save
    # =========================================

    def save(self, path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        output = {
            "metadata": {
                "total_items": len(self.collected),
                "collected_at": datetime.now(timezone.utc).isoformat(),
                "source": "tmdb",
                "errors": len(self.errors),
            },
            "items": self.collected,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        logger.info("Saved %d items to %s", len(self.collected), path)
        return path
