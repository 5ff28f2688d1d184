"""
Thin TMDb client for the catalog importer.

Only the movie list and detail endpoints are used. Requests are spread
over a sliding window so a long import stays under TMDb's limit, and
429 answers are retried a bounded number of times.
"""

import logging
import os
import time
from collections import deque
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import requests

import shelf.config  # noqa: F401  loads .env

logger = logging.getLogger(__name__)


def retry_delay(header: str | None, default: float = 10.0) -> float:
    """
    Seconds to wait for a Retry-After header.

    The header is either a number of seconds or an HTTP date.
    """
    if not header:
        return default
    header = header.strip()
    if header.isdigit():
        return float(header)
    try:
        when = parsedate_to_datetime(header)
    except (TypeError, ValueError):
        return default
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


class TMDbClient:
    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_URL = "https://image.tmdb.org/t/p/w300"

    WINDOW_SECONDS = 10
    WINDOW_REQUESTS = 35  # TMDb allows 40 per 10s
    MAX_RETRIES = 3

    def __init__(self, access_token: str | None = None, session: requests.Session | None = None,
                 sleep=time.sleep):
        self.access_token = access_token or os.getenv("TMDB_ACCESS_TOKEN")
        if not self.access_token:
            raise ValueError(
                "TMDB_ACCESS_TOKEN is not set.\n"
                "Add it to your environment or .env file; get one at "
                "https://www.themoviedb.org/settings/api"
            )
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        })
        self.sleep = sleep
        self._sent = deque(maxlen=self.WINDOW_REQUESTS)

    def _wait_for_slot(self):
        if len(self._sent) == self.WINDOW_REQUESTS:
            elapsed = time.monotonic() - self._sent[0]
            if elapsed < self.WINDOW_SECONDS:
                self.sleep(self.WINDOW_SECONDS - elapsed)
        self._sent.append(time.monotonic())

    def get(self, endpoint, params=None):
        """GET an endpoint and return its JSON, retrying 429s up to MAX_RETRIES times."""
        for attempt in range(self.MAX_RETRIES + 1):
            self._wait_for_slot()
            response = self.session.get(f"{self.BASE_URL}{endpoint}", params=params or {}, timeout=10)
            if response.status_code != 429 or attempt == self.MAX_RETRIES:
                break
            delay = retry_delay(response.headers.get("Retry-After"))
            logger.warning("TMDb rate limit on %s, retrying in %.0fs", endpoint, delay)
            self.sleep(delay)

        response.raise_for_status()
        return response.json()

    def movie(self, movie_id):
        return self.get(f"/movie/{movie_id}", {"language": "en-US"})

    def movie_list(self, list_name, page=1):
        """One page of a movie list such as "popular" or "top_rated"."""
        return self.get(f"/movie/{list_name}", {"language": "en-US", "page": page})
