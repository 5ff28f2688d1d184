"""
Runtime settings, read from the environment and an optional .env file.

Relative paths resolve against the working directory, so the commands
work the same from a checkout or an installed package.
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_PAGE_SIZE = 24
DEFAULT_CATALOG = "data/catalog.json"


def catalog_path_from_env() -> Path:
    return Path(os.getenv("SHELF_CATALOG_PATH", DEFAULT_CATALOG))


def page_size_from_env() -> int:
    raw = os.getenv("SHELF_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(f"SHELF_PAGE_SIZE must be an integer, got {raw!r}") from None
    if size < 1:
        raise ValueError(f"SHELF_PAGE_SIZE must be positive, got {size}")
    return size


CATALOG_PATH = catalog_path_from_env()
PAGE_SIZE = page_size_from_env()
LOG_LEVEL = os.getenv("SHELF_LOG_LEVEL", "INFO")


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
