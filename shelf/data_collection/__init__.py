from .loader import CatalogError, item_from_record, load_catalog
from .tmdb_client import TMDbClient
from .importer import TMDbImporter

__all__ = ["CatalogError", "TMDbClient", "TMDbImporter", "item_from_record", "load_catalog"]
