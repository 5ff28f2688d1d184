"""
Build a catalog file from TMDb movies.

Usage:
    shelf-import-tmdb                     # 5 pages of popular + top rated
    shelf-import-tmdb --pages 2 --output data/tmdb_catalog.json
"""

import argparse

from shelf import config
from shelf.data_collection import TMDbImporter


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import TMDb movies into a catalog file.")
    parser.add_argument("--pages", type=int, default=5)
    parser.add_argument("--output", default="data/tmdb_catalog.json")
    args = parser.parse_args(argv)
    config.setup_logging()

    importer = TMDbImporter()
    importer.import_popular(pages=args.pages)
    importer.import_top_rated(pages=args.pages)
    path = importer.save(args.output)

    print(f"\n{'=' * 50}")
    print(f"✓ Saved {len(importer.collected)} titles to {path}")
    print(f"  Skipped (no genres): {len(importer.skipped)}")
    print(f"  Errors: {len(importer.errors)}")
    if importer.errors:
        print(f"  Failed: {[e['title'] for e in importer.errors[:5]]}")
    print(f"{'=' * 50}")


if __name__ == "__main__":
    main()
