"""
Browse the catalog from the terminal.

Usage:
    shelf-browse                             # everything, highest rated first
    shelf-browse --type Manga --sort title
    shelf-browse --genre Drama --rating 9 --page 2
"""

import argparse

from shelf import config
from shelf.data_collection import load_catalog
from shelf.engine import CatalogController, active_filter_count, catalog_stats
from shelf.models import SortKey

TYPE_EMOJI = {"movie": "🎬", "filme": "🎬", "series": "📺", "série": "📺", "anime": "📺",
              "manga": "📖", "mangá": "📖", "manhwa": "📖"}


def display_page(controller: CatalogController):
    view = controller.render()

    print(f"\n  Showing {view.filtered_count} of {view.total_items} titles"
          f"  ({active_filter_count(controller.criteria)} active filters)")
    print(f"  {'─' * 50}")

    if not view.page_items:
        print("  (nothing matches these filters)")
        return

    offset = (view.page_index - 1) * controller.page_size
    for rank, item in enumerate(view.page_items, offset + 1):
        emoji = TYPE_EMOJI.get(item.media_type.lower(), "❓")
        print(f"  {rank}. {emoji} {item.title} ({item.release_year})  ★{item.rating}")
        print(f"     {item.primary_genre} · {item.status}")

    print(f"\n  Page {view.page_index} of {view.page_count}")


def build_parser():
    parser = argparse.ArgumentParser(description="Browse the media catalog.")
    parser.add_argument("--catalog", default=str(config.CATALOG_PATH))
    parser.add_argument("--genre")
    parser.add_argument("--rating", type=int)
    parser.add_argument("--type", dest="media_type")
    parser.add_argument("--status")
    parser.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.RATING.value)
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=config.PAGE_SIZE)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config.setup_logging()

    catalog = load_catalog(args.catalog)
    controller = CatalogController(catalog, page_size=args.page_size)
    for field in ("genre", "rating", "media_type", "status"):
        controller.set_filter(field, getattr(args, field))
    controller.set_filter("sort_by", args.sort)
    if args.page != 1:
        controller.go_to_page(args.page)

    stats = catalog_stats(catalog)
    print("\n" + "=" * 60)
    print(f"  📚 MEDIA SHELF  ·  {stats.total} titles  ·  "
          + ", ".join(f"{n} {t}" for t, n in sorted(stats.by_type.items())))
    print("  n = next page, p = previous page, <number> = go to page, q = quit")
    print("=" * 60)

    while True:
        display_page(controller)
        command = input("\n> ").strip().lower()
        if command in ("quit", "exit", "q"):
            break
        if command == "n":
            controller.next_page()
        elif command == "p":
            controller.previous_page()
        elif command.isdigit():
            controller.go_to_page(int(command))
        else:
            print("Unknown command.")


if __name__ == "__main__":
    main()
