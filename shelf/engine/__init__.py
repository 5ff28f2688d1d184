from .options import DerivedOptions, derive_options
from .filters import apply_filters, matches
from .sorting import parse_year, sort_content
from .pagination import Page, paginate
from .view import (
    CatalogStats,
    CatalogView,
    active_filter_count,
    build_view,
    catalog_stats,
    filter_and_sort,
    items_to_frame,
)
from .controller import CatalogController

__all__ = [
    "CatalogController",
    "CatalogStats",
    "CatalogView",
    "DerivedOptions",
    "Page",
    "active_filter_count",
    "apply_filters",
    "build_view",
    "catalog_stats",
    "derive_options",
    "filter_and_sort",
    "items_to_frame",
    "matches",
    "paginate",
    "parse_year",
    "sort_content",
]
