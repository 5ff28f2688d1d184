# tests/test_view.py
from shelf.engine import (
    active_filter_count,
    build_view,
    catalog_stats,
    derive_options,
    items_to_frame,
)
from shelf.models import FilterCriteria, FilterState, SortKey


def test_build_view_counts(catalog):
    state = FilterState(FilterCriteria(genre="Mystery"), page_index=2)
    view = build_view(catalog, state, page_size=2)
    assert view.total_items == 7
    assert view.filtered_count == 3
    assert view.page_count == 2
    assert view.page_index == 2
    assert [i.title for i in view.page_items] == ["Lost"]
    assert view.options == derive_options(catalog)


def test_active_filter_count():
    assert active_filter_count(FilterCriteria()) == 0
    assert active_filter_count(FilterCriteria(genre="Drama", rating=9)) == 2
    assert active_filter_count(FilterCriteria(sort_by=SortKey.TITLE)) == 1


def test_catalog_stats(catalog):
    stats = catalog_stats(catalog)
    assert stats.total == 7
    assert stats.count("Series") == 3
    assert stats.count("Manga") == 2
    assert stats.count("Manhwa") == 0


def test_items_to_frame(catalog):
    frame = items_to_frame(catalog[:2])
    assert list(frame.columns) == ["title", "type", "rating", "year", "genres", "status"]
    assert frame.iloc[0]["genres"] == "Sci-Fi, Drama"
    assert len(items_to_frame([])) == 0
