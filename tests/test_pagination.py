# tests/test_pagination.py
import pytest

from shelf.engine import paginate


@pytest.fixture
def items(make_item):
    return tuple(make_item(f"Item {n}") for n in range(50))


def test_page_boundaries(items):
    page = paginate(items, 3, 24)
    assert page.total_items == 50
    assert page.page_count == 3
    assert (page.start_offset, page.end_offset) == (48, 50)
    assert page.page_items == items[48:]


def test_pages_concatenate_to_whole(items):
    page_count = paginate(items, 1, 24).page_count
    pages = [paginate(items, n, 24).page_items for n in range(1, page_count + 1)]
    assert all(len(p) <= 24 for p in pages)
    assert sum(pages, ()) == items


def test_empty_sequence():
    page = paginate((), 1, 24)
    assert page.page_count == 0
    assert page.page_items == ()
    assert page.total_items == 0


@pytest.mark.parametrize("page_index", [-1, 0, 4, 10])
def test_out_of_range_index_yields_empty_page(items, page_index):
    assert paginate(items, page_index, 24).page_items == ()


def test_exact_multiple(items):
    assert paginate(items[:48], 1, 24).page_count == 2


def test_page_size_must_be_positive(items):
    with pytest.raises(ValueError):
        paginate(items, 1, 0)
