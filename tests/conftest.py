# tests/conftest.py
import pytest

from shelf.models import MediaItem


@pytest.fixture
def make_item():
    def _make(title="Untitled", rating=5, year="2000", genres=("Drama",), status="complete",
              media_type="Movie", **extra):
        return MediaItem(
            title=title,
            rating=rating,
            release_year=year,
            genres=tuple(genres),
            status=status,
            media_type=media_type,
            **extra,
        )
    return _make


@pytest.fixture
def catalog(make_item):
    return (
        make_item("Interstellar", 10, "2014", ("Sci-Fi", "Drama"), "2h 49min", "Movie"),
        make_item("Dark", 9, "2017", ("Sci-Fi", "Mystery"), "complete", "Series"),
        make_item("Frieren", 10, "2023", ("Fantasy", "Adventure"), "ongoing", "Anime"),
        make_item("Berserk", 10, "1989", ("Fantasy", "Horror"), "ongoing", "Manga"),
        make_item("The Bear", 8, "2022", ("Comedy", "Drama"), "ongoing", "Series"),
        make_item("Monster", 9, "1994", ("Mystery", "Thriller"), "complete", "Manga"),
        make_item("Lost", 6, "2004", ("Mystery", "Adventure"), "complete", "Series"),
    )
