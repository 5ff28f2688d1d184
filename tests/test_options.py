# tests/test_options.py
from shelf.engine import DerivedOptions, derive_options


def test_derive_options(catalog):
    options = derive_options(catalog)
    assert options.genres == (
        "Adventure", "Comedy", "Drama", "Fantasy", "Horror", "Mystery", "Sci-Fi", "Thriller",
    )
    assert options.types == ("Anime", "Manga", "Movie", "Series")
    assert options.statuses == ("2h 49min", "complete", "ongoing")
    assert options.ratings == (10, 9, 8, 6)


def test_empty_catalog_has_no_options():
    assert derive_options(()) == DerivedOptions()


def test_derive_options_is_deterministic(catalog):
    assert derive_options(catalog) == derive_options(list(reversed(catalog)))
