# shelf/models/media_item.py

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaItem:
    title: str
    rating: int  # 0-10
    release_year: str  # year token, e.g. "2020"
    genres: tuple[str, ...]  # first one is the primary genre
    status: str  # "ongoing", "complete", or a duration label like "2h 10min"
    media_type: str  # "Movie", "Series", "Anime", "Manga", "Manhwa"
    cover_url: str | None = None
    review_url: str | None = None

    def __post_init__(self):
        if not self.genres:
            raise ValueError(f"{self.title!r}: genres must not be empty")
        if not 0 <= self.rating <= 10:
            raise ValueError(f"{self.title!r}: rating {self.rating} is outside 0-10")

    @property
    def primary_genre(self) -> str:
        return self.genres[0]
