from .media_item import MediaItem
from .criteria import FilterCriteria, FilterState, SortKey

__all__ = ["MediaItem", "FilterCriteria", "FilterState", "SortKey"]
