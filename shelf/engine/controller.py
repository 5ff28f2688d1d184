"""
Filter state transitions.

The module-level functions are pure: each takes a FilterState and returns
the next one. CatalogController binds them to a catalog and keeps the
current state, swapping it only once the next state is fully built.
"""

import logging
from dataclasses import replace
from typing import Any, Sequence

from shelf.config import PAGE_SIZE
from shelf.models import FilterCriteria, FilterState, MediaItem, SortKey
from .options import DerivedOptions, derive_options
from .pagination import page_count_for
from .view import CatalogView, build_view, filter_and_sort

logger = logging.getLogger(__name__)

FILTER_FIELDS = ("genre", "rating", "media_type", "status", "sort_by")


def _coerce(field: str, value: Any) -> Any:
    if value is None or value == "":
        return SortKey.RATING if field == "sort_by" else None
    if field == "rating":
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Rating {value!r} is not a whole number")
        return int(value)
    if field == "sort_by":
        try:
            return SortKey(value)
        except ValueError:
            # sort_content treats unknown keys as "keep filter order"
            return value
    return value


def set_filter(state: FilterState, field: str, value: Any) -> FilterState:
    """Set one criteria field; None or "" clears it. Always returns to page 1."""
    if field not in FILTER_FIELDS:
        raise ValueError(f"Unknown filter field {field!r}, expected one of {FILTER_FIELDS}")
    criteria = replace(state.criteria, **{field: _coerce(field, value)})
    return FilterState(criteria=criteria, page_index=1)


def clear_filters(state: FilterState) -> FilterState:
    return FilterState()


def go_to_page(state: FilterState, page_index: int, page_count: int) -> FilterState:
    if not 1 <= page_index <= page_count:
        return state
    return replace(state, page_index=page_index)


def next_page(state: FilterState, page_count: int) -> FilterState:
    return go_to_page(state, state.page_index + 1, page_count)


def previous_page(state: FilterState, page_count: int) -> FilterState:
    return go_to_page(state, state.page_index - 1, page_count)


class CatalogController:
    """
    Owns the filter state for one view of a catalog.

    Options are derived once since the catalog never changes; the
    filtered and sorted result is cached per criteria.
    """

    def __init__(
        self,
        catalog: Sequence[MediaItem],
        page_size: int = PAGE_SIZE,
        state: FilterState | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.catalog = tuple(catalog)
        self.page_size = page_size
        self._state = state or FilterState()
        self._options: DerivedOptions | None = None
        self._ordered_for: FilterCriteria | None = None
        self._ordered: tuple[MediaItem, ...] = ()

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    @property
    def page_index(self) -> int:
        return self._state.page_index

    @property
    def options(self) -> DerivedOptions:
        if self._options is None:
            self._options = derive_options(self.catalog)
        return self._options

    def results(self) -> tuple[MediaItem, ...]:
        """Filtered and sorted items for the current criteria."""
        criteria = self._state.criteria
        if self._ordered_for != criteria:
            self._ordered = filter_and_sort(self.catalog, criteria)
            self._ordered_for = criteria
        return self._ordered

    @property
    def page_count(self) -> int:
        return page_count_for(len(self.results()), self.page_size)

    def set_filter(self, field: str, value: Any) -> FilterState:
        self._state = set_filter(self._state, field, value)
        logger.debug("Filter %s=%r -> %s", field, value, self._state.criteria)
        return self._state

    def clear_filters(self) -> FilterState:
        self._state = clear_filters(self._state)
        return self._state

    def go_to_page(self, page_index: int) -> FilterState:
        page_count = self.page_count
        new_state = go_to_page(self._state, page_index, page_count)
        if new_state is self._state:
            logger.debug("Ignoring navigation to page %s of %s", page_index, page_count)
        self._state = new_state
        return self._state

    def next_page(self) -> FilterState:
        self._state = next_page(self._state, self.page_count)
        return self._state

    def previous_page(self) -> FilterState:
        self._state = previous_page(self._state, self.page_count)
        return self._state

    def render(self) -> CatalogView:
        return build_view(
            self.catalog,
            self._state,
            self.page_size,
            options=self.options,
            ordered=self.results(),
        )
