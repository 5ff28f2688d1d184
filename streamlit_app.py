import html

import streamlit as st

from shelf import config
from shelf.data_collection import load_catalog
from shelf.engine import (
    CatalogController,
    active_filter_count,
    catalog_stats,
    items_to_frame,
)
from shelf.models import MediaItem, SortKey

st.set_page_config(page_title="Media Shelf", layout="wide")
config.setup_logging()

GRID_COLUMNS = 5

SORT_LABELS = {
    SortKey.RATING: "Rating (high-low)",
    SortKey.RELEASE_YEAR: "Year (newest)",
    SortKey.TITLE: "Title (A-Z)",
}

# widget key -> criteria field
FILTER_WIDGETS = {
    "genre_select": "genre",
    "rating_select": "rating",
    "type_select": "media_type",
    "status_select": "status",
    "sort_select": "sort_by",
}


# ============================================================
# UI HELPERS
# ============================================================
def rating_color(rating: int) -> str:
    if rating == 10:
        return "#4ade80"
    if rating == 9:
        return "#a3e635"
    if rating == 8:
        return "#22c55e"
    if rating == 7:
        return "#facc15"
    return "#f87171"


TYPE_BADGE_COLORS = {
    "movie": "#451a03",
    "filme": "#451a03",
    "anime": "#4c0519",
    "series": "#022c22",
    "série": "#022c22",
    "manga": "#172554",
    "mangá": "#172554",
    "manhwa": "#2e1065",
}


def render_badge(text: str, bg: str) -> str:
    text = html.escape(str(text))
    return f"""
    <span style="
        display:inline-block;
        padding:2px 8px;
        margin:2px 6px 2px 0;
        border-radius:6px;
        background:{bg};
        color:white;
        font-size:12px;
        line-height:20px;
        ">
        {text}
    </span>
    """


def display_card(item: MediaItem):
    with st.container(border=True):
        if item.cover_url:
            st.image(item.cover_url)

        badges = render_badge(item.media_type, TYPE_BADGE_COLORS.get(item.media_type.lower(), "#030712"))
        badges += render_badge(item.rating, "#000000").replace(
            "color:white", f"color:{rating_color(item.rating)}"
        )
        st.markdown(badges, unsafe_allow_html=True)

        title = html.escape(item.title)
        if item.review_url:
            st.markdown(f"**[{title}]({item.review_url})**")
        else:
            st.markdown(f"**{title}**")
        st.caption(f"{item.primary_genre} · released {item.release_year} · {item.status}")


# ============================================================
# DATA LOADING
# ============================================================
@st.cache_resource
def get_catalog(path: str) -> tuple[MediaItem, ...]:
    """Load the catalog once; it never changes while the app runs."""
    return load_catalog(path)


catalog = get_catalog(str(config.CATALOG_PATH))

if "controller" not in st.session_state:
    st.session_state["controller"] = CatalogController(catalog, page_size=config.PAGE_SIZE)
controller: CatalogController = st.session_state["controller"]


# ============================================================
# CALLBACKS
# ============================================================
def on_filter_change(widget_key: str):
    controller.set_filter(FILTER_WIDGETS[widget_key], st.session_state[widget_key])


def on_clear():
    controller.clear_filters()
    for key in FILTER_WIDGETS:
        st.session_state[key] = SortKey.RATING if key == "sort_select" else None


# ============================================================
# HEADER
# ============================================================
stats = catalog_stats(catalog)
st.title("📚 Media Shelf")
h1, h2 = st.columns(2)
h1.metric("Total", stats.total)
h2.metric("Mangás", stats.count("Mangá") + stats.count("Manga"))

# ============================================================
# SIDEBAR FILTERS
# ============================================================
options = controller.options
active = active_filter_count(controller.criteria)

st.sidebar.header(f"Filters ({active})" if active else "Filters")

st.sidebar.selectbox(
    "Genre",
    options=[None, *options.genres],
    format_func=lambda v: "All genres" if v is None else v,
    key="genre_select",
    on_change=on_filter_change,
    args=("genre_select",),
)
st.sidebar.selectbox(
    "Rating",
    options=[None, *options.ratings],
    format_func=lambda v: "All ratings" if v is None else str(v),
    key="rating_select",
    on_change=on_filter_change,
    args=("rating_select",),
)
st.sidebar.selectbox(
    "Type",
    options=[None, *options.types],
    format_func=lambda v: "All types" if v is None else v,
    key="type_select",
    on_change=on_filter_change,
    args=("type_select",),
)
st.sidebar.selectbox(
    "Status",
    options=[None, *options.statuses],
    format_func=lambda v: "Any status" if v is None else v,
    key="status_select",
    on_change=on_filter_change,
    args=("status_select",),
)
st.sidebar.selectbox(
    "Sort by",
    options=list(SORT_LABELS),
    format_func=lambda k: SORT_LABELS[k],
    key="sort_select",
    on_change=on_filter_change,
    args=("sort_select",),
)

if active:
    st.sidebar.button("Clear", on_click=on_clear)

# ============================================================
# RESULTS
# ============================================================
view = controller.render()

st.sidebar.markdown("---")
st.sidebar.caption(f"Showing {view.filtered_count} of {view.total_items} titles")

if not view.page_items:
    st.warning("No results.")
    st.caption("Try removing a filter.")
    st.stop()

view_mode = st.radio("Display mode", ["Cards", "Compact List"], horizontal=True)

if view_mode == "Cards":
    for row_start in range(0, len(view.page_items), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, item in zip(cols, view.page_items[row_start:row_start + GRID_COLUMNS]):
            with col:
                display_card(item)
else:
    st.dataframe(items_to_frame(view.page_items), width="stretch", hide_index=True)

# ============================================================
# PAGE NAVIGATION
# ============================================================
st.divider()
prev_col, label_col, next_col = st.columns([1, 3, 1])
prev_col.button(
    "← Previous",
    on_click=controller.previous_page,
    disabled=view.page_index <= 1,
)
label_col.markdown(
    f"<div style='text-align:center'>Page {view.page_index} of {view.page_count}</div>",
    unsafe_allow_html=True,
)
next_col.button(
    "Next →",
    on_click=controller.next_page,
    disabled=view.page_index >= view.page_count,
)
