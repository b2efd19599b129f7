"""Rankings table page.

The main view: every ranked course with Golf Digest, Golf Mag and consensus
ratings. Sorting and paging go through the RankedTableController kept in
session state; clicking a row's arrow shows the course details.
"""

from __future__ import annotations

import html

import streamlit as st

from course_rankings.controller import RankedTableController, row_key
from course_rankings.presentation import TABLE_COLUMNS, detail_sections, render_cells
from utils.colors import COLOR_TEXT_SECONDARY
from utils.database import get_config, get_store

CONTROLLER_KEY = "rankings_controller"

# Relative widths: toggle, course, location, digest, mag, consensus
COLUMN_WIDTHS = [0.4, 4, 3, 1.4, 1.4, 1.4]


def get_controller() -> RankedTableController:
    """One controller per browser session."""
    if CONTROLLER_KEY not in st.session_state:
        cfg = get_config()
        st.session_state[CONTROLLER_KEY] = RankedTableController(
            get_store(), table=cfg.table, page_size=cfg.page_size
        )
    return st.session_state[CONTROLLER_KEY]


def reset_controller() -> None:
    """Drop the session's table state (e.g. after a re-import)."""
    st.session_state.pop(CONTROLLER_KEY, None)


def _sort_arrow(ctl: RankedTableController, key: str) -> str:
    if ctl.sort.key != key:
        return ""
    return " ↓" if ctl.sort.desc else " ↑"


def location_markup(text: str) -> str:
    """Muted location text; the value comes from the imported sheet, so escape it."""
    return (
        f'<span style="color:{COLOR_TEXT_SECONDARY};font-size:0.9rem;">'
        f"{html.escape(text)}</span>"
    )


def _render_header(ctl: RankedTableController) -> None:
    cols = st.columns(COLUMN_WIDTHS)
    for col, column in zip(cols[1:], TABLE_COLUMNS):
        with col:
            if column.sortable:
                st.button(
                    f"**{column.label}**{_sort_arrow(ctl, column.key)}",
                    key=f"sort-{column.key}",
                    on_click=ctl.toggle_sort,
                    args=(column.key,),
                    type="tertiary",
                )
            else:
                # City/state column has no header text
                st.write("")


def _render_section(title: str, fields: list[tuple[str, str]]) -> None:
    lines = [f"**{title}**"]
    lines += [f"- **{label}:** {text}" if label else text for label, text in fields]
    st.markdown("\n".join(lines))


def _render_details(record: dict) -> None:
    # Details + location side by side, modifications/description full width
    sections = detail_sections(record)
    with st.container(border=True):
        left, right = st.columns(2)
        with left:
            _render_section(*sections[0])
        with right:
            _render_section(*sections[1])
        for section in sections[2:]:
            _render_section(*section)


def _render_row(ctl: RankedTableController, record: dict) -> None:
    rid = row_key(record)
    expanded = ctl.is_expanded(rid)
    cells = render_cells(record)

    cols = st.columns(COLUMN_WIDTHS)
    cols[0].button(
        "▾" if expanded else "▸",
        key=f"expand-{rid}",
        on_click=ctl.toggle_row,
        args=(rid,),
        type="tertiary",
    )
    cols[1].markdown(f"**{cells['club_name']}**")
    if cells["city"]:
        cols[2].markdown(location_markup(cells["city"]), unsafe_allow_html=True)
    for col, column in zip(cols[3:], TABLE_COLUMNS[2:]):
        col.markdown(cells[column.key])

    if expanded:
        _render_details(record)


def _render_sentinel(ctl: RankedTableController) -> None:
    """The marker after the last row; bringing it into view loads the next page."""
    if ctl.has_more:
        st.button(
            "Load more courses",
            key="load-more",
            on_click=ctl.on_sentinel_visible,
            disabled=ctl.in_flight,
            use_container_width=True,
        )
    elif ctl.rows:
        st.caption("All courses loaded")


def render():
    """Render the rankings page."""

    st.title("Golf Course Rankings: United States")
    st.caption("All the rankings, all the sources, all in one place.")

    try:
        ctl = get_controller()
    except ValueError as e:
        st.error(f"Configuration error: {e}. See the Debug page.", icon="❌")
        return

    if not ctl.initial_load_complete and not ctl.loading:
        with st.spinner("Loading courses..."):
            ctl.load_initial()

    search = st.text_input(
        "Search",
        placeholder="🔍 Search all columns...",
        key="rankings_filter",
        label_visibility="collapsed",
    )
    ctl.set_filter(search)

    _render_header(ctl)
    st.divider()

    rows = ctl.visible_rows()
    if not rows:
        st.info("No results found.")
        if not ctl.rows:
            st.button("Reload", key="reload", on_click=ctl.refresh)
    for record in rows:
        _render_row(ctl, record)

    _render_sentinel(ctl)

    st.markdown("---")
    st.caption("built by [@yipsh](https://twitter.com/yipsh)")
