"""Golf Course Rankings

A dashboard listing ranked US golf courses with their Golf Digest, Golf Mag
and consensus ratings, plus admin pages for loading the rankings sheet and
checking the Supabase connection.
"""

import streamlit as st

from modules import check_data, debug, import_data, rankings_table
from utils.database import configure_logging, test_connection

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="Golf course rankings",
    page_icon="⛳",
    layout="wide",
    initial_sidebar_state="expanded",
)

configure_logging()

# =============================================================================
# STYLING
# =============================================================================

st.markdown(
    """
<style>
    /* Tighter rows for the rankings table. */
    [data-testid="stHorizontalBlock"] {
        align-items: center;
    }
    [data-testid="stMetric"] {
        background-color: rgba(248, 250, 252, 1);
        padding: 1rem;
        border-radius: 0.5rem;
        border: 1px solid rgba(226, 232, 240, 1);
    }
</style>
""",
    unsafe_allow_html=True,
)


# =============================================================================
# SIDEBAR
# =============================================================================

PAGES = {
    "Rankings": rankings_table.render,
    "Import data": import_data.render,
    "Check data": check_data.render,
    "Debug": debug.render,
}

with st.sidebar:
    st.title("⛳ Course rankings")
    st.caption("All the rankings, all the sources")

    st.divider()

    page = st.radio("Navigate", list(PAGES), label_visibility="collapsed")

    st.divider()

    if not test_connection():
        st.error(
            "Database unavailable. Check SUPABASE_URL / SUPABASE_ANON_KEY or run the Debug page.",
            icon="❌",
        )


# =============================================================================
# MAIN ROUTER
# =============================================================================

PAGES[page]()
