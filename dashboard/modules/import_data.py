"""Import page.

Loads the master rankings sheet (CSV export) into the golf_courses table,
replacing whatever is there.
"""

import streamlit as st

from course_rankings.importer import import_courses
from modules.rankings_table import reset_controller
from utils.database import get_config, get_store
from utils.display import show_payload

RESULT_KEY = "import_result"


def render():
    """Render the import page."""

    st.title("Import CSV data to Supabase")
    st.markdown(
        """
    This utility will import the golf course data from the CSV file into your
    `golf_courses` table. It will:

    1. Fetch the CSV file from the configured URL
    2. Parse the CSV data
    3. Clear any existing data in the `golf_courses` table
    4. Insert the parsed data in batches
    """
    )

    try:
        cfg = get_config()
    except ValueError as e:
        st.error(f"Configuration error: {e}", icon="❌")
        return

    st.caption(f"Source: {cfg.import_csv_url}")

    if st.button("Import data", type="primary"):
        with st.spinner("Importing..."):
            result = import_courses(cfg, get_store())
        st.session_state[RESULT_KEY] = result
        if result.success:
            # Table contents changed; the rankings view reloads on next visit
            reset_controller()

    result = st.session_state.get(RESULT_KEY)
    if result is None:
        return

    if result.success:
        st.success(f"{result.message} Imported {result.count} rows.", icon="✅")
        st.caption("Go to the Rankings page to see the table.")
    else:
        st.error(result.message, icon="❌")
        if result.details:
            show_payload("Error details", {"details": result.details})
