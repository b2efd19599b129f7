"""Check data page.

Shows whether the golf_courses table exists, how many rows it has, its
columns and the first few rows.
"""

import pandas as pd
import streamlit as st

from course_rankings.store import StoreError
from course_rankings.table_check import SAMPLE_ROWS, inspect_table
from utils.database import get_config, get_store
from utils.display import display_df, records_df


def render():
    """Render the table check page."""

    st.title("Check Supabase table data")

    try:
        cfg = get_config()
    except ValueError as e:
        st.error(f"Configuration error: {e}", icon="❌")
        return

    st.caption(f"This page checks the data in your '{cfg.table}' table.")

    if st.button("Refresh data"):
        st.rerun()

    try:
        with st.spinner("Checking table data..."):
            info = inspect_table(get_store(), cfg.table)
    except StoreError as e:
        st.error(e.message, icon="❌")
        return

    st.subheader("Table status")
    c1, c2 = st.columns(2)
    c1.metric("Table exists", "Yes" if info.exists else "No")
    c2.metric("Row count", f"{info.row_count:,}")

    if info.schema:
        st.subheader("Table schema")
        schema_df = pd.DataFrame(info.schema).rename(columns={"column": "Column", "dataType": "Data type"})
        display_df(schema_df)

    if info.sample_data:
        st.subheader(f"Sample data (first {SAMPLE_ROWS} rows)")
        display_df(records_df(info.sample_data))
    elif info.exists:
        st.warning(
            "The table exists but contains no data. "
            "You may need to import data from the CSV file.",
            icon="⚠️",
        )
