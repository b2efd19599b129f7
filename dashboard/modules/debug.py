"""Debug page.

Diagnoses the Supabase integration: env vars, client creation, and
connection / table / query checks.
"""

import os

import streamlit as st

from course_rankings.constants import DEFAULT_TABLE
from course_rankings.diagnostics import run_diagnostics
from utils.database import get_config, get_store
from utils.display import show_payload, status_line

REPORT_KEY = "diagnostics_report"


def _render_check(title: str, check) -> None:
    st.subheader(title)
    if check.success:
        st.success(check.message, icon="✅")
    else:
        st.error(check.message, icon="❌")
    show_payload("Data", check.data)
    show_payload("Error", check.error)


def render():
    """Render the debug page."""

    st.title("Supabase debug")
    st.caption("Diagnose issues with your Supabase integration")

    if st.button("Run diagnostics", type="primary"):
        with st.spinner("Running diagnostics..."):
            # Rebuild the client so fixed env vars are picked up
            get_config.clear()
            get_store.clear()
            st.session_state[REPORT_KEY] = run_diagnostics(
                get_store, table=os.getenv("GCR_TABLE") or DEFAULT_TABLE
            )

    report = st.session_state.get(REPORT_KEY)
    if report is None:
        st.info("Not tested yet")
        return

    st.subheader("Environment variables")
    for name, defined in report.env_vars.items():
        status_line(defined, f"`{name}`: {'Defined' if defined else 'Not defined'}")

    st.subheader("Supabase client")
    status_line(
        report.client_initialized,
        f"Client initialized: {'Yes' if report.client_initialized else 'No'}",
    )

    _render_check("Connection test", report.connection_test)
    _render_check("Table test", report.table_test)
    _render_check("Query test", report.query_test)
