"""Database utilities for connecting to the Supabase row store."""

import streamlit as st

from course_rankings.config import RankingsConfig
from course_rankings.observability import get_logger
from course_rankings.store import StoreError, SupabaseRowStore, make_store


@st.cache_resource
def get_config() -> RankingsConfig:
    """Load config once per server process.

    Connection parameters come from environment variables:
    - SUPABASE_URL (required)
    - SUPABASE_ANON_KEY (required)
    - GCR_TABLE (default: golf_courses)

    Raises:
        ValueError: if a required variable is missing
    """
    return RankingsConfig.from_env()


@st.cache_resource
def get_store() -> SupabaseRowStore:
    """Create the Supabase-backed row store (shared across sessions)."""
    return make_store(get_config())


def test_connection() -> bool:
    """Test if the row store is reachable and the table exists.

    Returns:
        True if a count query succeeds, False otherwise
    """
    try:
        get_store().count(get_config().table)
        return True
    except (ValueError, StoreError):
        # Let the caller decide how to surface the error in the UI.
        return False


def configure_logging() -> None:
    """Set up app logging, honouring GCR_LOG_JSON when the config loads.

    A missing required env var still gets plain-text logging; the sidebar
    and the Debug page report the config problem.
    """
    try:
        json_mode = get_config().log_json
    except ValueError:
        json_mode = None
    get_logger(json_mode=json_mode)
