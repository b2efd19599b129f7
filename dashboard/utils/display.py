"""Shared display helpers for dashboard pages."""

import json

import pandas as pd
import streamlit as st

from utils.colors import COLOR_MAP_STATUS


def display_df(df, height=None):
    """Display a dataframe with consistent styling."""
    if df is None or df.empty:
        st.info("No data available")
        return

    # Integers get grouping separators; everything else is left to Streamlit.
    column_config: dict = {}
    for col in df.columns:
        if pd.api.types.is_integer_dtype(df[col]):
            column_config[col] = st.column_config.NumberColumn(format="localized")

    dataframe_kwargs = {
        "use_container_width": True,
        "hide_index": True,
        "column_config": column_config,
    }
    if height is not None:
        dataframe_kwargs["height"] = height

    st.dataframe(df, **dataframe_kwargs)


def records_df(records) -> pd.DataFrame:
    """Rows from the store as a DataFrame; nested values shown as JSON text."""
    df = pd.DataFrame(records or [])
    for col in df.columns:
        if df[col].map(lambda v: isinstance(v, (dict, list))).any():
            df[col] = df[col].map(lambda v: json.dumps(v) if isinstance(v, (dict, list)) else v)
    return df


def status_line(ok: bool, text: str) -> None:
    """Green/red dot followed by text."""
    color = COLOR_MAP_STATUS[bool(ok)]
    st.markdown(
        f'<span style="color:{color};font-size:1.1rem;">●</span> {text}',
        unsafe_allow_html=True,
    )


def show_payload(label: str, payload) -> None:
    """Raw error/data payload in a collapsed expander."""
    if payload is None:
        return
    with st.expander(label, expanded=False):
        st.code(json.dumps(payload, indent=2, default=str), language="json")
