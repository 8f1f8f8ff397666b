from __future__ import annotations
import streamlit as st
import pandas as pd
from typing import Callable

def header(app_title: str, subtitle: str) -> None:
    st.set_page_config(page_title=app_title, page_icon="🚢", layout="wide")
    st.title(app_title)
    st.caption(subtitle)
    st.info(
        "This dashboard analyzes market transit time data for carriers operating on the priority "
        "shipping lanes. It includes carriers that have moved shipments on these lanes, not only "
        "carriers currently in use, to support carrier selection decisions."
    )

def data_source_picker(
    data_path: str,
    load_sample: Callable[[str], pd.DataFrame],
    load_uploaded: Callable[[object], pd.DataFrame],
) -> pd.DataFrame:
    st.sidebar.header("Data")
    use_sample = st.sidebar.checkbox("Use bundled shipment data", value=True)
    uploaded = st.sidebar.file_uploader("Upload shipment CSV", type=["csv"])

    if use_sample:
        return load_sample(data_path)
    if uploaded:
        return load_uploaded(uploaded)
    st.info("Upload a file or check 'Use bundled shipment data' to get started.")
    st.stop()

def error_screen(message: str | None) -> bool:
    """Show the load error; True when the user asked to try again."""
    st.error(f"**Error Loading Data**\n\n{message or 'Unknown error'}")
    return st.button("Try Again", type="primary")

def footer_description() -> None:
    with st.expander("ℹ️ Note: About this app and expected data format", expanded=False):
        st.markdown(
            """
            **Market carrier analysis** across priority lanes: transit times, lane coverage and consistency.
            Use the bundled dataset (set `SHIPMENT_DATA_PATH` to point elsewhere) or upload a CSV.
            Override the lane list with a comma-separated `PRIORITY_LANES` value.

            **Expected columns:**
            `carrier_name, port_2_port_id, transit_time` (hours)
            """
        )
    st.caption("Priority Shipping Lanes Market Analysis")
