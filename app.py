# app.py
from __future__ import annotations
import logging
import streamlit as st

from constants import APP_TITLE, APP_SUBTITLE
from app_secrets import get_data_path, get_priority_lanes
from data_io import DataLoadError, load_sample, load_uploaded
from stats import build_analysis
from state import DashboardState, LoadStatus, start_load, load_succeeded, load_failed
from filters import lane_selector
from kpis import compute_kpis, render_kpis
from charts import render_carrier_overview, render_lane_chart
from tables import (
    carrier_summary_frame, lane_carrier_frame, carrier_reliability_table,
    lane_consistency_panel, lane_detail_table, download_lane, consistency_explainer,
)
from parsing import format_lane_name
from ui import header, data_source_picker, error_screen, footer_description

logger = logging.getLogger(__name__)

_STATE_KEY = "dashboard_state"


def _get_state() -> DashboardState:
    return st.session_state.get(_STATE_KEY) or start_load()

def _set_state(state: DashboardState) -> None:
    st.session_state[_STATE_KEY] = state


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    header(APP_TITLE, APP_SUBTITLE)

    state = _get_state()
    if state.status is LoadStatus.ERROR:
        if error_screen(state.error):
            load_sample.clear()
            _set_state(start_load())
            st.rerun()
        return

    # Load + compute
    try:
        with st.spinner("Loading maritime data..."):
            raw = data_source_picker(get_data_path(), load_sample, load_uploaded)
            analysis = build_analysis(raw, get_priority_lanes())
    except DataLoadError as e:
        logger.error("Data load failed: %s", e)
        _set_state(load_failed(str(e)))
        st.rerun()

    if state.status is not LoadStatus.READY or state.selected_lane not in analysis.lanes:
        state = load_succeeded(analysis.lanes)
        _set_state(state)

    if analysis.rejected_count:
        st.caption(f"🧹 {analysis.rejected_count:,} rows skipped (missing carrier, lane or transit time)")

    # KPIs
    st.divider()
    render_kpis(compute_kpis(analysis.carrier_summary))

    # Carrier overview
    st.divider()
    l, r = st.columns(2)
    with l:
        render_carrier_overview(carrier_summary_frame(analysis.carrier_summary))
    with r:
        carrier_reliability_table(analysis.carrier_summary)

    # Lane detail
    st.divider()
    state = lane_selector(analysis, state)
    _set_state(state)

    if state.selected_lane:
        lane_name = format_lane_name(state.selected_lane)
        lane_df = lane_carrier_frame(analysis.lane_stats.get(state.selected_lane))

        l2, r2 = st.columns(2)
        with l2:
            render_lane_chart(lane_df, lane_name)
        with r2:
            lane_consistency_panel(lane_df, lane_name)

        st.divider()
        lane_detail_table(lane_df, lane_name)
        download_lane(lane_df, state.selected_lane)

    # Explainer + footer
    st.divider()
    consistency_explainer()
    footer_description()


if __name__ == "__main__":
    main()
