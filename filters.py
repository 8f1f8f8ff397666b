# filters.py
from __future__ import annotations
import streamlit as st

from parsing import format_lane_name
from state import DashboardState, select_lane
from stats import LaneAnalysis

def lane_label(analysis: LaneAnalysis, lane_id: str) -> str:
    lane = analysis.lane_stats[lane_id]
    return f"{lane.rank}. {format_lane_name(lane_id)} ({lane.total_shipments} shipments)"

# ---------- public API ----------
def lane_selector(analysis: LaneAnalysis, state: DashboardState) -> DashboardState:
    """Render the lane picker and return the state after any reselection."""
    lanes = list(analysis.lanes)
    if not lanes:
        st.info("None of the priority lanes have shipments in this dataset.")
        return state

    idx = lanes.index(state.selected_lane) if state.selected_lane in lanes else 0
    choice = st.selectbox(
        "Select Priority Shipping Lane",
        lanes,
        index=idx,
        format_func=lambda lane: lane_label(analysis, lane),
    )
    if choice != state.selected_lane:
        state = select_lane(state, choice, lanes)
    return state
