from __future__ import annotations
from typing import Sequence
import streamlit as st
import pandas as pd

from constants import TRANSIT_COLOR_BANDS, CONSISTENCY_COLOR_BANDS, RED
from stats import CarrierSummary, LaneStat

LANE_TABLE_COLS = [
    "carrier", "avg_transit_days", "min_transit_days", "max_transit_days",
    "shipment_count", "absolute_range", "normalized_range", "consistency_score",
]

# ---- colour coding ----
def time_color(days: float) -> str:
    for bound, color in TRANSIT_COLOR_BANDS:
        if days < bound:
            return color
    return RED

def consistency_color(score: float) -> str:
    for bound, color in CONSISTENCY_COLOR_BANDS:
        if score > bound:
            return color
    return RED

def _badge(color: str) -> str:
    return f"color: {color}; background-color: {color}20; font-weight: 600"

# ---- frames ----
def carrier_summary_frame(summary: Sequence[CarrierSummary]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "carrier": c.carrier,
                "avg_days": c.avg_days,
                "lane_count": c.lane_count,
                "shipment_count": c.shipment_count,
                "avg_consistency_score": c.avg_consistency_score,
                "weighted_consistency_score": c.weighted_consistency_score,
            }
            for c in summary
        ],
        columns=[
            "carrier", "avg_days", "lane_count", "shipment_count",
            "avg_consistency_score", "weighted_consistency_score",
        ],
    )

def lane_carrier_frame(lane: LaneStat | None) -> pd.DataFrame:
    """One row per carrier on the lane, fastest average first."""
    if lane is None:
        return pd.DataFrame(columns=LANE_TABLE_COLS)
    rows = [
        {
            "carrier": carrier,
            "avg_transit_days": s.avg_transit_days,
            "min_transit_days": s.min_transit_days,
            "max_transit_days": s.max_transit_days,
            "shipment_count": s.shipment_count,
            "absolute_range": s.absolute_range,
            "normalized_range": s.normalized_range,
            "consistency_score": s.consistency_score,
        }
        for carrier, s in lane.carriers.items()
    ]
    df = pd.DataFrame(rows, columns=LANE_TABLE_COLS)
    return df.sort_values("avg_transit_days", kind="stable").reset_index(drop=True)

# ---- rendering ----
def carrier_reliability_table(summary: Sequence[CarrierSummary]) -> None:
    st.subheader("Carrier Reliability Rankings")
    st.caption("Based on lane-specific consistency and coverage. Higher consistency score indicates more predictable service.")
    df = carrier_summary_frame(summary)[["carrier", "avg_days", "lane_count", "weighted_consistency_score"]]
    if df.empty:
        st.info("No carriers on the priority lanes.")
        return
    styled = (
        df.style
        .map(lambda v: _badge(time_color(v)), subset=["avg_days"])
        .format({"avg_days": "{:.2f}", "weighted_consistency_score": "{:.1f}"})
    )
    st.dataframe(
        styled,
        hide_index=True,
        use_container_width=True,
        height=350,
        column_config={
            "carrier": "Carrier",
            "avg_days": "Avg Days",
            "lane_count": "Lanes",
            "weighted_consistency_score": st.column_config.ProgressColumn(
                "Consistency", min_value=0, max_value=100, format="%.1f"
            ),
        },
    )

def lane_consistency_panel(df: pd.DataFrame, lane_name: str) -> None:
    st.subheader(f"Lane-Specific Consistency: {lane_name}")
    st.caption("How consistent is each carrier on this specific lane?")
    for row in df.itertuples(index=False):
        score = row.consistency_score
        color = consistency_color(score)
        st.markdown(
            f"**{row.carrier}** &nbsp; <span style='color:{color}'>{score:.1f}/100</span>",
            unsafe_allow_html=True,
        )
        st.progress(min(100, int(round(score))))
        st.caption(f"Range: {row.absolute_range} days · {row.shipment_count} shipments")

def lane_detail_table(df: pd.DataFrame, lane_name: str) -> None:
    st.subheader(f"Detailed Carrier Comparison: {lane_name}")
    st.caption("Complete transit time statistics and consistency metrics")
    if df.empty:
        st.info("No carriers on this lane.")
        return
    view = pd.DataFrame({
        "Carrier": df["carrier"],
        "Avg Transit": df["avg_transit_days"].map("{:.2f} days".format),
        "Min-Max": df["min_transit_days"].astype(str) + " - " + df["max_transit_days"].astype(str) + " days",
        "Consistency": df["consistency_score"],
        "Shipments": df["shipment_count"],
    })
    styled = (
        view.style
        .map(lambda v: _badge(consistency_color(v)), subset=["Consistency"])
        .format({"Consistency": "{:.1f}/100"})
    )
    st.dataframe(styled, hide_index=True, use_container_width=True)

def download_lane(df: pd.DataFrame, lane_id: str) -> None:
    csv = df.to_csv(index=False).encode("utf-8")
    st.download_button("Download lane statistics (CSV)", csv, f"{lane_id}_carriers.csv", "text/csv")

def consistency_explainer() -> None:
    with st.expander("About Consistency Scoring"):
        st.markdown(
            '''
The consistency score measures how predictable a carrier's transit times are within each specific shipping lane.

- **consistency_score** = max(0, 100 − (max − min) / mean × 100)
- **Higher scores (80-100)**: minimal variation in transit times, highly predictable
- **Medium scores (60-80)**: moderate variation, reasonably predictable
- **Lower scores (<60)**: high variation, less predictable service

The weighted consistency score accounts for shipping volume, giving more importance to performance on frequently used lanes.
'''
        )
