from __future__ import annotations
import pandas as pd
import altair as alt
import streamlit as st

_CARRIER_METRICS = {
    "avg_days": "Avg Transit Time (days)",
    "weighted_consistency_score": "Consistency Score",
}
_LANE_METRICS = {
    "min_transit_days": "Min Transit Time",
    "avg_transit_days": "Avg Transit Time",
    "max_transit_days": "Max Transit Time",
}

def _long(df: pd.DataFrame, metrics: dict) -> pd.DataFrame:
    out = df.melt(id_vars="carrier", value_vars=list(metrics), var_name="metric", value_name="value")
    out["metric"] = out["metric"].map(metrics)
    return out

def carrier_overview_chart(summary_df: pd.DataFrame) -> alt.Chart:
    data = _long(summary_df, _CARRIER_METRICS)
    order = summary_df["carrier"].tolist()
    return (
        alt.Chart(data)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("carrier:N", sort=order, title="Carrier"),
            xOffset=alt.XOffset("metric:N", sort=list(_CARRIER_METRICS.values())),
            y=alt.Y("value:Q", title="Avg Transit Time (days) / Score"),
            color=alt.Color(
                "metric:N",
                scale=alt.Scale(domain=list(_CARRIER_METRICS.values()), range=["#3b82f6", "#8b5cf6"]),
                title=None,
            ),
            tooltip=["carrier", "metric", "value"],
        )
    )

def lane_transit_chart(lane_df: pd.DataFrame) -> alt.Chart:
    data = _long(lane_df, _LANE_METRICS)
    order = lane_df["carrier"].tolist()
    return (
        alt.Chart(data)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("carrier:N", sort=order, title="Carrier"),
            xOffset=alt.XOffset("metric:N", sort=list(_LANE_METRICS.values())),
            y=alt.Y("value:Q", title="Transit Time (days)"),
            color=alt.Color(
                "metric:N",
                scale=alt.Scale(domain=list(_LANE_METRICS.values()), range=["#93c5fd", "#3b82f6", "#1d4ed8"]),
                title=None,
            ),
            tooltip=["carrier", "metric", alt.Tooltip("value:Q", format=".2f", title="days")],
        )
    )

def render_carrier_overview(summary_df: pd.DataFrame) -> None:
    st.subheader("Market Performance of Carriers on Priority Lanes")
    st.caption("Average transit times in days by carrier")
    st.altair_chart(carrier_overview_chart(summary_df), use_container_width=True)

def render_lane_chart(lane_df: pd.DataFrame, lane_name: str) -> None:
    st.subheader(f"Transit Time Analysis: {lane_name}")
    st.caption("Compare market carrier performance on this lane")
    st.altair_chart(lane_transit_chart(lane_df), use_container_width=True)
