from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import streamlit as st
from constants import KPI_FORMATS
from stats import CarrierSummary

def fastest_carrier(summary: Sequence[CarrierSummary]) -> Optional[CarrierSummary]:
    # summary is already sorted by avg_days ascending
    return summary[0] if summary else None

def most_reliable_carriers(summary: Sequence[CarrierSummary], n: int = 3) -> List[CarrierSummary]:
    """Widest lane coverage first; shipment volume breaks ties."""
    return sorted(summary, key=lambda c: (-c.lane_count, -c.shipment_count))[:n]

def most_consistent_carriers(summary: Sequence[CarrierSummary], n: int = 3) -> List[CarrierSummary]:
    """Highest volume-weighted consistency among carriers on more than one lane."""
    multi_lane = [c for c in summary if c.lane_count > 1]
    return sorted(multi_lane, key=lambda c: -c.weighted_consistency_score)[:n]

def compute_kpis(summary: Sequence[CarrierSummary]) -> Dict[str, Dict[str, object]]:
    fastest = fastest_carrier(summary)
    reliable = most_reliable_carriers(summary)
    consistent = most_consistent_carriers(summary)
    return dict(
        fastest=dict(
            carrier=fastest.carrier if fastest else "N/A",
            value=fastest.avg_days if fastest else 0.0,
        ),
        most_reliable=dict(
            carrier=reliable[0].carrier if reliable else "N/A",
            value=reliable[0].lane_count if reliable else 0,
        ),
        most_consistent=dict(
            carrier=consistent[0].carrier if consistent else "N/A",
            value=consistent[0].weighted_consistency_score if consistent else 0.0,
        ),
    )

def render_kpis(kpis: Dict[str, Dict[str, object]]) -> None:
    c1, c2, c3 = st.columns(3)
    c1.metric("⚡ Fastest Carrier", kpis["fastest"]["carrier"])
    c1.caption(KPI_FORMATS["fastest"].format(kpis["fastest"]["value"]))
    c2.metric("🛡️ Most Reliable Carrier", kpis["most_reliable"]["carrier"])
    c2.caption(KPI_FORMATS["most_reliable"].format(kpis["most_reliable"]["value"]))
    c3.metric("📊 Most Consistent Carrier", kpis["most_consistent"]["carrier"])
    c3.caption(KPI_FORMATS["most_consistent"].format(kpis["most_consistent"]["value"]) + " · based on lane-specific performance")
