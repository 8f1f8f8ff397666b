"""
Lane & Carrier Statistics
=========================

Pure pipeline from raw shipment rows to the structures the dashboard draws:

  1. split_rows()          drop rows without carrier, lane or numeric transit time
  2. to_records()          typed ShipmentRecords; days = hours / 24, once
  3. resolve_lanes()       priority lanes that actually have data, in priority order
  4. aggregate_lanes()     per-lane, per-carrier transit statistics
  5. summarize_carriers()  cross-lane roll-up, fastest carrier first

Reported floats round half away from zero (10.125 -> 10.13), not to even.
No Streamlit here; the same input always yields equal output.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from constants import PRIORITY_LANES
from parsing import Rows, ShipmentRecord, split_rows, to_records

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int) -> float:
    # Decimal(value) is the exact binary value, so only true ties round up
    return float(Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class CarrierLaneStat:
    avg_transit_days: float
    min_transit_days: float
    max_transit_days: float
    shipment_count: int
    standard_deviation: float
    absolute_range: float
    normalized_range: float
    coefficient_of_variation: float
    consistency_score: float


@dataclass(frozen=True)
class LaneStat:
    lane_id: str
    rank: int
    total_shipments: int
    average_transit_days: float
    carriers: Dict[str, CarrierLaneStat]


@dataclass(frozen=True)
class LaneContribution:
    lane_id: str
    rank: int
    avg_transit_days: float
    consistency_score: float
    shipment_count: int


@dataclass(frozen=True)
class CarrierSummary:
    carrier: str
    avg_days: float
    lane_count: int
    shipment_count: int
    avg_consistency_score: float
    weighted_consistency_score: float
    lanes: Tuple[LaneContribution, ...]


@dataclass(frozen=True)
class LaneAnalysis:
    lanes: Tuple[str, ...]
    lane_stats: Dict[str, LaneStat]
    carrier_summary: Tuple[CarrierSummary, ...]
    rejected_count: int


# =============================================================================
# LANE RESOLUTION
# =============================================================================

def lane_ranks(priority_lanes: Sequence[str]) -> Dict[str, int]:
    """1-based rank by position; a repeated lane keeps its first position."""
    ranks: Dict[str, int] = {}
    for i, lane in enumerate(priority_lanes, start=1):
        ranks.setdefault(lane, i)
    return ranks


def resolve_lanes(
    records: Sequence[ShipmentRecord], priority_lanes: Sequence[str]
) -> Tuple[List[str], Dict[str, int]]:
    """Priority lanes with at least one record, in priority order, plus record counts."""
    present = Counter(r.lane_id for r in records)
    lanes: List[str] = []
    counts: Dict[str, int] = {}
    for lane in lane_ranks(priority_lanes):
        if present[lane] > 0:
            lanes.append(lane)
            counts[lane] = present[lane]
    return lanes, counts


# =============================================================================
# AGGREGATION
# =============================================================================

def consistency_score(normalized_range: float) -> float:
    # normalized_range >= 0, so the score never exceeds 100
    return max(0.0, 100.0 - normalized_range * 100.0)


def carrier_lane_stat(days: Sequence[float]) -> Optional[CarrierLaneStat]:
    """Transit statistics for one carrier on one lane; None when there are no values."""
    values = np.asarray(days, dtype=float)
    if values.size == 0:
        return None

    mean = float(values.mean())
    lo = float(values.min())
    hi = float(values.max())
    std = float(values.std(ddof=0))
    spread = hi - lo
    normalized = spread / mean if mean > 0 else 0.0
    cv = std / mean if mean > 0 else 0.0

    return CarrierLaneStat(
        avg_transit_days=round_half_up(mean, 2),
        min_transit_days=round_half_up(lo, 2),
        max_transit_days=round_half_up(hi, 2),
        shipment_count=int(values.size),
        standard_deviation=round_half_up(std, 2),
        absolute_range=round_half_up(spread, 2),
        normalized_range=round_half_up(normalized, 2),
        coefficient_of_variation=round_half_up(cv, 2),
        consistency_score=round_half_up(consistency_score(normalized), 1),
    )


def aggregate_lanes(
    records: Sequence[ShipmentRecord], priority_lanes: Sequence[str]
) -> Dict[str, LaneStat]:
    """
    Per-lane statistics for every priority lane with data.

    Expects filtered records. Dict order follows the priority list; carriers
    within a lane keep their first-appearance order.
    """
    ranks = lane_ranks(priority_lanes)
    lanes, counts = resolve_lanes(records, priority_lanes)

    lane_days: Dict[str, List[float]] = {lane: [] for lane in lanes}
    carrier_days: Dict[str, Dict[str, List[float]]] = {lane: {} for lane in lanes}
    for r in records:
        if r.lane_id not in lane_days:
            continue
        lane_days[r.lane_id].append(r.transit_days)
        carrier_days[r.lane_id].setdefault(r.carrier_name, []).append(r.transit_days)

    stats: Dict[str, LaneStat] = {}
    for lane in lanes:
        carriers: Dict[str, CarrierLaneStat] = {}
        for carrier, days in carrier_days[lane].items():
            stat = carrier_lane_stat(days)
            if stat is not None:
                carriers[carrier] = stat

        stats[lane] = LaneStat(
            lane_id=lane,
            rank=ranks[lane],
            total_shipments=counts[lane],
            average_transit_days=round_half_up(float(np.mean(lane_days[lane])), 2),
            carriers=carriers,
        )
    return stats


# =============================================================================
# CARRIER SUMMARY
# =============================================================================

def summarize_carriers(lane_stats: Mapping[str, LaneStat]) -> List[CarrierSummary]:
    """
    Roll per-lane carrier stats up across lanes, fastest (lowest avg_days) first.

    avg_days and avg_consistency_score weight every lane equally;
    weighted_consistency_score weights each lane by the carrier's shipments on it.
    """
    contributions: Dict[str, List[LaneContribution]] = {}
    for lane_id, lane in lane_stats.items():
        for carrier, stat in lane.carriers.items():
            contributions.setdefault(carrier, []).append(
                LaneContribution(
                    lane_id=lane_id,
                    rank=lane.rank,
                    avg_transit_days=stat.avg_transit_days,
                    consistency_score=stat.consistency_score,
                    shipment_count=stat.shipment_count,
                )
            )

    summary = []
    for carrier, lanes in contributions.items():
        n_lanes = len(lanes)
        shipments = sum(l.shipment_count for l in lanes)
        weighted = (
            sum(l.consistency_score * l.shipment_count for l in lanes) / shipments
            if shipments > 0 else 0.0
        )
        summary.append(
            CarrierSummary(
                carrier=carrier,
                avg_days=round_half_up(sum(l.avg_transit_days for l in lanes) / n_lanes, 2),
                lane_count=n_lanes,
                shipment_count=shipments,
                avg_consistency_score=round_half_up(sum(l.consistency_score for l in lanes) / n_lanes, 1),
                weighted_consistency_score=round_half_up(weighted, 1),
                lanes=tuple(lanes),
            )
        )

    # sorted() is stable: ties keep first-appearance order
    return sorted(summary, key=lambda c: c.avg_days)


# =============================================================================
# PIPELINE
# =============================================================================

def build_analysis(rows: Rows, priority_lanes: Optional[Sequence[str]] = None) -> LaneAnalysis:
    lanes_in = list(PRIORITY_LANES if priority_lanes is None else priority_lanes)

    valid, rejected = split_rows(rows)
    if len(rejected):
        logger.info("Dropped %d of %d rows with missing carrier, lane or transit time",
                    len(rejected), len(valid) + len(rejected))

    records = list(to_records(valid))
    lane_stats = aggregate_lanes(records, lanes_in)
    summary = summarize_carriers(lane_stats)

    missing = [l for l in lane_ranks(lanes_in) if l not in lane_stats]
    if missing:
        logger.debug("Priority lanes without data: %s", ", ".join(missing))
    logger.info("Analysed %d lanes and %d carriers from %d shipments",
                len(lane_stats), len(summary), len(valid))

    return LaneAnalysis(
        lanes=tuple(lane_stats),
        lane_stats=lane_stats,
        carrier_summary=tuple(summary),
        rejected_count=len(rejected),
    )
