# parsing.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union
import pandas as pd

from constants import CARRIER_COL, LANE_COL, TRANSIT_HOURS_COL, HOURS_PER_DAY, COUNTRY_NAMES, PORT_NAMES

Rows = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


@dataclass(frozen=True)
class ShipmentRecord:
    carrier_name: str
    lane_id: str
    transit_time_hours: float

    @property
    def transit_days(self) -> float:
        return self.transit_time_hours / HOURS_PER_DAY


def _present(value: Any) -> bool:
    """Falsy in the loose sense: None, NaN, '' and 0 all count as missing."""
    if value is None:
        return False
    try:
        if pd.isna(value):
            return False
    except (TypeError, ValueError):
        # non-scalar values (lists, dicts) are not NaN
        pass
    return bool(value)


def _as_frame(rows: Rows) -> pd.DataFrame:
    df = rows.copy() if isinstance(rows, pd.DataFrame) else pd.DataFrame(list(rows))
    for col in (CARRIER_COL, LANE_COL, TRANSIT_HOURS_COL):
        if col not in df.columns:
            df[col] = None
    return df


def split_rows(rows: Rows) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split raw parsed rows into (valid, rejected) frames, both in input order.

    A row is rejected when transit_time is missing or not numeric, or when
    carrier_name / port_2_port_id is missing or empty. Valid rows come back
    with carrier and lane as str and transit_time as float hours.
    """
    df = _as_frame(rows).reset_index(drop=True)
    hours = pd.to_numeric(df[TRANSIT_HOURS_COL], errors="coerce")
    ok = (
        hours.notna()
        & df[CARRIER_COL].map(_present).astype(bool)
        & df[LANE_COL].map(_present).astype(bool)
    )

    valid = df[ok].copy()
    valid[TRANSIT_HOURS_COL] = hours[ok].astype(float)
    valid[CARRIER_COL] = valid[CARRIER_COL].astype(str)
    valid[LANE_COL] = valid[LANE_COL].astype(str)
    return valid.reset_index(drop=True), df[~ok].reset_index(drop=True)


def filter_records(rows: Rows) -> pd.DataFrame:
    return split_rows(rows)[0]


def to_records(valid: pd.DataFrame) -> Iterator[ShipmentRecord]:
    for carrier, lane, hours in zip(valid[CARRIER_COL], valid[LANE_COL], valid[TRANSIT_HOURS_COL]):
        yield ShipmentRecord(carrier_name=carrier, lane_id=lane, transit_time_hours=float(hours))


# ---- Lane display names ----
def _format_location(code: str) -> str:
    country, port = code[:2], code[2:]
    return f"{COUNTRY_NAMES.get(country, country)}-{PORT_NAMES.get(port, port)}"


def format_lane_name(lane_id: str | None) -> str:
    """'CNYTN--USSEA' -> 'China-Yantian to USA-Seattle'. Unknown codes pass through."""
    if not lane_id:
        return ""
    origin, sep, destination = lane_id.partition("--")
    if not sep:
        return lane_id
    return f"{_format_location(origin)} to {_format_location(destination)}"
