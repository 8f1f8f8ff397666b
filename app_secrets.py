from __future__ import annotations
import os
from typing import List
import streamlit as st

from constants import DEFAULT_DATA_PATH, PRIORITY_LANES

def get_secret(key: str) -> str | None:
    """Environment variable first, then .streamlit/secrets.toml; None when neither has the key."""
    v = os.environ.get(key)
    if v:
        return v
    try:
        return st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:
        # st.secrets raises when no secrets.toml exists
        return None

def get_data_path() -> str:
    return get_secret("SHIPMENT_DATA_PATH") or DEFAULT_DATA_PATH

def parse_lane_list(raw: str | None) -> List[str]:
    """Comma-separated lane ids, blanks and repeats dropped; falls back to the built-in priority list."""
    if not raw:
        return list(PRIORITY_LANES)
    lanes = list(dict.fromkeys(p.strip().upper() for p in raw.split(",") if p.strip()))
    return lanes or list(PRIORITY_LANES)

def get_priority_lanes() -> List[str]:
    return parse_lane_list(get_secret("PRIORITY_LANES"))
