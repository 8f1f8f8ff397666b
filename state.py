# state.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class InvalidTransition(ValueError):
    pass


@dataclass(frozen=True)
class DashboardState:
    status: LoadStatus = LoadStatus.LOADING
    selected_lane: str = ""
    error: Optional[str] = None


# ---------- transitions ----------
def start_load() -> DashboardState:
    return DashboardState(status=LoadStatus.LOADING)

def load_succeeded(lanes: Sequence[str]) -> DashboardState:
    return DashboardState(status=LoadStatus.READY, selected_lane=lanes[0] if lanes else "")

def load_failed(message: str) -> DashboardState:
    return DashboardState(status=LoadStatus.ERROR, error=message)

def select_lane(state: DashboardState, lane: str, lanes: Sequence[str]) -> DashboardState:
    """Ready -> Ready with a new lane. Anything else is a programming error."""
    if state.status is not LoadStatus.READY:
        raise InvalidTransition(f"Cannot select a lane while {state.status.value}")
    if lane not in lanes:
        raise InvalidTransition(f"Unknown lane: {lane!r}")
    return replace(state, selected_lane=lane)
