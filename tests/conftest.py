"""Shared fixtures for the lane statistics tests."""

import pytest


def _rows(carrier, lane, days):
    return [
        {"carrier_name": carrier, "port_2_port_id": lane, "transit_time": d * 24}
        for d in days
    ]


@pytest.fixture
def make_rows():
    """Build raw CSV-like rows (transit_time in hours) from transit days."""
    return _rows


@pytest.fixture
def yantian_seattle_rows():
    """CNYTN--USSEA with a steady carrier A and an erratic carrier B, same mean."""
    return _rows("A", "CNYTN--USSEA", [20, 20, 20]) + _rows("B", "CNYTN--USSEA", [10, 30, 20])


@pytest.fixture
def multi_lane_rows():
    """Three lanes, four carriers; KRPUS--USLAX is not a priority lane."""
    return (
        _rows("A", "CNYTN--USSEA", [20, 20, 20])
        + _rows("B", "CNYTN--USSEA", [10, 30, 20])
        + _rows("A", "CNSHA--USSEA", [15, 17])
        + _rows("C", "CNSHA--USSEA", [12, 12, 12, 12])
        + _rows("B", "BDCGP--USNYC", [40, 44])
        + _rows("D", "BDCGP--USNYC", [35])
        + _rows("A", "KRPUS--USLAX", [11, 11])
    )
