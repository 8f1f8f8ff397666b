"""
Unit Tests for the dashboard load / selection state machine

Run with: pytest tests/test_state.py -v
"""

import pytest

from state import (
    DashboardState,
    InvalidTransition,
    LoadStatus,
    load_failed,
    load_succeeded,
    select_lane,
    start_load,
)

LANES = ["CNYTN--USSEA", "CNSHA--USSEA"]


class TestTransitions:

    def test_initial_state_is_loading(self):
        assert DashboardState().status is LoadStatus.LOADING
        assert start_load() == DashboardState()

    def test_success_selects_first_lane(self):
        state = load_succeeded(LANES)
        assert state.status is LoadStatus.READY
        assert state.selected_lane == "CNYTN--USSEA"
        assert state.error is None

    def test_success_without_lanes(self):
        assert load_succeeded([]).selected_lane == ""

    def test_failure_keeps_message(self):
        state = load_failed("Error parsing CSV: boom")
        assert state.status is LoadStatus.ERROR
        assert state.error == "Error parsing CSV: boom"

    def test_reselect(self):
        state = select_lane(load_succeeded(LANES), "CNSHA--USSEA", LANES)
        assert state.status is LoadStatus.READY
        assert state.selected_lane == "CNSHA--USSEA"

    def test_select_unknown_lane(self):
        with pytest.raises(InvalidTransition):
            select_lane(load_succeeded(LANES), "XXXXX--YYYYY", LANES)

    @pytest.mark.parametrize("state", [start_load(), load_failed("x")])
    def test_select_only_when_ready(self, state):
        with pytest.raises(InvalidTransition):
            select_lane(state, LANES[0], LANES)

    def test_states_are_immutable(self):
        state = load_succeeded(LANES)
        select_lane(state, LANES[1], LANES)
        assert state.selected_lane == LANES[0]
