"""Tests for the sensitivity sweep helpers."""

import pytest

from experiments.run_sensitivity_analysis import (
    PARAM_RANGES,
    run_sensitivity,
    run_single,
    sweep_values,
)
from data.mock_data import get_default_config
from models.grid import LatticeBounds


class TestSweepValues:
    def test_endpoints(self):
        assert sweep_values("wind_speed", 5) == [0.0, 5.0, 10.0, 15.0, 20.0]

    def test_hours_are_whole(self):
        hours = sweep_values("time_of_day", 5)
        assert all(isinstance(h, int) for h in hours)
        assert hours[0] == 0 and hours[-1] == 23

    def test_hours_deduplicated(self):
        hours = sweep_values("time_of_day", 100)
        assert hours == list(range(24))


class TestRuns:
    def test_run_single_with_field(self, mock_sources, mock_interventions):
        bounds = LatticeBounds(min_lat=18.63, max_lat=18.65, min_lng=73.82, max_lng=73.84, step=0.005)
        row = run_single(get_default_config(), mock_sources, mock_interventions, bounds)
        assert row["peak_co2_ppm"] >= row["min_co2_ppm"] >= 380.0
        assert row["intervention_count"] == 5

    def test_run_sensitivity_rows(self):
        rows = run_sensitivity(steps=3, include_field=False, verbose=False)
        assert {r["parameter"] for r in rows} == set(PARAM_RANGES)
        assert len(rows) == 3 * len(PARAM_RANGES)

    def test_capture_falls_with_wind(self):
        rows = [r for r in run_sensitivity(steps=3, include_field=False, verbose=False)
                if r["parameter"] == "wind_speed"]
        captures = [r["total_capture"] for r in rows]
        assert captures == sorted(captures, reverse=True)
        assert captures[0] > captures[-1]
