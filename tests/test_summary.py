"""Tests for dashboard summaries."""

from dataclasses import replace

import pytest

from optimization.metrics import PerformanceMetrics
from optimization.summary import (
    aqi_category,
    capture_outlook,
    emissions_by_category,
    find_nearest_source,
    portfolio_costs,
)


class TestAqiCategory:
    @pytest.mark.parametrize("aqi,label", [
        (0, "Good"),
        (50, "Good"),
        (51, "Moderate"),
        (100, "Moderate"),
        (101, "Unhealthy for Sensitive Groups"),
        (150, "Unhealthy for Sensitive Groups"),
        (151, "Unhealthy"),
        (500, "Unhealthy"),
    ])
    def test_bands(self, aqi, label):
        assert aqi_category(aqi) == label


class TestEmissionsByCategory:
    def test_seed_mix(self, mock_sources):
        mix = emissions_by_category(mock_sources)
        assert mix["transportation"] == pytest.approx(2000 + 1900 + 1700 + 2500)
        assert mix["industrial"] == pytest.approx(5200 + 3800 + 2600 + 8000)
        assert mix["commercial"] == pytest.approx(1200)
        assert mix["residential"] == pytest.approx(600)

    def test_inactive_excluded(self, traffic_source):
        assert emissions_by_category([replace(traffic_source, active=False)]) == {}


class TestPortfolioCosts:
    def test_active_only(self, mock_interventions):
        paused = [replace(mock_interventions[0], active=False)] + mock_interventions[1:]
        costs = portfolio_costs(paused)
        assert costs["total_install_cost"] == pytest.approx(55000 + 50000 + 125000 + 47000)
        assert costs["annual_maintenance_cost"] == pytest.approx(9000 + 9500 + 15500 + 8200)

    def test_empty(self):
        assert portfolio_costs([]) == {"total_install_cost": 0.0, "annual_maintenance_cost": 0.0}


class TestCaptureOutlook:
    def test_values(self):
        m = PerformanceMetrics(1000, 500, 500, 75, 300, 2)
        outlook = capture_outlook(m)
        assert outlook["daily_tonnes"] == pytest.approx(12.0)
        assert outlook["annual_tonnes"] == pytest.approx(4380.0)
        assert outlook["efficiency_pct"] == pytest.approx(50.0)

    def test_no_emissions(self):
        m = PerformanceMetrics(0, 500, 0, 150, 300, 2)
        assert capture_outlook(m)["efficiency_pct"] == 0.0


class TestFindNearestSource:
    def test_colocated(self, mock_sources, mock_interventions):
        green_wall = next(iv for iv in mock_interventions if iv.id == "pune-pcmc-green-wall")
        nearest = find_nearest_source(green_wall, mock_sources)
        assert nearest.id == "pune-pcmc-bhosari"

    def test_skips_inactive(self, mock_sources, mock_interventions):
        green_wall = next(iv for iv in mock_interventions if iv.id == "pune-pcmc-green-wall")
        sources = [
            replace(s, active=False) if s.id == "pune-pcmc-bhosari" else s
            for s in mock_sources
        ]
        assert find_nearest_source(green_wall, sources).id != "pune-pcmc-bhosari"

    def test_no_sources(self, roadside_unit):
        assert find_nearest_source(roadside_unit, []) is None
