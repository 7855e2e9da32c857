"""Tests for the 24-hour trend projection."""

import pytest

from optimization.metrics import PerformanceMetrics
from optimization.projection import hourly_projection, projection_multipliers


@pytest.fixture
def metrics():
    return PerformanceMetrics(
        total_emissions=1000, total_capture=200, net_emissions=800,
        air_quality_index=120, cost_effectiveness=500, intervention_count=2,
    )


class TestProjectionMultipliers:
    @pytest.mark.parametrize("hour", [7, 8, 9, 17, 18, 19])
    def test_rush_hours(self, hour):
        assert projection_multipliers(hour) == (1.4, 1.0)

    @pytest.mark.parametrize("hour", [22, 23, 0, 3, 5])
    def test_night(self, hour):
        assert projection_multipliers(hour) == (0.4, 0.8)

    @pytest.mark.parametrize("hour", [6, 10, 12, 16, 20, 21])
    def test_daytime(self, hour):
        assert projection_multipliers(hour) == (1.0, 1.0)


class TestHourlyProjection:
    def test_covers_full_day(self, metrics):
        rows = hourly_projection(metrics)
        assert [r["hour"] for r in rows] == list(range(24))

    def test_rush_hour_row(self, metrics):
        row = hourly_projection(metrics)[8]
        assert row == {"hour": 8, "emissions": 1400, "capture": 200, "net": 1200}

    def test_night_row(self, metrics):
        row = hourly_projection(metrics)[23]
        assert row == {"hour": 23, "emissions": 400, "capture": 160, "net": 240}

    def test_midday_row_matches_totals(self, metrics):
        row = hourly_projection(metrics)[12]
        assert row == {"hour": 12, "emissions": 1000, "capture": 200, "net": 800}

    def test_net_not_floored(self):
        """The trend line shows net as a plain difference."""
        m = PerformanceMetrics(100, 500, 0, 50, 100, 3)
        assert hourly_projection(m)[12]["net"] == -400
