"""Smoke tests for the Plotly figure builders."""

from dataclasses import replace

import plotly.graph_objects as go

from models.grid import LatticeBounds
from optimization.concentration_field import compute_concentration_field
from optimization.metrics import PerformanceMetrics
from optimization.projection import hourly_projection
from optimization.summary import emissions_by_category
from visualization.plots import (
    create_capture_rate_figure,
    create_concentration_figure,
    create_hourly_trend_figure,
    create_source_mix_figure,
)


class TestFigures:
    def test_concentration_figure(self, mock_sources, mock_interventions, neutral_config):
        bounds = LatticeBounds(min_lat=18.60, max_lat=18.66, min_lng=73.80, max_lng=73.86, step=0.01)
        LAT, LNG, co2, _ = compute_concentration_field(
            bounds, mock_sources, mock_interventions, neutral_config,
        )
        fig = create_concentration_figure(LAT, LNG, co2, mock_sources, mock_interventions)
        assert isinstance(fig, go.Figure)
        assert isinstance(fig.data[0], go.Heatmap)
        # heatmap + sources + one ring per intervention + intervention markers
        assert len(fig.data) == 2 + len(mock_interventions) + 1

    def test_concentration_figure_empty(self, small_bounds, neutral_config):
        LAT, LNG, co2, _ = compute_concentration_field(small_bounds, [], [], neutral_config)
        fig = create_concentration_figure(LAT, LNG, co2, [], [])
        assert len(fig.data) == 1

    def test_hourly_trend(self):
        metrics = PerformanceMetrics(1000, 200, 800, 120, 500, 2)
        fig = create_hourly_trend_figure(hourly_projection(metrics))
        assert len(fig.data) == 3
        assert len(fig.data[0].x) == 24

    def test_source_mix(self, mock_sources):
        fig = create_source_mix_figure(emissions_by_category(mock_sources))
        assert isinstance(fig.data[0], go.Pie)
        assert len(fig.data[0].labels) == 4

    def test_capture_rate_skips_inactive(self, mock_interventions):
        paused = [replace(mock_interventions[0], active=False)] + mock_interventions[1:]
        fig = create_capture_rate_figure(paused)
        assert len(fig.data[0].x) == len(mock_interventions) - 1
