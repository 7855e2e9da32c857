"""Tests for the single-intervention impact predictor."""

import math
from dataclasses import replace

import pytest

from models.conditions import SimulationConfig
from optimization.impact import (
    UNBOUNDED_COST_BENEFIT,
    InterventionImpact,
    predict_intervention_impact,
)


class TestPredictInterventionImpact:
    def test_neutral_weather(self, roadside_unit, neutral_config):
        impact = predict_intervention_impact(roadside_unit, neutral_config)
        assert impact.co2_reduction == 300
        assert impact.aqi_improvement == 30
        # (125000 + 15000 * 10) / (300 * 8760) = 0.1046...
        assert impact.cost_benefit == pytest.approx(0.10)
        assert not impact.is_unbounded

    def test_weather_scales_reduction(self, roadside_unit):
        config = SimulationConfig(wind_speed=10.0, temperature=20.0, humidity=50.0)
        forest = replace(
            roadside_unit, category="urban-forest", capture_rate=800.0,
            install_cost=200000.0, annual_maintenance_cost=25000.0, coverage_radius=500.0,
        )
        impact = predict_intervention_impact(forest, config)
        assert impact.co2_reduction == 640
        assert impact.aqi_improvement == 64
        # 450000 / (640 * 8760) = 0.0803
        assert impact.cost_benefit == pytest.approx(0.08)

    def test_zero_capture_is_unbounded(self, roadside_unit, neutral_config):
        idle = replace(roadside_unit, capture_rate=0.0)
        impact = predict_intervention_impact(idle, neutral_config)
        assert impact.co2_reduction == 0
        assert impact.aqi_improvement == 0
        assert impact.cost_benefit == UNBOUNDED_COST_BENEFIT
        assert math.isinf(impact.cost_benefit)
        assert impact.is_unbounded

    def test_free_intervention(self, roadside_unit, neutral_config):
        free = replace(roadside_unit, install_cost=0.0, annual_maintenance_cost=0.0)
        assert predict_intervention_impact(free, neutral_config).cost_benefit == 0.0

    def test_ignores_active_flag(self, roadside_unit, neutral_config):
        """A preview of a paused candidate matches the active one."""
        paused = replace(roadside_unit, active=False)
        assert (
            predict_intervention_impact(paused, neutral_config)
            == predict_intervention_impact(roadside_unit, neutral_config)
        )

    def test_cost_benefit_two_decimals(self, roadside_unit, neutral_config):
        cheap = replace(roadside_unit, capture_rate=1.0, install_cost=12345.0,
                        annual_maintenance_cost=0.0)
        impact = predict_intervention_impact(cheap, neutral_config)
        # 12345 / 8760 = 1.40925...
        assert impact.cost_benefit == pytest.approx(1.41)

    def test_to_dict(self, roadside_unit, neutral_config):
        d = predict_intervention_impact(roadside_unit, neutral_config).to_dict()
        assert set(d) == {"co2_reduction", "aqi_improvement", "cost_benefit"}

    def test_result_type(self, roadside_unit, neutral_config):
        impact = predict_intervention_impact(roadside_unit, neutral_config)
        assert isinstance(impact, InterventionImpact)
        assert isinstance(impact.co2_reduction, int)
        assert isinstance(impact.aqi_improvement, int)
