"""End-to-end checks over the seed data: provider -> metrics / field / impact."""

import numpy as np
import pytest

from data.interfaces import MockDataProvider
from data.portfolio import remove_intervention, toggle_intervention
from models.grid import LatticeBounds
from optimization.concentration_field import compute_concentration_field, generate_grid_cells
from optimization.impact import predict_intervention_impact
from optimization.metrics import compute_performance_metrics
from optimization.projection import hourly_projection

GREEN_WALL = "pune-pcmc-green-wall"


@pytest.fixture
def provider():
    return MockDataProvider()


@pytest.fixture
def green_wall_area():
    """Fine lattice centred on the Bhosari estate and its green wall."""
    return LatticeBounds(
        min_lat=18.6406, max_lat=18.6466, min_lng=73.8304, max_lng=73.8364, step=0.0005,
    )


class TestSeedPipeline:
    def test_metrics_invariants(self, provider):
        config = provider.get_default_config()
        metrics = compute_performance_metrics(
            provider.get_emission_sources(), provider.get_interventions(), config,
        )
        assert 0 <= metrics.net_emissions <= metrics.total_emissions
        assert metrics.total_capture > 0
        assert 50 <= metrics.air_quality_index <= 150
        assert metrics.intervention_count == 5

    def test_study_area_field(self, provider):
        cells = generate_grid_cells(
            provider.get_study_area(),
            provider.get_emission_sources(),
            provider.get_interventions(),
            provider.get_default_config(),
        )
        assert len(cells) == provider.get_study_area().shape[0] * provider.get_study_area().shape[1]
        assert all(c.co2_level >= 380 for c in cells)
        assert all(0 <= c.air_quality <= 500 for c in cells)
        assert max(c.co2_level for c in cells) > 400

    def test_every_catalog_entry_previews(self, provider):
        from data.portfolio import intervention_from_template
        config = provider.get_default_config()
        for template in provider.get_intervention_catalog():
            iv = intervention_from_template(template, 18.64, 73.83)
            impact = predict_intervention_impact(iv, config)
            assert impact.co2_reduction > 0
            assert 0 < impact.cost_benefit < float("inf")

    def test_projection_from_seed_metrics(self, provider):
        metrics = compute_performance_metrics(
            provider.get_emission_sources(), provider.get_interventions(),
            provider.get_default_config(),
        )
        rows = hourly_projection(metrics)
        assert rows[12]["emissions"] == metrics.total_emissions
        assert rows[12]["capture"] == metrics.total_capture


class TestToggleEquivalence:
    def test_toggled_off_equals_removed(self, provider, green_wall_area, neutral_config):
        """A switched-off intervention leaves exactly the field of its absence."""
        sources = provider.get_emission_sources()
        portfolio = tuple(provider.get_interventions())
        toggled = toggle_intervention(portfolio, GREEN_WALL)
        removed = remove_intervention(portfolio, GREEN_WALL)

        off = compute_concentration_field(green_wall_area, sources, toggled, neutral_config)
        gone = compute_concentration_field(green_wall_area, sources, removed, neutral_config)
        on = compute_concentration_field(green_wall_area, sources, portfolio, neutral_config)

        np.testing.assert_array_equal(off[2], gone[2])
        np.testing.assert_array_equal(off[3], gone[3])
        assert not np.array_equal(on[2], off[2])
        assert np.all(on[2] <= off[2])

        assert (
            generate_grid_cells(green_wall_area, sources, toggled, neutral_config)
            == generate_grid_cells(green_wall_area, sources, removed, neutral_config)
        )

    def test_toggled_off_metrics_equal_removed(self, provider):
        config = provider.get_default_config()
        sources = provider.get_emission_sources()
        portfolio = tuple(provider.get_interventions())
        assert (
            compute_performance_metrics(sources, toggle_intervention(portfolio, GREEN_WALL), config)
            == compute_performance_metrics(sources, remove_intervention(portfolio, GREEN_WALL), config)
        )
