"""Shared fixtures for the Urban CO2 Capture Planner test suite."""

import sys
import os
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.conditions import SimulationConfig
from models.grid import LatticeBounds
from models.sources import CaptureIntervention, EmissionSource


@pytest.fixture
def neutral_config():
    """Calm, mild, 50% humidity at noon with unit traffic: weather modifier is exactly 1."""
    return SimulationConfig(
        wind_speed=0.0,
        wind_direction=0.0,
        temperature=20.0,
        humidity=50.0,
        time_of_day=12,
        traffic_density=1.0,
    )


@pytest.fixture
def small_bounds():
    """A 5 x 5 lattice around the origin at 0.005 deg (~555 m) spacing."""
    return LatticeBounds(min_lat=-0.01, max_lat=0.01, min_lng=-0.01, max_lng=0.01, step=0.005)


@pytest.fixture
def origin_point():
    """A single-point lattice at (0, 0)."""
    return LatticeBounds(min_lat=0.0, max_lat=0.0, min_lng=0.0, max_lng=0.0, step=0.001)


@pytest.fixture
def traffic_source():
    """A transportation source at the origin."""
    return EmissionSource(
        id="road-1",
        category="transportation",
        name="Test Corridor",
        lat=0.0,
        lng=0.0,
        emission_rate=2500.0,
    )


@pytest.fixture
def roadside_unit():
    """A roadside capture unit at the origin."""
    return CaptureIntervention(
        id="unit-1",
        category="roadside-capture",
        name="Test Capture Unit",
        lat=0.0,
        lng=0.0,
        capture_rate=300.0,
        install_cost=125000.0,
        annual_maintenance_cost=15000.0,
        coverage_radius=150.0,
    )


@pytest.fixture
def mock_sources():
    """The full set of seed emission sources."""
    from data.mock_data import get_emission_sources
    return get_emission_sources()


@pytest.fixture
def mock_interventions():
    """The seed interventions."""
    from data.mock_data import get_interventions
    return get_interventions()
