"""
City-wide Performance Metrics for the Urban CO2 Capture Planner.

Aggregates emissions, capture, cost and a headline air-quality index from
the current source and intervention snapshots.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Sequence

from models.conditions import SimulationConfig
from models.modifiers import time_of_day_modifier, weather_modifier
from models.rounding import round_half_up
from models.sources import CaptureIntervention, EmissionSource, SourceCategory
from config import (
    CITY_AQI_START,
    CITY_AQI_FLOOR,
    CITY_AQI_PER_REDUCTION_PCT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerformanceMetrics:
    """Headline figures for one run.  All values are whole numbers.

    Attributes:
        total_emissions: Time- and traffic-adjusted emissions (kg/h).
        total_capture: Weather-adjusted capture (kg/h).
        net_emissions: Emissions left after capture, never negative (kg/h).
        air_quality_index: City-wide index, 50-150.
        cost_effectiveness: Installation cost per kg/h captured.
        intervention_count: Number of active interventions.
    """

    total_emissions: int
    total_capture: int
    net_emissions: int
    air_quality_index: int
    cost_effectiveness: int
    intervention_count: int

    def to_dict(self) -> dict:
        return asdict(self)


def total_emissions(
    sources: Sequence[EmissionSource],
    config: SimulationConfig,
) -> float:
    """Sum of active emission rates scaled by time of day and, for traffic, density."""
    total = 0.0
    for src in sources:
        if not src.active:
            continue
        rate = src.emission_rate * time_of_day_modifier(src.category, config.time_of_day)
        if src.category == SourceCategory.TRANSPORTATION:
            rate *= config.traffic_density
        total += rate
    return total


def total_capture(
    interventions: Sequence[CaptureIntervention],
    config: SimulationConfig,
) -> float:
    """Sum of active capture rates scaled by the weather modifier."""
    modifier = weather_modifier(config)
    return sum(iv.capture_rate * modifier for iv in interventions if iv.active)


def reduction_percentage(emissions: float, capture: float) -> float:
    """Capture as a percentage of emissions; 0 when nothing is emitted."""
    if emissions > 0:
        return capture / emissions * 100.0
    return 0.0


def compute_performance_metrics(
    sources: Sequence[EmissionSource],
    interventions: Sequence[CaptureIntervention],
    config: SimulationConfig,
) -> PerformanceMetrics:
    """
    Compute the city-wide metrics for one snapshot.

    Args:
        sources: Emission sources; inactive ones are skipped.
        interventions: Capture interventions; inactive ones are skipped.
        config: Condition set for this run.

    Returns:
        PerformanceMetrics with every field rounded half-up to an integer.
        Cost effectiveness is 0 when nothing is captured.
    """
    emissions = total_emissions(sources, config)
    capture = total_capture(interventions, config)
    net = max(0.0, emissions - capture)

    active = [iv for iv in interventions if iv.active]
    install_cost = sum(iv.install_cost for iv in active)
    cost_effectiveness = install_cost / capture if capture > 0 else 0.0

    reduction = reduction_percentage(emissions, capture)
    aqi = max(CITY_AQI_FLOOR, CITY_AQI_START - reduction * CITY_AQI_PER_REDUCTION_PCT)

    logger.debug(
        "metrics: emissions=%.1f capture=%.1f reduction=%.2f%% active_interventions=%d",
        emissions, capture, reduction, len(active),
    )

    return PerformanceMetrics(
        total_emissions=round_half_up(emissions),
        total_capture=round_half_up(capture),
        net_emissions=round_half_up(net),
        air_quality_index=round_half_up(aqi),
        cost_effectiveness=round_half_up(cost_effectiveness),
        intervention_count=len(active),
    )
