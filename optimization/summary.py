"""
Dashboard summaries derived from the metrics and the current snapshots.
"""

from typing import Dict, Optional, Sequence

import numpy as np

from models.geo import planar_distance_m
from models.sources import CaptureIntervention, EmissionSource
from optimization.metrics import PerformanceMetrics, reduction_percentage
from config import AQI_CATEGORIES, AQI_CATEGORY_WORST, HOURS_PER_YEAR


def aqi_category(aqi: float) -> str:
    """Label for an air-quality index value."""
    for upper, label in AQI_CATEGORIES:
        if aqi <= upper:
            return label
    return AQI_CATEGORY_WORST


def emissions_by_category(sources: Sequence[EmissionSource]) -> Dict[str, float]:
    """Base emission rate (kg/h) of active sources per category.

    Uses the unadjusted rates, as shown in the source-mix breakdown.
    """
    totals: Dict[str, float] = {}
    for src in sources:
        if src.active:
            key = src.category.value
            totals[key] = totals.get(key, 0.0) + src.emission_rate
    return totals


def portfolio_costs(interventions: Sequence[CaptureIntervention]) -> Dict[str, float]:
    """Install and annual maintenance totals for active interventions."""
    active = [iv for iv in interventions if iv.active]
    return {
        "total_install_cost": float(sum(iv.install_cost for iv in active)),
        "annual_maintenance_cost": float(sum(iv.annual_maintenance_cost for iv in active)),
    }


def capture_outlook(metrics: PerformanceMetrics) -> Dict[str, float]:
    """
    Daily and annual capture in tonnes, and capture as a share of emissions.

    Returns:
        Dict with keys:
            daily_tonnes: capture * 24 / 1000.
            annual_tonnes: capture * 24 * 365 / 1000.
            efficiency_pct: capture / emissions * 100 (0 with no emissions).
    """
    return {
        "daily_tonnes": metrics.total_capture * 24 / 1000.0,
        "annual_tonnes": metrics.total_capture * HOURS_PER_YEAR / 1000.0,
        "efficiency_pct": reduction_percentage(
            metrics.total_emissions, metrics.total_capture,
        ),
    }


def find_nearest_source(
    intervention: CaptureIntervention,
    sources: Sequence[EmissionSource],
) -> Optional[EmissionSource]:
    """
    Return the active source closest to an intervention.

    Returns:
        The nearest active source, or None if there are none.
    """
    active = [s for s in sources if s.active]
    if not active:
        return None

    src_lat = np.array([s.lat for s in active])
    src_lng = np.array([s.lng for s in active])
    # Measure from each source so the cosine correction uses the source latitude
    distances = planar_distance_m(src_lat, src_lng, intervention.lat, intervention.lng)
    return active[int(np.argmin(distances))]
