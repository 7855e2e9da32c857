"""
24-hour trend projection.

Re-scales the current aggregate totals with fixed rush-hour and night-time
multipliers to draw a daily trend line.  This is a deliberate approximation:
it does not recompute each source per hour, and its multipliers (1.4 / 0.4)
are flatter than the per-category time-of-day profiles.
"""

from typing import List

from models.rounding import round_half_up
from optimization.metrics import PerformanceMetrics
from config import (
    PROJECTION_RUSH_HOURS,
    PROJECTION_NIGHT_START,
    PROJECTION_NIGHT_END,
    PROJECTION_RUSH_EMISSION,
    PROJECTION_NIGHT_EMISSION,
    PROJECTION_NIGHT_CAPTURE,
)


def projection_multipliers(hour: int):
    """(emission, capture) multipliers for an hour of the day."""
    if any(lo <= hour <= hi for lo, hi in PROJECTION_RUSH_HOURS):
        return PROJECTION_RUSH_EMISSION, 1.0
    if hour >= PROJECTION_NIGHT_START or hour <= PROJECTION_NIGHT_END:
        return PROJECTION_NIGHT_EMISSION, PROJECTION_NIGHT_CAPTURE
    return 1.0, 1.0


def hourly_projection(metrics: PerformanceMetrics) -> List[dict]:
    """
    Project emissions, capture and net emissions for each hour 0-23.

    Args:
        metrics: Current aggregate metrics (the totals are re-scaled).

    Returns:
        List of 24 dicts with keys 'hour', 'emissions', 'capture', 'net'.
        'net' is the plain difference and can go negative when the
        projected capture exceeds projected emissions.
    """
    rows = []
    for hour in range(24):
        e_mult, c_mult = projection_multipliers(hour)
        emissions = metrics.total_emissions * e_mult
        capture = metrics.total_capture * c_mult
        rows.append({
            "hour": hour,
            "emissions": round_half_up(emissions),
            "capture": round_half_up(capture),
            "net": round_half_up(emissions - capture),
        })
    return rows
