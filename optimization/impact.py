"""
Intervention Impact Predictor.

Projects the standalone effect of a single candidate intervention under the
current weather, for "what if I add this" previews before it is committed
to the portfolio.
"""

import math
from dataclasses import dataclass, asdict

from models.conditions import SimulationConfig
from models.modifiers import weather_modifier
from models.rounding import round_half_up, round_half_up_to
from models.sources import CaptureIntervention
from config import (
    AQI_IMPROVEMENT_PER_KG_H,
    HOURS_PER_YEAR,
    PLANNING_HORIZON_YEARS,
)

# Reported cost-benefit when the intervention captures nothing: every unit of
# spend buys zero capture.
UNBOUNDED_COST_BENEFIT = math.inf


@dataclass(frozen=True)
class InterventionImpact:
    """Projected effect of one intervention.

    Attributes:
        co2_reduction: Weather-adjusted capture (kg/h), whole number.
        aqi_improvement: Expected drop in the air-quality index, whole number.
        cost_benefit: Ten-year cost per kg captured per year, two decimals,
            or ``UNBOUNDED_COST_BENEFIT`` when nothing is captured.
    """

    co2_reduction: int
    aqi_improvement: int
    cost_benefit: float

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.cost_benefit)

    def to_dict(self) -> dict:
        return asdict(self)


def predict_intervention_impact(
    intervention: CaptureIntervention,
    config: SimulationConfig,
) -> InterventionImpact:
    """
    Project the impact of deploying ``intervention`` on its own.

    The ``active`` flag is ignored: a preview describes the candidate as if
    it were switched on.

    Model:
        reduction   = capture_rate * weather_modifier
        annual      = reduction * 24 * 365
        total_cost  = install_cost + annual_maintenance_cost * 10
        cost_benefit = total_cost / annual
    """
    co2_reduction = intervention.capture_rate * weather_modifier(config)
    aqi_improvement = co2_reduction * AQI_IMPROVEMENT_PER_KG_H
    annual_capture = co2_reduction * HOURS_PER_YEAR
    total_cost = (
        intervention.install_cost
        + intervention.annual_maintenance_cost * PLANNING_HORIZON_YEARS
    )

    if annual_capture > 0:
        cost_benefit = round_half_up_to(total_cost / annual_capture, 2)
    else:
        cost_benefit = UNBOUNDED_COST_BENEFIT

    return InterventionImpact(
        co2_reduction=round_half_up(co2_reduction),
        aqi_improvement=round_half_up(aqi_improvement),
        cost_benefit=cost_benefit,
    )
