"""
Intervention portfolio edits.

The planner's add / toggle / remove actions.  Each returns a new tuple
snapshot and leaves its input untouched, so a computation already running
over the previous snapshot is never affected.
"""

import uuid
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from models.sources import CaptureIntervention


def new_intervention_id(prefix: str = "intervention") -> str:
    """Generate a unique identifier for a newly placed intervention."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def intervention_from_template(
    template: dict,
    lat: float,
    lng: float,
    intervention_id: Optional[str] = None,
    name: Optional[str] = None,
    active: bool = True,
) -> CaptureIntervention:
    """
    Instantiate a catalog template at a position.

    Args:
        template: Catalog dict (see ``DataProvider.get_intervention_catalog``).
        lat, lng: Placement (degrees).
        intervention_id: Identifier to use; generated if omitted.
        name: Display name; defaults to the template name.
        active: Whether the new intervention starts switched on.
    """
    return CaptureIntervention(
        id=intervention_id or new_intervention_id(),
        category=template["category"],
        name=name or template["name"],
        lat=lat,
        lng=lng,
        capture_rate=template["capture_rate"],
        install_cost=template["install_cost"],
        annual_maintenance_cost=template["annual_maintenance_cost"],
        coverage_radius=template["coverage_radius"],
        active=active,
    )


def add_intervention(
    interventions: Sequence[CaptureIntervention],
    intervention: CaptureIntervention,
) -> Tuple[CaptureIntervention, ...]:
    """Append an intervention.  Raises ValueError on a duplicate id."""
    if any(iv.id == intervention.id for iv in interventions):
        raise ValueError(f"Intervention id already in portfolio: {intervention.id}")
    return tuple(interventions) + (intervention,)


def toggle_intervention(
    interventions: Sequence[CaptureIntervention],
    intervention_id: str,
) -> Tuple[CaptureIntervention, ...]:
    """Flip the ``active`` flag of one intervention, keeping list order.

    Raises:
        KeyError: If no intervention has that id.
    """
    if not any(iv.id == intervention_id for iv in interventions):
        raise KeyError(intervention_id)
    return tuple(
        replace(iv, active=not iv.active) if iv.id == intervention_id else iv
        for iv in interventions
    )


def remove_intervention(
    interventions: Sequence[CaptureIntervention],
    intervention_id: str,
) -> Tuple[CaptureIntervention, ...]:
    """Drop one intervention, keeping the order of the rest.

    Raises:
        KeyError: If no intervention has that id.
    """
    remaining = tuple(iv for iv in interventions if iv.id != intervention_id)
    if len(remaining) == len(interventions):
        raise KeyError(intervention_id)
    return remaining
