"""
Emission source and capture intervention data models.

Both are immutable snapshots supplied by the caller for a single run.
Categories are closed enumerations; plain strings are accepted on
construction and coerced to the matching member.
"""

import math
from dataclasses import dataclass
from enum import Enum

from models.errors import ValidationError


class SourceCategory(str, Enum):
    """Kind of activity producing CO2."""

    TRANSPORTATION = "transportation"
    INDUSTRIAL = "industrial"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class InterventionCategory(str, Enum):
    """Kind of capture technology."""

    ROADSIDE_CAPTURE = "roadside-capture"
    VERTICAL_GARDEN = "vertical-garden"
    BIOFILTER = "biofilter"
    URBAN_FOREST = "urban-forest"
    GREEN_ROOF = "green-roof"


def _coerce_category(value, enum_cls, label: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Unknown {label} category '{value}'. Use one of: {allowed}."
        ) from None


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number, got {value}")


def _check_position(lat: float, lng: float) -> None:
    _check_finite("lat", lat)
    _check_finite("lng", lng)


def _check_non_negative(name: str, value: float) -> None:
    _check_finite(name, value)
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class EmissionSource:
    """A point source of CO2.

    Args:
        id: Stable identifier.
        category: One of ``SourceCategory`` (string values accepted).
        name: Display name.
        lat, lng: Position in decimal degrees.
        emission_rate: Base emission in kg CO2 per hour.
        active: Inactive sources are ignored by every computation.
    """

    id: str
    category: SourceCategory
    name: str
    lat: float
    lng: float
    emission_rate: float
    active: bool = True

    def __post_init__(self):
        object.__setattr__(
            self, "category", _coerce_category(self.category, SourceCategory, "source")
        )
        _check_position(self.lat, self.lng)
        _check_non_negative("emission_rate", self.emission_rate)

    @property
    def position(self):
        return (self.lat, self.lng)


@dataclass(frozen=True)
class CaptureIntervention:
    """A deployed (or candidate) carbon-capture installation.

    Args:
        id: Stable identifier.
        category: One of ``InterventionCategory`` (string values accepted).
        name: Display name.
        lat, lng: Position in decimal degrees.
        capture_rate: Nominal capture in kg CO2 per hour.
        install_cost: One-off installation cost (currency units).
        annual_maintenance_cost: Yearly upkeep (currency units).
        coverage_radius: Radius of local effect in meters (must be > 0).
        active: Inactive interventions are ignored by aggregate and
            spatial computations.
    """

    id: str
    category: InterventionCategory
    name: str
    lat: float
    lng: float
    capture_rate: float
    install_cost: float
    annual_maintenance_cost: float
    coverage_radius: float
    active: bool = True

    def __post_init__(self):
        object.__setattr__(
            self,
            "category",
            _coerce_category(self.category, InterventionCategory, "intervention"),
        )
        _check_position(self.lat, self.lng)
        _check_non_negative("capture_rate", self.capture_rate)
        _check_non_negative("install_cost", self.install_cost)
        _check_non_negative("annual_maintenance_cost", self.annual_maintenance_cost)
        _check_finite("coverage_radius", self.coverage_radius)
        if self.coverage_radius <= 0:
            raise ValidationError(
                f"coverage_radius must be > 0, got {self.coverage_radius}"
            )

    @property
    def position(self):
        return (self.lat, self.lng)
