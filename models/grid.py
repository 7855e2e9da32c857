"""
Lattice bounds and grid cell data models.
"""

import math
from dataclasses import dataclass

import numpy as np

from models.errors import ValidationError
from config import DEFAULT_BOUNDS, DEFAULT_GRID_STEP_DEG, LATTICE_EPSILON


@dataclass(frozen=True)
class LatticeBounds:
    """Rectangular geographic lattice, inclusive on both ends.

    Args:
        min_lat, max_lat: Latitude extent (degrees).
        min_lng, max_lng: Longitude extent (degrees).
        step: Spacing between lattice points (degrees, > 0).
    """

    min_lat: float = DEFAULT_BOUNDS["min_lat"]
    max_lat: float = DEFAULT_BOUNDS["max_lat"]
    min_lng: float = DEFAULT_BOUNDS["min_lng"]
    max_lng: float = DEFAULT_BOUNDS["max_lng"]
    step: float = DEFAULT_GRID_STEP_DEG

    def __post_init__(self):
        for name in ("min_lat", "max_lat", "min_lng", "max_lng", "step"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be a finite number, got {value}")
        if self.step <= 0:
            raise ValidationError(f"step must be > 0, got {self.step}")
        if self.min_lat > self.max_lat:
            raise ValidationError(
                f"min_lat ({self.min_lat}) must not exceed max_lat ({self.max_lat})"
            )
        if self.min_lng > self.max_lng:
            raise ValidationError(
                f"min_lng ({self.min_lng}) must not exceed max_lng ({self.max_lng})"
            )

    def _axis(self, lo: float, hi: float) -> np.ndarray:
        # Count points instead of accumulating steps so the inclusive
        # end point survives floating-point drift.
        n = int(math.floor((hi - lo) / self.step + LATTICE_EPSILON)) + 1
        return lo + np.arange(n) * self.step

    def latitudes(self) -> np.ndarray:
        return self._axis(self.min_lat, self.max_lat)

    def longitudes(self) -> np.ndarray:
        return self._axis(self.min_lng, self.max_lng)

    @property
    def shape(self):
        """(rows, cols) = (number of latitudes, number of longitudes)."""
        return len(self.latitudes()), len(self.longitudes())


@dataclass(frozen=True)
class GridCell:
    """One lattice point of the concentration field."""

    id: str
    lat: float
    lng: float
    co2_level: int      # ppm, never below the capture floor
    air_quality: int    # 0-500 index

    @property
    def position(self):
        return (self.lat, self.lng)


def cell_id(row: int, col: int) -> str:
    """Identity of the cell at lattice row/column."""
    return f"r{row}-c{col}"
