"""
Planar distance on a small patch of the Earth's surface.

Uses the equirectangular approximation: one degree of latitude is a fixed
number of meters, and longitude is scaled by the cosine of the latitude of
the point being evaluated.  Accurate to well under 1% across a city.
"""

import numpy as np
from config import METERS_PER_DEGREE


def planar_distance_m(cell_lat, cell_lng, point_lat: float, point_lng: float):
    """
    Distance in meters from lattice point(s) to a fixed point.

    Args:
        cell_lat, cell_lng: Evaluation coordinates (degrees).  Scalars or
            arrays of matching shape; the cosine correction uses these.
        point_lat, point_lng: Source or intervention position (degrees).

    Returns:
        Distance in meters, same shape as ``cell_lat``.
    """
    dx = (cell_lat - point_lat) * METERS_PER_DEGREE
    dy = (cell_lng - point_lng) * METERS_PER_DEGREE * np.cos(np.radians(cell_lat))
    return np.sqrt(dx ** 2 + dy ** 2)
