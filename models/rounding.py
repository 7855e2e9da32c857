"""Rounding helpers for reported metrics."""

import math

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding toward +inf.

    Python's built-in ``round`` uses banker's rounding, which would report
    e.g. 2.5 kg/h as 2.  Dashboards expect 3.
    """
    return int(math.floor(value + 0.5))


def round_half_up_to(value: float, decimals: int) -> float:
    """Half-up rounding to a fixed number of decimal places."""
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def round_half_up_array(values: np.ndarray) -> np.ndarray:
    """Vectorised ``round_half_up`` returning an integer array."""
    return np.floor(values + 0.5).astype(int)
