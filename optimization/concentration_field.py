"""
Concentration Field Generator.

Evaluates CO2 concentration and a local air-quality index at every point
of a geographic lattice, from all active emission sources and capture
interventions under the current conditions.

Sources add CO2 with a linear falloff to zero at 2 km.  Interventions then
remove CO2 within their coverage radius, each one clamped at the 380 ppm
floor before the next is applied, in the order given.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple

import numpy as np
import streamlit as st

from models.conditions import SimulationConfig
from models.geo import planar_distance_m
from models.grid import GridCell, LatticeBounds, cell_id
from models.rounding import round_half_up_array
from models.sources import CaptureIntervention, EmissionSource
from config import (
    BACKGROUND_CO2_PPM,
    CO2_FLOOR_PPM,
    SOURCE_FALLOFF_M,
    EMISSION_KG_H_PER_PPM,
    CAPTURE_KG_H_PER_PPM,
    AQI_BASELINE,
    AQI_PER_PPM,
    AQI_MIN,
    AQI_MAX,
    CACHE_MAX_ENTRIES,
    DEFAULT_FIELD_WORKERS,
)

logger = logging.getLogger(__name__)


def create_lattice(bounds: LatticeBounds) -> Tuple[np.ndarray, np.ndarray]:
    """
    Create the latitude/longitude meshgrid for a lattice.

    Rows run over latitude and columns over longitude, so flattening in C
    order visits cells latitude-outer, longitude-inner.

    Returns:
        (LAT, LNG) arrays of shape (rows, cols) in degrees.
    """
    return np.meshgrid(bounds.latitudes(), bounds.longitudes(), indexing="ij")


def _field_block(
    lats: np.ndarray,
    lngs: np.ndarray,
    sources: Sequence[EmissionSource],
    interventions: Sequence[CaptureIntervention],
    config: SimulationConfig,
) -> np.ndarray:
    """CO2 (ppm, unrounded) for the rows ``lats`` of the lattice."""
    LAT, LNG = np.meshgrid(lats, lngs, indexing="ij")
    co2 = np.full(LAT.shape, BACKGROUND_CO2_PPM, dtype=float)

    for src in sources:
        distance = planar_distance_m(LAT, LNG, src.lat, src.lng)
        influence = np.maximum(0.0, 1.0 - distance / SOURCE_FALLOFF_M)
        co2 += (src.emission_rate / EMISSION_KG_H_PER_PPM) * influence * config.traffic_density

    # Order matters here: each intervention is clamped at the floor before
    # the next one is applied.
    for iv in interventions:
        distance = planar_distance_m(LAT, LNG, iv.lat, iv.lng)
        covered = distance <= iv.coverage_radius
        if not np.any(covered):
            continue
        effect = (iv.capture_rate / CAPTURE_KG_H_PER_PPM) * (1.0 - distance / iv.coverage_radius)
        co2 = np.where(covered, np.maximum(CO2_FLOOR_PPM, co2 - effect), co2)

    return co2


def air_quality_from_co2(co2_ppm: np.ndarray) -> np.ndarray:
    """Local air-quality index from concentration, clipped to [0, 500]."""
    return np.clip((co2_ppm - BACKGROUND_CO2_PPM) * AQI_PER_PPM + AQI_BASELINE, AQI_MIN, AQI_MAX)


def compute_concentration_field(
    bounds: LatticeBounds,
    sources: Sequence[EmissionSource],
    interventions: Sequence[CaptureIntervention],
    config: SimulationConfig,
    max_workers: int = DEFAULT_FIELD_WORKERS,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute the CO2 and air-quality fields over a lattice.

    Cells are independent, so with ``max_workers > 1`` the latitude rows are
    split into contiguous blocks and evaluated on a thread pool.  Every
    block sees the same interventions in the same order, so the result is
    identical to the serial computation.

    Args:
        bounds: Lattice extent and step.
        sources: Emission sources; inactive ones are skipped.
        interventions: Capture interventions; inactive ones are skipped.
            List order fixes the order in which capture is applied.
        config: Condition set for this run.
        max_workers: Threads to use (1 = compute inline).

    Returns:
        (LAT, LNG, co2_ppm, air_quality), all 2D arrays of shape
        (rows, cols), values unrounded.
    """
    lats = bounds.latitudes()
    lngs = bounds.longitudes()
    active_sources = [s for s in sources if s.active]
    active_interventions = [iv for iv in interventions if iv.active]

    logger.debug(
        "field: %d x %d cells, %d sources, %d interventions, %d worker(s)",
        len(lats), len(lngs), len(active_sources), len(active_interventions), max_workers,
    )

    if max_workers <= 1 or len(lats) < 2:
        co2 = _field_block(lats, lngs, active_sources, active_interventions, config)
    else:
        blocks = np.array_split(lats, min(max_workers, len(lats)))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(
                lambda block: _field_block(
                    block, lngs, active_sources, active_interventions, config,
                ),
                blocks,
            ))
        co2 = np.vstack(results)

    LAT, LNG = create_lattice(bounds)
    return LAT, LNG, co2, air_quality_from_co2(co2)


def generate_grid_cells(
    bounds: LatticeBounds,
    sources: Sequence[EmissionSource],
    interventions: Sequence[CaptureIntervention],
    config: SimulationConfig,
    max_workers: int = DEFAULT_FIELD_WORKERS,
) -> List[GridCell]:
    """
    Produce one GridCell per lattice point, latitude-outer / longitude-inner.

    CO2 and air quality are rounded half-up to integers.
    """
    return grid_cells_from_field(*compute_concentration_field(
        bounds, sources, interventions, config, max_workers=max_workers,
    ))


def grid_cells_from_field(
    LAT: np.ndarray,
    LNG: np.ndarray,
    co2: np.ndarray,
    aqi: np.ndarray,
) -> List[GridCell]:
    """Turn the raw arrays of ``compute_concentration_field`` into GridCells."""
    co2_int = round_half_up_array(co2)
    aqi_int = round_half_up_array(aqi)

    rows, cols = LAT.shape
    return [
        GridCell(
            id=cell_id(i, j),
            lat=float(LAT[i, j]),
            lng=float(LNG[i, j]),
            co2_level=int(co2_int[i, j]),
            air_quality=int(aqi_int[i, j]),
        )
        for i in range(rows)
        for j in range(cols)
    ]


@st.cache_data(max_entries=CACHE_MAX_ENTRIES)
def cached_concentration_field(
    bounds: LatticeBounds,
    sources_key: Tuple[EmissionSource, ...],
    interventions_key: Tuple[CaptureIntervention, ...],
    config: SimulationConfig,
    max_workers: int = DEFAULT_FIELD_WORKERS,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Cached wrapper around compute_concentration_field.

    Takes tuples of the (frozen) snapshots so Streamlit can hash the
    arguments for its cache.
    """
    return compute_concentration_field(
        bounds=bounds,
        sources=list(sources_key),
        interventions=list(interventions_key),
        config=config,
        max_workers=max_workers,
    )
