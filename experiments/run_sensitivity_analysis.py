#!/usr/bin/env python3
"""
One-at-a-Time Sensitivity Analysis.

Sweeps individual condition tunables while holding the others at their
default values.  For each value, computes city-wide metrics over the seed
sources and interventions and reports capture, net emissions and AQI.

Usage:
    python experiments/run_sensitivity_analysis.py
    python experiments/run_sensitivity_analysis.py --steps 9 --field
"""

import sys
import os
import argparse
import logging
import time
from dataclasses import replace

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import numpy as np

from data.mock_data import (
    get_default_config,
    get_emission_sources,
    get_interventions,
    get_study_area,
)
from optimization.concentration_field import compute_concentration_field
from optimization.metrics import compute_performance_metrics
from config import (
    WIND_SPEED_RANGE,
    TEMPERATURE_RANGE,
    HUMIDITY_RANGE,
    TIME_OF_DAY_RANGE,
    TRAFFIC_DENSITY_RANGE,
)


# ---------------------------------------------------------------------------
# Parameter sweep definitions
# ---------------------------------------------------------------------------

PARAM_RANGES = {
    "wind_speed": WIND_SPEED_RANGE,
    "temperature": TEMPERATURE_RANGE,
    "humidity": HUMIDITY_RANGE,
    "time_of_day": TIME_OF_DAY_RANGE,
    "traffic_density": TRAFFIC_DENSITY_RANGE,
}


def sweep_values(param: str, steps: int) -> list:
    """Evenly spaced values across a tunable's declared range."""
    lo, hi = PARAM_RANGES[param]
    values = np.linspace(lo, hi, steps)
    if param == "time_of_day":
        return sorted({int(round(v)) for v in values})
    return [float(v) for v in values]


# ---------------------------------------------------------------------------
# Single run helper
# ---------------------------------------------------------------------------

def run_single(config, sources, interventions, bounds=None) -> dict:
    """Compute metrics (and optionally the field peak) for one config."""
    metrics = compute_performance_metrics(sources, interventions, config)
    row = metrics.to_dict()
    if bounds is not None:
        _, _, co2, _ = compute_concentration_field(bounds, sources, interventions, config)
        row["peak_co2_ppm"] = float(co2.max())
        row["min_co2_ppm"] = float(co2.min())
    return row


def run_sensitivity(steps: int, include_field: bool, verbose: bool = True) -> list:
    """Run every sweep and return one row per (parameter, value)."""
    sources = get_emission_sources()
    interventions = get_interventions()
    base = get_default_config()
    bounds = get_study_area() if include_field else None

    all_rows = []
    for param in PARAM_RANGES:
        if verbose:
            print(f"\n{'='*70}")
            print(f"Sweeping {param}")
            print(f"{'='*70}")
            print(f"  {'value':>8}  {'capture':>8}  {'net':>8}  {'AQI':>5}")

        for value in sweep_values(param, steps):
            config = replace(base, **{param: value})
            t0 = time.time()
            row = run_single(config, sources, interventions, bounds)
            elapsed = time.time() - t0
            row.update({"parameter": param, "value": value})
            all_rows.append(row)

            if verbose:
                print(
                    f"  {value:>8.2f}  "
                    f"{row['total_capture']:>8d}  "
                    f"{row['net_emissions']:>8d}  "
                    f"{row['air_quality_index']:>5d}"
                    f"  ({elapsed:.2f}s)"
                )

    return all_rows


def print_summary(rows: list):
    """Print the spread each tunable causes in net emissions."""
    print(f"\n\n{'='*70}")
    print("SENSITIVITY ANALYSIS SUMMARY")
    print(f"{'='*70}")

    params = {}
    for row in rows:
        params.setdefault(row["parameter"], []).append(row)

    for param_name, param_rows in params.items():
        net_vals = [r["net_emissions"] for r in param_rows]
        val_labels = [r["value"] for r in param_rows]
        best_idx = int(np.argmin(net_vals))
        print(f"\n  {param_name}:")
        print(f"    Lowest net emissions at {val_labels[best_idx]} "
              f"({net_vals[best_idx]} kg/h)")
        print(f"    Range: {min(net_vals)} to {max(net_vals)} kg/h")


def main():
    parser = argparse.ArgumentParser(description="One-at-a-Time Sensitivity Analysis")
    parser.add_argument("--steps", type=int, default=5, help="Values per parameter")
    parser.add_argument("--field", action="store_true",
                        help="Also evaluate the concentration field over the study area")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-value output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    print("Sensitivity Analysis")
    print(f"Steps: {args.steps}, Field: {args.field}")
    print(f"Parameters: {list(PARAM_RANGES.keys())}")

    rows = run_sensitivity(
        steps=args.steps,
        include_field=args.field,
        verbose=not args.quiet,
    )

    print_summary(rows)
    print(f"\nTotal: {len(rows)} runs completed.")


if __name__ == "__main__":
    main()
