"""
Visualization module for the Urban CO2 Capture Planner.

Provides Plotly-based interactive plots for the Streamlit interface.
"""

from typing import Dict, List, Sequence

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from models.sources import CaptureIntervention, EmissionSource
from config import METERS_PER_DEGREE

_CATEGORY_COLORS = {
    "transportation": "rgba(239, 68, 68, 0.8)",
    "industrial": "rgba(245, 158, 11, 0.8)",
    "residential": "rgba(59, 130, 246, 0.8)",
    "commercial": "rgba(139, 92, 246, 0.8)",
}


def _coverage_ring(iv: CaptureIntervention, points: int = 48):
    """(lats, lngs) of a closed circle at the intervention's coverage radius."""
    theta = np.linspace(0.0, 2.0 * np.pi, points)
    dlat = iv.coverage_radius / METERS_PER_DEGREE * np.cos(theta)
    dlng = iv.coverage_radius / (METERS_PER_DEGREE * np.cos(np.radians(iv.lat))) * np.sin(theta)
    return iv.lat + dlat, iv.lng + dlng


def create_concentration_figure(
    grid_lat: np.ndarray,
    grid_lng: np.ndarray,
    co2_ppm: np.ndarray,
    sources: Sequence[EmissionSource],
    interventions: Sequence[CaptureIntervention],
) -> go.Figure:
    """Create a full-width CO2 heatmap with source and intervention markers.

    Args:
        grid_lat, grid_lng: 2D lattice from ``compute_concentration_field``.
        co2_ppm: 2D concentration array of the same shape.
        sources: Sources to mark (inactive ones are drawn hollow).
        interventions: Interventions to mark with their coverage rings.
    """
    fig = make_subplots(rows=1, cols=1)

    fig.add_trace(
        go.Heatmap(
            x=grid_lng[0, :],
            y=grid_lat[:, 0],
            z=co2_ppm,
            colorscale="YlOrRd",
            colorbar=dict(title="CO2 (ppm)"),
            name="CO2",
            hovertemplate="lat: %{y:.4f}<br>lng: %{x:.4f}<br>CO2: %{z:.1f} ppm<extra></extra>",
        ),
        row=1, col=1,
    )

    if sources:
        fig.add_trace(
            go.Scatter(
                x=[s.lng for s in sources],
                y=[s.lat for s in sources],
                mode="markers",
                marker=dict(
                    size=11,
                    symbol=["circle" if s.active else "circle-open" for s in sources],
                    color=[_CATEGORY_COLORS[s.category.value] for s in sources],
                    line=dict(width=1, color="black"),
                ),
                text=[f"{s.name} ({s.emission_rate:.0f} kg/h)" for s in sources],
                name="Emission Sources",
                hovertemplate="%{text}<extra></extra>",
            ),
            row=1, col=1,
        )

    for iv in interventions:
        ring_lat, ring_lng = _coverage_ring(iv)
        fig.add_trace(
            go.Scatter(
                x=ring_lng,
                y=ring_lat,
                mode="lines",
                line=dict(color="green" if iv.active else "gray", width=1, dash="dot"),
                showlegend=False,
                hoverinfo="skip",
            ),
            row=1, col=1,
        )

    if interventions:
        fig.add_trace(
            go.Scatter(
                x=[iv.lng for iv in interventions],
                y=[iv.lat for iv in interventions],
                mode="markers",
                marker=dict(
                    size=10,
                    symbol="diamond",
                    color=["lime" if iv.active else "gray" for iv in interventions],
                    line=dict(width=1, color="black"),
                ),
                text=[f"{iv.name} ({iv.capture_rate:.0f} kg/h)" for iv in interventions],
                name="Capture Interventions",
                hovertemplate="%{text}<extra></extra>",
            ),
            row=1, col=1,
        )

    fig.update_layout(
        height=650,
        legend=dict(orientation="h", yanchor="bottom", y=-0.15, xanchor="center", x=0.5),
        margin=dict(l=60, r=60, t=40, b=80),
    )
    fig.update_xaxes(title_text="Longitude")
    fig.update_yaxes(title_text="Latitude", scaleanchor="x")

    return fig


def create_hourly_trend_figure(projection: List[dict]) -> go.Figure:
    """Line chart of projected emissions, capture and net over 24 hours."""
    hours = [f"{row['hour']}:00" for row in projection]
    fig = go.Figure()
    for key, label, color in (
        ("emissions", "Total Emissions", "rgb(239, 68, 68)"),
        ("capture", "CO2 Captured", "rgb(34, 197, 94)"),
        ("net", "Net Emissions", "rgb(59, 130, 246)"),
    ):
        fig.add_trace(go.Scatter(
            x=hours,
            y=[row[key] for row in projection],
            mode="lines+markers",
            name=label,
            line=dict(color=color),
        ))
    fig.update_layout(
        height=380,
        margin=dict(l=40, r=20, t=40, b=40),
        yaxis=dict(title="kg CO2 / hour", rangemode="tozero"),
    )
    return fig


def create_source_mix_figure(by_category: Dict[str, float]) -> go.Figure:
    """Donut of base emission rate per source category."""
    labels = list(by_category.keys())
    fig = go.Figure(go.Pie(
        labels=[label.capitalize() for label in labels],
        values=[by_category[label] for label in labels],
        hole=0.5,
        marker=dict(colors=[_CATEGORY_COLORS.get(label, "gray") for label in labels]),
    ))
    fig.update_layout(height=320, margin=dict(l=20, r=20, t=30, b=20))
    return fig


def create_capture_rate_figure(interventions: Sequence[CaptureIntervention]) -> go.Figure:
    """Bar chart of nominal capture rate for each active intervention."""
    active = [iv for iv in interventions if iv.active]
    fig = go.Figure(go.Bar(
        x=[iv.name for iv in active],
        y=[iv.capture_rate for iv in active],
        marker_color="rgba(34, 197, 94, 0.8)",
        name="Capture Rate (kg/h)",
    ))
    fig.update_layout(
        height=320,
        margin=dict(l=40, r=20, t=30, b=80),
        yaxis=dict(title="kg CO2 / hour", rangemode="tozero"),
    )
    return fig
