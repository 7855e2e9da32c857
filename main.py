"""
Urban CO2 Capture Planner — Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os
import logging

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

from data.interfaces import MockDataProvider
from data.portfolio import (
    add_intervention,
    intervention_from_template,
    remove_intervention,
    toggle_intervention,
)
from models.conditions import SimulationConfig
from models.errors import ValidationError
from optimization.concentration_field import cached_concentration_field, grid_cells_from_field
from optimization.impact import predict_intervention_impact
from optimization.metrics import compute_performance_metrics
from optimization.projection import hourly_projection
from optimization.summary import (
    aqi_category,
    capture_outlook,
    emissions_by_category,
    find_nearest_source,
    portfolio_costs,
)
from visualization.plots import (
    create_concentration_figure,
    create_hourly_trend_figure,
    create_source_mix_figure,
    create_capture_rate_figure,
)
from config import (
    WIND_SPEED_RANGE,
    TEMPERATURE_RANGE,
    HUMIDITY_RANGE,
    TRAFFIC_DENSITY_RANGE,
    DEFAULT_FIELD_WORKERS,
)

logging.basicConfig(level=logging.INFO)

# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Urban CO2 Capture Planner",
    page_icon="🌿",
    layout="wide",
)

st.title("Urban CO2 Capture Planner")
st.markdown(
    "Explore how carbon-capture interventions offset city emission sources "
    "under changing weather and traffic conditions."
)

provider = MockDataProvider()
sources = tuple(provider.get_emission_sources())
catalog = provider.get_intervention_catalog()
study_area = provider.get_study_area()
defaults = provider.get_default_config()

if "interventions" not in st.session_state:
    st.session_state["interventions"] = tuple(provider.get_interventions())

# ── Sidebar Controls ─────────────────────────────────────────────────────────

st.sidebar.header("Conditions")

wind_speed = st.sidebar.slider(
    "Wind Speed (m/s)",
    min_value=WIND_SPEED_RANGE[0],
    max_value=WIND_SPEED_RANGE[1],
    value=defaults.wind_speed,
    step=0.1,
)
wind_direction = st.sidebar.slider(
    "Wind Direction (degrees)",
    min_value=0,
    max_value=360,
    value=int(defaults.wind_direction),
    step=5,
)
temperature = st.sidebar.slider(
    "Temperature (°C)",
    min_value=TEMPERATURE_RANGE[0],
    max_value=TEMPERATURE_RANGE[1],
    value=defaults.temperature,
    step=0.5,
)
humidity = st.sidebar.slider(
    "Humidity (%)",
    min_value=HUMIDITY_RANGE[0],
    max_value=HUMIDITY_RANGE[1],
    value=defaults.humidity,
    step=1.0,
)
time_of_day = st.sidebar.slider("Time of Day (hour)", 0, 23, defaults.time_of_day)
traffic_density = st.sidebar.slider(
    "Traffic Density",
    min_value=TRAFFIC_DENSITY_RANGE[0],
    max_value=TRAFFIC_DENSITY_RANGE[1],
    value=defaults.traffic_density,
    step=0.05,
)

config = SimulationConfig(
    wind_speed=wind_speed,
    wind_direction=float(wind_direction),
    temperature=temperature,
    humidity=humidity,
    time_of_day=time_of_day,
    traffic_density=traffic_density,
)

# ── Intervention Catalog & Preview ───────────────────────────────────────────

st.sidebar.header("Deploy Intervention")

template_names = [t["name"] for t in catalog]
selected_name = st.sidebar.selectbox("Intervention Type", template_names)
template = next(t for t in catalog if t["name"] == selected_name)
st.sidebar.caption(template.get("description", ""))

place_lat = st.sidebar.number_input(
    "Latitude", min_value=study_area.min_lat, max_value=study_area.max_lat,
    value=(study_area.min_lat + study_area.max_lat) / 2, format="%.4f",
)
place_lng = st.sidebar.number_input(
    "Longitude", min_value=study_area.min_lng, max_value=study_area.max_lng,
    value=(study_area.min_lng + study_area.max_lng) / 2, format="%.4f",
)

try:
    candidate = intervention_from_template(template, place_lat, place_lng)
except ValidationError as exc:
    st.sidebar.error(str(exc))
    candidate = None

if candidate is not None:
    impact = predict_intervention_impact(candidate, config)
    nearest = find_nearest_source(candidate, sources)
    st.sidebar.metric("CO2 Reduction", f"{impact.co2_reduction} kg/h")
    st.sidebar.metric("AQI Improvement", f"{impact.aqi_improvement}")
    st.sidebar.metric(
        "10-yr Cost per kg/yr",
        "unbounded" if impact.is_unbounded else f"${impact.cost_benefit:.2f}",
    )
    if nearest is not None:
        st.sidebar.caption(f"Nearest source: {nearest.name}")

    if st.sidebar.button("Deploy"):
        st.session_state["interventions"] = add_intervention(
            st.session_state["interventions"], candidate,
        )
        st.rerun()

interventions = st.session_state["interventions"]

# ── Metrics ──────────────────────────────────────────────────────────────────

metrics = compute_performance_metrics(sources, interventions, config)
outlook = capture_outlook(metrics)
costs = portfolio_costs(interventions)

col1, col2, col3, col4 = st.columns(4)
col1.metric("Total Emissions", f"{metrics.total_emissions:,} kg/h")
col2.metric("CO2 Captured", f"{metrics.total_capture:,} kg/h")
col3.metric("Net Emissions", f"{metrics.net_emissions:,} kg/h")
col4.metric(
    "Air Quality Index",
    metrics.air_quality_index,
    help=aqi_category(metrics.air_quality_index),
)

col1, col2, col3, col4 = st.columns(4)
col1.metric("Reduction", f"{outlook['efficiency_pct']:.1f}%")
col2.metric("Active Interventions", metrics.intervention_count)
col3.metric("Cost per kg/h", f"${metrics.cost_effectiveness:,}")
col4.metric("Annual Capture", f"{outlook['annual_tonnes']:,.0f} t")
st.caption(
    f"Total investment ${costs['total_install_cost']:,.0f} · "
    f"annual maintenance ${costs['annual_maintenance_cost']:,.0f} · "
    f"daily capture {outlook['daily_tonnes']:.1f} t"
)

# ── Map ──────────────────────────────────────────────────────────────────────

st.subheader("CO2 Concentration")
grid_lat, grid_lng, co2_ppm, aqi_field = cached_concentration_field(
    study_area, sources, interventions, config, max_workers=DEFAULT_FIELD_WORKERS,
)
st.plotly_chart(
    create_concentration_figure(grid_lat, grid_lng, co2_ppm, sources, interventions),
    use_container_width=True,
)

with st.expander("Grid cells"):
    cells = grid_cells_from_field(grid_lat, grid_lng, co2_ppm, aqi_field)
    hotspots = sorted(cells, key=lambda c: c.co2_level, reverse=True)[:10]
    st.dataframe(
        [
            {"id": c.id, "lat": c.lat, "lng": c.lng,
             "co2_ppm": c.co2_level, "air_quality": c.air_quality}
            for c in hotspots
        ],
        use_container_width=True,
    )

# ── Analytics ────────────────────────────────────────────────────────────────

st.subheader("24-Hour Trend")
st.caption("Approximation: current totals re-scaled by rush-hour and night multipliers.")
st.plotly_chart(create_hourly_trend_figure(hourly_projection(metrics)), use_container_width=True)

left, right = st.columns(2)
with left:
    st.markdown("**Emissions by Source Type**")
    st.plotly_chart(create_source_mix_figure(emissions_by_category(sources)), use_container_width=True)
with right:
    st.markdown("**Intervention Capture Rates**")
    st.plotly_chart(create_capture_rate_figure(interventions), use_container_width=True)

# ── Portfolio ────────────────────────────────────────────────────────────────

st.subheader("Interventions")
for iv in interventions:
    c_name, c_toggle, c_remove = st.columns([6, 1, 1])
    status = "active" if iv.active else "paused"
    c_name.write(
        f"**{iv.name}** ({iv.category.value}, {status}) — "
        f"{iv.capture_rate:.0f} kg/h, {iv.coverage_radius:.0f} m, "
        f"${iv.install_cost:,.0f}"
    )
    if c_toggle.button("Toggle", key=f"toggle-{iv.id}"):
        st.session_state["interventions"] = toggle_intervention(interventions, iv.id)
        st.rerun()
    if c_remove.button("Remove", key=f"remove-{iv.id}"):
        st.session_state["interventions"] = remove_intervention(interventions, iv.id)
        st.rerun()
