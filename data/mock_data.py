"""
Mock Data for the Urban CO2 Capture Planner.

Provides seed emission sources and capture interventions for the Pune
region (with two Mumbai anchors), the intervention catalog offered in the
planner, and default conditions.  Designed to be swapped out for real
inventory data later.
"""

from typing import List

from models.conditions import SimulationConfig
from models.grid import LatticeBounds
from models.sources import CaptureIntervention, EmissionSource


def get_emission_sources() -> List[EmissionSource]:
    """
    Return the seed emission sources.

    Returns:
        List of EmissionSource; rates in kg CO2/hour.
    """
    return [
        # Pune
        EmissionSource("pune-hinjawadi-traffic", "transportation",
                       "Hinjawadi IT Park Corridor", 18.5916, 73.7389, 2000),
        EmissionSource("pune-chakan-industrial", "industrial",
                       "Chakan MIDC Cluster", 18.7603, 73.8630, 5200),
        EmissionSource("pune-pcmc-bhosari", "industrial",
                       "PCMC Bhosari Industrial Estate", 18.6436, 73.8334, 3800),
        EmissionSource("pune-kharadi-corridor", "transportation",
                       "Kharadi IT Corridor Traffic", 18.5510, 73.9436, 1900),
        EmissionSource("pune-magarpatta-commercial", "commercial",
                       "Magarpatta-Hadapsar Commercial District", 18.5150, 73.9270, 1200),
        EmissionSource("pune-talegaon-industrial", "industrial",
                       "Talegaon Industrial Area", 18.7352, 73.6755, 2600),
        EmissionSource("pune-pcmc-ring-road-traffic", "transportation",
                       "PCMC Spine/Ring Road Traffic", 18.6186, 73.8037, 1700),
        EmissionSource("pune-hadapsar-residential", "residential",
                       "Hadapsar Residential Sector", 18.5005, 73.9340, 600),
        # Mumbai anchors
        EmissionSource("mumbai-expressway-1", "transportation",
                       "Mumbai Western Express Highway", 19.1136, 72.8697, 2500),
        EmissionSource("tps-mumbai", "industrial",
                       "Trombay Power Station", 19.0200, 72.9100, 8000),
    ]


def get_interventions() -> List[CaptureIntervention]:
    """
    Return the interventions already deployed at the start of a session.

    Returns:
        List of CaptureIntervention; capture in kg CO2/hour, costs in USD,
        coverage radius in meters.
    """
    return [
        CaptureIntervention("pune-chakan-roadside-capture", "roadside-capture",
                            "Chakan CO2 Capture Unit", 18.7606, 73.8625,
                            capture_rate=360, install_cost=135000,
                            annual_maintenance_cost=16500, coverage_radius=160),
        CaptureIntervention("pune-pcmc-green-wall", "vertical-garden",
                            "PCMC Bhosari Green Wall", 18.6436, 73.8334,
                            capture_rate=160, install_cost=55000,
                            annual_maintenance_cost=9000, coverage_radius=230),
        CaptureIntervention("pune-kharadi-green-corridor", "vertical-garden",
                            "Kharadi Green Corridor", 18.5510, 73.9436,
                            capture_rate=150, install_cost=50000,
                            annual_maintenance_cost=9500, coverage_radius=210),
        CaptureIntervention("pune-magarpatta-capture", "roadside-capture",
                            "Magarpatta CO2 Capture Unit", 18.5150, 73.9270,
                            capture_rate=300, install_cost=125000,
                            annual_maintenance_cost=15500, coverage_radius=150),
        CaptureIntervention("marine-drive-green-wall", "vertical-garden",
                            "Marine Drive Vertical Garden", 18.9340, 72.8238,
                            capture_rate=130, install_cost=47000,
                            annual_maintenance_cost=8200, coverage_radius=200),
    ]


def get_intervention_catalog() -> List[dict]:
    """
    Return the intervention templates a planner can deploy.

    Returns:
        List of dicts with keys: 'category', 'name', 'capture_rate',
        'install_cost', 'annual_maintenance_cost', 'coverage_radius',
        'description'.
    """
    return [
        {
            "category": "roadside-capture",
            "name": "Roadside CO2 Capture",
            "capture_rate": 300.0,
            "install_cost": 125000.0,
            "annual_maintenance_cost": 15000.0,
            "coverage_radius": 150.0,
            "description": "High-efficiency roadside units for traffic corridors",
        },
        {
            "category": "vertical-garden",
            "name": "Vertical Garden System",
            "capture_rate": 120.0,
            "install_cost": 45000.0,
            "annual_maintenance_cost": 8000.0,
            "coverage_radius": 200.0,
            "description": "Living walls with integrated CO2 absorption",
        },
        {
            "category": "biofilter",
            "name": "Biofilter Array",
            "capture_rate": 200.0,
            "install_cost": 75000.0,
            "annual_maintenance_cost": 12000.0,
            "coverage_radius": 180.0,
            "description": "Biological filtration systems for air purification",
        },
        {
            "category": "urban-forest",
            "name": "Urban Forest Patch",
            "capture_rate": 800.0,
            "install_cost": 200000.0,
            "annual_maintenance_cost": 25000.0,
            "coverage_radius": 500.0,
            "description": "Dense urban forestry for large-scale carbon capture",
        },
        {
            "category": "green-roof",
            "name": "Green Roof System",
            "capture_rate": 150.0,
            "install_cost": 90000.0,
            "annual_maintenance_cost": 10000.0,
            "coverage_radius": 300.0,
            "description": "Rooftop vegetation systems with air filtration",
        },
    ]


def get_default_config() -> SimulationConfig:
    """Conditions a new session starts with: light easterly wind, mild and humid, midday."""
    return SimulationConfig(
        wind_speed=3.2,
        wind_direction=90.0,
        temperature=22.0,
        humidity=65.0,
        time_of_day=12,
        traffic_density=0.8,
    )


def get_study_area() -> LatticeBounds:
    """Lattice covering the Pune sources at roughly 330 m resolution."""
    return LatticeBounds(
        min_lat=18.48,
        max_lat=18.78,
        min_lng=73.66,
        max_lng=73.96,
        step=0.003,
    )
