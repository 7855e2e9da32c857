"""
Global configuration and constants for the Urban CO2 Capture Planner.
"""

# --- Atmosphere ---
BACKGROUND_CO2_PPM = 400.0     # Urban background concentration (ppm)
CO2_FLOOR_PPM = 380.0          # Capture cannot deplete a cell below this (ppm)

# --- Geometry ---
METERS_PER_DEGREE = 111000.0   # Equirectangular approximation (m per degree)

# --- Dispersion ---
SOURCE_FALLOFF_M = 2000.0      # Source influence decays linearly to zero here (m)
EMISSION_KG_H_PER_PPM = 1000.0  # kg/h of emission adding 1 ppm at zero distance
CAPTURE_KG_H_PER_PPM = 1000.0   # kg/h of capture removing 1 ppm at the centre

# --- Air Quality ---
AQI_BASELINE = 50.0            # Cell AQI at background concentration
AQI_PER_PPM = 0.5              # Cell AQI gained per ppm above background
AQI_MIN = 0.0
AQI_MAX = 500.0
CITY_AQI_START = 150.0         # City-wide index with no capture
CITY_AQI_FLOOR = 50.0          # City-wide index never reported below this
CITY_AQI_PER_REDUCTION_PCT = 1.5

# --- Weather modifier ---
WEATHER_WIND_PENALTY = 0.02        # Per m/s of wind
WEATHER_TEMP_PENALTY = 0.2         # Applied outside the comfortable band
WEATHER_TEMP_LOW_C = 5.0
WEATHER_TEMP_HIGH_C = 35.0
WEATHER_HUMIDITY_REFERENCE = 50.0  # %
WEATHER_HUMIDITY_GAIN = 0.002      # Per % above reference
WEATHER_MODIFIER_MIN = 0.5
WEATHER_MODIFIER_MAX = 1.5

# --- Impact prediction ---
HOURS_PER_YEAR = 24 * 365
PLANNING_HORIZON_YEARS = 10        # Maintenance years counted in total cost
AQI_IMPROVEMENT_PER_KG_H = 0.1

# --- Simulation ranges (inclusive) ---
WIND_SPEED_RANGE = (0.0, 20.0)        # m/s
WIND_DIRECTION_RANGE = (0.0, 360.0)   # Meteorological degrees
TEMPERATURE_RANGE = (-10.0, 40.0)     # Celsius
HUMIDITY_RANGE = (10.0, 90.0)         # %
TIME_OF_DAY_RANGE = (0, 23)           # Hour
TRAFFIC_DENSITY_RANGE = (0.1, 1.5)    # Unitless

# --- Simulation defaults ---
DEFAULT_WIND_SPEED = 3.2
DEFAULT_WIND_DIRECTION = 90.0
DEFAULT_TEMPERATURE = 22.0
DEFAULT_HUMIDITY = 65.0
DEFAULT_TIME_OF_DAY = 12
DEFAULT_TRAFFIC_DENSITY = 0.8

# --- Lattice ---
DEFAULT_BOUNDS = {
    "min_lat": 40.7400,
    "max_lat": 40.7700,
    "min_lng": -74.0100,
    "max_lng": -73.9600,
}
DEFAULT_GRID_STEP_DEG = 0.002   # Roughly 200 m cells
LATTICE_EPSILON = 1e-9          # Tolerance when counting inclusive lattice points
DEFAULT_FIELD_WORKERS = 1       # Threads used for field generation

# --- Hourly projection (trend chart approximation) ---
PROJECTION_RUSH_HOURS = ((7, 9), (17, 19))
PROJECTION_NIGHT_START = 22
PROJECTION_NIGHT_END = 5
PROJECTION_RUSH_EMISSION = 1.4
PROJECTION_NIGHT_EMISSION = 0.4
PROJECTION_NIGHT_CAPTURE = 0.8

# --- Cache ---
CACHE_MAX_ENTRIES = 32          # Max entries for concentration field cache

# --- Dashboard ---
# Upper bounds (inclusive) of each AQI band, in ascending order
AQI_CATEGORIES = (
    (50, "Good"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive Groups"),
)
AQI_CATEGORY_WORST = "Unhealthy"
