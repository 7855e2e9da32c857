"""
Simulation condition set.

A single value object describing weather and urban activity for one run.
It is never mutated; UI updates build a new instance with
``dataclasses.replace``.
"""

from dataclasses import dataclass

from models.errors import ValidationError
from config import (
    WIND_SPEED_RANGE,
    WIND_DIRECTION_RANGE,
    TEMPERATURE_RANGE,
    HUMIDITY_RANGE,
    TIME_OF_DAY_RANGE,
    TRAFFIC_DENSITY_RANGE,
    DEFAULT_WIND_SPEED,
    DEFAULT_WIND_DIRECTION,
    DEFAULT_TEMPERATURE,
    DEFAULT_HUMIDITY,
    DEFAULT_TIME_OF_DAY,
    DEFAULT_TRAFFIC_DENSITY,
)


def _check_range(name: str, value: float, bounds) -> None:
    lo, hi = bounds
    # NaN fails both comparisons
    if not lo <= value <= hi:
        raise ValidationError(f"{name} must be in [{lo}, {hi}], got {value}")


@dataclass(frozen=True)
class SimulationConfig:
    """Environmental and urban conditions for a simulation run.

    Args:
        wind_speed: Wind speed (m/s), 0-20.
        wind_direction: Meteorological direction (degrees), 0-360.
            Carried for display only; no formula uses it.
        temperature: Air temperature (Celsius), -10 to 40.
        humidity: Relative humidity (%), 10-90.
        time_of_day: Hour of day, integer 0-23.
        traffic_density: Traffic scaling factor, 0.1-1.5.
    """

    wind_speed: float = DEFAULT_WIND_SPEED
    wind_direction: float = DEFAULT_WIND_DIRECTION
    temperature: float = DEFAULT_TEMPERATURE
    humidity: float = DEFAULT_HUMIDITY
    time_of_day: int = DEFAULT_TIME_OF_DAY
    traffic_density: float = DEFAULT_TRAFFIC_DENSITY

    def __post_init__(self):
        _check_range("wind_speed", self.wind_speed, WIND_SPEED_RANGE)
        _check_range("wind_direction", self.wind_direction, WIND_DIRECTION_RANGE)
        _check_range("temperature", self.temperature, TEMPERATURE_RANGE)
        _check_range("humidity", self.humidity, HUMIDITY_RANGE)
        _check_range("time_of_day", self.time_of_day, TIME_OF_DAY_RANGE)
        if int(self.time_of_day) != self.time_of_day:
            raise ValidationError(
                f"time_of_day must be a whole hour, got {self.time_of_day}"
            )
        object.__setattr__(self, "time_of_day", int(self.time_of_day))
        _check_range("traffic_density", self.traffic_density, TRAFFIC_DENSITY_RANGE)
