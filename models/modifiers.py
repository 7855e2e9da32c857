"""
Condition Modifiers.

Turn a condition snapshot into multiplicative scaling factors:

  - time-of-day activity profiles, one per source category, applied to
    emission rates;
  - a weather efficiency factor applied to every capture rate.

Both are pure functions of their arguments.
"""

from typing import Union

from models.conditions import SimulationConfig
from models.sources import SourceCategory
from config import (
    WEATHER_WIND_PENALTY,
    WEATHER_TEMP_PENALTY,
    WEATHER_TEMP_LOW_C,
    WEATHER_TEMP_HIGH_C,
    WEATHER_HUMIDITY_REFERENCE,
    WEATHER_HUMIDITY_GAIN,
    WEATHER_MODIFIER_MIN,
    WEATHER_MODIFIER_MAX,
)


def _transportation(hour: float) -> float:
    # Morning and evening rush
    if 7 <= hour <= 9 or 17 <= hour <= 19:
        return 1.5
    if hour >= 22 or hour <= 5:
        return 0.3
    return 1.0


def _industrial(hour: float) -> float:
    # Shift hours
    if 8 <= hour <= 18:
        return 1.2
    if hour >= 22 or hour <= 6:
        return 0.6
    return 1.0


def _residential(hour: float) -> float:
    # Heating, cooking and commuting peaks at either end of the day
    if 6 <= hour <= 8 or 18 <= hour <= 22:
        return 1.3
    return 0.8


def _commercial(hour: float) -> float:
    # Opening hours
    if 9 <= hour <= 21:
        return 1.1
    return 0.5


_TIME_OF_DAY_PROFILES = {
    SourceCategory.TRANSPORTATION: _transportation,
    SourceCategory.INDUSTRIAL: _industrial,
    SourceCategory.RESIDENTIAL: _residential,
    SourceCategory.COMMERCIAL: _commercial,
}

# Every category needs a profile; adding an enum member without one fails at import.
_missing = set(SourceCategory) - set(_TIME_OF_DAY_PROFILES)
if _missing:
    raise RuntimeError(
        f"No time-of-day profile for categories: {sorted(m.value for m in _missing)}"
    )


def time_of_day_modifier(
    category: Union[SourceCategory, str],
    hour: float,
) -> float:
    """
    Activity multiplier for a source category at a given hour.

    Args:
        category: Source category (enum member or its string value).
        hour: Hour of day, 0-23.

    Returns:
        Multiplier applied to the source's base emission rate.  Strings that
        do not name a known category get a neutral 1.0.
    """
    try:
        category = SourceCategory(category)
    except ValueError:
        return 1.0
    return _TIME_OF_DAY_PROFILES[category](hour)


def weather_modifier(config: SimulationConfig) -> float:
    """
    Capture efficiency multiplier for the current weather.

    Wind carries air through capture units too fast, temperature extremes
    slow biological uptake, and humidity above 50% helps slightly.

    Returns:
        Multiplier clamped to [0.5, 1.5].
    """
    modifier = 1.0
    modifier -= config.wind_speed * WEATHER_WIND_PENALTY

    if config.temperature < WEATHER_TEMP_LOW_C or config.temperature > WEATHER_TEMP_HIGH_C:
        modifier -= WEATHER_TEMP_PENALTY

    modifier += (config.humidity - WEATHER_HUMIDITY_REFERENCE) * WEATHER_HUMIDITY_GAIN

    return max(WEATHER_MODIFIER_MIN, min(WEATHER_MODIFIER_MAX, modifier))
