"""Sunrise, sunset and civil twilight from a low-precision solar model."""

from .core.events import (
    CIVIL_TWILIGHT_ZENITH,
    SUNRISE_ZENITH,
    HorizonCrossing,
    SolarEventCalculator,
    SolarEvents,
    compute,
)
from .core.position import SunPosition, sun_position
from .core.sunpath import SunPath
from .errors import ConfigError, CoordinateError, SolarEventsError

__all__ = [
    "compute",
    "SolarEventCalculator",
    "SolarEvents",
    "HorizonCrossing",
    "SUNRISE_ZENITH",
    "CIVIL_TWILIGHT_ZENITH",
    "SunPosition",
    "sun_position",
    "SunPath",
    "SolarEventsError",
    "CoordinateError",
    "ConfigError",
]
