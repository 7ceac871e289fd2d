"""Geometric sun position (elevation and azimuth) at an instant.

No atmospheric refraction is applied, so elevations near the horizon read
about half a degree low compared with what an observer sees.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional
import math

import numpy as np

from ..model.location import make_site
from .angles import acosd, cosd, normalize_degrees, sind, wrap_degrees
from .events import SolarEventCalculator
from .julian import julian_century, julian_day
from .solar import solar_geometry

MIDNIGHT_HOUR_ANGLE = -180.0


@dataclass(frozen=True)
class SunPosition:
    """Sun elevation above the horizon and azimuth clockwise from north."""
    elevation: float
    azimuth: float

    @property
    def is_valid(self) -> bool:
        return not (math.isnan(self.elevation) or math.isnan(self.azimuth))

    def to_vector(self) -> np.ndarray:
        """Unit vector (x north, y east, z up) pointing at the sun."""
        return np.array([
            cosd(self.elevation) * cosd(self.azimuth),
            cosd(self.elevation) * sind(self.azimuth),
            sind(self.elevation),
        ])


def _position(latitude: float, declination: float, hour_angle: float) -> SunPosition:
    cos_zenith = (sind(latitude) * sind(declination)
                  + cosd(latitude) * cosd(declination) * cosd(hour_angle))
    zenith = acosd(min(1.0, max(-1.0, cos_zenith)))

    denominator = cosd(latitude) * sind(zenith)
    if abs(denominator) < 1e-12:
        # Pole, or sun in the zenith: azimuth is undefined.
        return SunPosition(elevation=90.0 - zenith, azimuth=math.nan)

    ratio = (sind(latitude) * cosd(zenith) - sind(declination)) / denominator
    azimuth = acosd(min(1.0, max(-1.0, ratio)))
    if hour_angle < 0:
        azimuth = 180.0 - azimuth
    else:
        azimuth = 180.0 + azimuth
    return SunPosition(elevation=90.0 - zenith, azimuth=normalize_degrees(azimuth))


def sun_position(instant: datetime, latitude: float, longitude: float) -> SunPosition:
    """Where the sun stands at ``instant`` (naive datetimes are read as UTC).

    Raises:
        CoordinateError: If latitude or longitude is out of range
    """
    site = make_site(latitude, longitude)
    if instant.tzinfo is None:
        utc = instant.replace(tzinfo=timezone.utc)
    else:
        utc = instant.astimezone(timezone.utc)

    geo = solar_geometry(julian_century(julian_day(utc)))
    minutes = (utc.hour * 60 + utc.minute + utc.second / 60.0
               + utc.microsecond / 60e6)
    true_solar_minutes = minutes + geo.equation_of_time + 4.0 * site.longitude
    hour_angle = wrap_degrees(true_solar_minutes / 4.0 - 180.0)
    return _position(site.latitude, geo.declination, hour_angle)


def solar_midnight(day: date, latitude: float, longitude: float,
                   utc_offset_minutes: Optional[int] = None) -> datetime:
    """Instant of solar midnight following the solar noon of ``day``."""
    noon = SolarEventCalculator(latitude, longitude, utc_offset_minutes).compute(day).noon
    return noon + timedelta(hours=12)


def solar_midnight_position(day: date, latitude: float, longitude: float,
                            utc_offset_minutes: Optional[int] = None) -> SunPosition:
    """Sun position at its lowest point of the night after ``day``'s noon."""
    midnight = solar_midnight(day, latitude, longitude, utc_offset_minutes)
    geo = solar_geometry(julian_century(julian_day(midnight)))
    return _position(latitude, geo.declination, MIDNIGHT_HOUR_ANGLE)
