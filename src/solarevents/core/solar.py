"""
Low-precision solar coordinates after the NOAA spreadsheet formulas.

Every function takes the Julian Century ``t`` and returns degrees, except
``eccentricity`` (unitless) and ``equation_of_time`` (minutes).
"""
from dataclasses import dataclass
import math

from .angles import asind, cosd, normalize_degrees, sind, tand


def mean_longitude(t: float) -> float:
  return normalize_degrees(280.46646 + t * (36000.76983 + t * 0.0003032))


def mean_anomaly(t: float) -> float:
  return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity(t: float) -> float:
  return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
  m = mean_anomaly(t)
  return (sind(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
          + sind(2 * m) * (0.019993 - 0.000101 * t)
          + sind(3 * m) * 0.000289)


def true_longitude(t: float) -> float:
  return mean_longitude(t) + equation_of_center(t)


def _omega(t: float) -> float:
  # longitude of the moon's ascending node, drives nutation
  return 125.04 - 1934.136 * t


def apparent_longitude(t: float) -> float:
  return true_longitude(t) - 0.00569 - 0.00478 * sind(_omega(t))


def mean_obliquity(t: float) -> float:
  return 23 + (26 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60) / 60


def obliquity(t: float) -> float:
  return mean_obliquity(t) + 0.00256 * cosd(_omega(t))


def declination(t: float) -> float:
  return asind(sind(obliquity(t)) * sind(apparent_longitude(t)))


def equation_of_time(t: float) -> float:
  """Apparent minus mean solar time, in minutes."""
  l0 = mean_longitude(t)
  m = mean_anomaly(t)
  e = eccentricity(t)
  y = tand(obliquity(t) / 2) ** 2
  eq = (y * sind(2 * l0)
        - 2 * e * sind(m)
        + 4 * e * y * sind(m) * cosd(2 * l0)
        - 0.5 * y * y * sind(4 * l0)
        - 1.25 * e * e * sind(2 * m))
  return 4 * math.degrees(eq)


@dataclass(frozen=True)
class SolarGeometry:
  century: float
  mean_longitude: float
  mean_anomaly: float
  eccentricity: float
  equation_of_center: float
  true_longitude: float
  apparent_longitude: float
  mean_obliquity: float
  obliquity: float
  declination: float
  equation_of_time: float


def solar_geometry(t: float) -> SolarGeometry:
  """Evaluate the whole chain once for a Julian Century."""
  return SolarGeometry(
    century=t,
    mean_longitude=mean_longitude(t),
    mean_anomaly=mean_anomaly(t),
    eccentricity=eccentricity(t),
    equation_of_center=equation_of_center(t),
    true_longitude=true_longitude(t),
    apparent_longitude=apparent_longitude(t),
    mean_obliquity=mean_obliquity(t),
    obliquity=obliquity(t),
    declination=declination(t),
    equation_of_time=equation_of_time(t),
  )
