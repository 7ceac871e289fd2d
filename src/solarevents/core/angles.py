"""Trigonometry in degrees."""
import math


def sind(angle: float) -> float:
  return math.sin(math.radians(angle))


def cosd(angle: float) -> float:
  return math.cos(math.radians(angle))


def tand(angle: float) -> float:
  return math.tan(math.radians(angle))


def asind(value: float) -> float:
  return math.degrees(math.asin(value))


def acosd(value: float) -> float:
  # Callers check the domain first; math.acos raises on |value| > 1.
  return math.degrees(math.acos(value))


def normalize_degrees(angle: float) -> float:
  """Fold an angle into [0, 360)."""
  angle = math.fmod(angle, 360.0)
  if angle < 0:
    angle += 360.0
  # fmod of a tiny negative value can land exactly on 360 after the shift
  return 0.0 if angle >= 360.0 else angle


def wrap_degrees(angle: float) -> float:
  """Fold an angle into [-180, 180)."""
  return normalize_degrees(angle + 180.0) - 180.0
