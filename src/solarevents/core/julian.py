from datetime import datetime, timezone

UNIX_EPOCH_JD = 2440587.5
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
MS_PER_DAY = 86400000.0


def julian_day(instant: datetime) -> float:
  """Julian Day of an aware datetime (naive values are read as UTC)."""
  if instant.tzinfo is None:
    instant = instant.replace(tzinfo=timezone.utc)
  unix_ms = instant.timestamp() * 1000.0
  return unix_ms / MS_PER_DAY + UNIX_EPOCH_JD


def julian_century(jd: float) -> float:
  return (jd - J2000_JD) / DAYS_PER_CENTURY
