"""Exceptions raised by solarevents."""


class SolarEventsError(Exception):
  """Base class for all solarevents errors."""


class CoordinateError(SolarEventsError, ValueError):
  """Latitude, longitude or UTC offset outside the accepted range."""


class ConfigError(SolarEventsError):
  """A site or almanac configuration could not be loaded."""
