"""Sunrise, sunset and civil twilight for a calendar day.

Solar noon is placed from the equation of time and the observer's longitude;
each event pair is then offset symmetrically from noon by the hour angle at
which the sun's centre reaches a fixed zenith distance:

* 90.833 degrees for sunrise and sunset (refraction plus the solar radius)
* 96 degrees for civil dawn and dusk

Near the poles the hour-angle equation has no solution on some days. Those
pairs come back as ``None`` together with a ``HorizonCrossing`` telling the
caller whether the sun stayed above or below the threshold all day.
"""
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union
import logging

from ..model.location import Site, make_site
from .angles import acosd, cosd, tand
from .julian import julian_century, julian_day
from .solar import SolarGeometry, solar_geometry

logger = logging.getLogger(__name__)

SUNRISE_ZENITH = 90.833
CIVIL_TWILIGHT_ZENITH = 96.0

# The sun's hour angle advances one degree every four minutes.
MINUTES_PER_DEGREE = 4.0

Instant = Union[datetime, date]


class HorizonCrossing(Enum):
    """Whether the sun crosses a zenith threshold on a given day."""
    RISES_AND_SETS = "rises_and_sets"
    ALWAYS_ABOVE = "always_above"   # midnight sun / white night
    ALWAYS_BELOW = "always_below"   # polar night


@dataclass(frozen=True)
class SolarEvents:
    """Solar events of one local calendar day.

    All timestamps are timezone-aware and carry the UTC offset the
    calculation was made for. A ``None`` event means the sun does not cross
    that threshold today; ``daylight`` and ``twilight`` say which way.
    """
    noon: datetime
    sunrise: Optional[datetime]
    sunset: Optional[datetime]
    dawn: Optional[datetime]
    dusk: Optional[datetime]
    daylight: HorizonCrossing = HorizonCrossing.RISES_AND_SETS
    twilight: HorizonCrossing = HorizonCrossing.RISES_AND_SETS
    geometry: Optional[SolarGeometry] = field(default=None, repr=False, compare=False)

    @property
    def day_length(self) -> Optional[timedelta]:
        """Time between sunrise and sunset, or None without a crossing."""
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset - self.sunrise

    @property
    def twilight_length(self) -> Optional[timedelta]:
        """Time between civil dawn and civil dusk."""
        if self.dawn is None or self.dusk is None:
            return None
        return self.dusk - self.dawn

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary.

        Returns:
            Dict with ISO-8601 timestamps (or None) and crossing values
        """
        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value is not None else None

        return {
            "noon": iso(self.noon),
            "dawn": iso(self.dawn),
            "sunrise": iso(self.sunrise),
            "sunset": iso(self.sunset),
            "dusk": iso(self.dusk),
            "daylight": self.daylight.value,
            "twilight": self.twilight.value,
        }

    def geometry_dict(self) -> Dict[str, float]:
        """Intermediate solar quantities, empty when not recorded."""
        return asdict(self.geometry) if self.geometry is not None else {}


def hour_angle(
    latitude: float,
    declination: float,
    zenith: float,
) -> Tuple[Optional[float], HorizonCrossing]:
    """Hour angle (degrees) at which the sun reaches ``zenith``.

    Args:
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees
        zenith: Zenith distance of the event in degrees

    Returns:
        Tuple of the hour angle (None when there is no crossing) and the
        crossing condition
    """
    cos_h = (cosd(zenith) / (cosd(latitude) * cosd(declination))
             - tand(latitude) * tand(declination))
    if cos_h < -1.0:
        return None, HorizonCrossing.ALWAYS_ABOVE
    if cos_h > 1.0:
        return None, HorizonCrossing.ALWAYS_BELOW
    return acosd(cos_h), HorizonCrossing.RISES_AND_SETS


def localize(instant: Instant, utc_offset_minutes: Optional[int]) -> Tuple[datetime, int]:
    """Express ``instant`` as an aware datetime at a fixed UTC offset.

    Args:
        instant: A date (local midnight) or a datetime; naive datetimes are
            read as wall-clock time at the offset
        utc_offset_minutes: Offset east of UTC; None takes it from an aware
            instant and falls back to UTC otherwise

    Returns:
        Tuple of the localized datetime and the offset in minutes
    """
    if isinstance(instant, datetime):
        if utc_offset_minutes is None:
            offset = instant.utcoffset()
            utc_offset_minutes = int(offset.total_seconds() // 60) if offset is not None else 0
        tz = timezone(timedelta(minutes=utc_offset_minutes))
        if instant.tzinfo is None:
            return instant.replace(tzinfo=tz), utc_offset_minutes
        return instant.astimezone(tz), utc_offset_minutes
    if isinstance(instant, date):
        if utc_offset_minutes is None:
            utc_offset_minutes = 0
        tz = timezone(timedelta(minutes=utc_offset_minutes))
        return datetime.combine(instant, time(), tzinfo=tz), utc_offset_minutes
    raise TypeError(f"expected date or datetime, got {type(instant).__name__}")


def _around_noon(noon: datetime, angle: Optional[float]) -> Tuple[Optional[datetime], Optional[datetime]]:
    if angle is None:
        return None, None
    half = timedelta(minutes=MINUTES_PER_DEGREE * angle)
    return noon - half, noon + half


@dataclass
class SolarEventCalculator:
    """Solar event calculator bound to one observing site.

    Coordinates are validated on construction, so an invalid site never
    reaches the astronomy.
    """
    latitude: float
    longitude: float
    utc_offset_minutes: Optional[int] = None

    def __post_init__(self):
        # Range-check now; the offset may still come from each instant.
        make_site(self.latitude, self.longitude, self.utc_offset_minutes or 0)

    @classmethod
    def for_site(cls, site: Site) -> "SolarEventCalculator":
        return cls(site.latitude, site.longitude, site.utc_offset_minutes)

    def compute(self, instant: Instant) -> SolarEvents:
        """Compute noon, sunrise, sunset, dawn and dusk for the local day of ``instant``.

        Args:
            instant: Any moment of the day of interest, or the date itself

        Returns:
            SolarEvents anchored to the local calendar day of ``instant``

        Raises:
            CoordinateError: If an offset taken from ``instant`` is out of range
        """
        local, offset = localize(instant, self.utc_offset_minutes)
        site = make_site(self.latitude, self.longitude, offset)

        t = julian_century(julian_day(local))
        geo = solar_geometry(t)

        midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
        noon_minutes = 720.0 - MINUTES_PER_DEGREE * site.longitude - geo.equation_of_time + offset
        noon = midnight + timedelta(minutes=noon_minutes)

        h_standard, daylight = hour_angle(site.latitude, geo.declination, SUNRISE_ZENITH)
        h_twilight, twilight = hour_angle(site.latitude, geo.declination, CIVIL_TWILIGHT_ZENITH)
        sunrise, sunset = _around_noon(noon, h_standard)
        dawn, dusk = _around_noon(noon, h_twilight)

        if daylight is not HorizonCrossing.RISES_AND_SETS:
            logger.debug(f"No sunrise/sunset on {midnight.date()} at latitude {site.latitude}: {daylight.value}")
        if twilight is not HorizonCrossing.RISES_AND_SETS:
            logger.debug(f"No civil dawn/dusk on {midnight.date()} at latitude {site.latitude}: {twilight.value}")
        logger.debug(
            f"Solar events for ({site.latitude}, {site.longitude}) on {midnight.date()}: "
            f"decl={geo.declination:.4f} eot={geo.equation_of_time:.3f}min noon={noon.isoformat()}"
        )

        return SolarEvents(
            noon=noon,
            sunrise=sunrise,
            sunset=sunset,
            dawn=dawn,
            dusk=dusk,
            daylight=daylight,
            twilight=twilight,
            geometry=geo,
        )


def compute(
    instant: Instant,
    latitude: float,
    longitude: float,
    utc_offset_minutes: Optional[int] = None,
) -> SolarEvents:
    """Compute the solar events of one day.

    Args:
        instant: Date, or any moment of the day, of interest
        latitude: Degrees, north positive, -90..90
        longitude: Degrees, east positive, -180..180
        utc_offset_minutes: Local offset east of UTC (UTC+2 is 120)

    Returns:
        SolarEvents for the local calendar day

    Raises:
        CoordinateError: If latitude, longitude or offset is out of range
    """
    return SolarEventCalculator(latitude, longitude, utc_offset_minutes).compute(instant)
