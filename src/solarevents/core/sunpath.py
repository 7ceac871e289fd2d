"""The sun's daily path as a circle fitted to hourly sun vectors."""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Optional
import logging
import math

import numpy as np

from .position import SunPosition, sun_position

logger = logging.getLogger(__name__)

SAMPLE_COUNT = 24
_EPS = 1e-9


def _unit(v: np.ndarray) -> Optional[np.ndarray]:
    n = np.linalg.norm(v)
    if n < _EPS:
        return None
    return v / n


@dataclass(frozen=True, eq=False)
class SunPath:
    """Circle traced by the sun over one day, in horizon vector coordinates.

    Vectors use the frame of ``SunPosition.to_vector``: x north, y east,
    z up. An invalid path (zero radius) is returned where the sun's
    azimuth is undefined, i.e. at the poles.
    """
    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    radius: float = 0.0

    @property
    def is_valid(self) -> bool:
        return self.radius > 0.0 and bool(np.linalg.norm(self.normal) > _EPS)

    @classmethod
    def create(
        cls,
        day: date,
        latitude: float,
        longitude: float,
        utc_offset_minutes: int = 0,
    ) -> "SunPath":
        """Fit the path from hourly samples starting at local midnight of ``day``.

        Raises:
            CoordinateError: If latitude or longitude is out of range
        """
        tz = timezone(timedelta(minutes=utc_offset_minutes))
        start = datetime(day.year, day.month, day.day, tzinfo=tz)

        samples = []
        for hour in range(SAMPLE_COUNT):
            pos = sun_position(start + timedelta(hours=hour), latitude, longitude)
            if not pos.is_valid:
                logger.debug(f"No sun path at ({latitude}, {longitude}) on {day}: invalid sample at hour {hour}")
                return cls()
            samples.append(pos.to_vector())
        points = np.vstack(samples)

        center = points.mean(axis=0)
        radius = float(np.linalg.norm(points - center, axis=1).mean())
        offsets = points - center
        normal = _unit(np.cross(offsets[:-1], offsets[1:]).sum(axis=0))
        if normal is None:
            return cls()
        return cls(center=center, normal=normal, radius=radius)

    def project(self, position: SunPosition) -> Optional[np.ndarray]:
        """Point of the path on the same north-axis plane as ``position``.

        The plane through the north axis and the sun vector cuts the path
        twice; the cut on the same side of the horizon as ``position`` wins
        (on the horizon, the one on the same side of the meridian). Returns
        None for an invalid path or when the plane misses the circle.
        """
        if not self.is_valid:
            return None

        plane = _unit(np.cross(np.array([1.0, 0.0, 0.0]), position.to_vector()))
        if plane is None:
            return None

        line = np.cross(self.normal, plane)
        if np.linalg.norm(line) < _EPS:
            return None
        # Point on both planes: normal . x = normal . center and plane . x = 0.
        point = np.dot(self.normal, self.center) * np.cross(plane, line) / np.dot(line, line)
        direction = line / np.linalg.norm(line)

        delta = point - self.center
        dot = float(np.dot(direction, delta))
        disc = dot * dot - float(np.dot(delta, delta)) + self.radius * self.radius
        if disc < 0:
            return None
        a = point + direction * (-dot - math.sqrt(disc))
        b = point + direction * (-dot + math.sqrt(disc))

        if abs(position.elevation) < 1e-6:
            if position.azimuth < 180.0:
                return b if a[1] < b[1] else a
            return a if a[1] < b[1] else b
        if position.elevation < 0:
            return a if a[2] < b[2] else b
        return b if a[2] < b[2] else a

    def progress(self, position: SunPosition, midnight: SunPosition) -> Optional[float]:
        """Fraction of a full turn along the path from ``midnight`` to ``position``.

        Returns a value in [0, 1), or None when either position cannot be
        projected onto the path.
        """
        start = self.project(midnight)
        end = self.project(position)
        if start is None or end is None:
            return None
        v1 = _unit(start - self.center)
        v2 = _unit(end - self.center)
        if v1 is None or v2 is None:
            return None
        angle = math.atan2(float(np.dot(self.normal, np.cross(v1, v2))), float(np.dot(v1, v2)))
        if angle < 0:
            angle += 2.0 * math.pi
        return angle / (2.0 * math.pi)
