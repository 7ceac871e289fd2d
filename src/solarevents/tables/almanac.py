import logging
from datetime import timedelta
from typing import Dict, List, Optional

import numpy as np

from ..core.events import HorizonCrossing, SolarEventCalculator
from ..core.timebase import Timebase
from ..io.schema import AlmanacRow
from ..model.location import Site

logger = logging.getLogger(__name__)


def _minutes(delta: Optional[timedelta]) -> Optional[float]:
  return delta.total_seconds() / 60.0 if delta is not None else None


def almanac_rows(site: Site, year: int) -> List[dict]:
  """
  One row per local calendar day of ``year`` at ``site``.
  """
  calc = SolarEventCalculator.for_site(site)
  rows = []
  for d in Timebase(year).days():
    ev = calc.compute(d)
    out = ev.to_dict()
    rows.append(AlmanacRow(
      site=site.name,
      date=d.isoformat(),
      day_minutes=_minutes(ev.day_length),
      twilight_minutes=_minutes(ev.twilight_length),
      declination=ev.geometry.declination,
      equation_of_time=ev.geometry.equation_of_time,
      **out,
    ).model_dump())
  polar = sum(1 for r in rows if r["daylight"] != HorizonCrossing.RISES_AND_SETS.value)
  if polar:
    logger.warning(f"{site.name}: {polar} day(s) in {year} without sunrise or sunset")
  return rows


def daylength_summary(rows: List[dict]) -> Dict[str, Optional[float]]:
  """
  Day-length statistics over almanac rows; polar days count separately.
  """
  minutes = np.array(
    [np.nan if r["day_minutes"] is None else r["day_minutes"] for r in rows],
    dtype=float,
  )
  has_day = bool(np.any(~np.isnan(minutes)))
  return {
    "days": len(rows),
    "polar_day": sum(1 for r in rows if r["daylight"] == HorizonCrossing.ALWAYS_ABOVE.value),
    "polar_night": sum(1 for r in rows if r["daylight"] == HorizonCrossing.ALWAYS_BELOW.value),
    "min_day_minutes": float(np.nanmin(minutes)) if has_day else None,
    "max_day_minutes": float(np.nanmax(minutes)) if has_day else None,
    "mean_day_minutes": float(np.nanmean(minutes)) if has_day else None,
  }
