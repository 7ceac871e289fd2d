from typing import Optional

from pydantic import BaseModel


class AlmanacRow(BaseModel):
  site: str
  date: str
  noon: str
  dawn: Optional[str]
  sunrise: Optional[str]
  sunset: Optional[str]
  dusk: Optional[str]
  day_minutes: Optional[float]
  twilight_minutes: Optional[float]
  daylight: str
  twilight: str
  declination: float
  equation_of_time: float
