import calendar
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class Timebase:
  year: int

  def days(self):
    d = date(self.year, 1, 1)
    while d.year == self.year:
      yield d
      d += timedelta(days=1)

  def day_count(self) -> int:
    return 366 if calendar.isleap(self.year) else 365
