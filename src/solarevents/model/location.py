from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError, CoordinateError

SITES_PATH = Path(__file__).parent.parent / "config" / "sites.yaml"


class Site(BaseModel):
  name: str = Field(default="custom", pattern=r"^[A-Za-z0-9_-]+$")
  latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
  longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
  # UTC-12:00 .. UTC+14:00
  utc_offset_minutes: int = Field(default=0, ge=-720, le=840)


def make_site(latitude: float, longitude: float, utc_offset_minutes: int = 0, name: str = "custom") -> Site:
  """Build a Site, reporting range problems as CoordinateError."""
  try:
    return Site(
      name=name,
      latitude=latitude,
      longitude=longitude,
      utc_offset_minutes=utc_offset_minutes,
    )
  except ValidationError as e:
    problems = "; ".join(
      f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
    )
    raise CoordinateError(f"invalid site {name!r}: {problems}") from e


def load_sites(path: Optional[Path] = None) -> Dict[str, Site]:
  path = Path(path) if path else SITES_PATH
  try:
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigError(f"cannot read sites from {path}: {e}") from e
  if not isinstance(raw, dict):
    raise ConfigError(f"{path} has no 'sites' mapping")
  sites = raw.get("sites")
  if not isinstance(sites, dict):
    raise ConfigError(f"{path} has no 'sites' mapping")
  out = {}
  for name, values in sites.items():
    if not isinstance(values, dict):
      raise ConfigError(f"site {name!r} in {path} is not a mapping")
    out[name] = make_site(
      name=name,
      latitude=values.get("latitude"),
      longitude=values.get("longitude"),
      utc_offset_minutes=values.get("utc_offset_minutes", 0),
    )
  return out


@lru_cache(maxsize=1)
def builtin_sites() -> Dict[str, Site]:
  return load_sites(SITES_PATH)


def get_site(name: str) -> Site:
  sites = builtin_sites()
  if name not in sites:
    raise ConfigError(f"unknown site {name!r}; known sites: {', '.join(sorted(sites))}")
  return sites[name]
