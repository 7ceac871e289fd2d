from pathlib import Path
from typing import Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError
from .location import Site, get_site, load_sites


class OutputConfig(BaseModel):
  path: str = "out/"
  format: Literal["parquet", "jsonl"] = "parquet"


class AlmanacConfig(BaseModel):
  year: int = Field(default=2025, ge=1, le=9999)
  sites: List[Union[str, Site]]
  sites_file: Optional[str] = None
  output: OutputConfig = OutputConfig()

  def resolve_sites(self) -> List[Site]:
    """Named entries are looked up in ``sites_file`` or the built-in list."""
    named: Optional[Dict[str, Site]] = load_sites(Path(self.sites_file)) if self.sites_file else None
    out = []
    for entry in self.sites:
      if isinstance(entry, Site):
        out.append(entry)
      elif named is not None:
        if entry not in named:
          raise ConfigError(f"unknown site {entry!r} in {self.sites_file}")
        out.append(named[entry])
      else:
        out.append(get_site(entry))
    names = [s.name for s in out]
    if len(set(names)) != len(names):
      raise ConfigError(f"duplicate site names: {names}")
    return out


def load_almanac_config(path) -> AlmanacConfig:
  try:
    cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigError(f"cannot read {path}: {e}") from e
  try:
    return AlmanacConfig(**cfg)
  except (ValidationError, TypeError) as e:
    raise ConfigError(f"invalid almanac config {path}: {e}") from e
