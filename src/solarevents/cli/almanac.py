import logging
from pathlib import Path

import click

from ..errors import SolarEventsError
from ..io.manifest import write_manifest
from ..io.write_jsonl import write_rows_jsonl
from ..io.write_parquet import write_rows_parquet
from ..model.config import load_almanac_config
from ..tables.almanac import almanac_rows, daylength_summary


@click.command()
@click.option("--config", required=True, type=click.Path(exists=True))
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(config, verbose):
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )
  try:
    cfg = load_almanac_config(config)
    sites = cfg.resolve_sites()
  except SolarEventsError as e:
    raise click.ClickException(str(e))
  year = cfg.year
  out_dir = Path(cfg.output.path) / f"{year:04d}"
  ext = "parquet" if cfg.output.format == "parquet" else "jsonl"
  meta = {"year": year, "format": cfg.output.format, "sites": {}}
  for site in sites:
    rows = almanac_rows(site, year)
    path = out_dir / f"almanac_{site.name}_{year:04d}.{ext}"
    if ext == "parquet":
      write_rows_parquet(rows, str(path))
    else:
      write_rows_jsonl(rows, str(path))
    meta["sites"][site.name] = {
      "file": path.name,
      "latitude": site.latitude,
      "longitude": site.longitude,
      "utc_offset_minutes": site.utc_offset_minutes,
      **daylength_summary(rows),
    }
  write_manifest(str(out_dir / "manifest.json"), meta)
  click.echo(f"Done. Wrote almanac for {len(sites)} site(s) to {out_dir}")


if __name__ == "__main__":
  main()
