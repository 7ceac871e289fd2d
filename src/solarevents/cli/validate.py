import sys

import click

from ..core.timebase import Timebase
from ..io.manifest import dataset_hash, read_manifest


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  sites = m.get("sites", {})
  if not sites:
    click.echo("ERROR: no sites found in manifest", err=True)
    sys.exit(1)
  expected = Timebase(int(m.get("year", 0))).day_count()
  bad = [k for k, v in sites.items() if v.get("days") != expected]
  if bad:
    click.echo(f"ERROR: expected {expected} days for {', '.join(sorted(bad))}", err=True)
    sys.exit(1)
  recorded = m.get("dataset_hash")
  if recorded != dataset_hash({k: v for k, v in m.items() if k != "dataset_hash"}):
    click.echo("WARNING: dataset hash does not match manifest contents")
  polar = sorted(k for k, v in sites.items() if v.get("polar_day") or v.get("polar_night"))
  if polar:
    click.echo(f"NOTE: polar days at {', '.join(polar)}")
  click.echo(f"Found {len(sites)} sites with {expected} days each")
  click.echo("Validation OK")


if __name__ == "__main__":
  main()
