import click

from ..io.manifest import read_manifest


def _hm(minutes) -> str:
  if minutes is None:
    return "--"
  total = int(round(minutes))
  return f"{total // 60}h{total % 60:02d}m"


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  sites = m.get("sites", {})
  rows = sorted(sites.items())
  width = max(len(k) for k, _ in rows) if rows else 4
  width = max(width, 4)
  click.echo("Site".ljust(width) + " | Shortest | Longest  | Mean     | Polar day | Polar night")
  click.echo("-" * width + "-|----------|----------|----------|-----------|------------")
  for k, v in rows:
    click.echo(
      k.ljust(width)
      + f" | {_hm(v.get('min_day_minutes')):<8} | {_hm(v.get('max_day_minutes')):<8}"
      + f" | {_hm(v.get('mean_day_minutes')):<8} | {v.get('polar_day', 0):>9} | {v.get('polar_night', 0):>11}"
    )
  click.echo(f"Total sites: {len(rows)}, Year: {m.get('year')}")


if __name__ == "__main__":
  main()
