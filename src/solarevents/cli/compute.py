"""CLI command printing the solar events of one day."""

from datetime import date, datetime
from typing import Optional
import json
import logging

import click

from ..core.events import SolarEventCalculator
from ..errors import ConfigError, CoordinateError
from ..model.location import get_site, load_sites, make_site


def _format_offset(minutes: int) -> str:
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"UTC{sign}{hours:02d}:{mins:02d}"


def _format_event(value: Optional[datetime], day: date, crossing: str) -> str:
    if value is None:
        return f"--:--:-- ({crossing.replace('_', ' ')})"
    text = value.strftime("%H:%M:%S")
    if value.date() != day:
        text += f" ({value.date().isoformat()})"
    return text


@click.command()
@click.option("--site", "site_name", type=str, help="Named site (see --sites-file)")
@click.option(
    "--sites-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with a 'sites' mapping (default: built-in sites)",
)
@click.option("--lat", type=float, help="Latitude in degrees, north positive")
@click.option("--lon", type=float, help="Longitude in degrees, east positive")
@click.option(
    "--offset",
    type=int,
    help="Local UTC offset in minutes, east positive (default: site offset or 0)",
)
@click.option(
    "--date",
    "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Calendar date (default: today)",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.option("--geometry", is_flag=True, help="Include intermediate solar quantities in JSON output")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(site_name, sites_file, lat, lon, offset, day, as_json, geometry, verbose):
    """Print dawn, sunrise, solar noon, sunset and dusk for one day.

    Examples:
        # Built-in site, today
        solarevents-compute --site london

        # Explicit coordinates and offset
        solarevents-compute --lat 40.7128 --lon -74.006 --offset -300 --date 2025-06-21
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if site_name and (lat is not None or lon is not None):
        raise click.UsageError("--site cannot be combined with --lat/--lon")

    try:
        if site_name:
            if sites_file:
                sites = load_sites(sites_file)
                if site_name not in sites:
                    raise ConfigError(f"unknown site {site_name!r} in {sites_file}")
                site = sites[site_name]
            else:
                site = get_site(site_name)
            if offset is not None:
                site = make_site(site.latitude, site.longitude, offset, name=site.name)
        elif lat is not None and lon is not None:
            site = make_site(lat, lon, offset or 0)
        else:
            raise click.UsageError("give either --site or both --lat and --lon")

        the_day = day.date() if day else date.today()
        events = SolarEventCalculator.for_site(site).compute(the_day)
    except CoordinateError as e:
        raise click.UsageError(str(e))
    except ConfigError as e:
        raise click.ClickException(str(e))

    if as_json:
        payload = {
            "site": site.model_dump(),
            "date": the_day.isoformat(),
            **events.to_dict(),
        }
        if geometry:
            payload["geometry"] = events.geometry_dict()
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Site: {site.name} ({site.latitude}, {site.longitude}) {_format_offset(site.utc_offset_minutes)}")
    click.echo(f"Date: {the_day.isoformat()}")
    click.echo(f"Dawn:    {_format_event(events.dawn, the_day, events.twilight.value)}")
    click.echo(f"Sunrise: {_format_event(events.sunrise, the_day, events.daylight.value)}")
    click.echo(f"Noon:    {_format_event(events.noon, the_day, '')}")
    click.echo(f"Sunset:  {_format_event(events.sunset, the_day, events.daylight.value)}")
    click.echo(f"Dusk:    {_format_event(events.dusk, the_day, events.twilight.value)}")
    if events.day_length is not None:
        total = int(round(events.day_length.total_seconds() / 60))
        click.echo(f"Day length: {total // 60}h {total % 60:02d}m")


if __name__ == "__main__":
    main()
