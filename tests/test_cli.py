import json

from click.testing import CliRunner

from solarevents.cli import almanac, compute, summarize, validate


def test_compute_named_site():
  result = CliRunner().invoke(compute.main, ["--site", "london", "--date", "2024-03-20"])
  assert result.exit_code == 0, result.output
  assert "Site: london" in result.output
  assert "UTC+00:00" in result.output
  assert "Sunrise: 06:0" in result.output
  assert "Sunset:  18:1" in result.output
  assert "Day length: 12h" in result.output


def test_compute_coordinates_json():
  result = CliRunner().invoke(compute.main, [
    "--lat", "40.7128", "--lon", "-74.006", "--offset", "-240",
    "--date", "2025-07-04", "--json", "--geometry",
  ])
  assert result.exit_code == 0, result.output
  payload = json.loads(result.output)
  assert payload["date"] == "2025-07-04"
  assert payload["sunrise"].startswith("2025-07-04T05:")
  assert payload["sunrise"].endswith("-04:00")
  assert payload["daylight"] == "rises_and_sets"
  assert "declination" in payload["geometry"]


def test_compute_polar_night():
  result = CliRunner().invoke(compute.main, ["--site", "longyearbyen", "--date", "2025-12-21"])
  assert result.exit_code == 0, result.output
  assert "Sunrise: --:--:-- (always below)" in result.output
  assert "Day length" not in result.output


def test_compute_rejects_latitude():
  result = CliRunner().invoke(compute.main, ["--lat", "91", "--lon", "0"])
  assert result.exit_code == 2
  assert "latitude" in result.output


def test_compute_requires_location():
  result = CliRunner().invoke(compute.main, ["--date", "2025-01-01"])
  assert result.exit_code == 2


def test_compute_unknown_site():
  result = CliRunner().invoke(compute.main, ["--site", "atlantis"])
  assert result.exit_code == 1
  assert "unknown site" in result.output


def test_compute_sites_file_without_mapping(tmp_path):
  sites = tmp_path / "sites.yaml"
  sites.write_text("- a\n- b\n", encoding="utf-8")
  result = CliRunner().invoke(compute.main, ["--site", "a", "--sites-file", str(sites)])
  assert result.exit_code == 1
  assert "no 'sites' mapping" in result.output


def test_compute_site_conflicts_with_coordinates():
  result = CliRunner().invoke(compute.main, ["--site", "london", "--lat", "10", "--lon", "10"])
  assert result.exit_code == 2
  assert "--site cannot be combined" in result.output


def test_almanac_rejects_year_zero(tmp_path):
  cfg = tmp_path / "almanac.yaml"
  cfg.write_text(f"year: 0\nsites: [london]\noutput:\n  path: {tmp_path / 'out'}\n", encoding="utf-8")
  result = CliRunner().invoke(almanac.main, ["--config", str(cfg)])
  assert result.exit_code == 1
  assert "year" in result.output
  assert not (tmp_path / "out").exists()


def test_almanac_validate_summarize(tmp_path):
  cfg = tmp_path / "almanac.yaml"
  out = tmp_path / "out"
  cfg.write_text(
    "year: 2024\n"
    "sites:\n"
    "  - london\n"
    "  - name: cabin\n"
    "    latitude: 69.0\n"
    "    longitude: 20.0\n"
    "    utc_offset_minutes: 60\n"
    "output:\n"
    f"  path: {out}\n"
    "  format: jsonl\n",
    encoding="utf-8",
  )
  runner = CliRunner()
  result = runner.invoke(almanac.main, ["--config", str(cfg)])
  assert result.exit_code == 0, result.output
  manifest = out / "2024" / "manifest.json"
  assert (out / "2024" / "almanac_london_2024.jsonl").exists()
  meta = json.loads(manifest.read_text(encoding="utf-8"))
  assert meta["sites"]["london"]["days"] == 366
  assert meta["sites"]["cabin"]["polar_night"] > 0

  result = runner.invoke(validate.main, ["--manifest", str(manifest)])
  assert result.exit_code == 0, result.output
  assert "Validation OK" in result.output
  assert "polar days at cabin" in result.output

  result = runner.invoke(summarize.main, ["--manifest", str(manifest)])
  assert result.exit_code == 0, result.output
  assert "london" in result.output
  assert "Total sites: 2, Year: 2024" in result.output


def test_validate_rejects_short_year(tmp_path):
  manifest = tmp_path / "manifest.json"
  manifest.write_text(json.dumps({"year": 2025, "sites": {"x": {"days": 300}}}), encoding="utf-8")
  result = CliRunner().invoke(validate.main, ["--manifest", str(manifest)])
  assert result.exit_code == 1
