import json

import pyarrow.parquet as pq

from solarevents.core.timebase import Timebase
from solarevents.io.manifest import dataset_hash, read_manifest, write_manifest
from solarevents.io.write_jsonl import write_rows_jsonl
from solarevents.io.write_parquet import write_rows_parquet
from solarevents.model.location import get_site, make_site
from solarevents.tables.almanac import almanac_rows, daylength_summary


def test_timebase_covers_leap_year():
  tb = Timebase(2024)
  days = list(tb.days())
  assert len(days) == tb.day_count() == 366
  assert days[0].isoformat() == "2024-01-01"
  assert days[-1].isoformat() == "2024-12-31"


def test_london_almanac():
  rows = almanac_rows(get_site("london"), 2025)
  assert len(rows) == 365
  assert all(r["daylight"] == "rises_and_sets" for r in rows)
  summary = daylength_summary(rows)
  assert summary["days"] == 365
  assert summary["polar_day"] == summary["polar_night"] == 0
  # Roughly 7h50m in December, 16h40m in June
  assert 460 < summary["min_day_minutes"] < 480
  assert 990 < summary["max_day_minutes"] < 1010


def test_svalbard_almanac_counts_polar_days():
  rows = almanac_rows(get_site("longyearbyen"), 2025)
  summary = daylength_summary(rows)
  assert summary["polar_day"] > 100
  assert summary["polar_night"] > 80
  assert summary["min_day_minutes"] is not None


def test_all_polar_summary_is_empty():
  rows = [{"day_minutes": None, "daylight": "always_below"}]
  summary = daylength_summary(rows)
  assert summary["polar_night"] == 1
  assert summary["mean_day_minutes"] is None


def test_writers(tmp_path):
  rows = almanac_rows(make_site(0.0, 0.0, 0, name="null_island"), 2025)
  n = write_rows_parquet(rows, str(tmp_path / "a" / "rows.parquet"))
  assert n == 365
  table = pq.read_table(tmp_path / "a" / "rows.parquet")
  assert table.num_rows == 365
  assert table.column("site")[0].as_py() == "null_island"
  write_rows_jsonl(rows[:3], str(tmp_path / "b" / "rows.jsonl"))
  lines = (tmp_path / "b" / "rows.jsonl").read_text(encoding="utf-8").splitlines()
  assert [json.loads(x)["date"] for x in lines] == ["2025-01-01", "2025-01-02", "2025-01-03"]


def test_parquet_writer_skips_empty(tmp_path):
  assert write_rows_parquet([], str(tmp_path / "empty.parquet")) == 0
  assert not (tmp_path / "empty.parquet").exists()


def test_manifest_hash_is_stable(tmp_path):
  meta = {"year": 2025, "sites": {"x": {"days": 365}}}
  written = write_manifest(str(tmp_path / "manifest.json"), dict(meta))
  assert written["dataset_hash"] == dataset_hash(meta)
  again = write_manifest(str(tmp_path / "manifest.json"), read_manifest(str(tmp_path / "manifest.json")))
  assert again["dataset_hash"] == written["dataset_hash"]
