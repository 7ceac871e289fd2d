import logging
import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

logger = logging.getLogger(__name__)

# Column order follows io.schema.AlmanacRow.
ALMANAC_SCHEMA = pa.schema([
  ("site", pa.string()),
  ("date", pa.string()),
  ("noon", pa.string()),
  ("dawn", pa.string()),
  ("sunrise", pa.string()),
  ("sunset", pa.string()),
  ("dusk", pa.string()),
  ("day_minutes", pa.float64()),
  ("twilight_minutes", pa.float64()),
  ("daylight", pa.string()),
  ("twilight", pa.string()),
  ("declination", pa.float64()),
  ("equation_of_time", pa.float64()),
])


def write_rows_parquet(rows_iter: Iterable[dict], path: str) -> int:
  rows = list(rows_iter)
  if not rows:
    return 0
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  table = pa.Table.from_pylist(rows, schema=ALMANAC_SCHEMA)
  pq.write_table(table, path, compression="snappy")
  logger.info(f"Wrote {len(rows)} rows to {path}")
  return len(rows)
