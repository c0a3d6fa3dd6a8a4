"""Parquet schema definitions for territory run artifacts.

Every module that persists or reads run logs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

TERRITORY_LOG_SCHEMA_VERSION = 1

TERRITORY_LOG_SCHEMA = pa.schema(
    [
        ("tick", pa.int64()),
        ("years", pa.int64()),
        ("faction", pa.int64()),
        ("owned", pa.int64()),
        ("frontier", pa.int64()),
        ("clusters", pa.int64()),
        ("has_capital", pa.bool_()),
        ("contested_border_fraction", pa.float64()),
    ]
)
"""One row per faction per logged snapshot."""

TERRITORY_LOG_COLUMNS = [f.name for f in TERRITORY_LOG_SCHEMA]
