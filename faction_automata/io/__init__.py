"""Output artifacts: Parquet schemas and path conventions."""

from faction_automata.io.paths import (
    final_frame_path,
    logs_dir,
    resolve_within_base,
    summary_path,
    territory_log_path,
)
from faction_automata.io.schemas import (
    TERRITORY_LOG_COLUMNS,
    TERRITORY_LOG_SCHEMA,
    TERRITORY_LOG_SCHEMA_VERSION,
)

__all__ = [
    "TERRITORY_LOG_COLUMNS",
    "TERRITORY_LOG_SCHEMA",
    "TERRITORY_LOG_SCHEMA_VERSION",
    "final_frame_path",
    "logs_dir",
    "resolve_within_base",
    "summary_path",
    "territory_log_path",
]
