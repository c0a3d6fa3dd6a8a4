"""Parquet persistence of per-faction territory statistics.

The log records what each rendered snapshot looked like; it is an output of
the run and is never read back to resume one.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from faction_automata.config.constants import FLUSH_THRESHOLD
from faction_automata.domain.snapshot import BoardSnapshot
from faction_automata.io.schemas import TERRITORY_LOG_COLUMNS, TERRITORY_LOG_SCHEMA
from faction_automata.metrics.territory import (
    cluster_count_by_faction,
    contested_border_fraction,
)


def flush_territory_columns(
    columns: dict[str, list[int | float | bool]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated territory rows to Parquet and clear in-memory buffers."""
    if not columns["tick"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TERRITORY_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(log_path, TERRITORY_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class TerritoryLogWriter:
    """Renderer that appends one row per faction for every snapshot it receives."""

    def __init__(self, log_path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.flush_threshold = flush_threshold
        self._writer: pq.ParquetWriter | None = None
        self._closed = False
        self._columns: dict[str, list[int | float | bool]] = {
            name: [] for name in TERRITORY_LOG_COLUMNS
        }

    def __call__(self, snapshot: BoardSnapshot) -> None:
        if self._closed:
            raise ValueError("territory log is already closed")
        clusters = cluster_count_by_faction(snapshot)
        contested = contested_border_fraction(snapshot)
        columns = self._columns
        for summary in snapshot.factions:
            columns["tick"].append(snapshot.tick)
            columns["years"].append(snapshot.years)
            columns["faction"].append(summary.faction)
            columns["owned"].append(summary.owned)
            columns["frontier"].append(summary.frontier)
            columns["clusters"].append(clusters.get(summary.faction, 0))
            columns["has_capital"].append(summary.capital is not None)
            columns["contested_border_fraction"].append(contested)
        if len(columns["tick"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        self._writer = flush_territory_columns(self._columns, self.log_path, self._writer)

    def close(self) -> None:
        """Flush remaining rows and close the file; writes an empty table if nothing was logged.

        Closing twice is a no-op.
        """
        if self._closed:
            return
        self.flush()
        if self._writer is None:
            pq.write_table(TERRITORY_LOG_SCHEMA.empty_table(), self.log_path)
        else:
            self._writer.close()
            self._writer = None
        self._closed = True

    def __enter__(self) -> TerritoryLogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
