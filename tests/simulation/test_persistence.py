"""Tests for the Parquet territory log writer."""

from __future__ import annotations

import math
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from faction_automata.domain.snapshot import BoardSnapshot, FactionSummary
from faction_automata.io.schemas import TERRITORY_LOG_COLUMNS, TERRITORY_LOG_SCHEMA
from faction_automata.simulation.persistence import TerritoryLogWriter


def _snapshot(tick: int) -> BoardSnapshot:
    cells = (
        (0, 0, None),
        (None, 1, None),
        (None, None, None),
    )
    return BoardSnapshot(
        tick=tick,
        years=tick // 12,
        board_size=3,
        cells=cells,
        factions=(
            FactionSummary(faction=0, owned=2, frontier=2, capital=(0, 0)),
            FactionSummary(faction=1, owned=1, frontier=1, capital=None),
        ),
    )


class TestTerritoryLogWriter:
    def test_one_row_per_faction_per_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "logs" / "territory.parquet"
        with TerritoryLogWriter(path) as writer:
            writer(_snapshot(12))
            writer(_snapshot(24))
        table = pq.read_table(path)
        assert table.schema.equals(TERRITORY_LOG_SCHEMA)
        assert table.column_names == TERRITORY_LOG_COLUMNS
        rows = table.to_pylist()
        assert len(rows) == 4
        assert [r["tick"] for r in rows] == [12, 12, 24, 24]
        assert [r["years"] for r in rows] == [1, 1, 2, 2]
        first = rows[0]
        assert first["faction"] == 0
        assert first["owned"] == 2
        assert first["clusters"] == 1
        assert first["has_capital"] is True
        assert rows[1]["has_capital"] is False
        # (0,0)-(0,1) same faction, (0,1)-(1,1) contested.
        assert math.isclose(first["contested_border_fraction"], 0.5)

    def test_small_flush_threshold_keeps_every_row(self, tmp_path: Path) -> None:
        path = tmp_path / "territory.parquet"
        writer = TerritoryLogWriter(path, flush_threshold=1)
        for tick in range(1, 6):
            writer(_snapshot(tick))
        writer.close()
        assert pq.read_table(path).num_rows == 10

    def test_close_without_rows_writes_empty_table(self, tmp_path: Path) -> None:
        path = tmp_path / "territory.parquet"
        TerritoryLogWriter(path).close()
        table = pq.read_table(path)
        assert table.num_rows == 0
        assert table.column_names == TERRITORY_LOG_COLUMNS

    def test_rejects_non_positive_threshold(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            TerritoryLogWriter(tmp_path / "x.parquet", flush_threshold=0)

    def test_close_inside_context_keeps_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "territory.parquet"
        with TerritoryLogWriter(path) as writer:
            writer(_snapshot(5))
            writer.close()
        assert pq.read_table(path).num_rows == 2

    def test_second_close_is_noop(self, tmp_path: Path) -> None:
        path = tmp_path / "territory.parquet"
        writer = TerritoryLogWriter(path, flush_threshold=1)
        writer(_snapshot(5))
        writer.close()
        writer.close()
        assert pq.read_table(path).num_rows == 2

    def test_rejects_rows_after_close(self, tmp_path: Path) -> None:
        writer = TerritoryLogWriter(tmp_path / "territory.parquet")
        writer.close()
        with pytest.raises(ValueError, match="closed"):
            writer(_snapshot(5))
