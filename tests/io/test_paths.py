from __future__ import annotations

from pathlib import Path

import pytest

from faction_automata.io.paths import (
    final_frame_path,
    resolve_within_base,
    summary_path,
    territory_log_path,
)


class TestResolveWithinBase:
    def test_relative_path_inside_base(self, tmp_path: Path) -> None:
        assert resolve_within_base(Path("runs/a"), tmp_path) == (tmp_path / "runs" / "a").resolve()

    def test_base_itself_is_allowed(self, tmp_path: Path) -> None:
        assert resolve_within_base(tmp_path, tmp_path) == tmp_path.resolve()

    def test_escape_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            resolve_within_base(Path("../outside"), tmp_path)

    def test_absolute_path_outside_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="outside"):
            resolve_within_base(tmp_path.parent / "elsewhere.png", tmp_path / "run")


class TestRunPaths:
    def test_layout(self, tmp_path: Path) -> None:
        assert territory_log_path(tmp_path) == tmp_path / "logs" / "territory_log.parquet"
        assert final_frame_path(tmp_path) == tmp_path / "final_frame.png"
        assert summary_path(tmp_path) == tmp_path / "summary.json"
