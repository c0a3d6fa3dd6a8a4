"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve a run artifact path against the run directory.

    Relative paths are joined onto *base_dir*; absolute paths are kept. The
    result must be *base_dir* itself or lie beneath it, otherwise
    :exc:`ValueError` is raised.
    """
    base = Path(base_dir).resolve()
    resolved = (base / path).resolve()
    if not resolved.is_relative_to(base):
        raise ValueError(f"{path} resolves outside run directory {base}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def territory_log_path(out_dir: Path) -> Path:
    """Return path to the per-faction territory log Parquet file."""
    return logs_dir(out_dir) / "territory_log.parquet"


def final_frame_path(out_dir: Path) -> Path:
    """Return path to the PNG frame of the last rendered snapshot."""
    return out_dir / "final_frame.png"


def summary_path(out_dir: Path) -> Path:
    return out_dir / "summary.json"
