"""CLI entrypoint for running a territory simulation.

Supports ``--config path/to/config.json`` for reproducible runs. CLI
arguments override config-file values; config-file values override built-in
defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from random import Random
from typing import TextIO

from faction_automata.config.types import RenderMode, SimulationConfig
from faction_automata.io.paths import final_frame_path, summary_path, territory_log_path
from faction_automata.io.schemas import TERRITORY_LOG_SCHEMA_VERSION
from faction_automata.render.image import FinalFrameRenderer
from faction_automata.render.palette import random_palette
from faction_automata.render.terminal import TerminalRenderer, hidden_cursor
from faction_automata.simulation.engine import Renderer, Simulation
from faction_automata.simulation.persistence import TerritoryLogWriter

logger = logging.getLogger(__name__)

_CONFIG_FIELDS = {f.name for f in fields(SimulationConfig)}


def _parse_render_mode(raw: str) -> RenderMode:
    """Parse CLI render-mode value into RenderMode enum."""
    try:
        return RenderMode(raw.lower())
    except ValueError as exc:
        valid = ", ".join(m.value for m in RenderMode)
        raise ValueError(f"render-mode must be one of {valid}") from exc


def _load_config_file(path: Path) -> dict[str, object]:
    raw = json.loads(Path(path).read_text())
    if not isinstance(raw, dict):
        raise ValueError("config file must contain a JSON object")
    unknown = sorted(set(raw) - _CONFIG_FIELDS)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    return raw


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge CLI arguments over config-file values over dataclass defaults."""
    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = _load_config_file(args.config)

    values: dict[str, object] = dict(file_cfg)
    for name in _CONFIG_FIELDS:
        cli_val = getattr(args, name, None)
        if cli_val is not None:
            values[name] = cli_val
    mode = values.get("render_mode")
    if isinstance(mode, str):
        values["render_mode"] = _parse_render_mode(mode)
    return SimulationConfig(**values)  # type: ignore[arg-type]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate competing factions growing on a grid")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--board-size", dest="board_size", type=int, default=None)
    parser.add_argument("--chunk-size", dest="chunk_size", type=int, default=None)
    parser.add_argument(
        "--init-population-count", dest="init_population_count", type=int, default=None
    )
    parser.add_argument("--growth-rate", dest="growth_rate", type=int, default=None)
    parser.add_argument("--weight-adjustment", dest="weight_adjustment", type=float, default=None)
    parser.add_argument("--faction-count", dest="faction_count", type=int, default=None)
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--render-every", dest="render_every", type=int, default=None)
    parser.add_argument(
        "--render-final", dest="render_final", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--render-mode", dest="render_mode", type=str, default=None)
    parser.add_argument("--spawn-jitter", dest="spawn_jitter", type=int, default=None)
    parser.add_argument("--sub-steps-low", dest="sub_steps_low", type=int, default=None)
    parser.add_argument("--sub-steps-high", dest="sub_steps_high", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Skip terminal output (logs and images are still written)",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write territory log, final frame and summary under this directory",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> dict[str, object]:
    """Run one simulation and print a JSON summary; returns the summary."""
    out = stream if stream is not None else sys.stdout
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = build_config(args)
    rng = Random(config.seed)
    palette = random_palette(rng, config.faction_count)

    renderers: list[Renderer] = []
    terminal: TerminalRenderer | None = None
    if not args.no_render:
        terminal = TerminalRenderer(palette, mode=config.render_mode, stream=out)
        renderers.append(terminal)
    log_writer: TerritoryLogWriter | None = None
    frame_renderer: FinalFrameRenderer | None = None
    if args.out_dir is not None:
        out_dir = Path(args.out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        log_writer = TerritoryLogWriter(territory_log_path(out_dir))
        frame_renderer = FinalFrameRenderer(final_frame_path(out_dir), palette, base_dir=out_dir)
        renderers.extend([log_writer, frame_renderer])

    simulation = Simulation(config, rng=rng, renderers=renderers)
    try:
        if terminal is not None:
            with hidden_cursor(out):
                result = simulation.run()
        else:
            result = simulation.run()
    finally:
        if log_writer is not None:
            log_writer.close()

    summary: dict[str, object] = {
        "ticks": result.ticks,
        "years": result.years,
        "owned_counts": {str(f): n for f, n in result.owned_counts.items()},
        "surviving_factions": list(result.surviving_factions),
        "elapsed_ms": result.elapsed_ms,
    }
    if frame_renderer is not None and args.out_dir is not None:
        frame = frame_renderer.save()
        summary["final_frame"] = str(frame) if frame is not None else None
        summary["territory_log_schema_version"] = TERRITORY_LOG_SCHEMA_VERSION
        summary_path(Path(args.out_dir)).write_text(
            json.dumps(summary, ensure_ascii=False, indent=2)
        )
        logger.info("wrote run artifacts to %s", args.out_dir)
    out.write(json.dumps(summary, ensure_ascii=False, indent=2) + "\n")
    out.write(f"TOTAL RUNTIME: {result.elapsed_ms}ms\n")
    return summary


if __name__ == "__main__":
    main()
