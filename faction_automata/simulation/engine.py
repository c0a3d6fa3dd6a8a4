"""Tick driver: samples factions and frontier tiles and feeds the growth rule."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from random import Random

from faction_automata.config.constants import MAX_SAMPLE_PER_SUB_STEP, YEAR_LENGTH
from faction_automata.config.types import SimulationConfig, SimulationResult
from faction_automata.domain.snapshot import BoardSnapshot
from faction_automata.simulation.capitals import assign_initial_capitals
from faction_automata.simulation.context import SimulationContext
from faction_automata.simulation.growth import GrowthOutcome, attempt_growth
from faction_automata.simulation.seeding import seed_initial_population

logger = logging.getLogger(__name__)

Renderer = Callable[[BoardSnapshot], None]
"""Anything that consumes a read-only board snapshot."""


@dataclass(frozen=True)
class TickReport:
    """What happened during one outer tick."""

    tick: int
    years: int
    sub_steps: int
    attempts: int
    outcomes: dict[GrowthOutcome, int] = field(default_factory=dict)
    rendered: bool = False


class Simulation:
    """Owns one :class:`SimulationContext` and advances it tick by tick."""

    def __init__(
        self,
        config: SimulationConfig,
        rng: Random | None = None,
        renderers: Iterable[Renderer] = (),
        seed_population: bool = True,
    ) -> None:
        self.config = config
        self.ctx = SimulationContext.create(config, rng)
        self.renderers: list[Renderer] = list(renderers)
        self.tick = 0
        self.years = 0
        self.sub_step_bounds = config.sub_step_bounds()
        self._last_rendered_tick: int | None = None
        if seed_population:
            seed_initial_population(self.ctx)
            assign_initial_capitals(self.ctx)

    def draw_sub_steps(self) -> int:
        """Sub-steps for the next tick, uniform over ``[low, high)``.

        Collapses to ``low`` when the range is empty (tiny boards).
        """
        low, high = self.sub_step_bounds
        if high <= low:
            return low
        return self.ctx.rng.randrange(low, high)

    def snapshot(self) -> BoardSnapshot:
        return self.ctx.snapshot(self.tick, self.years)

    def render(self) -> None:
        """Hand a fresh snapshot to every renderer."""
        if not self.renderers:
            return
        snapshot = self.snapshot()
        for renderer in self.renderers:
            renderer(snapshot)
        self._last_rendered_tick = self.tick

    def step(self) -> TickReport:
        """Advance exactly one outer tick."""
        ctx = self.ctx
        rng = ctx.rng
        faction_ids = list(ctx.factions)
        outcomes: Counter[GrowthOutcome] = Counter()
        sub_steps = self.draw_sub_steps()
        attempts = 0
        for _ in range(sub_steps):
            faction = rng.choice(faction_ids)
            sample_size = rng.randrange(MAX_SAMPLE_PER_SUB_STEP)
            frontier = ctx.factions[faction].frontier
            if not frontier or sample_size == 0:
                continue
            tiles = rng.sample(sorted(frontier), min(sample_size, len(frontier)))
            for x, y in tiles:
                outcomes[attempt_growth(ctx, x, y, faction)] += 1
                attempts += 1

        self.tick += 1
        if self.tick % YEAR_LENGTH == 0:
            self.years += 1
        rendered = self.tick % self.config.render_every == 0
        if rendered:
            self.render()
        return TickReport(
            tick=self.tick,
            years=self.years,
            sub_steps=sub_steps,
            attempts=attempts,
            outcomes=dict(outcomes),
            rendered=rendered,
        )

    def result(self, elapsed_ms: int = 0) -> SimulationResult:
        return SimulationResult(
            ticks=self.tick,
            years=self.years,
            owned_counts={f: len(s.owned) for f, s in self.ctx.factions.items()},
            capitals={f: s.capital for f, s in self.ctx.factions.items()},
            elapsed_ms=elapsed_ms,
        )

    def run(self, iterations: int | None = None) -> SimulationResult:
        """Advance ``iterations`` ticks (``config.iterations`` by default)."""
        total = self.config.iterations if iterations is None else iterations
        if total < 0:
            raise ValueError("iterations must be >= 0")
        logger.info(
            "starting run: board=%dx%d factions=%d ticks=%d",
            self.config.board_size,
            self.config.board_size,
            self.config.faction_count,
            total,
        )
        started = time.perf_counter()
        for _ in range(total):
            self.step()
        if self.config.render_final and total > 0 and self._last_rendered_tick != self.tick:
            self.render()
        elapsed_ms = round((time.perf_counter() - started) * 1000)
        result = self.result(elapsed_ms)
        logger.info(
            "finished run after %d ticks (%d years) in %dms; survivors=%s",
            result.ticks,
            result.years,
            elapsed_ms,
            list(result.surviving_factions),
        )
        return result


def run_simulation(
    config: SimulationConfig,
    renderers: Iterable[Renderer] = (),
    rng: Random | None = None,
) -> SimulationResult:
    """Seed a fresh board and run it for ``config.iterations`` ticks."""
    return Simulation(config, rng=rng, renderers=renderers).run()
