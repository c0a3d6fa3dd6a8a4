"""The single aggregate every simulation component reads and mutates."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from faction_automata.config.types import SimulationConfig
from faction_automata.domain.board import EMPTY, ChunkedBoard, Coord, FactionId
from faction_automata.domain.factions import FactionState, create_faction_states
from faction_automata.domain.snapshot import BoardSnapshot, FactionSummary
from faction_automata.simulation.frontier import is_frontier


@dataclass
class SimulationContext:
    """Board, per-faction caches, configuration and the shared random source."""

    config: SimulationConfig
    board: ChunkedBoard
    factions: dict[FactionId, FactionState]
    rng: Random

    @classmethod
    def create(cls, config: SimulationConfig, rng: Random | None = None) -> SimulationContext:
        """Build an empty board and empty faction states.

        When ``rng`` is omitted a ``Random`` seeded from ``config.seed`` is used
        (an unseeded source when ``config.seed`` is ``None``).
        """
        return cls(
            config=config,
            board=ChunkedBoard(config.board_size, config.chunk_size),
            factions=create_faction_states(config.faction_count),
            rng=rng if rng is not None else Random(config.seed),
        )

    def snapshot(self, tick: int, years: int) -> BoardSnapshot:
        summaries = tuple(
            FactionSummary(
                faction=state.faction,
                owned=len(state.owned),
                frontier=len(state.frontier),
                capital=state.capital,
            )
            for state in self.factions.values()
        )
        return BoardSnapshot(
            tick=tick,
            years=years,
            board_size=self.board.board_size,
            cells=self.board.rows(),
            factions=summaries,
        )

    def consistency_errors(self) -> list[str]:
        """Compare every cached set against the board; return human-readable mismatches.

        This is an O(board) audit meant for tests and debugging, never for the
        per-tick path.
        """
        errors: list[str] = []
        actual: dict[FactionId, set[Coord]] = {faction: set() for faction in self.factions}
        for coord, cell in self.board.cells():
            if cell is EMPTY:
                continue
            if cell not in actual:
                errors.append(f"{coord} holds unknown faction {cell}")
                continue
            actual[cell].add(coord)
        for faction, state in self.factions.items():
            if state.owned != actual[faction]:
                errors.append(f"faction {faction} owned set disagrees with board")
            expected_frontier = {c for c in actual[faction] if is_frontier(self.board, *c)}
            if state.frontier != expected_frontier:
                errors.append(f"faction {faction} frontier set disagrees with board")
            if state.capital is not None and state.capital not in state.owned:
                errors.append(f"faction {faction} capital {state.capital} is not owned")
            if not state.owned and state.capital is not None:
                errors.append(f"faction {faction} has no territory but keeps a capital")
        return errors
