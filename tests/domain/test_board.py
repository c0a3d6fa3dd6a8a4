"""Tests for faction_automata.domain.board module."""

from __future__ import annotations

import pytest

from faction_automata.domain.board import (
    EMPTY,
    ChunkedBoard,
    OutOfBoundsError,
    chunk_coordinates,
    global_coordinates,
)


class TestChunkTranslation:
    def test_round_trip_every_coordinate(self) -> None:
        for x in range(50):
            for y in range(50):
                chunk = chunk_coordinates(x, y, 10)
                assert global_coordinates(*chunk, 10) == (x, y)

    def test_round_trip_uneven_chunks(self) -> None:
        for x in range(7):
            for y in range(7):
                assert global_coordinates(*chunk_coordinates(x, y, 3), 3) == (x, y)

    def test_known_translation(self) -> None:
        assert chunk_coordinates(23, 7, 10) == (2, 0, 3, 7)

    def test_translation_is_injective(self) -> None:
        seen = {chunk_coordinates(x, y, 4) for x in range(12) for y in range(12)}
        assert len(seen) == 144


class TestChunkedBoard:
    def test_new_board_is_empty(self) -> None:
        board = ChunkedBoard(12, 5)
        assert board.chunk_count == 3
        assert all(cell is EMPTY for _, cell in board.cells())
        assert board.count(EMPTY) == 144

    def test_set_then_get(self) -> None:
        board = ChunkedBoard(10, 10)
        board.set(3, 9, 4)
        assert board.get(3, 9) == 4
        assert board.get(9, 3) is EMPTY

    def test_cells_in_distinct_chunks_do_not_alias(self) -> None:
        board = ChunkedBoard(20, 10)
        board.set(1, 1, 0)
        board.set(11, 1, 1)
        board.set(1, 11, 2)
        assert board.get(1, 1) == 0
        assert board.get(11, 1) == 1
        assert board.get(1, 11) == 2
        assert board.count(EMPTY) == 397

    def test_set_empty_clears(self) -> None:
        board = ChunkedBoard(4, 2)
        board.set(0, 0, 1)
        board.set(0, 0, EMPTY)
        assert board.get(0, 0) is EMPTY

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (10, 0), (0, 10), (10, 10)])
    def test_out_of_bounds_get_raises(self, coord: tuple[int, int]) -> None:
        board = ChunkedBoard(10, 5)
        with pytest.raises(OutOfBoundsError):
            board.get(*coord)

    def test_out_of_bounds_is_index_error(self) -> None:
        board = ChunkedBoard(10, 5)
        with pytest.raises(IndexError):
            board.set(10, 0, 1)

    def test_trailing_chunk_padding_not_addressable(self) -> None:
        board = ChunkedBoard(7, 3)
        with pytest.raises(OutOfBoundsError):
            board.get(8, 0)

    @pytest.mark.parametrize("value", [-1, True, "a", 1.5])
    def test_invalid_cell_value_rejected(self, value: object) -> None:
        board = ChunkedBoard(4, 2)
        with pytest.raises(ValueError):
            board.set(0, 0, value)  # type: ignore[arg-type]

    def test_in_bounds(self) -> None:
        board = ChunkedBoard(5, 5)
        assert board.in_bounds(0, 0)
        assert board.in_bounds(4, 4)
        assert not board.in_bounds(5, 0)
        assert not board.in_bounds(0, -1)

    def test_rows_is_detached_copy(self) -> None:
        board = ChunkedBoard(3, 2)
        board.set(0, 2, 1)
        rows = board.rows()
        assert rows[0][2] == 1
        board.set(0, 2, EMPTY)
        assert rows[0][2] == 1
        assert len(rows) == 3 and all(len(row) == 3 for row in rows)

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(ValueError):
            ChunkedBoard(0, 1)
        with pytest.raises(ValueError):
            ChunkedBoard(1, 0)
