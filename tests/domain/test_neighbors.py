"""Tests for faction_automata.domain.neighbors module."""

from __future__ import annotations

from faction_automata.domain.board import ChunkedBoard
from faction_automata.domain.neighbors import count_friendly, orthogonal_neighbors


class TestCountFriendly:
    def test_interior_of_empty_board_counts_eight(self) -> None:
        board = ChunkedBoard(5, 5)
        assert count_friendly(board, 2, 2, 0) == 8

    def test_corner_skips_out_of_bounds(self) -> None:
        board = ChunkedBoard(5, 5)
        assert count_friendly(board, 0, 0, 0) == 3
        assert count_friendly(board, 4, 4, 0) == 3

    def test_edge_counts_five(self) -> None:
        board = ChunkedBoard(5, 5)
        assert count_friendly(board, 0, 2, 0) == 5

    def test_rivals_are_not_counted(self) -> None:
        board = ChunkedBoard(3, 3)
        for x in range(3):
            for y in range(3):
                board.set(x, y, 1)
        board.set(0, 0, 0)
        board.set(2, 2, 0)
        assert count_friendly(board, 1, 1, 0) == 2
        assert count_friendly(board, 1, 1, 1) == 6

    def test_centre_cell_is_ignored(self) -> None:
        board = ChunkedBoard(3, 3)
        board.set(1, 1, 7)
        assert count_friendly(board, 1, 1, 0) == 8

    def test_hypothetical_out_of_bounds_centre(self) -> None:
        board = ChunkedBoard(3, 3)
        assert count_friendly(board, -1, -1, 0) == 1
        assert count_friendly(board, -5, -5, 0) == 0

    def test_never_exceeds_eight(self) -> None:
        board = ChunkedBoard(6, 3)
        for x in range(6):
            for y in range(6):
                assert 0 <= count_friendly(board, x, y, 0) <= 8


class TestOrthogonalNeighbors:
    def test_fixed_order_in_interior(self) -> None:
        board = ChunkedBoard(5, 5)
        assert orthogonal_neighbors(board, 2, 2) == [(1, 2), (3, 2), (2, 1), (2, 3)]

    def test_corner_drops_out_of_bounds(self) -> None:
        board = ChunkedBoard(5, 5)
        assert orthogonal_neighbors(board, 0, 0) == [(1, 0), (0, 1)]

    def test_single_cell_board_has_none(self) -> None:
        assert orthogonal_neighbors(ChunkedBoard(1, 1), 0, 0) == []
