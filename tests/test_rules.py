"""Legality: the sandwich rule, bounds and occupied cells."""

import pytest

from othello.core import rules
from othello.core.board import Board
from othello.core.rules import classify, has_any_legal_move, is_legal, legal_moves, scan_direction
from othello.types import Occupancy, Seat

O, X = Seat(0), Seat(1)


class TestClassify:
    def test_exhaustive(self):
        assert classify(None, O) is Occupancy.EMPTY
        assert classify(O, O) is Occupancy.OWN
        assert classify(X, O) is Occupancy.OPPONENT
        assert classify(Seat(2), O) is Occupancy.OPPONENT


class TestOpening:
    def test_legal_moves_from_start(self):
        b = Board.start(8)
        assert legal_moves(b, O) == [(2, 4), (3, 5), (4, 2), (5, 3)]
        assert legal_moves(b, X) == [(2, 3), (3, 2), (4, 5), (5, 4)]

    def test_flanking_single_disc_is_legal(self):
        assert is_legal(Board.start(8), O, 3, 5)

    def test_non_adjacent_cell_is_illegal(self):
        assert not is_legal(Board.start(8), O, 0, 0)


class TestIllegal:
    @pytest.mark.parametrize("r,c", [(3, 3), (3, 4), (4, 3), (4, 4)])
    def test_occupied_cells(self, r, c):
        b = Board.start(8)
        assert not is_legal(b, O, r, c)
        assert not is_legal(b, X, r, c)

    @pytest.mark.parametrize("r,c", [(-1, -1), (-1, 3), (8, 0), (0, 8), (100, 100)])
    def test_out_of_bounds_fails_closed(self, r, c):
        assert not is_legal(Board.start(8), O, r, c)

    def test_occupied_even_with_capture_around(self, make_board):
        b = make_board([
            "OXX.",
            "....",
            "....",
            "....",
        ])
        # (0, 1) would close a line if it were empty
        assert not is_legal(b, O, 0, 1)


class TestScanDirection:
    def test_needs_adjacent_opponent(self, make_board):
        b = make_board([
            ".O.O",
            "....",
            "....",
            "....",
        ])
        assert not scan_direction(b, O, 0, 0, 1, 1)

    def test_gap_breaks_line(self, make_board):
        b = make_board([
            ".X.O",
            "....",
            "....",
            "....",
        ])
        assert not scan_direction(b, O, 0, 0, 1, 1)
        assert not is_legal(b, O, 0, 0)

    def test_edge_breaks_line(self, make_board):
        b = make_board([
            ".XXX",
            "....",
            "....",
            "....",
        ])
        assert not is_legal(b, O, 0, 0)

    def test_long_run_closed(self, make_board):
        b = make_board([
            ".XXO",
            "....",
            "....",
            "....",
        ])
        assert scan_direction(b, O, 0, 0, 1, 1)
        assert is_legal(b, O, 0, 0)

    def test_diagonal(self, make_board):
        b = make_board([
            "....",
            ".X..",
            "..O.",
            "....",
        ])
        assert is_legal(b, O, 0, 0)
        assert not is_legal(b, X, 0, 0)

    def test_off_grid_start(self):
        assert not scan_direction(Board.start(4), O, -1, -1, 0, 0)

    def test_third_seat_counts_as_opponent(self, make_board):
        b = make_board([
            ".ZO.",
            "....",
            "....",
            "....",
        ])
        assert is_legal(b, O, 0, 0)


class TestAnyLegalMove:
    def test_full_board(self, make_board):
        b = make_board(["OXOX", "XOXO", "OXOX", "XOXO"])
        assert not has_any_legal_move(b, O)
        assert not has_any_legal_move(b, X)

    def test_full_board_skips_cell_scan(self, make_board, monkeypatch):
        b = make_board(["OXOX", "XOXO", "OXOX", "XOXO"])

        def fail(*args):
            raise AssertionError("is_legal should not be called on a full board")

        monkeypatch.setattr(rules, "is_legal", fail)
        assert not has_any_legal_move(b, O)

    def test_only_own_discs(self, make_board):
        b = make_board([
            "....",
            ".OO.",
            ".OO.",
            "....",
        ])
        assert not has_any_legal_move(b, O)
        assert not has_any_legal_move(b, X)

    def test_start(self):
        assert has_any_legal_move(Board.start(4), O)
        assert has_any_legal_move(Board.start(4), X)
