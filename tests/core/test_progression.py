"""Tests for progress / play: application, transforms, rejection."""

import logging

import pytest

from chessfold.core.board import Board
from chessfold.core.enums import Color, PieceType
from chessfold.core.exceptions import IllegalMove
from chessfold.core.move import GameMove, Move, Replace
from chessfold.core.piece import Piece
from chessfold.core.progression import play, progress
from chessfold.core.rules import Rules
from chessfold.core.scenarios import castling_state, en_passant_state


class TestProgress:
    def test_appends_history(self, initial) -> None:
        state = progress(initial, Move("e2", "e4"))
        assert state.moves == (GameMove(Color.WHITE, Move("e2", "e4")),)
        assert state.board["e4"] == Piece(Color.WHITE, PieceType.PAWN)
        assert state.board.is_empty("e2")

    def test_input_untouched(self, initial) -> None:
        before = initial.copy()
        progress(initial, Move("g1", "f3"))
        assert initial == before

    def test_capture(self, initial) -> None:
        state = play(
            initial, [Move("e2", "e4"), Move("d7", "d5"), Move("e4", "d5")]
        )
        assert state.board["d5"] == Piece(Color.WHITE, PieceType.PAWN)
        assert len(state.board) == 31

    def test_double_step_only_once(self, initial) -> None:
        state = play(initial, [Move("a2", "a3"), Move("h7", "h6")])
        assert "a5" not in Rules.legal_destinations(state, "a3")
        with pytest.raises(IllegalMove):
            progress(state, Move("a3", "a5"))

    def test_logs_applied_move(self, initial, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessfold.core.progression"):
            progress(initial, Move("e2", "e4"))
        assert "Applied white:e2e4" in caplog.text


class TestTransforms:
    def test_castling_kingside(self, castling) -> None:
        state = progress(castling, Move("e1", "g1"))
        assert state.board["g1"] == Piece(Color.WHITE, PieceType.KING)
        assert state.board["f1"] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.board.is_empty("h1")
        assert state.board.is_empty("e1")
        assert state.moves[-1].transform == Move("h1", "f1")

    def test_castling_queenside_black(self, castling) -> None:
        state = play(castling, [Move("a1", "a2"), Move("e8", "c8")])
        assert state.board["c8"] == Piece(Color.BLACK, PieceType.KING)
        assert state.board["d8"] == Piece(Color.BLACK, PieceType.ROOK)
        assert state.board.is_empty("a8")

    def test_en_passant_removes_side_pawn(self, en_passant) -> None:
        state = play(en_passant, [Move("g7", "g5"), Move("f5", "g6")])
        assert state.board["g6"] == Piece(Color.WHITE, PieceType.PAWN)
        assert state.board.is_empty("g5")
        assert state.board.is_empty("f5")
        assert state.moves[-1].transform == Replace(
            "g5", Piece(Color.BLACK, PieceType.PAWN)
        )

    def test_en_passant_expires(self, initial) -> None:
        state = play(
            initial,
            [
                Move("e2", "e4"), Move("a7", "a6"),
                Move("e4", "e5"), Move("d7", "d5"),
            ],
        )
        assert set(Rules.legal_destinations(state, "e5")) == {"e6", "d6"}
        state = play(state, [Move("g1", "f3"), Move("a6", "a5")])
        assert Rules.legal_destinations(state, "e5") == ["e6"]

    def test_promotion_to_queen(self, make_state) -> None:
        state = make_state({"e7": "P", "a1": "K", "h7": "k"})
        state = progress(state, Move("e7", "e8"))
        assert state.board["e8"] == Piece(Color.WHITE, PieceType.QUEEN)
        assert state.board.is_empty("e7")

    def test_capture_promotion_black(self, make_state) -> None:
        history = [GameMove(Color.WHITE, Move("h2", "h3"))]
        state = make_state({"d2": "p", "c1": "N", "h3": "K", "a8": "k"}, history)
        state = progress(state, Move("d2", "c1"))
        assert state.board["c1"] == Piece(Color.BLACK, PieceType.QUEEN)


class TestRejection:
    def test_wrong_color(self, initial) -> None:
        with pytest.raises(IllegalMove) as excinfo:
            progress(initial, Move("e7", "e5"))
        assert excinfo.value.from_sq == "e7"
        assert excinfo.value.to_sq == "e5"
        assert str(excinfo.value) == "[e7, e5] is not a valid move"

    def test_empty_source(self, initial) -> None:
        with pytest.raises(IllegalMove, match=r"\[e4, e5\]"):
            progress(initial, Move("e4", "e5"))

    def test_unreachable_destination(self, initial) -> None:
        with pytest.raises(IllegalMove):
            progress(initial, Move("e2", "e5"))

    def test_pinned_piece(self, make_state) -> None:
        state = make_state({"e1": "K", "e2": "N", "e8": "r"})
        with pytest.raises(IllegalMove) as excinfo:
            progress(state, Move("e2", "c3"))
        assert excinfo.value.reason

    def test_state_unchanged_after_rejection(self, initial) -> None:
        state = progress(initial, Move("e2", "e4"))
        before = state.copy()
        with pytest.raises(IllegalMove):
            progress(state, Move("e4", "e5"))  # white cannot move twice
        assert state == before
        assert len(state.moves) == 1

    def test_is_value_error(self, initial) -> None:
        with pytest.raises(ValueError):
            progress(initial, Move("a1", "a5"))

    def test_play_stops_at_first_illegal(self, initial) -> None:
        with pytest.raises(IllegalMove) as excinfo:
            play(initial, [Move("e2", "e4"), Move("e4", "e5"), Move("e7", "e5")])
        assert (excinfo.value.from_sq, excinfo.value.to_sq) == ("e4", "e5")

    def test_logs_rejection(self, initial, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessfold.core.progression"):
            with pytest.raises(IllegalMove):
                progress(initial, Move("e2", "e5"))
        assert "Rejected e2e5" in caplog.text


class TestFoldConsistency:
    def test_board_equals_replayed_history(self, initial) -> None:
        state = play(
            initial,
            [
                Move("e2", "e4"), Move("d7", "d5"),
                Move("e4", "d5"), Move("g8", "f6"),
                Move("g1", "f3"), Move("f6", "d5"),
                Move("f1", "c4"), Move("e7", "e6"),
                Move("e1", "g1"),
            ],
        )
        assert state.board["g1"] == Piece(Color.WHITE, PieceType.KING)
        assert state.board["f1"] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.replayed().board == state.board

    def test_scenario_transforms_replay(self) -> None:
        state = play(castling_state(), [Move("e1", "c1"), Move("e8", "g8")])
        assert state.replayed(castling_state().board).board == state.board

        # The seeded history starts from the pawn on f4
        start = Board.from_placement({"f4": "P", "g7": "p", "e7": "p"})
        state = play(en_passant_state(), [Move("e7", "e5"), Move("f5", "e6")])
        assert state.replayed(start).board == state.board
