"""Tests for Rules: move validation, wins and stalemate."""

import pytest

from pawnchess.core.board import Board
from pawnchess.core.enums import Color, GameResult, MoveKind, RejectionReason
from pawnchess.core.move import Move, parse_move
from pawnchess.core.rules import Accepted, EnPassantMarker, Rejected, Rules
from pawnchess.core.types import D3, D4, D5, D6, D7, E2, E3, E4, E5, F2

EMPTY_ROW = "........"


def _validate(board: Board, color: Color, text: str, marker=None):
    return Rules.validate(board, color, marker, parse_move(text))


def _reason(board: Board, color: Color, text: str, marker=None) -> RejectionReason:
    result = _validate(board, color, text, marker)
    assert isinstance(result, Rejected), f"{text} unexpectedly accepted"
    return result.reason


class TestAdvance:
    def test_single_step(self, board: Board) -> None:
        assert _validate(board, Color.WHITE, "e2e3") == Accepted(MoveKind.ADVANCE)
        assert _validate(board, Color.BLACK, "e7e6") == Accepted(MoveKind.ADVANCE)

    def test_two_step_from_home(self, board: Board) -> None:
        assert _validate(board, Color.WHITE, "e2e4") == Accepted(MoveKind.DOUBLE_ADVANCE)
        assert _validate(board, Color.BLACK, "d7d5") == Accepted(MoveKind.DOUBLE_ADVANCE)

    def test_two_step_outside_home(self, board: Board) -> None:
        board.move_pawn(Move(E2, E3))
        assert _reason(board, Color.WHITE, "e3e5") == RejectionReason.ILLEGAL_TWO_STEP_ORIGIN

    def test_black_two_step_outside_home(self, board: Board) -> None:
        board.move_pawn(Move(D7, D6))
        assert _reason(board, Color.BLACK, "d6d4") == RejectionReason.ILLEGAL_TWO_STEP_ORIGIN

    def test_step_too_large(self, board: Board) -> None:
        assert _reason(board, Color.WHITE, "e2e5") == RejectionReason.STEP_TOO_LARGE

    @pytest.mark.parametrize(
        ("color", "text"),
        [(Color.WHITE, "e2e1"), (Color.WHITE, "e2e2"), (Color.BLACK, "e7e8")],
    )
    def test_wrong_direction(self, board: Board, color: Color, text: str) -> None:
        assert _reason(board, color, text) == RejectionReason.WRONG_DIRECTION_OR_NO_ADVANCE

    def test_direction_checked_before_length(self, board: Board) -> None:
        board.move_pawn(Move(E2, E5))
        assert _reason(board, Color.WHITE, "e5e1") == RejectionReason.WRONG_DIRECTION_OR_NO_ADVANCE

    def test_intermediate_square_blocked(self, board: Board) -> None:
        # White pawns on e2 and e3.
        board.move_pawn(Move(F2, E3))
        assert _reason(board, Color.WHITE, "e2e4") == RejectionReason.PATH_BLOCKED

    def test_destination_blocked(self, board: Board) -> None:
        board.move_pawn(Move(D7, E3))
        assert _reason(board, Color.WHITE, "e2e3") == RejectionReason.PATH_BLOCKED


class TestSourceAndShape:
    def test_no_pawn(self, board: Board) -> None:
        assert _reason(board, Color.WHITE, "e3e4") == RejectionReason.NO_PAWN_AT_SOURCE

    def test_opponent_pawn(self, board: Board) -> None:
        assert _reason(board, Color.WHITE, "e7e6") == RejectionReason.NO_PAWN_AT_SOURCE

    def test_source_checked_first(self, board: Board) -> None:
        assert _reason(board, Color.BLACK, "a1h8") == RejectionReason.NO_PAWN_AT_SOURCE

    @pytest.mark.parametrize("text", ["e2f2", "e2g3", "e2f4", "e2c4"])
    def test_illegal_shape(self, board: Board, text: str) -> None:
        assert _reason(board, Color.WHITE, text) == RejectionReason.ILLEGAL_MOVE_SHAPE


class TestCapture:
    def test_normal_capture(self, board: Board) -> None:
        board.move_pawn(Move(E2, E4))
        board.move_pawn(Move(D7, D5))
        result = _validate(board, Color.WHITE, "e4d5")
        assert result == Accepted(MoveKind.CAPTURE, captured=D5)

    def test_no_target(self, board: Board) -> None:
        board.move_pawn(Move(E2, E4))
        board.move_pawn(Move(D7, D5))
        assert _reason(board, Color.WHITE, "e4f5") == RejectionReason.NO_CAPTURE_TARGET

    def test_cannot_capture_own_pawn(self, board: Board) -> None:
        board.move_pawn(Move(E2, E3))
        assert _reason(board, Color.WHITE, "d2e3") == RejectionReason.NO_CAPTURE_TARGET

    def test_backwards_diagonal(self, board: Board) -> None:
        board.move_pawn(Move(E2, E4))
        board.move_pawn(Move(D7, D3))
        assert _reason(board, Color.WHITE, "e4d3") == RejectionReason.WRONG_CAPTURE_DIRECTION

    def test_black_captures_downwards(self, board: Board) -> None:
        board.move_pawn(Move(E2, E4))
        board.move_pawn(Move(D7, D5))
        assert _validate(board, Color.BLACK, "d5e4") == Accepted(MoveKind.CAPTURE, captured=E4)


class TestEnPassant:
    def _position(self) -> tuple[Board, EnPassantMarker]:
        # White pawn on e5, black has just played d7d5.
        board = Board.initial()
        board.move_pawn(Move(E2, E5))
        board.move_pawn(Move(D7, D5))
        marker = EnPassantMarker.after_double_step(Move(D7, D5), Color.BLACK)
        return board, marker

    def test_marker_squares(self) -> None:
        _, marker = self._position()
        assert marker == EnPassantMarker(target=D6, pawn=D5, color=Color.BLACK)

    def test_white_marker(self) -> None:
        marker = EnPassantMarker.after_double_step(Move(E2, E4), Color.WHITE)
        assert marker.target == E3
        assert marker.pawn == E4

    def test_capture_reports_real_pawn_square(self) -> None:
        board, marker = self._position()
        result = _validate(board, Color.WHITE, "e5d6", marker)
        assert result == Accepted(MoveKind.EN_PASSANT, captured=D5)

    def test_without_marker_rejected(self) -> None:
        board, _ = self._position()
        assert _reason(board, Color.WHITE, "e5d6") == RejectionReason.NO_CAPTURE_TARGET

    def test_own_marker_not_capturable(self) -> None:
        board, _ = self._position()
        own = EnPassantMarker(target=D6, pawn=D5, color=Color.WHITE)
        assert _reason(board, Color.WHITE, "e5d6", own) == RejectionReason.NO_CAPTURE_TARGET

    def test_direction_checked_before_marker(self) -> None:
        board, marker = self._position()
        assert board.is_empty(D4)
        assert _reason(board, Color.WHITE, "e5d4", marker) == RejectionReason.WRONG_CAPTURE_DIRECTION


class TestWinner:
    def test_no_winner_initially(self, board: Board) -> None:
        assert Rules.winner(board) is None
        assert Rules.game_result(board) == GameResult.IN_PROGRESS

    def test_white_reaches_last_rank(self) -> None:
        board = Board.from_rows(["W.......", "BBBBBBBB"] + [EMPTY_ROW] * 5 + ["....W..."])
        assert Rules.winner(board) == Color.WHITE
        assert Rules.game_result(board) == GameResult.WHITE_WINS

    def test_black_reaches_first_rank(self) -> None:
        board = Board.from_rows([EMPTY_ROW, "B......."] + [EMPTY_ROW] * 4 + ["W.......", "...B...."])
        assert Rules.game_result(board) == GameResult.BLACK_WINS

    def test_opponent_wiped_out(self) -> None:
        board = Board.from_rows([EMPTY_ROW] * 4 + ["...W...."] + [EMPTY_ROW] * 3)
        assert Rules.winner(board) == Color.WHITE

    def test_white_checked_first(self) -> None:
        board = Board.from_rows(["W......."] + [EMPTY_ROW] * 6 + ["B......."])
        assert Rules.winner(board) == Color.WHITE


class TestStalemate:
    def test_blocked_pawns(self) -> None:
        # Head-to-head on the e-file, nothing else on the board.
        board = Board.from_rows([EMPTY_ROW] * 3 + ["....B...", "....W..."] + [EMPTY_ROW] * 3)
        assert not Rules.has_moves(board, Color.WHITE)
        assert not Rules.has_moves(board, Color.BLACK)
        assert Rules.game_result(board) == GameResult.STALEMATE

    def test_one_side_stuck_is_stalemate(self) -> None:
        board = Board.from_rows(
            [EMPTY_ROW] * 3 + ["....B...", "....W..."] + [EMPTY_ROW] * 2 + ["W......."]
        )
        assert Rules.has_moves(board, Color.WHITE)
        assert not Rules.has_moves(board, Color.BLACK)
        assert Rules.is_stalemate(board)

    def test_capture_counts_as_move(self) -> None:
        board = Board.from_rows(
            [EMPTY_ROW] * 3 + ["...BB...", "....W..."] + [EMPTY_ROW] * 3
        )
        assert Rules.has_moves(board, Color.WHITE)
        assert Rules.has_moves(board, Color.BLACK)
        assert not Rules.is_stalemate(board)

    def test_edge_file_capture_in_bounds(self) -> None:
        # Edge pawns only look at the diagonal that stays on the board.
        board = Board.from_rows(
            [EMPTY_ROW] * 3 + ["B.....BB", "WW.....W"] + [EMPTY_ROW] * 3
        )
        assert Rules.has_moves(board, Color.WHITE)
        assert Rules.has_moves(board, Color.BLACK)

    def test_initial_position_not_stalemate(self, board: Board) -> None:
        assert not Rules.is_stalemate(board)
