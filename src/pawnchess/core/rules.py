"""Pawn move validation plus win and stalemate detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from pawnchess.core.enums import Color, GameResult, MoveKind, RejectionReason
from pawnchess.core.types import Coordinate

if TYPE_CHECKING:
    from pawnchess.core.board import Board
    from pawnchess.core.move import Move


@dataclass(frozen=True, slots=True)
class EnPassantMarker:
    """The square a double-stepped pawn skipped over.

    ``target`` is where a capturing pawn lands, ``pawn`` is where the
    double-stepped pawn actually stands, ``color`` is that pawn's side.
    """

    target: Coordinate
    pawn: Coordinate
    color: Color

    @classmethod
    def after_double_step(cls, move: Move, color: Color) -> EnPassantMarker:
        skipped = Coordinate(move.start.file, move.start.rank + color.forward)
        return cls(target=skipped, pawn=move.end, color=color)


@dataclass(frozen=True, slots=True)
class Accepted:
    """Legal move. ``captured`` is the square whose pawn gets removed."""

    kind: MoveKind
    captured: Coordinate | None = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """Illegal move with a typed reason."""

    reason: RejectionReason

    @property
    def ok(self) -> bool:
        return False


MoveResult: TypeAlias = Accepted | Rejected


class Rules:
    """Stateless rule-checker operating on a :class:`Board`."""

    # -- Move validation ----------------------------------------------------

    @staticmethod
    def validate(
        board: Board,
        color: Color,
        marker: EnPassantMarker | None,
        move: Move,
    ) -> MoveResult:
        """Decide whether *color* may play *move*.

        Checks run in a fixed order: source occupancy, move shape, then the
        straight-advance or diagonal-capture checks.
        """
        if board[move.start] is not color.cell:
            return Rejected(RejectionReason.NO_PAWN_AT_SOURCE)

        df = abs(move.file_delta)
        if df == 0:
            return Rules._validate_advance(board, color, move)
        if df == 1 and abs(move.rank_delta) == 1:
            return Rules._validate_capture(board, color, marker, move)
        return Rejected(RejectionReason.ILLEGAL_MOVE_SHAPE)

    @staticmethod
    def _validate_advance(board: Board, color: Color, move: Move) -> MoveResult:
        dr = move.rank_delta
        if dr * color.forward <= 0:
            return Rejected(RejectionReason.WRONG_DIRECTION_OR_NO_ADVANCE)

        length = abs(dr)
        if length > 2:
            return Rejected(RejectionReason.STEP_TOO_LARGE)
        if length == 2 and move.start.rank != color.home_rank:
            return Rejected(RejectionReason.ILLEGAL_TWO_STEP_ORIGIN)

        # Every square after the start, destination included, must be free.
        for step in range(1, length + 1):
            sq = Coordinate(move.start.file, move.start.rank + step * color.forward)
            if not board.is_empty(sq):
                return Rejected(RejectionReason.PATH_BLOCKED)

        if length == 2:
            return Accepted(MoveKind.DOUBLE_ADVANCE)
        return Accepted(MoveKind.ADVANCE)

    @staticmethod
    def _validate_capture(
        board: Board,
        color: Color,
        marker: EnPassantMarker | None,
        move: Move,
    ) -> MoveResult:
        if move.rank_delta != color.forward:
            return Rejected(RejectionReason.WRONG_CAPTURE_DIRECTION)

        if (
            marker is not None
            and marker.color == color.opposite
            and marker.target == move.end
        ):
            return Accepted(MoveKind.EN_PASSANT, captured=marker.pawn)

        if board[move.end] is color.opposite.cell:
            return Accepted(MoveKind.CAPTURE, captured=move.end)
        return Rejected(RejectionReason.NO_CAPTURE_TARGET)

    # -- End-of-game detection ----------------------------------------------

    @staticmethod
    def has_reached_goal(board: Board, color: Color) -> bool:
        return color.cell in board.rank_cells(color.goal_rank)

    @staticmethod
    def winner(board: Board) -> Color | None:
        """White is checked first, then black."""
        for color in (Color.WHITE, Color.BLACK):
            if Rules.has_reached_goal(board, color):
                return color
            if board.count_of_color(color.opposite) == 0:
                return color
        return None

    @staticmethod
    def has_moves(board: Board, color: Color) -> bool:
        """Whether any *color* pawn can step forward or capture diagonally.

        A local approximation: double steps and en passant are ignored.
        """
        enemy = color.opposite.cell
        for sq in board.pawns(color):
            ahead = sq.offset(0, color.forward)
            if ahead is None:
                continue
            if board.is_empty(ahead):
                return True
            for df in (-1, 1):
                diagonal = sq.offset(df, color.forward)
                if diagonal is not None and board[diagonal] is enemy:
                    return True
        return False

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        return not (
            Rules.has_moves(board, Color.WHITE) and Rules.has_moves(board, Color.BLACK)
        )

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        color = Rules.winner(board)
        if color is not None:
            return GameResult.win_for(color)
        if Rules.is_stalemate(board):
            return GameResult.STALEMATE
        return GameResult.IN_PROGRESS
