"""Core domain layer — pure pawns-only logic with zero external dependencies.

Quick start::

    from pawnchess.core import Board, Color, Rules, parse_move

    board = Board.initial()
    result = Rules.validate(board, Color.WHITE, None, parse_move("e2e4"))
    if result.ok:
        board.move_pawn(parse_move("e2e4"))
"""

from pawnchess.core.board import Board
from pawnchess.core.enums import CellState, Color, GameResult, MoveKind, RejectionReason
from pawnchess.core.exceptions import (
    CoordinateFormatError,
    MoveFormatError,
    NotationError,
)
from pawnchess.core.move import Move, parse_move
from pawnchess.core.rules import (
    Accepted,
    EnPassantMarker,
    MoveResult,
    Rejected,
    Rules,
)
from pawnchess.core.types import Coordinate, parse_square, square_name

__all__ = [
    # Enums
    "CellState",
    "Color",
    "GameResult",
    "MoveKind",
    "RejectionReason",
    # Types / codec
    "Coordinate",
    "CoordinateFormatError",
    "MoveFormatError",
    "NotationError",
    "parse_move",
    "parse_square",
    "square_name",
    # Domain objects
    "Accepted",
    "Board",
    "EnPassantMarker",
    "Move",
    "MoveResult",
    "Rejected",
    "Rules",
]
