"""Game state machine — board, turn order, en-passant marker, history."""

from __future__ import annotations

from dataclasses import dataclass, field

from pawnchess.core.board import Board
from pawnchess.core.enums import Color, GameResult, MoveKind, RejectionReason
from pawnchess.core.move import Move
from pawnchess.core.rules import Accepted, EnPassantMarker, Rules
from pawnchess.core.types import Coordinate
from pawnchess.game.interfaces import GamePhase


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    move: Move
    kind: MoveKind
    captured: Coordinate | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class MoveOutcome:
    """What the controller did with a submitted move.

    Exactly one of ``record`` (accepted) or ``reason`` (rejected) is set.
    """

    move: Move | None
    record: MoveRecord | None = None
    reason: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        return self.record is not None

    @classmethod
    def rejected(cls, reason: RejectionReason, move: Move | None = None) -> MoveOutcome:
        return cls(move=move, reason=reason)


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, turn, en passant, history.

    This is a pure data/logic class — no I/O.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    mover_index: int = field(default=0, init=False)
    en_passant: EnPassantMarker | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.mover_index = int(side_to_move)
        self.en_passant = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move, accepted: Accepted) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        color = self.side_to_move
        self.board.move_pawn(move)
        if accepted.kind == MoveKind.EN_PASSANT and accepted.captured is not None:
            self.board.remove_pawn(accepted.captured)

        if accepted.kind == MoveKind.DOUBLE_ADVANCE:
            self.en_passant = EnPassantMarker.after_double_step(move, color)
        else:
            self.en_passant = None

        record = MoveRecord(
            color=color,
            move=move,
            kind=accepted.kind,
            captured=accepted.captured,
        )
        self.move_history.append(record)
        self.phase = GamePhase.MOVE_APPLIED
        return record

    def finish_turn(self) -> GameResult:
        """Evaluate end conditions, then either end the game or pass the turn."""
        result = Rules.game_result(self.board)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
        else:
            self.mover_index = 1 - self.mover_index
            self.phase = GamePhase.AWAITING_MOVE
        return result

    def abort(self) -> None:
        self.result = GameResult.ABORTED
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return Color(self.mover_index)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def pawn_count(self, color: Color) -> int:
        return self.board.count_of_color(color)
