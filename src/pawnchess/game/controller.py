"""GameController — the central orchestrator of a pawns-only game.

Coordinates: Players, GameState, Rules.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pawnchess.core.board import Board
from pawnchess.core.enums import Color, GameResult, RejectionReason
from pawnchess.core.exceptions import MoveFormatError
from pawnchess.core.move import Move, parse_move
from pawnchess.core.rules import Rejected, Rules
from pawnchess.game.interfaces import GamePhase, IGameController, IPlayer
from pawnchess.game.state import GameState, MoveOutcome, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[IPlayer, MoveOutcome], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, applies them, switches
    turns, detects wins and stalemate, notifies listeners.

    Single-threaded: a rejected move never touches the board, the
    en-passant marker or the turn index.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        if white.color != Color.WHITE or black.color != Color.BLACK:
            raise ValueError("white and black players must hold matching colors")
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, side_to_move)
        _LOGGER.debug("New game: %s (white) vs %s (black)", white.name, black.name)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_text(self, text: str) -> MoveOutcome:
        try:
            move = parse_move(text)
        except MoveFormatError as exc:
            _LOGGER.debug("Unparseable move text: %s", exc)
            return self._reject(MoveOutcome.rejected(RejectionReason.INVALID_FORMAT))
        return self.submit_move(move)

    def submit_move(self, move: Move) -> MoveOutcome:
        state = self._state
        if state.is_game_over or state.phase != GamePhase.AWAITING_MOVE:
            return MoveOutcome.rejected(RejectionReason.GAME_OVER, move)

        color = state.side_to_move
        result = Rules.validate(state.board, color, state.en_passant, move)
        if isinstance(result, Rejected):
            _LOGGER.debug("%s move %s rejected: %s", color, move, result.reason.name)
            return self._reject(MoveOutcome.rejected(result.reason, move))

        record = state.apply_move(move, result)
        _LOGGER.debug("%s played %s (%s)", color, move, record.kind.name)
        self._emit_phase(GamePhase.MOVE_APPLIED)
        self._emit_move(record)

        game_result = state.finish_turn()
        if state.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s", state.ply_count, game_result.name
            )
            self._emit_game_over(game_result)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return MoveOutcome(move=move, record=record)

    def exit(self) -> None:
        if self._state.is_game_over:
            return
        self._state.abort()
        _LOGGER.info("Game aborted after %d plies", self._state.ply_count)
        self._emit_game_over(GameResult.ABORTED)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, outcome: MoveOutcome) -> MoveOutcome:
        cp = self.current_player
        if cp is not None:
            for cb in self.events.on_rejected:
                cb(cp, outcome)
        return outcome

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
