"""Abstract interfaces for the game layer.

The GameController depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from pawnchess.core.enums import Color

if TYPE_CHECKING:
    from pawnchess.core.move import Move
    from pawnchess.game.state import MoveOutcome


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    MOVE_APPLIED = auto()  # transient: end conditions being evaluated
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, white: IPlayer, black: IPlayer) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> MoveOutcome:
        """Submit a move for the player to act."""

    @abstractmethod
    def submit_text(self, text: str) -> MoveOutcome:
        """Parse a move token and submit it."""

    @abstractmethod
    def exit(self) -> None:
        """Abort the game without touching the board."""
