"""Game management layer — controller, players, state machine.

Quick start::

    from pawnchess.core import Color
    from pawnchess.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.submit_text("e2e4")
"""

from pawnchess.game.controller import GameController, GameEvents
from pawnchess.game.interfaces import GamePhase, IGameController, IPlayer
from pawnchess.game.player import HumanPlayer
from pawnchess.game.state import GameState, MoveOutcome, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveOutcome",
    "MoveRecord",
]
