"""Console front end: board output, turn prompts and the blocking input loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from pawnchess.core.enums import Color, GameResult, RejectionReason
from pawnchess.core.types import square_name
from pawnchess.game.controller import GameController
from pawnchess.game.interfaces import IPlayer
from pawnchess.game.player import HumanPlayer
from pawnchess.game.state import MoveOutcome
from pawnchess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

ReadLine = Callable[[], str]  # raises EOFError when input is exhausted
Write = Callable[[str], None]

TITLE = "Pawns-Only Chess"
EXIT_COMMAND = "exit"
INVALID_INPUT = "Invalid Input"
FAREWELL = "Bye!"

_RESULT_MESSAGES: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White Wins!",
    GameResult.BLACK_WINS: "Black Wins!",
    GameResult.STALEMATE: "Stalemate!",
}


def rejection_message(player: IPlayer, outcome: MoveOutcome) -> str:
    """Text shown to *player* after a refused move."""
    if outcome.reason == RejectionReason.NO_PAWN_AT_SOURCE and outcome.move is not None:
        return f"No {player.color} pawn at {square_name(outcome.move.start)}"
    return INVALID_INPUT


def result_message(result: GameResult) -> str | None:
    """Terminal message, or ``None`` when the game was aborted or is running."""
    return _RESULT_MESSAGES.get(result)


def _stdin_read_line() -> str:
    return input()


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class ConsoleGame:
    """Runs one game against a line-based input and a text output.

    Args:
        settings: Player names and banner options.
        read_line: ``() -> str`` returning one line without its newline.
        write: ``(str) -> None`` receiving raw output text.
        controller: Injected for tests; a fresh one by default.
    """

    __slots__ = ("_settings", "_read_line", "_write", "_controller")

    def __init__(
        self,
        settings: AppSettings | None = None,
        read_line: ReadLine | None = None,
        write: Write | None = None,
        controller: GameController | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._read_line = read_line or _stdin_read_line
        self._write = write or _stdout_write
        self._controller = controller or GameController()

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> GameResult:
        """Play until a win, stalemate or ``exit``; return the result."""
        s = self._settings
        if s.show_banner:
            self._print(TITLE)

        white_name = s.white_name or self._ask("First Player's name:")
        black_name = s.black_name or self._ask("Second Player's name:")
        self._controller.new_game(
            HumanPlayer(Color.WHITE, white_name),
            HumanPlayer(Color.BLACK, black_name),
        )

        state = self._controller.state
        while not state.is_game_over:
            self._print(state.board.render())
            self._play_turn()

        message = result_message(state.result)
        if message is not None:
            self._print(state.board.render())
            self._print(message)
        self._print(FAREWELL)
        return state.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play_turn(self) -> None:
        """Prompt the current player until a move is accepted or they exit."""
        player = self._controller.current_player
        if player is None:
            raise RuntimeError("No player to move")

        while True:
            text = self._ask(f"{player.name}'s turn:")
            if text == EXIT_COMMAND:
                self._controller.exit()
                return
            outcome = self._controller.submit_text(text)
            if outcome.accepted:
                return
            self._print(rejection_message(player, outcome))

    def _ask(self, prompt: str) -> str:
        self._write(f"{prompt}\n> ")
        try:
            return self._read_line()
        except EOFError:
            _LOGGER.debug("Input closed; treating as %r", EXIT_COMMAND)
            return EXIT_COMMAND

    def _print(self, text: str) -> None:
        self._write(text + "\n")
