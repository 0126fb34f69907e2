"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from pawnchess.core.board import Board
from pawnchess.core.enums import Color
from pawnchess.game.controller import GameController
from pawnchess.game.player import HumanPlayer


@pytest.fixture
def board() -> Board:
    """Fresh starting position."""
    return Board.initial()


@pytest.fixture
def make_controller() -> Callable[..., GameController]:
    """Factory for a human-vs-human game, optionally from a custom board."""

    def _make(
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> GameController:
        ctrl = GameController()
        ctrl.new_game(
            HumanPlayer(Color.WHITE, "Alice"),
            HumanPlayer(Color.BLACK, "Bob"),
            board=board,
            side_to_move=side_to_move,
        )
        return ctrl

    return _make


@pytest.fixture
def controller(make_controller: Callable[..., GameController]) -> GameController:
    return make_controller()


class ScriptedIO:
    """Feeds canned input lines and records everything written."""

    def __init__(self, lines: list[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.chunks: list[str] = []

    def read_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def output(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def scripted_io() -> Callable[[list[str]], ScriptedIO]:
    return ScriptedIO
