"""Concrete player implementation."""

from __future__ import annotations

from pawnchess.core.enums import Color
from pawnchess.game.interfaces import IPlayer


class HumanPlayer(IPlayer):
    """A human participant; moves arrive as text from the console."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"HumanPlayer({self._color.name}, {self._name!r})"
