"""Notation errors raised by the coordinate/move codec."""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for malformed square or move text."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class CoordinateFormatError(NotationError):
    """Text is not a two-character square token such as ``e4``."""


class MoveFormatError(NotationError):
    """Text is not a four-character move token such as ``e2e4``."""
