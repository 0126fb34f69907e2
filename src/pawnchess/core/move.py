"""Move value object (coordinate-pair notation, e.g. ``e2e4``)."""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.core.exceptions import CoordinateFormatError, MoveFormatError
from pawnchess.core.types import Coordinate, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a pawn going from *start* to *end*."""

    start: Coordinate
    end: Coordinate

    @property
    def file_delta(self) -> int:
        return self.end.file - self.start.file

    @property
    def rank_delta(self) -> int:
        return self.end.rank - self.start.rank

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.start)}{square_name(self.end)}"

    @classmethod
    def from_text(cls, text: str) -> Move:
        return parse_move(text)


def parse_move(text: str) -> Move:
    """Parse a four-character move token, e.g. 'e2e4'."""
    if len(text) != 4:
        raise MoveFormatError(
            f"Invalid move {text!r}: expected four characters like 'e2e4'", text
        )
    try:
        start = parse_square(text[:2])
        end = parse_square(text[2:])
    except CoordinateFormatError as exc:
        raise MoveFormatError(f"Invalid move {text!r}: {exc}", text) from exc
    return Move(start, end)
