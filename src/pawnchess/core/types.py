"""Coordinate value object and square-name helpers.

Board layout (rank-major, rank 0 is white's side):
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pawnchess.core.exceptions import CoordinateFormatError

BOARD_SIZE = 8

_SQUARE_RE = re.compile(r"([a-h])([1-8])", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (file, rank) pair, both in 0–7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (is_on_board(self.file) and is_on_board(self.rank)):
            raise ValueError(f"Coordinate off board: ({self.file}, {self.rank})")

    def offset(self, df: int, dr: int) -> Coordinate | None:
        """Neighbouring coordinate, or ``None`` when it falls off the board."""
        f, r = self.file + df, self.rank + dr
        if is_on_board(f) and is_on_board(r):
            return Coordinate(f, r)
        return None

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(index: int) -> bool:
    """Check whether a file or rank index lies within the board."""
    return 0 <= index < BOARD_SIZE


def square_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    return chr(ord("a") + coord.file) + str(coord.rank + 1)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' or 'E4' → (4, 3)."""
    match = _SQUARE_RE.fullmatch(name)
    if match is None:
        raise CoordinateFormatError(f"Invalid square name: {name!r}", name)
    letter, digit = match.groups()
    return Coordinate(ord(letter.lower()) - ord("a"), int(digit) - 1)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 7) for f in range(8))
