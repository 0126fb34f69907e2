"""Board - pawn occupancy on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pawnchess.core.enums import CellState, Color
from pawnchess.core.move import Move
from pawnchess.core.types import BOARD_SIZE, Coordinate

_SEPARATOR = "  " + "+---" * BOARD_SIZE + "+"
_FILE_LABELS = "    " + "   ".join("abcdefgh")

_ROW_CHARS: dict[str, CellState] = {
    "W": CellState.WHITE,
    "B": CellState.BLACK,
    ".": CellState.EMPTY,
}


class Board:
    """Mutable rank-major grid of :class:`CellState`.

    Only :meth:`move_pawn` and :meth:`remove_pawn` change occupancy; both
    assume the caller has already validated the move.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [rank][file]
        self._cells: list[list[CellState]] = [
            [CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> CellState:
        return self._cells[coord.rank][coord.file]

    def cell_at(self, coord: Coordinate) -> CellState:
        return self[coord]

    def is_empty(self, coord: Coordinate) -> bool:
        return self[coord] is CellState.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pawns(self, color: Color) -> list[Coordinate]:
        """Squares occupied by *color*, rank by rank from a1."""
        cell = color.cell
        return [
            Coordinate(file, rank)
            for rank, row in enumerate(self._cells)
            for file, state in enumerate(row)
            if state is cell
        ]

    def count_of_color(self, color: Color) -> int:
        cell = color.cell
        return sum(row.count(cell) for row in self._cells)

    def rank_cells(self, rank: int) -> tuple[CellState, ...]:
        return tuple(self._cells[rank])

    # -- Mutation / copying -------------------------------------------------

    def move_pawn(self, move: Move) -> None:
        """Relocate the occupant of ``move.start`` to ``move.end``."""
        self._cells[move.end.rank][move.end.file] = self[move.start]
        self._cells[move.start.rank][move.start.file] = CellState.EMPTY

    def remove_pawn(self, coord: Coordinate) -> None:
        """Clear *coord*; used for the pawn taken en passant."""
        self._cells[coord.rank][coord.file] = CellState.EMPTY

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: white on rank 2, black on rank 7."""
        b = cls()
        b._cells[Color.WHITE.home_rank] = [CellState.WHITE] * BOARD_SIZE
        b._cells[Color.BLACK.home_rank] = [CellState.BLACK] * BOARD_SIZE
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from eight rows of ``W``/``B``/``.``, rank 8 first."""
        rows = list(rows)
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for rank_idx, text in enumerate(rows):
            text = text.replace(" ", "")
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Invalid row width: {text!r}")
            try:
                b._cells[BOARD_SIZE - 1 - rank_idx] = [_ROW_CHARS[ch] for ch in text]
            except KeyError as exc:
                raise ValueError(f"Invalid cell character in row {text!r}") from exc
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        """Fixed-width ASCII grid, rank 8 at the top, files labelled below."""
        return "\n".join(self._render_lines())

    def _render_lines(self) -> Iterator[str]:
        yield _SEPARATOR
        for rank in range(BOARD_SIZE - 1, -1, -1):
            cells = " | ".join(str(state) for state in self._cells[rank])
            yield f"{rank + 1} | {cells} |"
            yield _SEPARATOR
        yield _FILE_LABELS

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = (
                "." if state is CellState.EMPTY else state.value
                for state in self._cells[rank]
            )
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
