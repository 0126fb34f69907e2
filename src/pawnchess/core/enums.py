"""Core enumerations for the pawns-only domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a single advance: +1 for white, -1 for black."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank the pawns start on and may double-step from."""
        return 1 if self == Color.WHITE else 6

    @property
    def goal_rank(self) -> int:
        """Reaching this rank wins the game."""
        return 7 if self == Color.WHITE else 0

    @property
    def cell(self) -> CellState:
        return CellState.WHITE if self == Color.WHITE else CellState.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class CellState(Enum):
    """Occupancy of a single square."""

    WHITE = "W"
    BLACK = "B"
    EMPTY = " "

    @property
    def color(self) -> Color | None:
        if self == CellState.WHITE:
            return Color.WHITE
        if self == CellState.BLACK:
            return Color.BLACK
        return None

    def __str__(self) -> str:
        return self.value


class MoveKind(IntEnum):
    """Which legal sub-case an accepted move matched."""

    ADVANCE = 0
    DOUBLE_ADVANCE = 1
    CAPTURE = 2
    EN_PASSANT = 3


class RejectionReason(IntEnum):
    """Why a move was refused."""

    INVALID_FORMAT = auto()  # text is not a move token
    NO_PAWN_AT_SOURCE = auto()
    WRONG_DIRECTION_OR_NO_ADVANCE = auto()
    STEP_TOO_LARGE = auto()
    ILLEGAL_TWO_STEP_ORIGIN = auto()
    PATH_BLOCKED = auto()
    ILLEGAL_MOVE_SHAPE = auto()
    NO_CAPTURE_TARGET = auto()
    WRONG_CAPTURE_DIRECTION = auto()
    GAME_OVER = auto()  # no moves accepted once the game has ended


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    STALEMATE = 3
    ABORTED = 4

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS
