"""Basic chess value types: colours, files, ranks, squares, pieces and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

NUM_FILES = 8
NUM_RANKS = 8
NUM_SQUARES = NUM_FILES * NUM_RANKS


def _render(kind: str, spec: str, verbose: str, compact: str) -> str:
    if spec in ("", "v"):
        return verbose
    if spec == "c":
        return compact
    raise ValueError(f"invalid format spec {spec!r} for {kind}")


class Color(Enum):
    """Side to move or owner of a piece."""

    WHITE = 0
    BLACK = 1

    def opposite(self) -> Color:
        """Return the other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __invert__(self) -> Color:
        return self.opposite()

    def __format__(self, spec: str) -> str:
        verbose = "white" if self is Color.WHITE else "black"
        return _render("Color", spec, verbose, verbose[0])

    def __str__(self) -> str:
        return format(self, "")


class CastlingSide(Enum):
    """Side of the board towards which the king castles."""

    KINGSIDE = 0
    QUEENSIDE = 1

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"invalid format spec {spec!r} for CastlingSide")
        return "kingside" if self is CastlingSide.KINGSIDE else "queenside"

    def __str__(self) -> str:
        return format(self, "")


class CheckIndicator(Enum):
    """Check or checkmate marker attached to a move."""

    CHECK = 0
    CHECKMATE = 1

    def __format__(self, spec: str) -> str:
        if self is CheckIndicator.CHECK:
            return _render("CheckIndicator", spec, "check", "+")
        return _render("CheckIndicator", spec, "checkmate", "#")

    def __str__(self) -> str:
        return format(self, "")


class File(Enum):
    """Column of the board, from a to h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"invalid format spec {spec!r} for File")
        return "abcdefgh"[self.value]

    def __str__(self) -> str:
        return format(self, "")


class Rank(Enum):
    """Row of the board; the eighth rank has index 0."""

    R8 = 0
    R7 = 1
    R6 = 2
    R5 = 3
    R4 = 4
    R3 = 5
    R2 = 6
    R1 = 7

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"invalid format spec {spec!r} for Rank")
        return str(NUM_RANKS - self.value)

    def __str__(self) -> str:
        return format(self, "")


class PieceType(Enum):
    """Kind of chess piece."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5


class PromotablePieceType(Enum):
    """Piece kinds a pawn may promote to."""

    KNIGHT = 0
    BISHOP = 1
    ROOK = 2
    QUEEN = 3

    def to_piece_type(self) -> PieceType:
        """Return the matching general piece type."""
        return PieceType[self.name]


class DrawReason(Enum):
    """Why a game ended in a draw."""

    STALEMATE = 0
    FIFTY_MOVE_RULE = 1
    INSUFFICIENT_MATERIAL = 2
    THREEFOLD_REPETITION = 3

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"invalid format spec {spec!r} for DrawReason")
        return _DRAW_REASON_TEXT[self]

    def __str__(self) -> str:
        return format(self, "")


_DRAW_REASON_TEXT = {
    DrawReason.STALEMATE: "stalemate",
    DrawReason.FIFTY_MOVE_RULE: "fifty move rule",
    DrawReason.INSUFFICIENT_MATERIAL: "insufficient material",
    DrawReason.THREEFOLD_REPETITION: "three fold repetition",
}


class GameResult(Enum):
    """Outcome of a finished game."""

    WHITE_WINS = 0
    BLACK_WINS = 1
    DRAW = 2

    def __format__(self, spec: str) -> str:
        verbose, compact = _GAME_RESULT_TEXT[self]
        return _render("GameResult", spec, verbose, compact)

    def __str__(self) -> str:
        return format(self, "")


_GAME_RESULT_TEXT = {
    GameResult.WHITE_WINS: ("white wins", "1-0"),
    GameResult.BLACK_WINS: ("black wins", "0-1"),
    GameResult.DRAW: ("draw", "1/2-1/2"),
}


@dataclass(frozen=True)
class Piece:
    """A piece of a given type and colour."""

    type: PieceType
    color: Color


@dataclass(frozen=True)
class Square:
    """A single square of the board."""

    file: File = File.A
    rank: Rank = Rank.R8

    def index(self) -> int:
        """Row-major index, starting at a8."""
        return self.rank.value * NUM_FILES + self.file.value

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Build a square from its row-major index."""
        if not 0 <= index < NUM_SQUARES:
            raise ValueError(f"square index out of range: {index}")
        rank_index, file_index = divmod(index, NUM_FILES)
        return cls(File(file_index), Rank(rank_index))

    def __hash__(self) -> int:
        return self.index()

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"invalid format spec {spec!r} for Square")
        return f"{self.file}{self.rank}"

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class PartialSquare:
    """A square whose file, rank or both may be unknown."""

    file: Optional[File] = None
    rank: Optional[Rank] = None

    def matches(self, square: Square) -> bool:
        """Whether the given square agrees with every known coordinate."""
        file_ok = self.file is None or self.file == square.file
        rank_ok = self.rank is None or self.rank == square.rank
        return file_ok and rank_ok

    def to_square(self) -> Optional[Square]:
        """The full square, or None when a coordinate is missing."""
        if self.file is None or self.rank is None:
            return None
        return Square(self.file, self.rank)


def back_rank(color: Color) -> Rank:
    return Rank.R1 if color is Color.WHITE else Rank.R8


def promotion_rank(color: Color) -> Rank:
    return Rank.R8 if color is Color.WHITE else Rank.R1


def en_passant_rank(color: Color) -> Rank:
    return Rank.R6 if color is Color.WHITE else Rank.R3


def is_double_pawn_push_target_rank(rank: Rank, color: Color) -> bool:
    return rank is (Rank.R4 if color is Color.WHITE else Rank.R5)


def is_pawn_starting_rank(rank: Rank, color: Color) -> bool:
    return rank is (Rank.R2 if color is Color.WHITE else Rank.R7)


def shift_square(square: Square, file_offset: int, rank_offset: int) -> Optional[Square]:
    """Move a square by the given index offsets, or None if it leaves the board."""
    file_index = square.file.value + file_offset
    rank_index = square.rank.value + rank_offset
    if not (0 <= file_index < NUM_FILES and 0 <= rank_index < NUM_RANKS):
        return None
    return Square(File(file_index), Rank(rank_index))


def square_ahead(square: Square, ranks: int, color: Color) -> Optional[Square]:
    """The square the given number of ranks forward from color's point of view."""
    offset = -ranks if color is Color.WHITE else ranks
    return shift_square(square, 0, offset)


def square_behind(square: Square, ranks: int, color: Color) -> Optional[Square]:
    """The square the given number of ranks backward from color's point of view."""
    return square_ahead(square, -ranks, color)


def farthest_pawn_push_source(square: Square, color: Color) -> Optional[Square]:
    """The farthest square a pawn pushing to square could have started from."""
    distance = 2 if is_double_pawn_push_target_rank(square.rank, color) else 1
    return square_behind(square, distance, color)


def farthest_pawn_push(square: Square, color: Color) -> Optional[Square]:
    """The farthest square a pawn on square may push to."""
    distance = 2 if is_pawn_starting_rank(square.rank, color) else 1
    return square_ahead(square, distance, color)


def square_color(square: Square) -> Color:
    parity = (square.file.value + square.rank.value) & 1
    return Color.WHITE if parity == 0 else Color.BLACK


def back_rank_square(file: File, color: Color) -> Square:
    return Square(file, back_rank(color))


def is_valid_en_passant_target_square(square: Optional[Square], color: Color) -> bool:
    """Whether an optional en passant target sits on the rank color captures onto."""
    if square is None:
        return True
    return square.rank is en_passant_rank(color)


def en_passant_captured_pawn_square(target: Square, attacker_color: Color) -> Optional[Square]:
    """Square of the pawn removed by an en passant capture onto target."""
    return square_behind(target, 1, attacker_color)