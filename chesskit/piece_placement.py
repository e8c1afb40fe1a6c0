"""Arrangement of pieces on the board and the castling rules that depend on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from chesskit.castling_rights import CastlingRights
from chesskit.errors import InvalidPiecePlacementError, PiecePlacementError
from chesskit.types import (
    NUM_FILES,
    NUM_SQUARES,
    CastlingSide,
    Color,
    File,
    Piece,
    PieceType,
    Rank,
    Square,
    back_rank,
    back_rank_square,
    promotion_rank,
)

PieceArray = Tuple[Optional[Piece], ...]
PieceLocations = Dict[Color, Dict[PieceType, FrozenSet[Square]]]


@dataclass(frozen=True)
class RawMove:
    """A bare move from one square to another."""

    origin: Square
    destination: Square


@dataclass(frozen=True)
class CastlingMoves:
    """The king and rook moves that make up one castling move."""

    king_move: RawMove
    rook_move: RawMove


_BACK_ROW = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _standard_piece_array() -> List[Optional[Piece]]:
    def row(types: Iterable[PieceType], color: Color) -> List[Optional[Piece]]:
        return [Piece(kind, color) for kind in types]

    empty: List[Optional[Piece]] = [None] * NUM_FILES
    return (
        row(_BACK_ROW, Color.BLACK)
        + row([PieceType.PAWN] * NUM_FILES, Color.BLACK)
        + empty * 4
        + row([PieceType.PAWN] * NUM_FILES, Color.WHITE)
        + row(_BACK_ROW, Color.WHITE)
    )


class PiecePlacement:
    """The pieces on the board; a fresh instance holds the standard start."""

    __slots__ = ("_pieces", "_locations")

    def __init__(self) -> None:
        self._load(_standard_piece_array())

    @classmethod
    def from_piece_array(cls, piece_array: Sequence[Optional[Piece]]) -> PiecePlacement:
        """Build a placement from 64 optional pieces in row-major order from a8.

        Raises InvalidPiecePlacementError if the arrangement is not valid.
        """
        pieces = list(piece_array)
        if len(pieces) != NUM_SQUARES:
            raise ValueError(f"expected {NUM_SQUARES} squares, got {len(pieces)}")
        placement = cls.__new__(cls)
        placement._load(pieces)
        error = placement._validation_error()
        if error is not None:
            raise InvalidPiecePlacementError(error)
        return placement

    def _load(self, pieces: Sequence[Optional[Piece]]) -> None:
        self._pieces: List[Optional[Piece]] = [None] * NUM_SQUARES
        self._locations: Dict[Color, Dict[PieceType, Set[Square]]] = {}
        for index, piece in enumerate(pieces):
            self._update_piece_at(Square.from_index(index), piece)

    def _update_piece_at(self, square: Square, new_piece: Optional[Piece]) -> None:
        previous = self._pieces[square.index()]
        if previous is not None:
            by_type = self._locations.setdefault(previous.color, {})
            squares = by_type.setdefault(previous.type, set())
            squares.discard(square)
            if not squares:
                del by_type[previous.type]
        if new_piece is not None:
            self._locations.setdefault(new_piece.color, {}).setdefault(
                new_piece.type, set()
            ).add(square)
        self._pieces[square.index()] = new_piece

    def _squares_of(self, color: Color, kind: PieceType) -> Set[Square]:
        return self._locations.get(color, {}).get(kind, set())

    def _validation_error(self) -> Optional[PiecePlacementError]:
        colors = (Color.WHITE, Color.BLACK)
        if any(not self._squares_of(color, PieceType.KING) for color in colors):
            return PiecePlacementError.MISSING_KING
        if any(len(self._squares_of(color, PieceType.KING)) != 1 for color in colors):
            return PiecePlacementError.MULTIPLE_KINGS_OF_SAME_COLOR
        if any(self._has_pawn_on_rank(color, back_rank(color)) for color in colors):
            return PiecePlacementError.PAWN_ON_BACK_RANK
        if any(self._has_pawn_on_rank(color, promotion_rank(color)) for color in colors):
            return PiecePlacementError.PAWN_ON_PROMOTION_RANK
        return None

    def _has_pawn_on_rank(self, color: Color, rank: Rank) -> bool:
        return any(square.rank is rank for square in self._squares_of(color, PieceType.PAWN))

    def piece_array(self) -> PieceArray:
        """All 64 squares in row-major order from a8; empty squares are None."""
        return tuple(self._pieces)

    def piece_locations(self) -> PieceLocations:
        """Occupied squares grouped by colour and piece type."""
        return {
            color: {kind: frozenset(squares) for kind, squares in by_type.items()}
            for color, by_type in self._locations.items()
        }

    def piece_at(self, square: Square) -> Optional[Piece]:
        """The piece standing on square, or None."""
        return self._pieces[square.index()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PiecePlacement):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        return hash(tuple(self._pieces))

    def __repr__(self) -> str:
        occupied = ", ".join(
            f"{Square.from_index(index)}={piece.color.name[0]}{piece.type.name}"
            for index, piece in enumerate(self._pieces)
            if piece is not None
        )
        return f"PiecePlacement({occupied})"


def initial_king_square(color: Color) -> Square:
    return back_rank_square(File.E, color)


def kingside_castling_king_destination(color: Color) -> Square:
    return back_rank_square(File.G, color)


def queenside_castling_king_destination(color: Color) -> Square:
    return back_rank_square(File.C, color)


def initial_kingside_rook_square(color: Color) -> Square:
    return back_rank_square(File.H, color)


def initial_queenside_rook_square(color: Color) -> Square:
    return back_rank_square(File.A, color)


def _kingside_castling_rook_destination(color: Color) -> Square:
    return back_rank_square(File.F, color)


def _queenside_castling_rook_destination(color: Color) -> Square:
    return back_rank_square(File.D, color)


def castling_moves(side: CastlingSide, color: Color) -> CastlingMoves:
    """The king and rook moves that castling towards side performs for color."""
    king_origin = initial_king_square(color)
    if side is CastlingSide.KINGSIDE:
        return CastlingMoves(
            RawMove(king_origin, kingside_castling_king_destination(color)),
            RawMove(
                initial_kingside_rook_square(color),
                _kingside_castling_rook_destination(color),
            ),
        )
    return CastlingMoves(
        RawMove(king_origin, queenside_castling_king_destination(color)),
        RawMove(
            initial_queenside_rook_square(color),
            _queenside_castling_rook_destination(color),
        ),
    )


def affects_kingside_castling(move: RawMove, color: Color) -> bool:
    """Whether move touches the king or kingside rook square of color."""
    return (
        move.origin == initial_king_square(color)
        or move.origin == initial_kingside_rook_square(color)
        or move.destination == initial_kingside_rook_square(color)
    )


def affects_queenside_castling(move: RawMove, color: Color) -> bool:
    """Whether move touches the king or queenside rook square of color."""
    return (
        move.origin == initial_king_square(color)
        or move.origin == initial_queenside_rook_square(color)
        or move.destination == initial_queenside_rook_square(color)
    )


def are_castling_pieces_in_initial_location(
    piece_placement: PiecePlacement, side: CastlingSide, color: Color
) -> bool:
    """Whether the king and the rook for side stand on their starting squares."""
    rook_square = (
        initial_kingside_rook_square(color)
        if side is CastlingSide.KINGSIDE
        else initial_queenside_rook_square(color)
    )
    return piece_placement.piece_at(initial_king_square(color)) == Piece(
        PieceType.KING, color
    ) and piece_placement.piece_at(rook_square) == Piece(PieceType.ROOK, color)


def is_valid_castling_rights(piece_placement: PiecePlacement, rights: CastlingRights) -> bool:
    """Whether every granted right is backed by king and rook on their start squares."""
    return all(
        are_castling_pieces_in_initial_location(piece_placement, side, color)
        for side in CastlingSide
        for color in Color
        if rights.can_castle(side, color)
    )