"""Moves written in Standard Algebraic Notation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from chesskit.types import (
    CastlingSide,
    CheckIndicator,
    PartialSquare,
    PieceType,
    PromotablePieceType,
    Square,
)


@dataclass(frozen=True)
class SanCastlingMove:
    """A castling move, with an optional check or checkmate marker."""

    side: CastlingSide = CastlingSide.KINGSIDE
    check_indicator: Optional[CheckIndicator] = None


@dataclass(frozen=True)
class SanNormalMove:
    """A non-castling move; the origin may be fully, partly or not at all given."""

    piece_type: PieceType = PieceType.PAWN
    origin: PartialSquare = field(default_factory=PartialSquare)
    is_capture: bool = False
    destination: Square = field(default_factory=Square)
    promotion: Optional[PromotablePieceType] = None
    check_indicator: Optional[CheckIndicator] = None


SanMove = Union[SanNormalMove, SanCastlingMove]