"""Castling rights of both players."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from chesskit.types import CastlingSide, Color


class CastlingRights:
    """Which of the four castling moves are still permitted.

    A fresh instance allows every castling move.
    """

    NUM_CASTLING_RIGHTS = 4
    WHITE_KINGSIDE = 0
    WHITE_QUEENSIDE = 1
    BLACK_KINGSIDE = 2
    BLACK_QUEENSIDE = 3

    _ALL_BITS = (1 << NUM_CASTLING_RIGHTS) - 1

    __slots__ = ("_bits",)

    def __init__(self) -> None:
        self._bits = self._ALL_BITS

    @classmethod
    def from_bits(cls, bits: int) -> CastlingRights:
        """Build rights from an integer whose bit positions are the class constants."""
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(f"castling rights bits must be an int, not {type(bits).__name__}")
        if not 0 <= bits <= cls._ALL_BITS:
            raise ValueError(f"castling rights bits out of range: {bits}")
        rights = cls()
        rights._bits = bits
        return rights

    @staticmethod
    def _index(side: CastlingSide, color: Color) -> int:
        side_index = 0 if side is CastlingSide.KINGSIDE else 1
        color_index = 0 if color is Color.WHITE else 1
        return (color_index << 1) | side_index

    def _indices(
        self,
        side: Union[CastlingSide, Color, None],
        color: Optional[Color],
    ) -> Iterable[int]:
        if isinstance(side, Color) and color is None:
            side, color = None, side
        if color is None:
            if side is not None:
                raise TypeError("a castling side requires a colour")
            return range(self.NUM_CASTLING_RIGHTS)
        sides = (side,) if side is not None else tuple(CastlingSide)
        return [self._index(each, color) for each in sides]

    def can_castle(self, side: CastlingSide, color: Color) -> bool:
        """Whether color may still castle towards side."""
        return bool(self._bits >> self._index(side, color) & 1)

    def all(self) -> bool:
        """Whether every castling move is permitted."""
        return self._bits == self._ALL_BITS

    def any(self) -> bool:
        """Whether at least one castling move is permitted."""
        return self._bits != 0

    def none(self) -> bool:
        """Whether no castling move is permitted."""
        return self._bits == 0

    def enable(
        self,
        side: Union[CastlingSide, Color, None] = None,
        color: Optional[Color] = None,
    ) -> None:
        """Grant one right, both rights of a colour, or all rights."""
        for index in self._indices(side, color):
            self._bits |= 1 << index

    def disable(
        self,
        side: Union[CastlingSide, Color, None] = None,
        color: Optional[Color] = None,
    ) -> None:
        """Revoke one right, both rights of a colour, or all rights."""
        for index in self._indices(side, color):
            self._bits &= ~(1 << index)

    def to_bits(self) -> int:
        """The rights as an integer; bit positions are the class constants."""
        return self._bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CastlingRights):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"CastlingRights.from_bits({self._bits:#06b})"