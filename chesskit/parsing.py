"""Parsing of chess values from text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from chesskit.errors import ParseError, ParsingError
from chesskit.san_move import SanCastlingMove, SanMove, SanNormalMove
from chesskit.types import (
    CastlingSide,
    CheckIndicator,
    Color,
    File,
    GameResult,
    PartialSquare,
    Piece,
    PieceType,
    PromotablePieceType,
    Rank,
    Square,
)


class ParseStyle(Enum):
    """Variant of the notation to accept."""

    DEFAULT = "default"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


@dataclass(frozen=True)
class ParseResult:
    """A parsed value together with the position just after it."""

    value: Any
    pos: int


_Parser = Callable[[str, int], ParseResult]


def _parse_enum(kind: type, allowed: str, error: ParseError) -> _Parser:
    def parser(text: str, pos: int) -> ParseResult:
        if pos >= len(text):
            raise ParsingError(error)
        index = allowed.find(text[pos])
        if index < 0:
            raise ParsingError(error)
        return ParseResult(kind(index), pos + 1)

    return parser


def _parse_game_result(text: str, pos: int) -> ParseResult:
    rest = text[pos:]
    for pattern, result in (
        ("1-0", GameResult.WHITE_WINS),
        ("0-1", GameResult.BLACK_WINS),
        ("1/2-1/2", GameResult.DRAW),
    ):
        if rest.startswith(pattern):
            return ParseResult(result, pos + len(pattern))
    raise ParsingError(ParseError.INVALID_GAME_RESULT)


def _parse_square(text: str, pos: int) -> ParseResult:
    file = parse_from(File, text, pos)
    rank = parse_from(Rank, text, file.pos)
    return ParseResult(Square(file.value, rank.value), rank.pos)


def _parse_partial_square(text: str, pos: int) -> ParseResult:
    file = try_parse_from(File, text, pos)
    rank = try_parse_from(Rank, text, file.pos)
    return ParseResult(PartialSquare(file.value, rank.value), rank.pos)


def _parse_piece(text: str, pos: int) -> ParseResult:
    white = try_parse_from(PieceType, text, pos, ParseStyle.UPPERCASE)
    if white.value is not None:
        return ParseResult(Piece(white.value, Color.WHITE), white.pos)
    black = try_parse_from(PieceType, text, pos, ParseStyle.LOWERCASE)
    if black.value is not None:
        return ParseResult(Piece(black.value, Color.BLACK), black.pos)
    raise ParsingError(ParseError.INVALID_PIECE)


def _parse_san_normal_move(text: str, pos: int) -> ParseResult:
    piece = try_parse_from(PieceType, text, pos, ParseStyle.UPPERCASE)
    piece_type = piece.value if piece.value is not None else PieceType.PAWN
    pos = piece.pos

    origin_result = parse_from(PartialSquare, text, pos)
    origin: PartialSquare = origin_result.value
    pos = origin_result.pos

    is_capture = text.startswith("x", pos)
    if is_capture:
        pos += 1

    try:
        destination_result = parse_from(Square, text, pos)
    except ParsingError:
        fallback = origin.to_square()
        if is_capture or fallback is None:
            raise
        origin, destination = PartialSquare(), fallback
    else:
        destination = destination_result.value
        pos = destination_result.pos

    has_promotion_symbol = text.startswith("=", pos)
    if has_promotion_symbol:
        pos += 1

    promotion: Optional[PromotablePieceType] = None
    try:
        promotion_result = parse_from(PromotablePieceType, text, pos, ParseStyle.UPPERCASE)
    except ParsingError:
        if has_promotion_symbol:
            raise
    else:
        promotion = promotion_result.value
        pos = promotion_result.pos

    check = try_parse_from(CheckIndicator, text, pos)
    move = SanNormalMove(
        piece_type=piece_type,
        origin=origin,
        is_capture=is_capture,
        destination=destination,
        promotion=promotion,
        check_indicator=check.value,
    )
    return ParseResult(move, check.pos)


def _parse_san_castling_move(text: str, pos: int) -> ParseResult:
    rest = text[pos:]
    if rest.startswith("O-O-O"):
        side, pos = CastlingSide.QUEENSIDE, pos + len("O-O-O")
    elif rest.startswith("O-O"):
        side, pos = CastlingSide.KINGSIDE, pos + len("O-O")
    else:
        raise ParsingError(ParseError.INVALID_SAN_CASTLING)
    check = try_parse_from(CheckIndicator, text, pos)
    return ParseResult(SanCastlingMove(side, check.value), check.pos)


def _parse_san_move(text: str, pos: int) -> ParseResult:
    castling = try_parse_from(SanCastlingMove, text, pos)
    if castling.value is not None:
        return castling
    return parse_from(SanNormalMove, text, pos)


_DEFAULT = ParseStyle.DEFAULT
_UPPER = ParseStyle.UPPERCASE
_LOWER = ParseStyle.LOWERCASE

_PARSERS: dict[tuple[object, ParseStyle], _Parser] = {
    (Color, _DEFAULT): _parse_enum(Color, "wb", ParseError.INVALID_COLOR),
    (File, _DEFAULT): _parse_enum(File, "abcdefgh", ParseError.INVALID_FILE),
    (Rank, _DEFAULT): _parse_enum(Rank, "87654321", ParseError.INVALID_RANK),
    (CheckIndicator, _DEFAULT): _parse_enum(
        CheckIndicator, "+#", ParseError.INVALID_CHECK_INDICATOR
    ),
    (PieceType, _UPPER): _parse_enum(PieceType, "PNBRQK", ParseError.INVALID_PIECE_TYPE),
    (PieceType, _LOWER): _parse_enum(PieceType, "pnbrqk", ParseError.INVALID_PIECE_TYPE),
    (PromotablePieceType, _UPPER): _parse_enum(
        PromotablePieceType, "NBRQ", ParseError.INVALID_PROMOTABLE_PIECE_TYPE
    ),
    (PromotablePieceType, _LOWER): _parse_enum(
        PromotablePieceType, "nbrq", ParseError.INVALID_PROMOTABLE_PIECE_TYPE
    ),
    (GameResult, _DEFAULT): _parse_game_result,
    (Square, _DEFAULT): _parse_square,
    (PartialSquare, _DEFAULT): _parse_partial_square,
    (Piece, _DEFAULT): _parse_piece,
    (SanNormalMove, _DEFAULT): _parse_san_normal_move,
    (SanCastlingMove, _DEFAULT): _parse_san_castling_move,
    (SanMove, _DEFAULT): _parse_san_move,
}


def _parser_for(kind: object, style: ParseStyle) -> _Parser:
    try:
        return _PARSERS[(kind, style)]
    except KeyError:
        raise TypeError(f"no {style.value} parser for {kind!r}") from None


def parse_from(
    kind: object, text: str, pos: int = 0, style: ParseStyle = ParseStyle.DEFAULT
) -> ParseResult:
    """Parse a value of kind starting at pos; raise ParsingError on failure."""
    if not 0 <= pos <= len(text):
        raise ValueError(f"position {pos} outside text of length {len(text)}")
    return _parser_for(kind, style)(text, pos)


def try_parse_from(
    kind: object, text: str, pos: int = 0, style: ParseStyle = ParseStyle.DEFAULT
) -> ParseResult:
    """Like parse_from, but give a None value at the unchanged position on failure."""
    try:
        return parse_from(kind, text, pos, style)
    except ParsingError:
        return ParseResult(None, pos)


def parse(kind: object, text: str, style: ParseStyle = ParseStyle.DEFAULT) -> Any:
    """Parse the whole of text as a value of kind."""
    result = parse_from(kind, text, 0, style)
    if result.pos != len(text):
        raise ParsingError(ParseError.EXPECTING_END_OF_STRING)
    return result.value