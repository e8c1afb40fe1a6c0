"""Error kinds reported by parsing, move validation and position checks."""

from __future__ import annotations

from enum import Enum, auto


class ParseError(Enum):
    """Reasons a piece of text could not be parsed."""

    INVALID_RANK = auto()
    INVALID_FILE = auto()
    INVALID_PIECE_TYPE = auto()
    INVALID_PROMOTABLE_PIECE_TYPE = auto()
    INVALID_SAN_CASTLING = auto()
    INVALID_SLASH_SYMBOL = auto()
    MISSING_PIECE_PLACEMENT_INFO = auto()
    MISSING_RANK_INFO = auto()
    INVALID_PIECE = auto()
    INVALID_CASTLING_AVAILABILITY = auto()
    INVALID_WHITE_SPACE = auto()
    INVALID_DASH_SYMBOL = auto()
    NUMBER_OUT_OF_RANGE = auto()
    INVALID_NUMBER = auto()
    INVALID_COLOR = auto()
    INVALID_CHECK_INDICATOR = auto()
    INVALID_TAG = auto()
    INVALID_QUOTE = auto()
    INVALID_RIGHT_BRACKET = auto()
    INVALID_PIECE_PLACEMENT = auto()
    INVALID_POSITION = auto()
    INVALID_GAME_RESULT = auto()
    INVALID_MOVE = auto()
    DUPLICATED_FEN_TAG = auto()
    EXPECTING_END_OF_STRING = auto()


class MoveError(Enum):
    """Reasons a move was rejected."""

    KING_OR_ROOK_MOVED = "King or rook moved"
    KING_PATH_BLOCKED = "King path blocked"
    ROOK_PATH_BLOCKED = "Rook path blocked"
    KING_PATH_UNDER_ATTACK = "King path under attack"
    NO_VALID_ORIGIN = "No valid origin"
    AMBIGUOUS_ORIGIN = "Ambiguous origin"
    MOVE_LEAVES_OWN_KING_IN_CHECK = "Move leaves own king in check"
    ILLEGAL_MOVE = "Illegal move"
    WRONG_PIECE_COLOR_AT_ORIGIN = "Wrong piece color at origin"
    NO_PIECE_AT_ORIGIN = "No piece at origin"
    PROMOTION_ON_INVALID_RANK = "Promotion on invalid rank"
    NON_PAWN_PROMOTION_ATTEMPT = "Non pawn promotion attempt"
    MISSING_PROMOTION_PIECE = "Missing promotion piece"
    HALFMOVE_CLOCK_OVERFLOW = "Halfmove clock overflow"
    FULLMOVE_NUMBER_OVERFLOW = "Fullmove number overflow"

    def __str__(self) -> str:
        return self.value


class PiecePlacementError(Enum):
    """Reasons a piece placement is invalid."""

    MISSING_KING = "Missing king"
    MULTIPLE_KINGS_OF_SAME_COLOR = "Multiple kings of same color"
    PAWN_ON_BACK_RANK = "Pawn on back rank"
    PAWN_ON_PROMOTION_RANK = "Pawn on promotion rank"

    def __str__(self) -> str:
        return self.value


class PositionError(Enum):
    """Reasons a position is invalid."""

    SIDE_NOT_TO_MOVE_IS_UNDER_ATTACK = "Side not to move is under attack"
    FULLMOVE_NUMBER_OUT_OF_RANGE = "Fullmove number out of range"
    HALFMOVE_CLOCK_OUT_OF_RANGE = "Halfmove clock out of range"
    INVALID_CASTLING_RIGHTS_FOR_PIECE_POSITIONS = "Invalid castling rights for piece positions"
    EN_PASSANT_TARGET_SQUARE_OCCUPIED = "En passant target square occupied"
    EN_PASSANT_NO_CAPTURABLE_PAWN = "En passant no capturable pawn"
    EN_PASSANT_TARGET_SQUARE_INVALID_RANK = "En passant target square invalid rank"

    def __str__(self) -> str:
        return self.value


class ParsingError(ValueError):
    """Raised when text cannot be parsed; ``error`` holds the reason."""

    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(error.name.replace("_", " ").capitalize())


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played; ``error`` holds the reason."""

    def __init__(self, error: MoveError) -> None:
        self.error = error
        super().__init__(str(error))


class InvalidPiecePlacementError(ValueError):
    """Raised for an invalid arrangement of pieces; ``error`` holds the reason."""

    def __init__(self, error: PiecePlacementError) -> None:
        self.error = error
        super().__init__(str(error))


class InvalidPositionError(ValueError):
    """Raised for an invalid position; ``error`` holds the reason."""

    def __init__(self, error: PositionError) -> None:
        self.error = error
        super().__init__(str(error))