import pytest

from chesskit.castling_rights import CastlingRights
from chesskit.errors import InvalidPiecePlacementError, PiecePlacementError
from chesskit.piece_placement import (
    CastlingMoves,
    PiecePlacement,
    RawMove,
    affects_kingside_castling,
    affects_queenside_castling,
    are_castling_pieces_in_initial_location,
    castling_moves,
    initial_king_square,
    initial_kingside_rook_square,
    initial_queenside_rook_square,
    is_valid_castling_rights,
    kingside_castling_king_destination,
    queenside_castling_king_destination,
)
from chesskit.types import (
    NUM_SQUARES,
    CastlingSide,
    Color,
    File,
    Piece,
    PieceType,
    Rank,
    Square,
)

WHITE_KING = Piece(PieceType.KING, Color.WHITE)
BLACK_KING = Piece(PieceType.KING, Color.BLACK)


def build(placements):
    array = [None] * NUM_SQUARES
    for square, piece in placements.items():
        array[square.index()] = piece
    return array


def kings_only():
    return {Square(File.E, Rank.R1): WHITE_KING, Square(File.E, Rank.R8): BLACK_KING}


def test_default_is_standard_start():
    placement = PiecePlacement()
    assert placement.piece_at(Square(File.E, Rank.R1)) == WHITE_KING
    assert placement.piece_at(Square(File.E, Rank.R8)) == BLACK_KING
    assert placement.piece_at(Square(File.D, Rank.R1)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert placement.piece_at(Square(File.E, Rank.R4)) is None


def test_default_is_mirror_symmetric():
    placement = PiecePlacement()
    for square in map(Square.from_index, range(NUM_SQUARES)):
        mirrored = Square(square.file, Rank(7 - square.rank.value))
        piece = placement.piece_at(square)
        other = placement.piece_at(mirrored)
        if piece is None:
            assert other is None
        else:
            assert other == Piece(piece.type, piece.color.opposite())


def test_round_trip_through_piece_array():
    placement = PiecePlacement()
    again = PiecePlacement.from_piece_array(placement.piece_array())
    assert again == placement
    assert hash(again) == hash(placement)


def test_piece_locations_match_piece_array():
    placement = PiecePlacement()
    locations = placement.piece_locations()
    for index, piece in enumerate(placement.piece_array()):
        square = Square.from_index(index)
        if piece is not None:
            assert square in locations[piece.color][piece.type]
    total = sum(len(s) for by_type in locations.values() for s in by_type.values())
    assert total == sum(piece is not None for piece in placement.piece_array())


def test_kings_only_is_valid():
    placement = PiecePlacement.from_piece_array(build(kings_only()))
    assert placement.piece_locations()[Color.WHITE] == {
        PieceType.KING: frozenset({Square(File.E, Rank.R1)})
    }
    assert placement != PiecePlacement()


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        PiecePlacement.from_piece_array([None] * (NUM_SQUARES - 1))


def test_missing_king():
    array = build({Square(File.E, Rank.R1): WHITE_KING})
    with pytest.raises(InvalidPiecePlacementError) as info:
        PiecePlacement.from_piece_array(array)
    assert info.value.error is PiecePlacementError.MISSING_KING


def test_multiple_kings():
    placements = kings_only()
    placements[Square(File.A, Rank.R1)] = WHITE_KING
    with pytest.raises(InvalidPiecePlacementError) as info:
        PiecePlacement.from_piece_array(build(placements))
    assert info.value.error is PiecePlacementError.MULTIPLE_KINGS_OF_SAME_COLOR


@pytest.mark.parametrize(
    "square, color, expected",
    [
        (Square(File.A, Rank.R1), Color.WHITE, PiecePlacementError.PAWN_ON_BACK_RANK),
        (Square(File.A, Rank.R8), Color.BLACK, PiecePlacementError.PAWN_ON_BACK_RANK),
        (Square(File.A, Rank.R8), Color.WHITE, PiecePlacementError.PAWN_ON_PROMOTION_RANK),
        (Square(File.A, Rank.R1), Color.BLACK, PiecePlacementError.PAWN_ON_PROMOTION_RANK),
    ],
)
def test_pawn_rank_errors(square, color, expected):
    placements = kings_only()
    placements[square] = Piece(PieceType.PAWN, color)
    with pytest.raises(InvalidPiecePlacementError) as info:
        PiecePlacement.from_piece_array(build(placements))
    assert info.value.error is expected


@pytest.mark.parametrize("color", list(Color))
def test_castling_moves_use_start_squares(color):
    kingside = castling_moves(CastlingSide.KINGSIDE, color)
    queenside = castling_moves(CastlingSide.QUEENSIDE, color)
    assert kingside.king_move == RawMove(
        initial_king_square(color), kingside_castling_king_destination(color)
    )
    assert kingside.rook_move.origin == initial_kingside_rook_square(color)
    assert queenside.king_move.destination == queenside_castling_king_destination(color)
    assert queenside.rook_move.origin == initial_queenside_rook_square(color)
    assert isinstance(kingside, CastlingMoves)


def test_white_kingside_castling_squares():
    moves = castling_moves(CastlingSide.KINGSIDE, Color.WHITE)
    assert moves.king_move == RawMove(Square(File.E, Rank.R1), Square(File.G, Rank.R1))
    assert moves.rook_move == RawMove(Square(File.H, Rank.R1), Square(File.F, Rank.R1))


def test_affects_castling():
    king_step = RawMove(initial_king_square(Color.WHITE), Square(File.E, Rank.R2))
    assert affects_kingside_castling(king_step, Color.WHITE)
    assert affects_queenside_castling(king_step, Color.WHITE)
    rook_capture = RawMove(Square(File.H, Rank.R7), initial_kingside_rook_square(Color.WHITE))
    assert affects_kingside_castling(rook_capture, Color.WHITE)
    assert not affects_queenside_castling(rook_capture, Color.WHITE)
    unrelated = RawMove(Square(File.B, Rank.R2), Square(File.B, Rank.R4))
    assert not affects_kingside_castling(unrelated, Color.WHITE)
    assert not affects_queenside_castling(unrelated, Color.BLACK)


def test_castling_pieces_in_initial_location():
    start = PiecePlacement()
    assert all(
        are_castling_pieces_in_initial_location(start, side, color)
        for side in CastlingSide
        for color in Color
    )
    assert is_valid_castling_rights(start, CastlingRights())


def test_castling_rights_invalid_without_rook():
    placements = kings_only()
    placements[Square(File.H, Rank.R1)] = Piece(PieceType.ROOK, Color.WHITE)
    placement = PiecePlacement.from_piece_array(build(placements))
    assert are_castling_pieces_in_initial_location(placement, CastlingSide.KINGSIDE, Color.WHITE)
    assert not are_castling_pieces_in_initial_location(
        placement, CastlingSide.QUEENSIDE, Color.WHITE
    )
    assert not is_valid_castling_rights(placement, CastlingRights())
    rights = CastlingRights.from_bits(1 << CastlingRights.WHITE_KINGSIDE)
    assert is_valid_castling_rights(placement, rights)
    assert is_valid_castling_rights(placement, CastlingRights.from_bits(0))