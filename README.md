# chesskit

A small chess toolkit. It has the basic chess value types, parsers for
algebraic notation, text formatting, castling rights, castling rules and
piece placement validation.

## Installation

```
pip install chesskit
```

## Modules

- `chesskit.types` holds `Color`, `File`, `Rank`, `Square`, `PartialSquare`,
  `PieceType`, `PromotablePieceType`, `Piece`, `CastlingSide`,
  `CheckIndicator`, `GameResult` and `DrawReason`. It also holds square and
  rank helpers: `back_rank`, `promotion_rank`, `en_passant_rank`,
  `shift_square`, `square_ahead`, `square_behind`, `farthest_pawn_push`,
  `farthest_pawn_push_source`, `square_color`, `back_rank_square` and others.
- `chesskit.errors` holds the error enums `ParseError`, `MoveError`,
  `PiecePlacementError` and `PositionError`. It also holds the exceptions
  `ParsingError`, `IllegalMoveError`, `InvalidPiecePlacementError` and
  `InvalidPositionError`. Each exception keeps its enum value in `.error`.
- `chesskit.castling_rights` holds `CastlingRights`, which stores the four
  castling flags.
- `chesskit.piece_placement` holds `PiecePlacement`, a validated board
  layout, and the castling helpers: `RawMove`, `CastlingMoves`,
  `castling_moves`, `affects_kingside_castling`,
  `affects_queenside_castling`, `are_castling_pieces_in_initial_location`
  and `is_valid_castling_rights`.
- `chesskit.san_move` holds `SanNormalMove` and `SanCastlingMove`.
- `chesskit.parsing` holds `parse`, `parse_from`, `try_parse_from`,
  `ParseStyle` and `ParseResult`.
- `chesskit.formatting` holds `format_optional`.

## Formatting

Values format through `format()` and f-strings. `Color`, `CheckIndicator`
and `GameResult` accept a verbose (`v`) spec and a compact (`c`) spec.
Verbose is the default. The other types accept only the empty spec.

```python
from chesskit.types import Color, GameResult, Square, File, Rank

f"{Color.WHITE}"              # 'white'
f"{Color.WHITE:c}"            # 'w'
f"{GameResult.DRAW:c}"        # '1/2-1/2'
f"{Square(File.E, Rank.R4)}"  # 'e4'
~Color.WHITE                  # Color.BLACK
```

`format_optional` formats a value that may be `None`. The spec has the form
`prefix[inner spec]suffix?default`. The default text is used when the value
is `None`.

```python
from chesskit.formatting import format_optional

format_optional(None, "?-")          # '-'
format_optional(Color.BLACK, "[c]")  # 'b'
```

## Parsing

`parse(kind, text)` reads a whole string as one value. It raises
`ParsingError` when the input is invalid or when text is left at the end.
It can read these kinds:

- `Color`, `File`, `Rank` and `CheckIndicator`
- `PieceType`, `PromotablePieceType` and `Piece`
- `GameResult`
- `Square` and `PartialSquare`
- `SanNormalMove`, `SanCastlingMove` and `SanMove`

For `PieceType` and `PromotablePieceType`, pass `ParseStyle.UPPERCASE` or
`ParseStyle.LOWERCASE`.

```python
from chesskit.parsing import parse
from chesskit.errors import ParsingError, ParseError
from chesskit.types import Color, File, Rank, Square
from chesskit.san_move import SanNormalMove

parse(Color, "w")                              # Color.WHITE
parse(Square, "e4") == Square(File.E, Rank.R4)  # True
move = parse(SanNormalMove, "Nbxd7+")
move.is_capture                                # True

try:
    parse(Color, "w ")
except ParsingError as exc:
    assert exc.error is ParseError.EXPECTING_END_OF_STRING
```

`parse_from(kind, text, pos)` reads one value starting at `pos`. It returns
a `ParseResult` with `.value` and `.pos`, where `.pos` is the position just
after the value. `try_parse_from` does the same but does not raise. If the
read fails, `.value` is `None` and `.pos` stays where it started.

## Castling rights

```python
from chesskit.castling_rights import CastlingRights
from chesskit.types import CastlingSide, Color

rights = CastlingRights()                  # all four rights granted
rights.disable(CastlingSide.QUEENSIDE, Color.BLACK)
rights.can_castle(CastlingSide.KINGSIDE, Color.WHITE)  # True
rights.disable(Color.WHITE)                # both white rights
rights.enable()                            # every right
rights.to_bits()                           # 15
CastlingRights.from_bits(0b0101)           # white and black kingside
```

## Piece placement

`PiecePlacement()` gives the standard starting layout.
`PiecePlacement.from_piece_array` builds a layout from 64 optional pieces,
listed rank by rank from a8 to h1. It raises `InvalidPiecePlacementError` in
these cases:

- a king is missing;
- a side has more than one king;
- a pawn stands on its own back rank;
- a pawn stands on its promotion rank.

`piece_at`, `piece_array` and `piece_locations` read the layout.
`is_valid_castling_rights` checks that every granted right has its king and
rook on their starting squares.

## What it does not do

This package has no game or position object. It does not generate moves,
check whether a move is legal, play moves on a board, or read or write FEN
or PGN. `MoveError`, `PositionError`, `IllegalMoveError` and
`InvalidPositionError` are defined, but no code in the package raises them.
There is no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```