"""Chess value types, notation parsing and formatting, castling rules and piece placement validation."""

__version__ = "1.0.0"

__all__ = [
    "types",
    "errors",
    "castling_rights",
    "piece_placement",
    "san_move",
    "parsing",
    "formatting",
]