import pytest

from chesskit.formatting import format_optional
from chesskit.types import Color, File, GameResult, Rank, Square


def test_empty_spec_formats_value_plainly():
    square = Square(File.E, Rank.R4)
    assert format_optional(square, "") == format(square, "")


def test_empty_spec_none_is_empty():
    assert format_optional(None, "") == ""


def test_default_only_spec_for_missing_value():
    assert format_optional(None, "?-") == "-"


def test_default_only_spec_for_present_value():
    square = Square(File.E, Rank.R3)
    assert format_optional(square, "?-") == "e3"


def test_underlying_spec_is_passed_on():
    assert format_optional(Color.WHITE, "[c]") == format(Color.WHITE, "c")
    assert format_optional(GameResult.DRAW, "[c]") == format(GameResult.DRAW, "c")


def test_prefix_and_suffix_wrap_value():
    result = format_optional(Color.BLACK, "<[v]>")
    assert result == "<" + format(Color.BLACK, "v") + ">"


def test_missing_value_ignores_prefix_and_suffix():
    assert format_optional(None, "<[c]>") == ""
    assert format_optional(None, "<[c]>?none") == "none"


def test_present_value_ignores_default():
    result = format_optional(Color.WHITE, "[c]?none")
    assert result == format(Color.WHITE, "c")


@pytest.mark.parametrize("spec", ["abc", "a[c", "[c"])
def test_malformed_spec_raises(spec):
    with pytest.raises(ValueError):
        format_optional(Color.WHITE, spec)


def test_invalid_underlying_spec_raises():
    with pytest.raises(ValueError):
        format_optional(Square(), "[x]")