"""
Unit tests for repetition and alignment.
"""

import tracemalloc

import pytest

from stringhelpers import Alignment, Char, InvalidArgument, align, multiply


class TestMultiply:
    """Tests for string repetition."""

    def test_basic(self):
        """Test repeating a string several times."""
        assert multiply("test ", 3) == "test test test "

    def test_zero(self):
        """Test that zero repetitions give an empty string."""
        assert multiply("test", 0) == ""

    def test_empty_string(self):
        """Test that an empty string stays empty for any amount."""
        assert multiply("", 0) == ""
        assert multiply("", 5) == ""

    def test_once(self):
        """Test that one repetition is the identity."""
        assert multiply("test", 1) == "test"

    def test_negative_amount_raises(self):
        """Test that a negative amount is rejected."""
        with pytest.raises(InvalidArgument, match="cannot be negative"):
            multiply("test", -1)

    def test_large_amount_allocates_once(self):
        """Test that memory use stays close to the size of the result."""
        tracemalloc.start()
        try:
            result = multiply("x", 2_000_000)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        assert len(result) == 2_000_000
        assert peak < 4_000_000


class TestAlign:
    """Tests for padding a string to a target length."""

    def test_target_len(self):
        """Test that padding grows with the target length."""
        string = align("test", Alignment.LEFT, 7, "*")
        assert string == "***test"
        assert align(string, Alignment.LEFT, 8, "*") == "****test"

    def test_fill(self):
        """Test that the fill character is used for padding."""
        assert align("test", Alignment.LEFT, 7, "*")[0] == "*"

    def test_align_left(self):
        """Test that LEFT places the padding before the text."""
        assert align("test", Alignment.LEFT, 7, "*") == "***test"

    def test_align_right(self):
        """Test that RIGHT places the padding after the text."""
        assert align("test", Alignment.RIGHT, 7, "*") == "test***"

    def test_align_center_even(self):
        """Test centering with an even pad amount."""
        assert align("test", Alignment.CENTER, 8, "*") == "**test**"

    def test_align_center_odd(self):
        """Test that centering drops the odd remainder."""
        assert align("test", Alignment.CENTER, 9, "*") == "**test**"

    def test_empty_string(self):
        """Test padding an empty string."""
        assert align("", Alignment.LEFT, 4, "*") == "****"

    def test_char_fill(self):
        """Test that a Char fill behaves like a one-character string."""
        assert align("test", Alignment.RIGHT, 6, Char("-")) == "test--"

    def test_default_fill_is_space(self):
        """Test that the fill defaults to a space."""
        assert align("test", Alignment.LEFT, 6) == "  test"

    def test_multi_character_fill_truncates(self):
        """Test that only whole repetitions of the fill are used."""
        assert align("test", Alignment.LEFT, 9, "ab") == "ababtest"
        assert align("test", Alignment.CENTER, 9, "ab") == "abtestab"

    def test_target_equal_to_length(self):
        """Test that no padding is added when the text already fits."""
        assert align("test", Alignment.CENTER, 4, "*") == "test"

    def test_alignment_by_name(self):
        """Test that alignment names are accepted case-insensitively."""
        assert align("test", "right", 6, "*") == "test**"
        assert align("test", "CENTER", 8, "*") == "**test**"

    def test_empty_fill_raises(self):
        """Test that an empty fill is rejected."""
        with pytest.raises(InvalidArgument, match="fill"):
            align("test", Alignment.CENTER, 6, "")

    def test_target_shorter_than_text_raises(self):
        """Test that a target shorter than the text is rejected."""
        with pytest.raises(InvalidArgument, match="target_len"):
            align("test", Alignment.LEFT, 2, "*")


class TestAlignmentParse:
    """Tests for resolving alignment modes."""

    def test_member_passthrough(self):
        """Test that members are returned unchanged."""
        assert Alignment.parse(Alignment.LEFT) is Alignment.LEFT

    def test_name(self):
        """Test parsing names with surrounding whitespace."""
        assert Alignment.parse(" Center ") is Alignment.CENTER

    def test_unknown_name_suggests(self):
        """Test that a misspelt name carries a suggestion."""
        with pytest.raises(InvalidArgument) as exc_info:
            Alignment.parse("centre")
        assert exc_info.value.suggestions == ["center"]
        assert "did you mean `center`?" in str(exc_info.value)

    def test_non_string_raises(self):
        """Test that non-string values are rejected."""
        with pytest.raises(InvalidArgument, match="unknown alignment"):
            Alignment.parse(3)
