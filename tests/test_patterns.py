"""Tests for the character pattern detectors."""

import pytest

from pancheck.validation.patterns import has_adjacent_repeat, is_strict_sequence


class TestHasAdjacentRepeat:
    """Tests for has_adjacent_repeat."""

    @pytest.mark.parametrize("value", ["", "A", "7"])
    def test_short_strings_have_no_repeat(self, value: str) -> None:
        """Strings shorter than two characters have no adjacent pair."""
        assert has_adjacent_repeat(value) is False

    def test_repeat_at_start(self) -> None:
        """Test repeat in the first pair."""
        assert has_adjacent_repeat("ZZOVO") is True

    def test_no_repeat(self) -> None:
        """Test string without any adjacent repeat."""
        assert has_adjacent_repeat("ZOVXY") is False

    def test_repeat_at_end(self) -> None:
        """Test repeat in the last pair is found."""
        assert has_adjacent_repeat("ABCDD") is True

    def test_non_adjacent_duplicates_ignored(self) -> None:
        """Equal characters that are not neighbours do not count."""
        assert has_adjacent_repeat("ABABA") is False

    def test_digits(self) -> None:
        """Test digit blocks."""
        assert has_adjacent_repeat("1123") is True
        assert has_adjacent_repeat("1923") is False

    def test_case_sensitive(self) -> None:
        """Upper and lower case of a letter are different characters."""
        assert has_adjacent_repeat("aA") is False


class TestIsStrictSequence:
    """Tests for is_strict_sequence."""

    @pytest.mark.parametrize("value", ["", "A", "9"])
    def test_short_strings_are_sequences(self, value: str) -> None:
        """Strings shorter than two characters are vacuously sequential."""
        assert is_strict_sequence(value) is True

    def test_letter_sequence(self) -> None:
        """Test consecutive letters."""
        assert is_strict_sequence("ABCDE") is True

    def test_broken_sequence(self) -> None:
        """Test one out-of-order character breaks the sequence."""
        assert is_strict_sequence("ABCXE") is False

    def test_digit_sequence(self) -> None:
        """Test consecutive digits."""
        assert is_strict_sequence("1234") is True
        assert is_strict_sequence("6789") is True

    def test_descending_is_not_sequence(self) -> None:
        """Only strictly increasing runs count."""
        assert is_strict_sequence("EDCBA") is False
        assert is_strict_sequence("4321") is False

    def test_step_of_two_is_not_sequence(self) -> None:
        """The code point step must be exactly one."""
        assert is_strict_sequence("ACEGI") is False

    def test_repeated_characters_are_not_sequence(self) -> None:
        """A step of zero is not a sequence."""
        assert is_strict_sequence("AAAAA") is False

    def test_uses_code_points(self) -> None:
        """Sequence detection follows code points, e.g. '9' -> ':'."""
        assert is_strict_sequence("89:") is True
        assert is_strict_sequence("YZ") is True
        assert is_strict_sequence("Z[") is True
