"""Tests for raw record normalization."""

import math

import pandas as pd
import pytest

from pancheck.normalization import is_missing, normalize, normalize_batch


class TestNormalize:
    """Tests for normalize."""

    @pytest.mark.parametrize("value", [None, "", " ", "   ", "\t\n"])
    def test_discards_missing_and_blank(self, value: str | None) -> None:
        """Test that null and whitespace-only values are discarded."""
        assert normalize(value) is None

    @pytest.mark.parametrize("value", [math.nan, pd.NA])
    def test_discards_pandas_missing_markers(self, value: object) -> None:
        """NaN and pd.NA from DataFrame columns are discarded like None."""
        assert is_missing(value) is True
        assert normalize(value) is None

    def test_literal_nan_text_is_a_value(self) -> None:
        """The string "nan" is not a missing marker."""
        assert is_missing("nan") is False
        assert normalize("nan") == "NAN"

    def test_trims_and_uppercases(self) -> None:
        """Test trimming of surrounding whitespace and upper-casing."""
        assert normalize("  abcde1234f  ") == "ABCDE1234F"

    def test_preserves_internal_whitespace(self) -> None:
        """Internal whitespace is kept as-is."""
        assert normalize(" ab  cd ") == "AB  CD"

    def test_already_clean_value_unchanged(self) -> None:
        """Test that clean values pass through."""
        assert normalize("AXBCE1923F") == "AXBCE1923F"

    @pytest.mark.parametrize(
        "value", ["  abcde1234f  ", "AXBCE1923F", "x", " mixed Case 12 "]
    )
    def test_idempotent(self, value: str) -> None:
        """Normalizing a clean record again yields the same record."""
        once = normalize(value)
        assert once is not None
        assert normalize(once) == once


class TestNormalizeBatch:
    """Tests for normalize_batch."""

    def test_collapses_duplicates(self) -> None:
        """Records that normalize identically collapse to one."""
        result = normalize_batch(
            ["  abcde1234f  ", "ABCDE1234F", None, "", "AABCE1923F"]
        )
        assert result == frozenset({"ABCDE1234F", "AABCE1923F"})

    def test_empty_batch(self) -> None:
        """Test empty input."""
        assert normalize_batch([]) == frozenset()

    def test_all_discarded(self) -> None:
        """Test batch of only null and blank values."""
        assert normalize_batch([None, "", "  "]) == frozenset()

    def test_accepts_generator(self) -> None:
        """Test that any iterable is accepted."""
        result = normalize_batch(v for v in ["a", "A", " a "])
        assert result == frozenset({"A"})
