"""
Raw PAN record normalization.

A raw record is an optional string as ingested. Normalizing it either
discards it (null, empty or whitespace-only) or yields a clean record:
the trimmed, upper-cased value. Internal whitespace is preserved.

pandas missing markers (NaN, NA) are treated like None, so values taken
straight from a DataFrame column can be passed in.
"""

from collections.abc import Iterable
from typing import Any

import pandas as pd


def is_missing(raw: Any) -> bool:
    """Check for None and pandas missing markers (NaN, NA)."""
    if raw is None:
        return True
    if isinstance(raw, str):
        return False
    return bool(pd.isna(raw))


def normalize(raw: str | None) -> str | None:
    """
    Normalize a single raw PAN value.

    Args:
        raw: Raw value, possibly None, NaN, blank, padded or mis-cased.

    Returns:
        Upper-cased, trimmed value, or None if the record is discarded.
    """
    if is_missing(raw):
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None
    return trimmed.upper()


def normalize_batch(raw_records: Iterable[str | None]) -> frozenset[str]:
    """
    Normalize a batch of raw records into unique clean records.

    Discarded records are dropped and records that normalize to the same
    value collapse into one.

    Args:
        raw_records: Raw values of the batch.

    Returns:
        Set of unique clean records.
    """
    return frozenset(
        clean for clean in (normalize(raw) for raw in raw_records) if clean is not None
    )
