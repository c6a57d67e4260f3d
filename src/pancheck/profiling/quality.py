"""
Data quality profile of a raw PAN batch.

Reports the problems normalization will have to fix before validation:
missing values, blanks, exact duplicates, surrounding whitespace and
lowercase characters. Profiling is read-only and never rejects input.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from pancheck.normalization.records import is_missing, normalize_batch


@dataclass(frozen=True)
class DataQualityProfile:
    """
    Data quality counts over a raw batch.

    Attributes:
        total_records: Number of raw records.
        null_records: Records with no value.
        blank_records: Records that are empty after trimming.
        untrimmed_records: Records with leading or trailing whitespace.
        non_uppercase_records: Records that change when upper-cased.
        duplicate_values: Raw values occurring more than once, with counts.
        clean_unique_records: Unique records left after normalization.
    """

    total_records: int
    null_records: int
    blank_records: int
    untrimmed_records: int
    non_uppercase_records: int
    duplicate_values: dict[str, int] = field(default_factory=dict)
    clean_unique_records: int = 0

    @property
    def duplicate_records(self) -> int:
        """Surplus records beyond the first occurrence of each duplicate value."""
        return sum(count - 1 for count in self.duplicate_values.values())

    def as_dict(self) -> dict[str, Any]:
        """Return the profile as a plain dictionary."""
        return {
            "total_records": self.total_records,
            "null_records": self.null_records,
            "blank_records": self.blank_records,
            "untrimmed_records": self.untrimmed_records,
            "non_uppercase_records": self.non_uppercase_records,
            "duplicate_values": dict(self.duplicate_values),
            "duplicate_records": self.duplicate_records,
            "clean_unique_records": self.clean_unique_records,
        }


def profile_records(raw_records: Iterable[Any]) -> DataQualityProfile:
    """
    Profile a raw batch.

    Args:
        raw_records: Raw values as ingested.

    Returns:
        DataQualityProfile for the batch.
    """
    raw_records = list(raw_records)
    present = [value for value in raw_records if not is_missing(value)]

    counts = Counter(present)
    duplicates = {value: n for value, n in sorted(counts.items()) if n > 1}

    return DataQualityProfile(
        total_records=len(raw_records),
        null_records=len(raw_records) - len(present),
        blank_records=sum(1 for v in present if not v.strip()),
        untrimmed_records=sum(1 for v in present if v != v.strip()),
        non_uppercase_records=sum(1 for v in present if v != v.upper()),
        duplicate_values=duplicates,
        clean_unique_records=len(normalize_batch(present)),
    )
