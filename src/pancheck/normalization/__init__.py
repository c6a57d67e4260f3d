"""
Record normalization layer.

Trims and upper-cases raw PAN values and collapses duplicates
into a set of clean records.
"""

from pancheck.normalization.records import is_missing, normalize, normalize_batch

__all__ = ["is_missing", "normalize", "normalize_batch"]
