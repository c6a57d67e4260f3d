"""Data quality profiling of raw staging records."""

from pancheck.profiling.quality import DataQualityProfile, profile_records

__all__ = ["DataQualityProfile", "profile_records"]
