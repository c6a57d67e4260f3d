"""
Data ingestion layer for loading raw data with schema validation.

All raw data loading happens through this module to ensure
consistent validation at system boundaries.
"""

from pancheck.ingestion.staging import PanRecordLoader, load_raw_records

__all__ = ["PanRecordLoader", "load_raw_records"]
