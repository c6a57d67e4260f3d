"""
Schema definitions using Pandera for data validation.

Data contracts for the staging input and the classified output.
"""

from pancheck.schemas.pan import (
    SUMMARY_COLUMNS,
    PanOutcomeSchema,
    RawPanSchema,
    SummarySchema,
)
from pancheck.schemas.registry import DataRole, SchemaRegistry

__all__ = [
    "SUMMARY_COLUMNS",
    "DataRole",
    "PanOutcomeSchema",
    "RawPanSchema",
    "SchemaRegistry",
    "SummarySchema",
]
