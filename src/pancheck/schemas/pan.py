"""
Pandera schemas for PAN data at the system boundaries.
"""

import pandera.pandas as pa
from pandera.typing import Series

from pancheck.validation.core import PanStatus

SUMMARY_COLUMNS = [
    "total_processed_records",
    "total_valid_pans",
    "total_invalid_pans",
    "total_missing_pans",
]


class RawPanSchema(pa.DataFrameModel):
    """
    Schema for the raw staging dataset.

    Values are kept exactly as ingested: null, blank, padded and
    mis-cased values are all allowed here.
    """

    pan_number: Series[str] = pa.Field(
        nullable=True,
        description="Raw PAN value as ingested",
    )

    class Config:
        """Schema configuration."""

        name = "RawPanSchema"
        strict = False  # Allow extra columns
        coerce = False  # Coercing would turn None into the string 'None'


class PanOutcomeSchema(pa.DataFrameModel):
    """
    Schema for classified PAN records.

    One row per unique clean record.
    """

    pan_number: Series[str] = pa.Field(
        unique=True,
        str_length={"min_value": 1},
        description="Normalized PAN value",
    )
    status: Series[str] = pa.Field(
        isin=[s.value for s in PanStatus],
        description="Valid PAN or Invalid PAN",
    )

    class Config:
        """Schema configuration."""

        name = "PanOutcomeSchema"
        strict = True
        coerce = True  # Empty outcome sets arrive as object columns


class SummarySchema(pa.DataFrameModel):
    """Schema for the one-row batch summary."""

    total_processed_records: Series[int] = pa.Field(ge=0)
    total_valid_pans: Series[int] = pa.Field(ge=0)
    total_invalid_pans: Series[int] = pa.Field(ge=0)
    total_missing_pans: Series[int] = pa.Field(ge=0)

    class Config:
        """Schema configuration."""

        name = "SummarySchema"
        strict = True
        coerce = True
