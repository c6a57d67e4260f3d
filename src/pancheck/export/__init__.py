"""Export of classified records and batch summaries."""

from pancheck.export.results import (
    outcomes_to_dataframe,
    summary_to_dataframe,
    write_results,
)

__all__ = ["outcomes_to_dataframe", "summary_to_dataframe", "write_results"]
