"""
Export batch results.

Writes the classified records as CSV and the summary as JSON.
Row order is sorted by PAN for readability only.
"""

import json
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from pancheck.batch.processor import BatchResult, Summary
from pancheck.schemas.pan import SUMMARY_COLUMNS, PanOutcomeSchema, SummarySchema
from pancheck.utils.logging import get_logger
from pancheck.validation.core import ValidationOutcome

log = get_logger(__name__)

OUTCOMES_FILENAME = "pan_outcomes.csv"
SUMMARY_FILENAME = "pan_summary.json"


def outcomes_to_dataframe(outcomes: Iterable[ValidationOutcome]) -> pd.DataFrame:
    """
    Convert outcomes to a validated DataFrame.

    Args:
        outcomes: Validation outcomes of a batch.

    Returns:
        DataFrame with pan_number and status columns, sorted by pan_number.
    """
    rows = sorted(outcomes, key=lambda o: o.pan_number)
    df = pd.DataFrame(
        {
            "pan_number": [o.pan_number for o in rows],
            "status": [o.status.value for o in rows],
        },
        dtype=object,
    )
    return PanOutcomeSchema.validate(df)


def summary_to_dataframe(summary: Summary) -> pd.DataFrame:
    """Convert a summary to a validated one-row DataFrame."""
    df = pd.DataFrame([summary.as_dict()], columns=SUMMARY_COLUMNS)
    return SummarySchema.validate(df)


def write_results(result: BatchResult, output_dir: Path) -> dict[str, Path]:
    """
    Write outcomes and summary to an output directory.

    Args:
        result: Batch result to export.
        output_dir: Target directory (created if missing).

    Returns:
        Mapping of artifact name to written path.

    Raises:
        pandera.errors.SchemaError: If the outcomes or summary violate their schema.
    """
    summary_row = summary_to_dataframe(result.summary).iloc[0]
    outcomes_df = outcomes_to_dataframe(result.outcomes)

    output_dir.mkdir(parents=True, exist_ok=True)

    outcomes_path = output_dir / OUTCOMES_FILENAME
    outcomes_df.to_csv(outcomes_path, index=False)

    summary_path = output_dir / SUMMARY_FILENAME
    with summary_path.open("w", encoding="utf-8") as f:
        json.dump({k: int(v) for k, v in summary_row.items()}, f, indent=2)

    log.info(
        "Results written",
        outcomes=str(outcomes_path),
        summary=str(summary_path),
        rows=len(result.outcomes),
    )
    return {"outcomes": outcomes_path, "summary": summary_path}
