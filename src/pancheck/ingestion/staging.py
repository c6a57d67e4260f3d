"""
Staging dataset ingestion.

Loads the raw PAN column from a CSV, JSON or plain-text file. Values
are read as strings without any cleaning; empty cells become None.
"""

from typing import Any

import pandas as pd

from pancheck.config.settings import PipelineConfig
from pancheck.ingestion.base import DataLoader
from pancheck.normalization.records import is_missing
from pancheck.schemas.pan import RawPanSchema
from pancheck.utils.logging import get_logger

log = get_logger(__name__)

PAN_COLUMN = "pan_number"

SUPPORTED_SUFFIXES = (".csv", ".json", ".txt")


def _as_raw_value(value: Any) -> str | None:
    """Map missing markers (None, NaN, NA) to None and anything else to str."""
    if is_missing(value):
        return None
    return str(value)


class PanRecordLoader(DataLoader[RawPanSchema]):
    """Loader for the raw PAN staging dataset."""

    def __init__(self, config: PipelineConfig) -> None:
        """Initialize staging loader."""
        super().__init__(config, RawPanSchema)

    def _load_raw(self) -> pd.DataFrame:
        """Load the staging file and expose its PAN column as pan_number."""
        path = self.config.input_path

        if not path.exists():
            msg = f"PAN dataset not found: {path}"
            raise FileNotFoundError(msg)

        suffix = path.suffix.lower()
        source_column = self.config.input.column

        log.info("Loading PAN dataset", path=str(path), column=source_column)

        if suffix == ".csv":
            # Only empty cells are missing; padding and literal "NA" stay as-is
            df = pd.read_csv(
                path,
                dtype=str,
                encoding="utf-8",
                keep_default_na=False,
                na_values=[""],
                skip_blank_lines=False,
            )
        elif suffix == ".json":
            df = pd.read_json(path, dtype=False)
        elif suffix == ".txt":
            # utf-8-sig drops a leading byte order mark from the first value
            with path.open(encoding="utf-8-sig") as f:
                values = [line.rstrip("\r\n") for line in f]
            df = pd.DataFrame({source_column: [v if v else None for v in values]})
        else:
            msg = (
                f"Unsupported file format: {suffix} "
                f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
            )
            raise ValueError(msg)

        if source_column not in df.columns:
            msg = f"Column '{source_column}' not found in {path.name}"
            raise ValueError(msg)

        if source_column != PAN_COLUMN:
            df = df.rename(columns={source_column: PAN_COLUMN})

        df[PAN_COLUMN] = pd.Series(
            [_as_raw_value(v) for v in df[PAN_COLUMN]], index=df.index, dtype=object
        )
        return df

    def load_raw_records(self, *, validate: bool = True) -> list[str | None]:
        """
        Load the raw PAN values in file order.

        Returns:
            List of raw values, None where the cell is empty.
        """
        df = self.load(validate=validate)
        return [_as_raw_value(v) for v in df[PAN_COLUMN]]


def load_raw_records(config: PipelineConfig) -> list[str | None]:
    """Load raw PAN values for the configured staging dataset."""
    return PanRecordLoader(config).load_raw_records()
