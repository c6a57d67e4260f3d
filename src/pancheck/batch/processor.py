"""
Batch processor for raw PAN records.

Normalizes a whole batch, collapses duplicates, validates every unique
clean record and reduces the outcomes to a four-number summary:

    total_missing_pans = total_processed_records
                         - (total_valid_pans + total_invalid_pans)

The missing bucket therefore counts nulls, blanks and duplicates that
were collapsed during normalization.
"""

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import islice

from pancheck.normalization.records import normalize_batch
from pancheck.utils.logging import get_logger
from pancheck.validation.core import PanStatus, ValidationOutcome, classify

log = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 1000


@dataclass(frozen=True)
class Summary:
    """Aggregate counts of one batch run."""

    total_processed_records: int
    total_valid_pans: int
    total_invalid_pans: int
    total_missing_pans: int

    def is_consistent(self) -> bool:
        """Check that valid + invalid + missing adds up to processed."""
        return (
            self.total_valid_pans + self.total_invalid_pans + self.total_missing_pans
            == self.total_processed_records
        )

    def as_dict(self) -> dict[str, int]:
        """Return the counts keyed by their report names."""
        return {
            "total_processed_records": self.total_processed_records,
            "total_valid_pans": self.total_valid_pans,
            "total_invalid_pans": self.total_invalid_pans,
            "total_missing_pans": self.total_missing_pans,
        }


@dataclass(frozen=True)
class BatchResult:
    """Outcome set and summary of one batch run."""

    outcomes: frozenset[ValidationOutcome]
    summary: Summary

    @property
    def valid(self) -> list[ValidationOutcome]:
        """Valid outcomes, ordered by PAN."""
        return sorted(
            (o for o in self.outcomes if o.status is PanStatus.VALID),
            key=lambda o: o.pan_number,
        )

    @property
    def invalid(self) -> list[ValidationOutcome]:
        """Invalid outcomes, ordered by PAN."""
        return sorted(
            (o for o in self.outcomes if o.status is PanStatus.INVALID),
            key=lambda o: o.pan_number,
        )


def summarize(outcomes: Iterable[ValidationOutcome], total_processed: int) -> Summary:
    """
    Reduce an outcome collection to summary counts.

    Args:
        outcomes: One outcome per unique clean record.
        total_processed: Size of the raw batch, including discarded records.

    Returns:
        Summary with the missing count derived by subtraction.
    """
    outcomes = list(outcomes)
    n_valid = sum(1 for o in outcomes if o.status is PanStatus.VALID)
    n_invalid = len(outcomes) - n_valid
    return Summary(
        total_processed_records=total_processed,
        total_valid_pans=n_valid,
        total_invalid_pans=n_invalid,
        total_missing_pans=total_processed - (n_valid + n_invalid),
    )


def _classify_chunk(chunk: Sequence[str]) -> frozenset[ValidationOutcome]:
    """Validate a chunk of clean records."""
    return frozenset(classify(clean) for clean in chunk)


def _chunked(values: Iterable[str], size: int) -> Iterable[list[str]]:
    """Yield successive lists of at most size values."""
    it = iter(values)
    while chunk := list(islice(it, size)):
        yield chunk


def process_batch(
    raw_records: Iterable[str | None],
    *,
    max_workers: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> BatchResult:
    """
    Normalize, deduplicate and validate a batch of raw PAN records.

    No record aborts the batch: discarded and duplicate records are left
    out of the outcome set and end up in the missing count.

    Args:
        raw_records: Raw values of the whole batch.
        max_workers: Worker threads for validation. None or 1 runs
            sequentially; the result is the same either way.
        chunk_size: Clean records per worker task.

    Returns:
        BatchResult with one outcome per unique clean record and the summary.

    Raises:
        ValueError: If max_workers or chunk_size is below 1.
    """
    if max_workers is not None and max_workers < 1:
        msg = f"max_workers must be at least 1, got {max_workers}"
        raise ValueError(msg)
    if chunk_size < 1:
        msg = f"chunk_size must be at least 1, got {chunk_size}"
        raise ValueError(msg)

    raw_records = list(raw_records)
    clean_records = normalize_batch(raw_records)
    log.debug(
        "Normalized batch",
        raw=len(raw_records),
        unique_clean=len(clean_records),
    )

    if max_workers is None or max_workers == 1:
        outcomes = _classify_chunk(list(clean_records))
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            partials = executor.map(
                _classify_chunk, _chunked(clean_records, chunk_size)
            )
            outcomes = frozenset().union(*partials)

    summary = summarize(outcomes, total_processed=len(raw_records))
    log.info(
        "Batch processed",
        processed=summary.total_processed_records,
        valid=summary.total_valid_pans,
        invalid=summary.total_invalid_pans,
        missing=summary.total_missing_pans,
    )
    return BatchResult(outcomes=outcomes, summary=summary)
