"""Batch processing of raw PAN records."""

from pancheck.batch.processor import BatchResult, Summary, process_batch, summarize

__all__ = ["BatchResult", "Summary", "process_batch", "summarize"]
