"""
PAN cleaning pipeline.

Orchestrates ingestion, profiling, validation and export.
"""

from pancheck.etl.pipeline import PanPipeline, PipelineResult, run_pipeline

__all__ = ["PanPipeline", "PipelineResult", "run_pipeline"]
