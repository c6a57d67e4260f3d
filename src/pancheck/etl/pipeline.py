"""
PAN cleaning pipeline.

Orchestrates loading of the staging dataset, data quality profiling,
batch validation and export of the results.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pancheck.batch.processor import BatchResult, process_batch
from pancheck.config.settings import PipelineConfig
from pancheck.export.results import write_results
from pancheck.ingestion.staging import PanRecordLoader
from pancheck.profiling.quality import DataQualityProfile, profile_records
from pancheck.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass
class PipelineResult:
    """
    Result of a pipeline run.

    Attributes:
        profile: Data quality profile of the raw batch.
        batch: Outcomes and summary of the batch.
        output_paths: Written artifacts (empty if nothing was exported).
    """

    profile: DataQualityProfile
    batch: BatchResult
    output_paths: dict[str, Path] = field(default_factory=dict)


class PanPipeline:
    """
    End-to-end PAN cleaning pipeline.

    Steps:
    1. Load raw PAN values from the staging dataset
    2. Profile data quality of the raw values
    3. Normalize, deduplicate and validate the batch
    4. Export outcomes and summary
    """

    def __init__(self, config: PipelineConfig) -> None:
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration.
        """
        self.config = config
        self.loader = PanRecordLoader(config)

    def run(
        self, output_dir: Path | None = None, *, export: bool | None = None
    ) -> PipelineResult:
        """
        Run the full pipeline.

        Args:
            output_dir: Directory for exported results. Defaults to the
                project results directory.
            export: Override for config.output.write_outcomes.

        Returns:
            PipelineResult with profile, batch result and written paths.
        """
        with log_context(project=self.config.project):
            log.info("Starting PAN pipeline", source=str(self.config.input_path))

            log.info("Step 1: Loading raw records")
            raw_records = self.loader.load_raw_records()

            log.info("Step 2: Profiling data quality")
            profile = profile_records(raw_records)
            log.info(
                "Data quality profile",
                nulls=profile.null_records,
                blanks=profile.blank_records,
                duplicates=profile.duplicate_records,
                untrimmed=profile.untrimmed_records,
                non_uppercase=profile.non_uppercase_records,
            )

            log.info("Step 3: Validating batch")
            batch = process_batch(
                raw_records,
                max_workers=self.config.batch.max_workers,
                chunk_size=self.config.batch.chunk_size,
            )

            output_paths: dict[str, Path] = {}
            should_export = (
                self.config.output.write_outcomes if export is None else export
            )
            if should_export:
                log.info("Step 4: Exporting results")
                output_paths = write_results(
                    batch, output_dir or self.config.results_dir
                )

            log.info("PAN pipeline complete", **batch.summary.as_dict())

        return PipelineResult(profile=profile, batch=batch, output_paths=output_paths)


def run_pipeline(
    config: PipelineConfig,
    output_dir: Path | None = None,
    *,
    export: bool | None = None,
) -> PipelineResult:
    """
    Convenience function to run the PAN pipeline.

    Args:
        config: Pipeline configuration.
        output_dir: Optional output directory override.
        export: Optional override for writing results.

    Returns:
        PipelineResult with profile, batch result and written paths.
    """
    return PanPipeline(config).run(output_dir=output_dir, export=export)
