"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
The PAN rule set itself is fixed and is not configurable.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class InputConfig(BaseModel):
    """Staging dataset location.

    The path is relative to data_root. Use resolve() to get the full path.
    """

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("./data"), description="Root directory for input files"
    )
    path: Path = Field(description="Path to the raw PAN dataset (CSV, JSON or TXT)")
    column: str = Field(
        default="pan_number", description="Source column holding the raw PAN values"
    )

    @field_validator("column")
    @classmethod
    def validate_column(cls, v: str) -> str:
        """Ensure the source column name is not blank."""
        if not v.strip():
            msg = "Input column name must not be blank"
            raise ValueError(msg)
        return v

    def resolve(self) -> Path:
        """Resolve the dataset path against data_root."""
        return self.data_root / self.path


class BatchConfig(BaseModel):
    """Batch evaluation configuration."""

    model_config = ConfigDict(frozen=True)

    # None or 1 evaluates sequentially
    max_workers: int | None = Field(
        default=None, ge=1, description="Worker threads for record evaluation"
    )
    chunk_size: int = Field(
        default=1000, ge=1, description="Clean records per worker chunk"
    )


class OutputConfig(BaseModel):
    """Output paths configuration.

    Results are written to ./output/{project}/ by default.
    """

    model_config = ConfigDict(frozen=True)

    output_root: Path = Field(
        default=Path("./output"), description="Root directory for all outputs"
    )
    write_outcomes: bool = Field(
        default=True, description="Write outcome CSV and summary JSON after a run"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a known logging level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class PipelineConfig(BaseModel):
    """Complete pipeline configuration.

    The project name drives the output directory: ./output/{project}/
    """

    model_config = ConfigDict(frozen=True)

    project: str = Field(description="Project identifier (e.g., 'kyc-2024')")

    input: InputConfig
    batch: BatchConfig = Field(default_factory=BatchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def input_path(self) -> Path:
        """Convenience accessor for the resolved dataset path."""
        return self.input.resolve()

    @property
    def results_dir(self) -> Path:
        """Path to the results directory of this project."""
        return self.output.output_root / self.project
