"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from pancheck.config import InputConfig, OutputConfig, PipelineConfig


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI commands."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_raw_records() -> list[str | None]:
    """Raw batch with padding, lowercase, duplicates, null and blank values."""
    return [
        "  abcde1234f  ",
        "ABCDE1234F",
        None,
        "",
        "AABCE1923F",
        "AXBCE1923F",
        "axbce1923f",
        "   ",
        "ZOVXY5827K",
        "ABC12",
    ]


@pytest.fixture
def staging_csv(tmp_path: Path) -> Path:
    """Write a staging CSV with the raw PAN column."""
    path = tmp_path / "data" / "pan_numbers.csv"
    path.parent.mkdir(parents=True)
    path.write_text(
        "pan_number\n"
        '"  abcde1234f  "\n'
        "ABCDE1234F\n"
        "\n"
        '"   "\n'
        "AABCE1923F\n"
        "AXBCE1923F\n"
        "axbce1923f\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def pipeline_config(tmp_path: Path, staging_csv: Path) -> PipelineConfig:
    """Pipeline configuration pointing at the staging CSV."""
    return PipelineConfig(
        project="test-project",
        input=InputConfig(data_root=staging_csv.parent, path=Path(staging_csv.name)),
        output=OutputConfig(output_root=tmp_path / "output"),
    )
