"""
Configuration management with typed Pydantic models.

Provides environment-aware configuration loading for pipeline runs.
"""

from pancheck.config.loader import load_config
from pancheck.config.settings import (
    BatchConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
)

__all__ = [
    "BatchConfig",
    "InputConfig",
    "LoggingConfig",
    "OutputConfig",
    "PipelineConfig",
    "load_config",
]
