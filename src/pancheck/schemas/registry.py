"""
Schema registry for versioning and discovery.

Provides centralized access to all schema definitions with version tracking.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

import pandera.pandas as pa

from pancheck.schemas.pan import PanOutcomeSchema, RawPanSchema, SummarySchema

if TYPE_CHECKING:
    import pandas as pd


class DataRole(Enum):
    """Classification of data products by their role in the pipeline."""

    SOURCE = "source"  # Raw staging data
    OUTPUT = "output"  # Classified records and summaries


@dataclass(frozen=True)
class SchemaInfo:
    """Metadata about a registered schema."""

    name: str
    schema: type[pa.DataFrameModel]
    version: str
    role: DataRole
    description: str


class SchemaRegistry:
    """
    Centralized registry for all data schemas.

    Provides version tracking and schema discovery.
    """

    _version = "1.0.0"

    _schemas: ClassVar[dict[str, SchemaInfo]] = {
        "raw_pan": SchemaInfo(
            name="raw_pan",
            schema=RawPanSchema,
            version="1.0.0",
            role=DataRole.SOURCE,
            description="Raw PAN values from the staging dataset",
        ),
        "pan_outcome": SchemaInfo(
            name="pan_outcome",
            schema=PanOutcomeSchema,
            version="1.0.0",
            role=DataRole.OUTPUT,
            description="Unique clean PAN values with their status",
        ),
        "summary": SchemaInfo(
            name="summary",
            schema=SummarySchema,
            version="1.0.0",
            role=DataRole.OUTPUT,
            description="Processed, valid, invalid and missing counts",
        ),
    }

    @classmethod
    def registry_version(cls) -> str:
        """Get the registry version."""
        return cls._version

    @classmethod
    def get(cls, name: str) -> type[pa.DataFrameModel]:
        """
        Get a schema by name.

        Args:
            name: Schema identifier.

        Returns:
            The Pandera DataFrameModel class.

        Raises:
            KeyError: If schema not found.
        """
        return cls.get_info(name).schema

    @classmethod
    def get_info(cls, name: str) -> SchemaInfo:
        """
        Get full schema info by name.

        Raises:
            KeyError: If schema not found.
        """
        if name not in cls._schemas:
            available = ", ".join(cls._schemas.keys())
            msg = f"Unknown schema '{name}'. Available: {available}"
            raise KeyError(msg)
        return cls._schemas[name]

    @classmethod
    def list_schemas(cls) -> list[str]:
        """List all registered schema names."""
        return list(cls._schemas.keys())

    @classmethod
    def list_by_role(cls, role: DataRole) -> list[str]:
        """List schemas filtered by their data role."""
        return [name for name, info in cls._schemas.items() if info.role == role]

    @classmethod
    def validate(cls, df: "pd.DataFrame", schema_name: str) -> "pd.DataFrame":
        """
        Validate a DataFrame against a registered schema.

        Raises:
            pandera.errors.SchemaError: If validation fails.
        """
        schema = cls.get(schema_name)
        return schema.validate(df)
