"""Main application configuration schema."""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging_schema import LoggingConfig


class OutputFormat(str, Enum):
    """CLI output formats."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class CatalogConfig(BaseModel):
    """Pattern catalog configuration."""

    packages: List[str] = Field(
        default_factory=lambda: ["patternbook.patterns"],
        description="Packages scanned for pattern examples",
    )
    title: str = Field("Design Patterns in Python", description="Title of the rendered README")

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: List[str]) -> List[str]:
        """At least one package must be scanned."""
        cleaned = [p.strip() for p in v if p and p.strip()]
        if not cleaned:
            raise ValueError("At least one package must be configured")
        return cleaned


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.JSON, description="Default output format")
    table_width: int = Field(120, description="Width of rendered tables")

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
