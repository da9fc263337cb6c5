"""Catalog (example execution) configuration schema."""

import os
import tempfile

from pydantic import BaseModel, Field, field_validator


def _default_output_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "design-patterns")


class CatalogConfig(BaseModel):
    """Settings handed to examples that need them."""

    output_dir: str = Field(
        default_factory=_default_output_dir,
        description="Directory where examples write their log files",
    )
    network_latency: float = Field(
        1.0, description="Seconds each simulated network tick sleeps"
    )
    default_variant: str = Field("all", description="Variant run when none is given")
    output_format: str = Field("json", description="Default CLI output format")

    @field_validator("network_latency")
    @classmethod
    def validate_latency(cls, v: float) -> float:
        """Validate network latency."""
        if v < 0:
            raise ValueError("Network latency must not be negative")
        return v

    @field_validator("default_variant")
    @classmethod
    def validate_variant(cls, v: str) -> str:
        """Validate default variant."""
        valid_variants = ["conceptual", "real_world", "all"]
        if v not in valid_variants:
            raise ValueError(f"Default variant must be one of {valid_variants}")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        valid_formats = ["json", "yaml", "table", "list"]
        if v not in valid_formats:
            raise ValueError(f"Output format must be one of {valid_formats}")
        return v
