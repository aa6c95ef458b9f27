"""Configuration settings for dxf2price."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for contour reconstruction and the geometry kernel.

    Distances are in drawing units (millimetres for typical sheet-metal
    drawings).
    """

    equal_threshold: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="L1 distance below which two endpoints are considered coincident",
    )
    arc_segments: int = Field(
        default=360,
        ge=16,
        le=4096,
        description="Segments per full turn used when flattening arcs for the kernel",
    )
    probe_distance: float = Field(
        default=10000.0,
        gt=0.0,
        description="Offset of the bounding-box probe segments from the origin",
    )


class NestingConfig(BaseModel):
    """Configuration for main-shape resolution."""

    includes_check_timeout_ms: float = Field(
        default=1000.0,
        ge=0.0,
        description="Wall-clock budget for verifying that every shape is inside the main shape",
    )


class PricingConfig(BaseModel):
    """Unit prices for the cutting quote."""

    sheet_price: float = Field(
        default=0.0,
        ge=0.0,
        description="Price per square metre of sheet",
    )
    entrance_price: float = Field(
        default=0.0,
        ge=0.0,
        description="Price per cut entrance (one per shape)",
    )
    cutting_price: float = Field(
        default=0.0,
        ge=0.0,
        description="Price per metre of cut",
    )
    units_per_metre: float = Field(
        default=1000.0,
        gt=0.0,
        description="Drawing units per metre",
    )


class OutputConfig(BaseModel):
    """Configuration for result post-processing."""

    normalize_origin: bool = Field(
        default=False,
        description="Translate primitives so the bounding box starts at the origin",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Dxf2PriceSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    nesting: NestingConfig = Field(default_factory=NestingConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Dxf2PriceSettings:
    """Get default application settings."""
    return Dxf2PriceSettings()
