"""Configuration management for dxf2price.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Endpoint tolerance, arc flattening and probe settings
- NestingConfig: Main-shape verification budget
- PricingConfig: Unit prices for the cutting quote
- OutputConfig: Result post-processing settings
- LoggingConfig: Logging settings
- Dxf2PriceSettings: Main application settings
"""

from dxf2price.config.settings import (
    Dxf2PriceSettings,
    GeometryConfig,
    LoggingConfig,
    NestingConfig,
    OutputConfig,
    PricingConfig,
    get_default_settings,
)

__all__ = [
    "Dxf2PriceSettings",
    "GeometryConfig",
    "LoggingConfig",
    "NestingConfig",
    "OutputConfig",
    "PricingConfig",
    "get_default_settings",
]
