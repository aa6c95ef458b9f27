"""Utility functions for dxf2price.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline event logging with processing statistics
"""

from dxf2price.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
