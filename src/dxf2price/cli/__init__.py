"""Command-line interface for dxf2price.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Measurement and quote summary
- Verbose/quiet output modes
- Optional JSON report
- Detailed error reporting
"""

from dxf2price.cli.app import cli, main

__all__ = ["cli", "main"]
