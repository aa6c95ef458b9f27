"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dxf2price.core.pricing import PriceQuote
from dxf2price.domain import FileData

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]dxf2price[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(drawing_path: str, shape_count: int, unknown: dict[str, int]) -> None:
    """Print drawing information.

    Args:
        drawing_path: Path to the drawing file
        shape_count: Number of measured shapes
        unknown: Tally of primitives that were not interpreted
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(drawing_path)
    console.print(line)

    unknown_total = sum(unknown.values())
    console.print(f"  {shape_count} shapes {SYM_DOT} {unknown_total} unknown entities")


def print_unknown_entities(unknown: dict[str, int]) -> None:
    """Print the unknown-entity tally, one type per line."""
    for entity_type, count in sorted(unknown.items()):
        console.print(f"  [yellow]{entity_type}[/yellow] {SYM_DOT} {count}")


def print_measurements(file_data: FileData, quote: PriceQuote, verbose: bool = False) -> None:
    """Print the measurement and quote summary.

    Args:
        file_data: Measurement result
        quote: Price quote for the drawing
        verbose: Whether to list every shape
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(justify="right")

    table.add_row("Size", f"{file_data.width:.2f} x {file_data.height:.2f}")
    table.add_row("Area", f"{file_data.area:.2f}")
    table.add_row("Sheet area", f"{quote.sheet_area:.4f} m²")
    table.add_row("Cut length", f"{quote.cut_length:.3f} m")
    table.add_row("Entrances", str(quote.entrances))
    table.add_row("Price", f"[bold]{quote.total}[/bold]")
    console.print(table)

    if verbose and file_data.shapes:
        console.print("\n[bold]Shapes[/bold]")
        for index, shape in enumerate(file_data.shapes):
            label = "main" if index == 0 else f"#{index}"
            console.print(
                f"  {label:>5} {SYM_DOT} area {shape.area:.2f} {SYM_DOT} "
                f"perimeter {shape.perimeter:.2f}"
            )


def print_warnings(errors: list[str]) -> None:
    """Print non-fatal errors recorded during measurement.

    Args:
        errors: Error messages from FileData
    """
    console.print(f"\n[yellow]{len(errors)} warnings[/yellow]")
    for message in errors:
        console.print(f"  {SYM_DOT} {message}")


def print_success(output_path: str | None, total_time_s: float) -> None:
    """Print completion message.

    Args:
        output_path: Path of the written JSON report, if any
        total_time_s: Total processing time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
