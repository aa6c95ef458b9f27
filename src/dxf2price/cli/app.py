"""CLI application entry point for dxf2price.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from dxf2price import __version__
from dxf2price.cli.output import (
    console,
    print_drawing_info,
    print_error,
    print_header,
    print_measurements,
    print_step,
    print_success,
    print_unknown_entities,
    print_warnings,
)
from dxf2price.config import (
    Dxf2PriceSettings,
    LoggingConfig,
    OutputConfig,
    PricingConfig,
)
from dxf2price.core import DrawingProcessor, estimate_price
from dxf2price.exceptions import Dxf2PriceError
from dxf2price.io import ResultWriter
from dxf2price.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="dxf2price",
    help="Measure a DXF cutting drawing and quote its price.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]dxf2price[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def quote(
    input_drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to input DXF drawing",
            show_default=False,
        ),
    ],
    sheet_price: Annotated[
        float | None,
        typer.Option(
            "--sheet-price",
            "-s",
            help="Price per square metre of sheet",
            min=0.0,
        ),
    ] = None,
    entrance_price: Annotated[
        float | None,
        typer.Option(
            "--entrance-price",
            "-e",
            help="Price per cut entrance",
            min=0.0,
        ),
    ] = None,
    cutting_price: Annotated[
        float | None,
        typer.Option(
            "--cutting-price",
            "-c",
            help="Price per metre of cut",
            min=0.0,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write a JSON report to this file or directory",
        ),
    ] = None,
    normalize_origin: Annotated[
        bool,
        typer.Option(
            "--normalize-origin",
            help="Move the drawing so its bounding box starts at the origin",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure a DXF drawing and quote the cutting price.

    Reconstructs closed shapes from the drawing's lines, arcs, circles and
    polylines, picks the outer contour, and prices the sheet area, the total
    cut length and one entrance per shape.

    Example:
        dxf2price part.dxf -s 25 -e 0.5 -c 3 -o part.json
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # All three unit prices are needed for a quote
    missing = [
        name
        for name, value in (
            ("--sheet-price", sheet_price),
            ("--entrance-price", entrance_price),
            ("--cutting-price", cutting_price),
        )
        if value is None
    ]
    if missing:
        print_error(
            "Missing price: " + ", ".join(missing),
            details="Sheet, entrance and cutting prices are all required.",
        )
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_drawing.exists():
        print_error(
            f"Input file not found: {input_drawing}",
            details=f"The file '{input_drawing}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_drawing.is_file():
        print_error(
            f"Input path is not a file: {input_drawing}",
            details="Please provide a path to a DXF drawing.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = Dxf2PriceSettings(
        pricing=PricingConfig(
            sheet_price=sheet_price,
            entrance_price=entrance_price,
            cutting_price=cutting_price,
        ),
        output=OutputConfig(normalize_origin=normalize_origin),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    start_time = time.time()

    try:
        if not quiet:
            print_step("Measuring drawing")

        processor = DrawingProcessor(settings, logger=logger)
        file_data = processor.get_file_data(input_drawing)

        if file_data.errors and file_data.area == 0:
            print_error(file_data.errors[0])
            for message in file_data.errors[1:]:
                console.print(f"  {message}")
            raise typer.Exit(code=1)

        price = estimate_price(file_data, settings.pricing)

        if not quiet:
            print_drawing_info(
                drawing_path=str(input_drawing),
                shape_count=len(file_data.shapes),
                unknown=file_data.unknown_entities,
            )
            if verbose and file_data.unknown_entities:
                print_unknown_entities(file_data.unknown_entities)

            print_step("Quote")
            print_measurements(file_data, price, verbose=verbose)

            if file_data.errors:
                print_warnings(file_data.errors)

        report_path = None
        if output is not None:
            report_path = ResultWriter.get_report_path(input_drawing, output)
            ResultWriter(report_path).write(file_data, price)

        if quiet:
            console.print(str(price.total))
        else:
            print_success(
                output_path=str(report_path) if report_path else None,
                total_time_s=time.time() - start_time,
            )

    except Dxf2PriceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write report: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
