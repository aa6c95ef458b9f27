"""Result writer for saving measurement reports.

This module provides the ResultWriter class for writing a drawing's
measurements (and optional price quote) as JSON.
"""

import json
from pathlib import Path
from typing import Any

from dxf2price.core.pricing import PriceQuote
from dxf2price.domain import FileData


class ResultWriter:
    """Writes measurement results as JSON.

    Example:
        writer = ResultWriter(Path("part.json"))
        writer.write(file_data, quote)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination JSON file
        """
        self.output_path = output_path

    @staticmethod
    def get_report_path(drawing_path: Path, output: Path | None = None) -> Path:
        """Derive the report path for a drawing.

        Args:
            drawing_path: Input drawing path
            output: Explicit output path or directory

        Returns:
            output if it is a file path; otherwise the drawing's base name
            with a .json suffix, inside output (if a directory) or the
            current directory
        """
        name = drawing_path.with_suffix(".json").name
        if output is None:
            return Path(name)
        if output.is_dir():
            return output / name
        return output

    def write(self, file_data: FileData, quote: PriceQuote | None = None) -> None:
        """Write the report.

        Args:
            file_data: Measurement result
            quote: Optional price quote, stored under "price"
        """
        report: dict[str, Any] = file_data.to_dict()
        if quote is not None:
            report["price"] = quote.to_dict()

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with self.output_path.open("w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
