"""Drawing processing orchestration.

This module runs the full measurement pipeline for one drawing:
read entities -> normalize -> stitch -> measure -> resolve main shape ->
bounding box.

Key components:
- DrawingProcessor: Main orchestrator class
- get_file_data: Convenience entry point with default settings
"""

import math
import time
from collections.abc import Callable
from pathlib import Path

import structlog

from dxf2price.config import Dxf2PriceSettings, get_default_settings
from dxf2price.core.bounds import BoundsEstimator, move_to_origin
from dxf2price.core.measurer import ShapeMeasurer
from dxf2price.core.normalizer import find_edges
from dxf2price.core.resolver import MainShapeResolver
from dxf2price.core.stitcher import ContourStitcher
from dxf2price.domain import Entity, FileData, Shape
from dxf2price.exceptions import (
    DrawingLoadError,
    GeometryKernelError,
    MainShapeError,
    ShapeError,
)
from dxf2price.io.reader import DrawingReader
from dxf2price.utils import ProcessingLogger

SKIPPED_INCLUDES_CHECK_MESSAGE = 'Skipped "all shapes in main shape" check'


class DrawingProcessor:
    """Orchestrates drawing measurement.

    Manages the complete workflow:
    1. Load the drawing and convert its entities
    2. Attach chainable edges, tallying unknown entities
    3. Stitch primitives into shapes
    4. Measure shapes, dropping the ones the kernel rejects
    5. Resolve the main shape and verify nesting
    6. Estimate the main shape's bounding box

    Domain failures never escape: they are recorded in FileData.errors.
    Unexpected exceptions propagate.

    Example:
        processor = DrawingProcessor(Dxf2PriceSettings())
        file_data = processor.get_file_data(Path("part.dxf"))
    """

    def __init__(
        self,
        config: Dxf2PriceSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize drawing processor with configuration.

        Args:
            config: Settings (defaults if None)
            logger: Structured logger (the "dxf2price" logger if None)
            clock: Time source for the nesting-check budget
        """
        self.config = config or get_default_settings()
        self.logger = logger or structlog.get_logger("dxf2price")
        self.processing_logger = ProcessingLogger(self.logger)

        geometry = self.config.geometry
        self.stitcher = ContourStitcher(tolerance=geometry.equal_threshold)
        self.measurer = ShapeMeasurer(
            tolerance=geometry.equal_threshold,
            arc_segments=geometry.arc_segments,
        )
        self.resolver = MainShapeResolver(
            timeout_ms=self.config.nesting.includes_check_timeout_ms,
            clock=clock,
        )
        self.bounds_estimator = BoundsEstimator(probe_distance=geometry.probe_distance)

    def get_file_data(self, drawing_path: Path) -> FileData:
        """Measure a DXF drawing.

        Args:
            drawing_path: Path to the DXF file

        Returns:
            FileData; a drawing that cannot be read yields zero metrics and
            a single error
        """
        try:
            entities = self._read_entities(drawing_path)
        except DrawingLoadError as e:
            self.processing_logger.log_file_error(e)
            return FileData(errors=[str(e)])

        self.processing_logger.log_drawing_loaded(str(drawing_path), len(entities))
        return self.process_entities(entities)

    def _read_entities(self, drawing_path: Path) -> list[Entity]:
        """Load a drawing and convert its entities.

        Raises:
            DrawingLoadError: If the file is missing or not a DXF drawing
        """
        reader = DrawingReader(drawing_path)
        try:
            reader.load()
        except FileNotFoundError as e:
            raise DrawingLoadError(str(drawing_path), "file not found") from e

        try:
            return reader.read_entities()
        finally:
            reader.close()

    def process_entities(self, entities: list[Entity]) -> FileData:
        """Measure a drawing given as an entity list.

        Entities are mutated in place (edges attached, edges swapped).

        Args:
            entities: Primitives in drawing order

        Returns:
            Fully populated FileData
        """
        start_time = time.time()

        unknown_entities = find_edges(entities)
        self.processing_logger.log_unknown_entities(unknown_entities)

        shapes = self.stitcher.stitch(entities)
        self.processing_logger.log_shapes_found(
            total=len(shapes),
            closed=sum(1 for shape in shapes if shape.closed),
        )

        file_data = FileData(
            unknown_entities=unknown_entities,
            spline_exists=unknown_entities.get("SPLINE", 0) > 0,
        )

        measured = self._measure_shapes(shapes, file_data)

        try:
            result = self.resolver.resolve(measured)
        except MainShapeError as e:
            file_data.errors.append(str(e))
            self.processing_logger.log_file_error(e)
            return file_data

        main = result.main
        file_data.area = main.area or 0.0
        self.processing_logger.log_main_shape(file_data.area, len(result.shapes))

        if result.skipped_includes_check:
            file_data.skipped_includes_check = True
            file_data.errors.append(SKIPPED_INCLUDES_CHECK_MESSAGE)
            self.processing_logger.log_includes_check_skipped(self.resolver.timeout_ms)

        file_data.perimeter = math.fsum(shape.perimeter or 0.0 for shape in result.shapes)
        file_data.shapes = [shape.to_data() for shape in result.shapes]

        try:
            bounds = self.bounds_estimator.find_bounds(main)
        except GeometryKernelError as e:
            file_data.errors.append(f"Can not compute bounds of main shape: {e}")
            self.processing_logger.log_file_error(e)
            return file_data

        if bounds is not None:
            if self.config.output.normalize_origin:
                bounds = move_to_origin(result.shapes, bounds)
            file_data.bounds = bounds
            file_data.width = bounds.width
            file_data.height = bounds.height

        self.processing_logger.log_complete(
            area=file_data.area,
            perimeter=file_data.perimeter,
            width=file_data.width,
            height=file_data.height,
            duration_ms=(time.time() - start_time) * 1000,
        )

        return file_data

    def _measure_shapes(self, shapes: list[Shape], file_data: FileData) -> list[Shape]:
        """Measure shapes, recording errors for the ones that fail.

        Args:
            shapes: Stitched shapes
            file_data: Result receiving error messages

        Returns:
            Shapes that survived measurement, in input order
        """
        measured: list[Shape] = []

        for index, shape in enumerate(shapes):
            try:
                valid = self.measurer.measure(shape, index)
            except ShapeError as e:
                file_data.errors.append(str(e))
                self.processing_logger.log_shape_dropped(str(e))
                continue

            if not valid:
                message = f"Shape {index} is invalid"
                file_data.errors.append(message)
                self.processing_logger.log_shape_invalid(message)

            measured.append(shape)

        return measured


def get_file_data(drawing_path: Path, config: Dxf2PriceSettings | None = None) -> FileData:
    """Measure a DXF drawing with a fresh processor.

    Args:
        drawing_path: Path to the DXF file
        config: Settings (defaults if None)

    Returns:
        FileData for the drawing
    """
    return DrawingProcessor(config).get_file_data(drawing_path)
