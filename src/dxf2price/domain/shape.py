"""Reconstructed contours and measurement results.

This module defines the shape domain model, which represents one contour
assembled from drawing primitives, and the result structures handed to the
pricing layer.
"""

from dataclasses import dataclass, field
from typing import Any

from dxf2price.domain.entity import Entity, Vertex


@dataclass
class Shape:
    """One contour stitched from primitives.

    Attributes:
        entities: Ordered primitives; read in order with edges oriented
            start to end they traverse the contour
        start: Open endpoint at the head of the chain
        end: Open endpoint at the tail of the chain
        closed: True when start and end coincide
        single: True when formed by one non-decomposed primitive (a circle)
        area: Area computed by the geometry kernel
        perimeter: Analytic length of all primitives
        main: True for the outer boundary contour
        skipped_includes_check: Nesting verification stopped on timeout
        polygon: Geometry-kernel handle, built once by the measurer
    """

    entities: list[Entity] = field(default_factory=list)
    start: Vertex | None = None
    end: Vertex | None = None
    closed: bool = False
    single: bool = False
    area: float | None = None
    perimeter: float | None = None
    main: bool = False
    skipped_includes_check: bool = False
    polygon: Any = field(default=None, repr=False)

    def to_data(self) -> "ShapeData":
        """Project the measured values for the result.

        Returns:
            ShapeData with area and perimeter (0.0 when unmeasured)
        """
        return ShapeData(area=self.area or 0.0, perimeter=self.perimeter or 0.0)


@dataclass(frozen=True)
class ShapeData:
    """Measured values of one shape."""

    area: float
    perimeter: float

    def to_dict(self) -> dict[str, Any]:
        return {"area": self.area, "perimeter": self.perimeter}


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extent of a shape.

    Attributes:
        left: Minimum x
        bottom: Minimum y
        right: Maximum x
        top: Maximum y
    """

    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
            "top": self.top,
        }


@dataclass
class FileData:
    """Measurement result for one drawing.

    Always fully populated; file-level failures leave the metrics at zero
    and are listed in ``errors``.

    Attributes:
        area: Area of the main shape
        perimeter: Total cut length over all shapes
        width: Bounding-box width of the main shape
        height: Bounding-box height of the main shape
        shapes: Per-shape measurements, main shape first
        unknown_entities: Count of uninterpreted primitives by type
        errors: Error messages in the order they were recorded
        spline_exists: True when the drawing contains splines
        skipped_includes_check: Nesting verification stopped on timeout
        bounds: Bounding box of the main shape, if resolved
    """

    area: float = 0.0
    perimeter: float = 0.0
    width: float = 0.0
    height: float = 0.0
    shapes: list[ShapeData] = field(default_factory=list)
    unknown_entities: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    spline_exists: bool = False
    skipped_includes_check: bool = False
    bounds: Bounds | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "area": self.area,
            "perimeter": self.perimeter,
            "width": self.width,
            "height": self.height,
            "shapes": [s.to_dict() for s in self.shapes],
            "unknownEntities": dict(self.unknown_entities),
            "errors": list(self.errors),
            "splineExists": self.spline_exists,
            "skippedIncludesCheck": self.skipped_includes_check,
            "bounds": self.bounds.to_dict() if self.bounds else None,
        }
