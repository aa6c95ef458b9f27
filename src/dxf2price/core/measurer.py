"""Shape measurement: kernel polygons, area and perimeter.

Each stitched shape is traced into a kernel polygon once; the polygon is
kept on the shape for the containment and distance queries that follow.
Area comes from the kernel. Perimeter is summed analytically over the
primitives, so arcs contribute their exact length rather than the length
of their flattened approximation.
"""

import math

from dxf2price.core.geometry import (
    DEFAULT_ARC_SEGMENTS,
    EQUAL_THRESHOLD,
    TWO_PI,
    build_polygon,
    line_length,
)
from dxf2price.domain import Entity, EntityType, Shape
from dxf2price.exceptions import GeometryKernelError, ShapeBuildError, ShapeMeasureError


def entity_length(entity: Entity) -> float:
    """Calculate the length of a primitive.

    Arcs sweep counter-clockwise from start to end angle unless flagged
    clockwise, in which case the complementary angle is used.

    Args:
        entity: LINE, ARC or CIRCLE primitive

    Returns:
        Length in drawing units

    Raises:
        ValueError: If the primitive type has no defined length

    Examples:
        >>> arc = Entity(type="ARC", radius=1.0, start_angle=0.0, end_angle=math.pi / 2)
        >>> entity_length(arc)  # quarter circle
        1.5707963267948966
    """
    if entity.type == EntityType.ARC:
        angle = (entity.end_angle or 0.0) - (entity.start_angle or 0.0)
        if angle < 0:
            angle = TWO_PI + angle
        if entity.clockwise:
            angle = TWO_PI - angle
        return angle * (entity.radius or 0.0)

    if entity.type == EntityType.LINE:
        if entity.edges is None:
            raise ValueError("line has no edges")
        return line_length(entity.edges[0], entity.edges[1])

    if entity.type == EntityType.CIRCLE:
        return TWO_PI * (entity.radius or 0.0)

    raise ValueError(f"Unknown entity: {entity.type}")


class ShapeMeasurer:
    """Builds kernel polygons and measures shapes.

    Stateless apart from its configuration.
    """

    def __init__(
        self,
        tolerance: float = EQUAL_THRESHOLD,
        arc_segments: int = DEFAULT_ARC_SEGMENTS,
    ) -> None:
        """Initialize the measurer.

        Args:
            tolerance: L1 tolerance for joints between primitives
            arc_segments: Arc flattening resolution for the kernel
        """
        self.tolerance = tolerance
        self.arc_segments = arc_segments

    def measure(self, shape: Shape, index: int) -> bool:
        """Build the shape's polygon and compute area and perimeter.

        Args:
            shape: Shape to measure (polygon, area and perimeter are set)
            index: Position of the shape, used in error messages

        Returns:
            True if the kernel reports the polygon valid

        Raises:
            ShapeBuildError: If the kernel rejects the primitive sequence
            ShapeMeasureError: If area or perimeter cannot be computed
        """
        try:
            shape.polygon = build_polygon(shape.entities, self.tolerance, self.arc_segments)
        except ShapeBuildError as e:
            raise ShapeBuildError(e.reason, index) from e

        valid = shape.polygon.is_valid()

        try:
            shape.area = shape.polygon.area()
        except GeometryKernelError as e:
            raise ShapeMeasureError("area", str(e), index) from e

        try:
            shape.perimeter = math.fsum(entity_length(entity) for entity in shape.entities)
        except ValueError as e:
            raise ShapeMeasureError("perimeter", str(e), index) from e

        return valid

