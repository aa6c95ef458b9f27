"""Bounding-box estimation by directional distance probes.

The kernel is only asked for distances: four long segments are placed at a
fixed offset L above, below, left and right of the origin, and the gap
between each probe and the polygon gives one side of the box. Shapes must
lie within the probe square for the result to be meaningful.
"""

from collections.abc import Iterable

from dxf2price.core.geometry import make_segment
from dxf2price.domain import Bounds, Shape

DEFAULT_PROBE_DISTANCE = 10000.0


class BoundsEstimator:
    """Computes the axis-aligned extent of a shape's polygon."""

    def __init__(self, probe_distance: float = DEFAULT_PROBE_DISTANCE) -> None:
        """Initialize the estimator.

        Args:
            probe_distance: Offset L of the probe segments from the origin
        """
        self.probe_distance = probe_distance

    def find_bounds(self, shape: Shape) -> Bounds | None:
        """Estimate the bounding box of a measured shape.

        Args:
            shape: Shape with a kernel polygon

        Returns:
            Bounds of the shape, or None if it has no polygon

        Raises:
            GeometryKernelError: If a distance query fails
        """
        if shape.polygon is None:
            return None

        far = self.probe_distance
        top = make_segment((-far, far), (far, far))
        bottom = make_segment((-far, -far), (far, -far))
        left = make_segment((-far, -far), (-far, far))
        right = make_segment((far, -far), (far, far))

        distance_top = shape.polygon.distance_to(top)
        distance_bottom = shape.polygon.distance_to(bottom)
        distance_left = shape.polygon.distance_to(left)
        distance_right = shape.polygon.distance_to(right)

        return Bounds(
            left=distance_left - far,
            bottom=distance_bottom - far,
            right=far - distance_right,
            top=far - distance_top,
        )


def translate_shapes(shapes: Iterable[Shape], dx: float, dy: float) -> None:
    """Move every primitive of the given shapes by (dx, dy).

    Polygons already built are left as they are.

    Args:
        shapes: Shapes to translate (mutated)
        dx: Offset along x
        dy: Offset along y
    """
    for shape in shapes:
        for entity in shape.entities:
            entity.translate(dx, dy)
        if shape.start is not None:
            shape.start = shape.start.translated(dx, dy)
        if shape.end is not None:
            shape.end = shape.end.translated(dx, dy)


def move_to_origin(shapes: Iterable[Shape], bounds: Bounds) -> Bounds:
    """Translate shapes so the lower-left corner of bounds sits at the origin.

    Args:
        shapes: Shapes to translate (mutated)
        bounds: Bounding box to normalize against

    Returns:
        The bounding box after translation
    """
    translate_shapes(shapes, -bounds.left, -bounds.bottom)
    return Bounds(left=0.0, bottom=0.0, right=bounds.width, top=bounds.height)
