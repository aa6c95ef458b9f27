"""Geometric operations and the polygon kernel.

This module provides the planar math used while reconstructing contours and
a thin polygon kernel on top of shapely:
- Endpoint comparison within a tolerance (L1 distance)
- Segment length and polar angle of a vector
- Points on a circle and angle normalization
- Arc flattening that keeps the axis-extreme points of the arc
- KernelPolygon: polygon handle with validity, area, containment and
  distance queries

The math helpers are pure; the kernel never mutates the entities it is
built from.
"""

import math
from collections.abc import Sequence

from shapely.errors import GEOSException
from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry

from dxf2price.domain import Entity, EntityType, Vertex
from dxf2price.exceptions import GeometryKernelError, ShapeBuildError

EQUAL_THRESHOLD = 0.01
TWO_PI = 2 * math.pi
DEFAULT_ARC_SEGMENTS = 360

Coordinate = tuple[float, float]


def points_equal(p1: Vertex, p2: Vertex, tolerance: float = EQUAL_THRESHOLD) -> bool:
    """Check whether two points coincide.

    Uses the L1 distance (|dx| + |dy|), so the tolerance region is a diamond.

    Args:
        p1: First point
        p2: Second point
        tolerance: Exclusive upper bound of the L1 distance

    Returns:
        True if the points are closer than tolerance

    Examples:
        >>> points_equal(Vertex(0.0, 0.0), Vertex(0.004, 0.005))
        True
        >>> points_equal(Vertex(0.0, 0.0), Vertex(0.006, 0.005))
        False
    """
    return abs(p1.x - p2.x) + abs(p1.y - p2.y) < tolerance


def line_length(p1: Vertex, p2: Vertex) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def vector_angle(p1: Vertex, p2: Vertex) -> float:
    """Calculate the polar angle of the vector from p1 to p2.

    The angle is measured counter-clockwise from the positive x-axis and
    lies in [0, 2*pi).

    Args:
        p1: Vector origin
        p2: Vector tip

    Returns:
        Angle in radians

    Raises:
        ValueError: If p1 and p2 are the same point

    Examples:
        >>> vector_angle(Vertex(0.0, 0.0), Vertex(0.0, -1.0))  # 3*pi/2
        4.71238898038469
    """
    length = line_length(p1, p2)
    if length == 0.0:
        raise ValueError("Cannot calculate angle of zero-length vector")

    # Clamp against rounding just outside acos' domain
    cosine = max(-1.0, min(1.0, (p2.x - p1.x) / length))
    angle = math.acos(cosine)
    if p2.y < p1.y:
        return TWO_PI - angle
    return angle


def arc_point(center: Vertex, radius: float, angle: float) -> Vertex:
    """Point on a circle at the given angle.

    Args:
        center: Circle center
        radius: Circle radius
        angle: Angle in radians, counter-clockwise from the positive x-axis

    Returns:
        Vertex on the circle, inheriting the center's elevation
    """
    return Vertex(
        x=math.cos(angle) * radius + center.x,
        y=math.sin(angle) * radius + center.y,
        z=center.z,
    )


def normalize_angle(angle: float) -> float:
    """Map an angle into [0, 2*pi)."""
    return angle % TWO_PI


def arc_sweep(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """Signed angle swept from start_angle to end_angle.

    Positive for counter-clockwise arcs, negative for clockwise ones.
    """
    if clockwise:
        return -normalize_angle(start_angle - end_angle)
    return normalize_angle(end_angle - start_angle)


def flatten_arc(
    center: Vertex,
    radius: float,
    start_angle: float,
    sweep: float,
    segments_per_turn: int = DEFAULT_ARC_SEGMENTS,
) -> list[Coordinate]:
    """Approximate an arc by a polyline.

    The sample spacing follows segments_per_turn. Every multiple of pi/2
    crossed by the arc is sampled as well, so the polyline reaches the
    arc's true extremes along both axes.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Angle of the first point in radians
        sweep: Signed sweep in radians (negative = clockwise)
        segments_per_turn: Segment count for a full turn

    Returns:
        Coordinates from the start point to the end point inclusive
    """
    if sweep == 0.0:
        start = arc_point(center, radius, start_angle)
        return [start.to_tuple()]

    steps = max(1, math.ceil(abs(sweep) / TWO_PI * segments_per_turn))
    params = {i / steps for i in range(steps + 1)}

    quarter = math.pi / 2
    low = min(start_angle, start_angle + sweep)
    high = max(start_angle, start_angle + sweep)
    for k in range(math.floor(low / quarter), math.ceil(high / quarter) + 1):
        t = (k * quarter - start_angle) / sweep
        if 0.0 < t < 1.0:
            params.add(t)

    return [
        arc_point(center, radius, start_angle + sweep * t).to_tuple()
        for t in sorted(params)
    ]


def entity_coordinates(
    entity: Entity, segments_per_turn: int = DEFAULT_ARC_SEGMENTS
) -> list[Coordinate]:
    """Trace a normalized primitive in its stitched orientation.

    Args:
        entity: LINE, ARC or CIRCLE primitive with edges assigned
        segments_per_turn: Arc flattening resolution

    Returns:
        Coordinates from the entity's first edge to its second edge

    Raises:
        ShapeBuildError: If the primitive type cannot be traced
    """
    if entity.type == EntityType.LINE:
        if entity.edges is None:
            raise ShapeBuildError("line has no edges")
        return [entity.edges[0].to_tuple(), entity.edges[1].to_tuple()]

    if entity.type == EntityType.ARC:
        if entity.center is None or entity.radius is None:
            raise ShapeBuildError("arc has no center or radius")
        sweep = arc_sweep(entity.start_angle or 0.0, entity.end_angle or 0.0, entity.clockwise)
        coords = flatten_arc(
            entity.center, entity.radius, entity.start_angle or 0.0, sweep, segments_per_turn
        )
        if entity.reverse:
            coords.reverse()
        return coords

    if entity.type == EntityType.CIRCLE:
        if entity.center is None or entity.radius is None:
            raise ShapeBuildError("circle has no center or radius")
        return flatten_arc(entity.center, entity.radius, 0.0, TWO_PI, segments_per_turn)

    raise ShapeBuildError(f"unknown entity {entity.type}")


def _coords_equal(a: Coordinate, b: Coordinate, tolerance: float) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) < tolerance


class KernelPolygon:
    """Polygon handle owned by a shape.

    Wraps a shapely Polygon and exposes only the queries the contour
    engine needs. Built once, never mutated.
    """

    def __init__(self, geometry: Polygon, closed: bool = True) -> None:
        """Initialize the handle.

        Args:
            geometry: Shapely polygon traced from the shape
            closed: False when the source chain did not return to its start
        """
        self._geometry = geometry
        self._closed = closed

    @property
    def geometry(self) -> Polygon:
        """The underlying shapely polygon."""
        return self._geometry

    def is_valid(self) -> bool:
        """True for a closed, non-self-intersecting contour."""
        return self._closed and bool(self._geometry.is_valid)

    def area(self) -> float:
        """Enclosed area.

        Raises:
            GeometryKernelError: If the kernel cannot produce a finite area
        """
        try:
            area = float(self._geometry.area)
        except GEOSException as e:
            raise GeometryKernelError(str(e)) from e
        if not math.isfinite(area):
            raise GeometryKernelError("area is not finite")
        return area

    def contains(self, other: "KernelPolygon") -> bool:
        """True if other lies entirely inside this polygon.

        Raises:
            GeometryKernelError: If the kernel fails on the predicate
        """
        try:
            return bool(self._geometry.contains(other.geometry))
        except GEOSException as e:
            raise GeometryKernelError(str(e)) from e

    def distance_to(self, probe: BaseGeometry) -> float:
        """Shortest distance between this polygon and a probe geometry.

        Raises:
            GeometryKernelError: If the kernel fails on the query
        """
        try:
            return float(self._geometry.distance(probe))
        except GEOSException as e:
            raise GeometryKernelError(str(e)) from e


def make_segment(p1: Coordinate, p2: Coordinate) -> LineString:
    """Build a probe segment for distance queries."""
    return LineString([p1, p2])


def build_polygon(
    entities: Sequence[Entity],
    tolerance: float = EQUAL_THRESHOLD,
    segments_per_turn: int = DEFAULT_ARC_SEGMENTS,
) -> KernelPolygon:
    """Build a kernel polygon from an ordered, oriented primitive sequence.

    Consecutive primitives must join within tolerance. An open chain is
    closed implicitly by the polygon ring and reported invalid.

    Args:
        entities: Primitives in contour order
        tolerance: L1 tolerance for joints
        segments_per_turn: Arc flattening resolution

    Returns:
        KernelPolygon for the contour

    Raises:
        ShapeBuildError: If the sequence cannot form a polygon
    """
    coords: list[Coordinate] = []

    for entity in entities:
        piece = entity_coordinates(entity, segments_per_turn)
        if coords:
            if not _coords_equal(coords[-1], piece[0], tolerance):
                x, y = piece[0]
                raise ShapeBuildError(f"primitives do not join at ({x:.3f}, {y:.3f})")
            piece = piece[1:]
        coords.extend(piece)

    closed = len(coords) > 1 and _coords_equal(coords[0], coords[-1], tolerance)
    if closed:
        coords.pop()

    if len(coords) < 3:
        raise ShapeBuildError("contour has fewer than three points")

    try:
        geometry = Polygon(coords)
    except (ValueError, GEOSException) as e:
        raise ShapeBuildError(str(e)) from e

    return KernelPolygon(geometry, closed=closed)
