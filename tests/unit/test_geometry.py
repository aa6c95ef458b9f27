"""Unit tests for geometry helpers and the polygon kernel."""

import math

import pytest
from shapely.geometry import LineString

from dxf2price.core.geometry import (
    KernelPolygon,
    arc_point,
    arc_sweep,
    build_polygon,
    entity_coordinates,
    flatten_arc,
    line_length,
    normalize_angle,
    points_equal,
    vector_angle,
)
from dxf2price.domain import Entity, EntityType, Vertex
from dxf2price.exceptions import ShapeBuildError


def _line(x1: float, y1: float, x2: float, y2: float) -> Entity:
    return Entity(
        type=EntityType.LINE,
        vertices=[Vertex(x1, y1), Vertex(x2, y2)],
        edges=[Vertex(x1, y1), Vertex(x2, y2)],
    )


def _square(size: float = 1.0, x: float = 0.0, y: float = 0.0) -> list[Entity]:
    return [
        _line(x, y, x + size, y),
        _line(x + size, y, x + size, y + size),
        _line(x + size, y + size, x, y + size),
        _line(x, y + size, x, y),
    ]


class TestPointsEqual:
    """Tests for points_equal function."""

    def test_same_point(self):
        """Test identical points are equal."""
        assert points_equal(Vertex(1.0, 1.0), Vertex(1.0, 1.0))

    def test_within_l1_tolerance(self):
        """Test points whose L1 distance is below the threshold."""
        assert points_equal(Vertex(0.0, 0.0), Vertex(0.004, 0.005))

    def test_outside_l1_tolerance(self):
        """Test the tolerance is on |dx| + |dy|, not Euclidean distance."""
        # Euclidean distance ~0.0078 but L1 distance 0.011
        assert not points_equal(Vertex(0.0, 0.0), Vertex(0.0055, 0.0055))

    def test_custom_tolerance(self):
        """Test a custom tolerance."""
        assert points_equal(Vertex(0.0, 0.0), Vertex(0.5, 0.0), tolerance=1.0)


class TestVectorAngle:
    """Tests for vector_angle function."""

    @pytest.mark.parametrize(
        "tip, expected",
        [
            (Vertex(1.0, 0.0), 0.0),
            (Vertex(0.0, 1.0), math.pi / 2),
            (Vertex(-1.0, 0.0), math.pi),
            (Vertex(0.0, -1.0), 3 * math.pi / 2),
            (Vertex(1.0, -1.0), 7 * math.pi / 4),
        ],
    )
    def test_quadrants(self, tip, expected):
        """Test angles in every quadrant lie in [0, 2*pi)."""
        assert vector_angle(Vertex(0.0, 0.0), tip) == pytest.approx(expected)

    def test_zero_length_vector(self):
        """Test zero-length vector raises ValueError."""
        with pytest.raises(ValueError, match="zero-length"):
            vector_angle(Vertex(2.0, 2.0), Vertex(2.0, 2.0))


class TestAngles:
    """Tests for arc helpers."""

    def test_line_length(self):
        """Test Euclidean length."""
        assert line_length(Vertex(0, 0), Vertex(3, 4)) == pytest.approx(5.0)

    def test_arc_point(self):
        """Test point on circle."""
        p = arc_point(Vertex(1.0, 1.0), 2.0, math.pi / 2)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(3.0)

    def test_normalize_angle(self):
        """Test angles wrap into [0, 2*pi)."""
        assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)

    def test_arc_sweep_counter_clockwise_wraps(self):
        """Test a counter-clockwise arc crossing angle 0."""
        assert arc_sweep(3 * math.pi / 2, math.pi / 2, clockwise=False) == pytest.approx(math.pi)

    def test_arc_sweep_clockwise_is_negative(self):
        """Test clockwise sweeps are negative."""
        assert arc_sweep(math.pi / 2, 0.0, clockwise=True) == pytest.approx(-math.pi / 2)


class TestFlattenArc:
    """Tests for flatten_arc function."""

    def test_endpoints(self):
        """Test the polyline starts and ends on the arc endpoints."""
        coords = flatten_arc(Vertex(0, 0), 1.0, 0.0, math.pi / 2, segments_per_turn=8)
        assert coords[0] == pytest.approx((1.0, 0.0))
        assert coords[-1] == pytest.approx((0.0, 1.0), abs=1e-12)

    def test_includes_axis_extremes(self):
        """Test the arc's topmost point is sampled even with coarse steps."""
        # Sweep from 20 to 170 degrees: apex at 90 degrees is not a step
        coords = flatten_arc(
            Vertex(0, 0), 1.0, math.radians(20), math.radians(150), segments_per_turn=3
        )
        assert max(y for _, y in coords) == pytest.approx(1.0)

    def test_clockwise_sweep(self):
        """Test a negative sweep runs clockwise."""
        coords = flatten_arc(Vertex(0, 0), 1.0, math.pi / 2, -math.pi / 2, segments_per_turn=4)
        assert coords[0] == pytest.approx((0.0, 1.0), abs=1e-12)
        assert coords[-1] == pytest.approx((1.0, 0.0), abs=1e-12)

    def test_zero_sweep(self):
        """Test a zero sweep yields the start point only."""
        assert len(flatten_arc(Vertex(0, 0), 1.0, 0.0, 0.0)) == 1


class TestEntityCoordinates:
    """Tests for entity_coordinates function."""

    def test_line_follows_edges(self):
        """Test a line is traced along its (possibly swapped) edges."""
        line = _line(0, 0, 1, 0)
        line.swap_edges()
        assert entity_coordinates(line) == [(1, 0), (0, 0)]

    def test_reversed_arc(self):
        """Test a reversed arc is traced from its end angle back."""
        arc = Entity(
            type=EntityType.ARC,
            center=Vertex(0, 0),
            radius=1.0,
            start_angle=0.0,
            end_angle=math.pi / 2,
            reverse=True,
        )
        coords = entity_coordinates(arc, segments_per_turn=8)
        assert coords[0] == pytest.approx((0.0, 1.0), abs=1e-12)
        assert coords[-1] == pytest.approx((1.0, 0.0))

    def test_unknown_type(self):
        """Test unknown types cannot be traced."""
        with pytest.raises(ShapeBuildError, match="unknown entity"):
            entity_coordinates(Entity(type="SPLINE"))


class TestBuildPolygon:
    """Tests for build_polygon function."""

    def test_unit_square(self):
        """Test a closed square is valid with area 1."""
        polygon = build_polygon(_square())
        assert polygon.is_valid()
        assert polygon.area() == pytest.approx(1.0)

    def test_circle_area(self):
        """Test a flattened circle approximates pi * r^2."""
        circle = Entity(
            type=EntityType.CIRCLE,
            center=Vertex(0, 0),
            radius=10.0,
            edges=[Vertex(10, 0), Vertex(10, 0)],
        )
        polygon = build_polygon([circle])
        assert polygon.is_valid()
        assert polygon.area() == pytest.approx(math.pi * 100, rel=1e-3)

    def test_open_chain_is_invalid(self):
        """Test an open chain closes implicitly but is reported invalid."""
        polygon = build_polygon(_square()[:3])
        assert not polygon.is_valid()
        assert polygon.area() == pytest.approx(1.0)

    def test_gap_between_primitives(self):
        """Test primitives that do not join raise ShapeBuildError."""
        entities = [_line(0, 0, 1, 0), _line(2, 0, 2, 1)]
        with pytest.raises(ShapeBuildError, match="do not join"):
            build_polygon(entities)

    def test_degenerate_contour(self):
        """Test a back-and-forth line has too few points."""
        entities = [_line(0, 0, 1, 0), _line(1, 0, 0, 0)]
        with pytest.raises(ShapeBuildError, match="fewer than three"):
            build_polygon(entities)

    def test_self_intersecting_is_invalid(self):
        """Test a bow-tie contour is reported invalid."""
        entities = [
            _line(0, 0, 1, 1),
            _line(1, 1, 1, 0),
            _line(1, 0, 0, 1),
            _line(0, 1, 0, 0),
        ]
        assert not build_polygon(entities).is_valid()


class TestKernelPolygon:
    """Tests for KernelPolygon queries."""

    def test_contains(self):
        """Test containment of a nested square."""
        outer = build_polygon(_square(10.0))
        inner = build_polygon(_square(2.0, 4.0, 4.0))
        assert outer.contains(inner)
        assert not inner.contains(outer)

    def test_distance_to_probe(self):
        """Test distance from polygon to a probe segment."""
        polygon = build_polygon(_square(10.0))
        probe = LineString([(-100, 50), (100, 50)])
        assert polygon.distance_to(probe) == pytest.approx(40.0)

    def test_wraps_geometry(self):
        """Test the handle exposes the wrapped geometry."""
        polygon = build_polygon(_square())
        assert isinstance(polygon, KernelPolygon)
        assert polygon.geometry.bounds == pytest.approx((0.0, 0.0, 1.0, 1.0))
