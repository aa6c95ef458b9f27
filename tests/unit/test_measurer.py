"""Unit tests for shape measurement."""

import math
from unittest.mock import patch

import pytest

from dxf2price.core.measurer import ShapeMeasurer, entity_length
from dxf2price.core.normalizer import find_edges
from dxf2price.core.stitcher import find_shapes
from dxf2price.domain import Entity, EntityType, Shape, Vertex
from dxf2price.exceptions import GeometryKernelError, ShapeBuildError, ShapeMeasureError


def _arc(start_angle: float, end_angle: float, clockwise: bool = False) -> Entity:
    return Entity(
        type=EntityType.ARC,
        center=Vertex(0, 0),
        radius=1.0,
        start_angle=start_angle,
        end_angle=end_angle,
        clockwise=clockwise,
    )


class TestEntityLength:
    """Tests for entity_length function."""

    def test_quarter_arc(self):
        """Test a counter-clockwise quarter arc."""
        assert entity_length(_arc(0.0, math.pi / 2)) == pytest.approx(math.pi / 2)

    def test_arc_crossing_zero(self):
        """Test an arc whose end angle is below its start angle."""
        assert entity_length(_arc(3 * math.pi / 2, math.pi / 2)) == pytest.approx(math.pi)

    def test_clockwise_arc_uses_complement(self):
        """Test a clockwise arc measures the complementary angle."""
        assert entity_length(_arc(0.0, math.pi / 2, clockwise=True)) == pytest.approx(
            3 * math.pi / 2
        )

    def test_clockwise_half_circle(self):
        """Test a clockwise half circle has the same length as a counter-clockwise one."""
        assert entity_length(_arc(0.0, math.pi, clockwise=True)) == pytest.approx(math.pi)

    def test_arc_scales_with_radius(self):
        """Test arc length is angle times radius."""
        arc = _arc(0.0, math.pi)
        arc.radius = 3.0
        assert entity_length(arc) == pytest.approx(3 * math.pi)

    def test_line(self):
        """Test line length from its edges."""
        line = Entity(type=EntityType.LINE, edges=[Vertex(0, 0), Vertex(3, 4)])
        assert entity_length(line) == pytest.approx(5.0)

    def test_circle(self):
        """Test circumference of a circle."""
        circle = Entity(type=EntityType.CIRCLE, center=Vertex(0, 0), radius=2.0)
        assert entity_length(circle) == pytest.approx(4 * math.pi)

    def test_unknown_type(self):
        """Test unknown types have no length."""
        with pytest.raises(ValueError, match="Unknown entity"):
            entity_length(Entity(type="SPLINE"))


class TestShapeMeasurer:
    """Tests for ShapeMeasurer class."""

    def _shapes(self, entities):
        find_edges(entities)
        return find_shapes(entities)

    def test_rectangle(self):
        """Test area and perimeter of a closed rectangle."""
        polyline = Entity(
            type=EntityType.LWPOLYLINE,
            vertices=[Vertex(0, 0), Vertex(4, 0), Vertex(4, 2), Vertex(0, 2)],
            closed=True,
        )
        shape = self._shapes([polyline])[0]

        assert ShapeMeasurer().measure(shape, 0)
        assert shape.area == pytest.approx(8.0)
        assert shape.perimeter == pytest.approx(12.0)
        assert shape.polygon is not None

    def test_circle_perimeter_is_analytic(self):
        """Test perimeter uses the exact arc length, not the flattened one."""
        circle = Entity(type=EntityType.CIRCLE, center=Vertex(0, 0), radius=5.0)
        shape = self._shapes([circle])[0]

        ShapeMeasurer(arc_segments=16).measure(shape, 0)

        assert shape.perimeter == pytest.approx(10 * math.pi)
        assert shape.area < 25 * math.pi

    def test_stadium(self):
        """Test a slot made of two lines and two half circles."""
        polyline = Entity(
            type=EntityType.LWPOLYLINE,
            vertices=[
                Vertex(0, 0),
                Vertex(10, 0, bulge=1.0),
                Vertex(10, 4),
                Vertex(0, 4, bulge=1.0),
            ],
            closed=True,
        )
        shape = self._shapes([polyline])[0]

        assert ShapeMeasurer().measure(shape, 0)
        assert shape.perimeter == pytest.approx(20 + 4 * math.pi)
        assert shape.area == pytest.approx(40 + 4 * math.pi, rel=1e-3)

    def test_open_shape_is_invalid(self):
        """Test an open chain is measured but reported invalid."""
        entities = [
            Entity(type=EntityType.LINE, vertices=[Vertex(0, 0), Vertex(1, 0)]),
            Entity(type=EntityType.LINE, vertices=[Vertex(1, 0), Vertex(1, 1)]),
        ]
        shape = self._shapes(entities)[0]

        assert not ShapeMeasurer().measure(shape, 0)
        assert shape.perimeter == pytest.approx(2.0)

    def test_build_error_carries_index(self):
        """Test kernel rejection reports the shape index."""
        shape = Shape(
            entities=[Entity(type=EntityType.LINE, edges=[Vertex(0, 0), Vertex(1, 0)])]
        )

        with pytest.raises(ShapeBuildError) as exc_info:
            ShapeMeasurer().measure(shape, 3)

        assert exc_info.value.index == 3
        assert str(exc_info.value).startswith("Shape 3 has errors: ")

    def test_area_error(self):
        """Test kernel area failure raises ShapeMeasureError."""
        circle = Entity(type=EntityType.CIRCLE, center=Vertex(0, 0), radius=1.0)
        shape = self._shapes([circle])[0]

        with patch(
            "dxf2price.core.geometry.KernelPolygon.area",
            side_effect=GeometryKernelError("boom"),
        ):
            with pytest.raises(ShapeMeasureError) as exc_info:
                ShapeMeasurer().measure(shape, 1)

        assert str(exc_info.value) == "Can not compute area of shape 1: boom"

    def test_perimeter_error(self):
        """Test a primitive without length raises ShapeMeasureError."""
        circle = Entity(type=EntityType.CIRCLE, center=Vertex(0, 0), radius=1.0)
        shape = self._shapes([circle])[0]

        with patch(
            "dxf2price.core.measurer.entity_length",
            side_effect=ValueError("Unknown entity: HATCH"),
        ):
            with pytest.raises(ShapeMeasureError) as exc_info:
                ShapeMeasurer().measure(shape, 2)

        assert str(exc_info.value) == (
            "Can not compute perimeter of shape 2: Unknown entity: HATCH"
        )
