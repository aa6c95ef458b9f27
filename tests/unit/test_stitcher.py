"""Unit tests for contour stitching."""

import itertools

import pytest

from dxf2price.core.measurer import ShapeMeasurer
from dxf2price.core.normalizer import find_edges
from dxf2price.core.stitcher import ContourStitcher, find_shapes
from dxf2price.domain import Entity, EntityType, Shape, Vertex

SQUARE_SIDES = [
    ((0.0, 0.0), (1.0, 0.0)),
    ((1.0, 0.0), (1.0, 1.0)),
    ((1.0, 1.0), (0.0, 1.0)),
    ((0.0, 1.0), (0.0, 0.0)),
]


def _line(p1: tuple[float, float], p2: tuple[float, float]) -> Entity:
    entity = Entity(type=EntityType.LINE, vertices=[Vertex(*p1), Vertex(*p2)])
    find_edges([entity])
    return entity


class TestContourStitcher:
    """Tests for ContourStitcher class."""

    @pytest.mark.parametrize("order", list(itertools.permutations(range(4))))
    def test_square_permutation_invariance(self, order):
        """Test any order and direction of the sides yields one unit square."""
        measurer = ShapeMeasurer()

        for flips in itertools.product([False, True], repeat=4):
            entities = []
            for index, flip in zip(order, flips):
                p1, p2 = SQUARE_SIDES[index]
                entities.append(_line(p2, p1) if flip else _line(p1, p2))

            shapes = ContourStitcher().stitch(entities)

            assert len(shapes) == 1
            assert shapes[0].closed
            assert measurer.measure(shapes[0], 0)
            assert shapes[0].area == pytest.approx(1.0)
            assert shapes[0].perimeter == pytest.approx(4.0)

    def test_circle_is_single_closed_shape(self):
        """Test a circle forms a closed shape on its own."""
        circle = Entity(type=EntityType.CIRCLE, center=Vertex(0, 0), radius=1.0)
        find_edges([circle])

        shapes = ContourStitcher().stitch([circle])

        assert len(shapes) == 1
        assert shapes[0].single
        assert shapes[0].closed
        assert shapes[0].entities == [circle]

    def test_closed_polyline_is_decurved(self):
        """Test a closed polyline becomes one closed shape of its pieces."""
        polyline = Entity(
            type=EntityType.LWPOLYLINE,
            vertices=[Vertex(0, 0), Vertex(2, 0), Vertex(2, 2), Vertex(0, 2)],
            closed=True,
        )
        find_edges([polyline])

        shapes = ContourStitcher().stitch([polyline])

        assert len(shapes) == 1
        assert shapes[0].closed
        assert not shapes[0].single
        assert len(shapes[0].entities) == 4

    def test_trailing_bulge_closes_without_matches(self):
        """Test a polyline closed by a trailing bulge needs no other primitive."""
        polyline = Entity(
            type=EntityType.LWPOLYLINE,
            vertices=[Vertex(0, 0), Vertex(2, 0), Vertex(2, 2, bulge=0.4)],
        )
        other = _line((10, 10), (11, 10))
        find_edges([polyline])

        shapes = ContourStitcher().stitch([polyline, other])

        assert shapes[0].closed
        assert shapes[0].start == shapes[0].end
        assert shapes[1].entities == [other]

    def test_match_priority(self):
        """Test first-edge matches win and the scan restarts at the pool head."""
        seed = _line((0, 0), (1, 0))
        stray = _line((5, 5), (6, 6))
        tail = _line((1, 0), (1, 1))
        head = _line((0, 0), (0, 1))

        shapes = ContourStitcher().stitch([seed, stray, tail, head])

        first = shapes[0]
        assert first.entities == [head, seed, tail]
        assert head.reverse
        assert not tail.reverse
        assert first.start == Vertex(0, 1)
        assert first.end == Vertex(1, 1)
        assert not first.closed
        assert shapes[1].entities == [stray]

    def test_second_edge_matches(self):
        """Test second-edge matches prepend as-is and append reversed."""
        seed = _line((0, 0), (1, 0))
        head = _line((0, 5), (0, 0))
        tail = _line((3, 0), (1, 0))

        shape = ContourStitcher().stitch([seed, head, tail])[0]

        assert shape.entities == [head, seed, tail]
        assert not head.reverse
        assert tail.reverse
        assert shape.start == Vertex(0, 5)
        assert shape.end == Vertex(3, 0)

    def test_reversed_polyline_in_chain(self):
        """Test a polyline attached reversed keeps the chain traversable."""
        seed = _line((0, 0), (2, 0))
        polyline = Entity(
            type=EntityType.LWPOLYLINE,
            vertices=[Vertex(0, 2), Vertex(2, 2), Vertex(2, 0)],
        )
        closing = _line((0, 2), (0, 0))
        find_edges([polyline])

        shapes = ContourStitcher().stitch([seed, polyline, closing])

        assert len(shapes) == 1
        assert shapes[0].closed
        assert ShapeMeasurer().measure(shapes[0], 0)
        assert shapes[0].area == pytest.approx(4.0)
        assert shapes[0].perimeter == pytest.approx(8.0)

    def test_tolerance(self):
        """Test endpoints within the tolerance are joined."""
        entities = [_line((0, 0), (1, 0)), _line((1.004, 0.004), (0, 0))]
        shapes = ContourStitcher(tolerance=0.01).stitch(entities)
        assert len(shapes) == 1
        assert shapes[0].closed

    def test_unnormalized_entities_ignored(self):
        """Test entities without edges never enter a shape."""
        shapes = ContourStitcher().stitch([Entity(type="SPLINE")])
        assert shapes == []

    def test_every_entity_used_once(self):
        """Test two disjoint squares stitch into two shapes."""
        entities = [_line(p1, p2) for p1, p2 in SQUARE_SIDES]
        entities += [
            _line((10 + p1[0], p1[1]), (10 + p2[0], p2[1])) for p1, p2 in SQUARE_SIDES
        ]

        shapes = find_shapes(entities)

        assert len(shapes) == 2
        assert all(s.closed for s in shapes)
        assert sum(len(s.entities) for s in shapes) == 8

    def test_unnormalized_seed_rejected(self):
        """Test growing a shape from a primitive without edges raises ValueError."""
        with pytest.raises(ValueError, match="has no edges"):
            ContourStitcher()._grow_shape([Entity(type=EntityType.LINE)])

    def test_shape_without_ends_attaches_nothing(self):
        """Test a shape with no open ends leaves the pool untouched."""
        pool = [_line((0, 0), (1, 0))]

        assert not ContourStitcher()._attach_next(Shape(), pool)
        assert len(pool) == 1
