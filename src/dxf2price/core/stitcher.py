"""Contour stitching: greedy assembly of shapes from loose primitives.

Primitives arrive in drawing order with no connectivity information. The
stitcher seeds a shape with the first primitive of the pool and keeps
attaching any primitive whose edge coincides with one of the shape's open
ends until the ends meet (closed shape) or nothing else fits (open shape).

Match priority for a candidate primitive is fixed:
1. its first edge at the shape start (attached reversed, at the head)
2. its first edge at the shape end (attached as-is, at the tail)
3. its second edge at the shape start (attached as-is, at the head)
4. its second edge at the shape end (attached reversed, at the tail)

The pool is scanned from index 0 after every attachment; the lowest index
that matches wins.
"""

from collections.abc import Iterable

from dxf2price.core.decurver import decurve
from dxf2price.core.geometry import EQUAL_THRESHOLD, points_equal
from dxf2price.domain import Entity, EntityType, Shape, Vertex


class ContourStitcher:
    """Assembles shapes from normalized primitives.

    The stitcher keeps no state between calls.
    """

    def __init__(self, tolerance: float = EQUAL_THRESHOLD) -> None:
        """Initialize the stitcher.

        Args:
            tolerance: L1 distance below which endpoints coincide
        """
        self.tolerance = tolerance

    def stitch(self, entities: Iterable[Entity]) -> list[Shape]:
        """Stitch primitives into shapes.

        Entities without edges are ignored; they are tallied by the
        normalizer.

        Args:
            entities: Normalized primitives in drawing order

        Returns:
            Shapes in the order their seeds appear in the drawing
        """
        pool = [entity for entity in entities if entity.is_normalized]
        shapes: list[Shape] = []

        while pool:
            shapes.append(self._grow_shape(pool))

        return shapes

    def _equal(self, p1: Vertex, p2: Vertex) -> bool:
        return points_equal(p1, p2, self.tolerance)

    def _grow_shape(self, pool: list[Entity]) -> Shape:
        """Seed a shape with the head of the pool and grow it.

        Args:
            pool: Remaining primitives; consumed primitives are removed

        Returns:
            The closed or exhausted shape

        Raises:
            ValueError: If the seed primitive was never normalized
        """
        seed = pool.pop(0)
        if seed.edges is None:
            raise ValueError(f"Entity {seed.type} has no edges")

        shape = Shape(entities=decurve(seed), start=seed.edges[0], end=seed.edges[1])
        if seed.type == EntityType.CIRCLE:
            shape.single = True
            shape.closed = True

        if self._equal(shape.start, shape.end):
            shape.closed = True
            return shape

        while self._attach_next(shape, pool):
            if self._equal(shape.start, shape.end):
                shape.closed = True
                break

        return shape

    def _attach_next(self, shape: Shape, pool: list[Entity]) -> bool:
        """Attach the first pool primitive that touches an open end.

        Args:
            shape: Shape under construction (mutated)
            pool: Remaining primitives (matched primitive is removed)

        Returns:
            True if a primitive was attached, False if none fits
        """
        if shape.start is None or shape.end is None:
            return False

        for index, entity in enumerate(pool):
            edges = entity.edges
            if edges is None:
                continue

            if self._equal(edges[0], shape.start):
                entity.swap_edges()
                shape.entities[:0] = decurve(entity)
                shape.start = edges[0]
            elif self._equal(edges[0], shape.end):
                shape.entities.extend(decurve(entity))
                shape.end = edges[1]
            elif self._equal(edges[1], shape.start):
                shape.entities[:0] = decurve(entity)
                shape.start = edges[0]
            elif self._equal(edges[1], shape.end):
                entity.swap_edges()
                shape.entities.extend(decurve(entity))
                shape.end = edges[1]
            else:
                continue

            del pool[index]
            return True

        return False


def find_shapes(entities: Iterable[Entity], tolerance: float = EQUAL_THRESHOLD) -> list[Shape]:
    """Stitch normalized primitives into shapes.

    Convenience wrapper around ContourStitcher.

    Args:
        entities: Normalized primitives in drawing order
        tolerance: L1 distance below which endpoints coincide

    Returns:
        Closed and open shapes
    """
    return ContourStitcher(tolerance=tolerance).stitch(entities)
