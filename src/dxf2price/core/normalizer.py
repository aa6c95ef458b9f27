"""Entity normalization: chainable endpoints for every primitive.

Each understood primitive gets ``edges``, the two endpoints through which it
can be linked to its neighbours:
- ARC: the points on the circle at start and end angle
- LINE: its two vertices
- CIRCLE: the point at angle 0, twice (a circle closes on itself)
- LWPOLYLINE: first and last vertex, after closing the vertex loop when the
  polyline is flagged closed or its last vertex carries a bulge

Anything else stays without edges and is tallied by type.
"""

from collections.abc import Iterable

from dxf2price.core.geometry import arc_point
from dxf2price.domain import Entity, EntityType, Vertex


def find_edges(entities: Iterable[Entity]) -> dict[str, int]:
    """Attach edges to every understood primitive, in place.

    Args:
        entities: Primitives in drawing order

    Returns:
        Count of primitives left without edges, keyed by type name
    """
    unknown: dict[str, int] = {}

    for entity in entities:
        if not normalize_entity(entity):
            unknown[entity.type] = unknown.get(entity.type, 0) + 1

    return unknown


def normalize_entity(entity: Entity) -> bool:
    """Attach edges to a single primitive.

    Args:
        entity: Primitive to normalize (mutated)

    Returns:
        True if edges were assigned, False for primitives that cannot be
        chained (unknown types or missing geometry)
    """
    if entity.type == EntityType.ARC:
        if entity.center is None or entity.radius is None:
            return False
        entity.edges = [
            arc_point(entity.center, entity.radius, entity.start_angle or 0.0),
            arc_point(entity.center, entity.radius, entity.end_angle or 0.0),
        ]
        return True

    if entity.type == EntityType.LINE:
        if len(entity.vertices) < 2:
            return False
        entity.edges = [entity.vertices[0], entity.vertices[1]]
        return True

    if entity.type == EntityType.LWPOLYLINE:
        if not entity.vertices:
            return False
        # Close the loop with a copy of the first vertex
        if entity.closed or entity.vertices[-1].bulge:
            first = entity.vertices[0]
            entity.vertices.append(Vertex(x=first.x, y=first.y, z=first.z))
        entity.edges = [entity.vertices[0], entity.vertices[-1]]
        return True

    if entity.type == EntityType.CIRCLE:
        if entity.center is None or entity.radius is None:
            return False
        edge = Vertex(x=entity.center.x + entity.radius, y=entity.center.y)
        entity.edges = [edge, edge]
        return True

    return False
