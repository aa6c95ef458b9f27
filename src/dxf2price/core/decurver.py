"""Polyline decurving: bulged polylines to lines and arcs.

A DXF lightweight polyline stores curvature as a per-vertex "bulge": the
tangent of a quarter of the included angle of the arc running to the next
vertex, signed positive for counter-clockwise arcs. This module expands a
polyline into LINE and ARC primitives that the kernel can trace.
"""

import math

from dxf2price.core.geometry import line_length, vector_angle
from dxf2price.domain import Entity, EntityType, Vertex


def bulge_to_arc(vertex: Vertex, next_vertex: Vertex) -> Entity | None:
    """Convert one bulged polyline segment into an ARC primitive.

    The half chord and the bulge give the radius; the center sits off the
    chord midpoint on the side selected by the bulge sign.

    Args:
        vertex: Segment start, carrying a non-zero bulge
        next_vertex: Segment end

    Returns:
        ARC entity with edges (vertex, next_vertex), or None for a
        zero-length chord
    """
    bulge = vertex.bulge or 0.0
    half_chord = line_length(vertex, next_vertex) / 2
    if half_chord == 0.0:
        return None

    gamma = math.pi / 2 - 2 * math.atan(abs(bulge))
    radius = abs(half_chord / math.cos(gamma))
    midpoint = Vertex(
        x=(vertex.x + next_vertex.x) / 2,
        y=(vertex.y + next_vertex.y) / 2,
    )
    beta = vector_angle(vertex, midpoint)
    center_angle = beta + gamma * math.copysign(1.0, bulge)
    center = Vertex(
        x=vertex.x + radius * math.cos(center_angle),
        y=vertex.y + radius * math.sin(center_angle),
    )

    return Entity(
        type=EntityType.ARC,
        center=center,
        radius=radius,
        start_angle=vector_angle(center, vertex),
        end_angle=vector_angle(center, next_vertex),
        clockwise=bulge < 0,
        edges=[vertex, next_vertex],
    )


def decurve(entity: Entity) -> list[Entity]:
    """Split a polyline into LINE and ARC primitives.

    Non-polyline entities are returned unchanged as a one-element list. If
    the polyline was reversed during stitching, the pieces come back in
    reverse order with their edges swapped, so the chain still reads from
    the polyline's (swapped) first edge to its second.

    Args:
        entity: Normalized primitive

    Returns:
        Primitives in chain order
    """
    if entity.type != EntityType.LWPOLYLINE:
        return [entity]

    pieces: list[Entity] = []

    for vertex, next_vertex in zip(entity.vertices, entity.vertices[1:]):
        if not vertex.bulge:
            pieces.append(
                Entity(
                    type=EntityType.LINE,
                    vertices=[vertex, next_vertex],
                    edges=[vertex, next_vertex],
                    polyline=entity,
                    layer=entity.layer,
                )
            )
            continue

        arc = bulge_to_arc(vertex, next_vertex)
        if arc is None:
            continue
        arc.polyline = entity
        arc.layer = entity.layer
        pieces.append(arc)

    if entity.reverse:
        pieces.reverse()
        for piece in pieces:
            piece.swap_edges()

    return pieces
