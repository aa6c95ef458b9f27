"""Converters between ezdxf entities and domain models.

This module handles the conversion from ezdxf's DXF entity objects to the
plain Entity/Vertex models consumed by the contour engine.
"""

import math
from typing import Any

from dxf2price.domain import Entity, EntityType, Vertex


def _vertex(point: Any) -> Vertex:
    """Convert an ezdxf Vec3 (or 3-tuple) to a Vertex."""
    return Vertex(x=float(point[0]), y=float(point[1]), z=float(point[2]))


def ezdxf_entity_to_domain(dxf_entity: Any) -> Entity:
    """Convert an ezdxf entity to a domain Entity.

    LINE, ARC, CIRCLE and LWPOLYLINE are converted with their geometry.
    Arc angles are converted from degrees to radians. Every other type
    becomes an Entity carrying only its type name and layer, so that it can
    be counted as unknown.

    Args:
        dxf_entity: Entity from an ezdxf layout

    Returns:
        Domain Entity
    """
    dxftype = dxf_entity.dxftype()
    layer = dxf_entity.dxf.get("layer")

    if dxftype == EntityType.LINE:
        return Entity(
            type=EntityType.LINE,
            vertices=[_vertex(dxf_entity.dxf.start), _vertex(dxf_entity.dxf.end)],
            layer=layer,
        )

    if dxftype == EntityType.ARC:
        return Entity(
            type=EntityType.ARC,
            center=_vertex(dxf_entity.dxf.center),
            radius=float(dxf_entity.dxf.radius),
            start_angle=math.radians(dxf_entity.dxf.start_angle),
            end_angle=math.radians(dxf_entity.dxf.end_angle),
            layer=layer,
        )

    if dxftype == EntityType.CIRCLE:
        return Entity(
            type=EntityType.CIRCLE,
            center=_vertex(dxf_entity.dxf.center),
            radius=float(dxf_entity.dxf.radius),
            layer=layer,
        )

    if dxftype == EntityType.LWPOLYLINE:
        return _lwpolyline_to_domain(dxf_entity, layer)

    return Entity(type=dxftype, layer=layer)


def _lwpolyline_to_domain(dxf_entity: Any, layer: str | None) -> Entity:
    """Convert an LWPOLYLINE, keeping per-vertex bulges.

    A zero bulge is stored as None (straight segment).
    """
    elevation = float(dxf_entity.dxf.get("elevation", 0.0))
    vertices = [
        Vertex(x=float(x), y=float(y), z=elevation, bulge=float(bulge) or None)
        for x, y, bulge in dxf_entity.get_points("xyb")
    ]
    return Entity(
        type=EntityType.LWPOLYLINE,
        vertices=vertices,
        closed=bool(dxf_entity.closed),
        layer=layer,
    )
