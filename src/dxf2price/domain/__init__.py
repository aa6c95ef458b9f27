"""Domain models for dxf2price.

This module contains the core domain models representing drawing primitives,
reconstructed shapes and measurement results. Models are:

- Plain dataclasses, independent of ezdxf and shapely
- Immutable where they are value data (Vertex, ShapeData, Bounds)
- Mutable where the pipeline updates them in place (Entity, Shape)

Key classes:
- Vertex: A planar point with optional polyline bulge
- Entity: A drawing primitive with its chainable endpoints
- Shape: A contour stitched from primitives
- Bounds: Axis-aligned extent of a shape
- ShapeData / FileData: Measurement results
"""

from dxf2price.domain.entity import Entity, EntityType, Vertex
from dxf2price.domain.shape import Bounds, FileData, Shape, ShapeData

__all__: list[str] = [
    # Enums
    "EntityType",
    # Core types
    "Vertex",
    "Entity",
    "Shape",
    "Bounds",
    "ShapeData",
    "FileData",
]
