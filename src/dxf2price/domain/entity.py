"""Drawing primitives as consumed by the contour engine.

This module defines the primitive types produced by the drawing reader:
- Vertex: A planar point, optionally carrying a polyline bulge
- EntityType: Enum of the primitive types the engine understands
- Entity: A drawing primitive (line, arc, circle or polyline) with its
  chainable endpoints ("edges") once normalized
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class EntityType(str, Enum):
    """Primitive types understood by the contour engine.

    Any other DXF type name is carried through as a plain string and
    counted as an unknown entity.
    """

    LINE = "LINE"
    ARC = "ARC"
    CIRCLE = "CIRCLE"
    LWPOLYLINE = "LWPOLYLINE"


@dataclass(frozen=True, slots=True)
class Vertex:
    """A point in the drawing plane.

    Immutable, so vertices can be shared between primitives freely.

    Attributes:
        x: X coordinate in drawing units
        y: Y coordinate in drawing units
        z: Optional elevation, carried through but never interpreted
        bulge: Polyline curvature towards the next vertex (None or 0 = straight)
    """

    x: float
    y: float
    z: float | None = None
    bulge: float | None = None

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Vertex":
        """Return a copy moved by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, z and bulge fields
        """
        return {"x": self.x, "y": self.y, "z": self.z, "bulge": self.bulge}


@dataclass
class Entity:
    """A drawing primitive.

    Entities are mutable: normalization attaches ``edges``, stitching may
    swap them (setting ``reverse``) and origin normalization translates
    coordinates in place.

    Attributes:
        type: DXF type name (an EntityType value for known primitives)
        vertices: LINE endpoints or LWPOLYLINE vertices
        center: ARC/CIRCLE center
        radius: ARC/CIRCLE radius
        start_angle: ARC start angle in radians
        end_angle: ARC end angle in radians
        closed: LWPOLYLINE closed flag
        clockwise: ARC sweeps clockwise from start to end
        edges: The two chainable endpoints (None until normalized)
        reverse: True when the edges were swapped during stitching
        polyline: Source polyline for primitives produced by decurving
        layer: DXF layer name
    """

    type: str
    vertices: list[Vertex] = field(default_factory=list)
    center: Vertex | None = None
    radius: float | None = None
    start_angle: float | None = None
    end_angle: float | None = None
    closed: bool = False
    clockwise: bool = False
    edges: list[Vertex] | None = None
    reverse: bool = False
    polyline: "Entity | None" = field(default=None, repr=False)
    layer: str | None = None

    @property
    def is_normalized(self) -> bool:
        """True once the normalizer has attached chainable edges."""
        return self.edges is not None

    def swap_edges(self) -> None:
        """Swap the chainable endpoints and mark the entity as reversed.

        Raises:
            ValueError: If the entity has not been normalized
        """
        if self.edges is None:
            raise ValueError(f"Entity {self.type} has no edges to swap")
        self.edges[0], self.edges[1] = self.edges[1], self.edges[0]
        self.reverse = True

    def translate(self, dx: float, dy: float) -> None:
        """Move the entity by (dx, dy) in place."""
        self.vertices = [v.translated(dx, dy) for v in self.vertices]
        if self.center is not None:
            self.center = self.center.translated(dx, dy)
        if self.edges is not None:
            self.edges = [v.translated(dx, dy) for v in self.edges]
