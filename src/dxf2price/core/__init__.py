"""Core processing algorithms for dxf2price.

This module contains the core algorithms for:

- Geometry operations (endpoint matching, angles, arc flattening, kernel)
- Entity normalization (chainable endpoints, unknown-entity tally)
- Polyline decurving (bulge to arc conversion)
- Contour stitching (greedy assembly of shapes)
- Shape measurement (polygon, area, perimeter)
- Main-shape resolution (outer contour, nesting check)
- Bounding-box estimation (directional distance probes)
- Pricing (cutting quote)

Key functions:
- find_edges: Attach edges to primitives and tally unknown ones
- decurve: Split a polyline into lines and arcs
- find_shapes: Stitch primitives into shapes
- build_polygon: Trace a shape into a kernel polygon
- entity_length: Analytic length of a primitive
- estimate_price: Apply unit prices to a measurement

Key classes:
- ContourStitcher: Greedy shape assembly
- ShapeMeasurer: Kernel polygon, area and perimeter
- MainShapeResolver: Outer contour selection
- BoundsEstimator: Bounding box via distance probes
- DrawingProcessor: Pipeline orchestration
"""

from dxf2price.core.bounds import BoundsEstimator, move_to_origin, translate_shapes
from dxf2price.core.decurver import bulge_to_arc, decurve
from dxf2price.core.geometry import (
    KernelPolygon,
    build_polygon,
    points_equal,
    vector_angle,
)
from dxf2price.core.measurer import ShapeMeasurer, entity_length
from dxf2price.core.normalizer import find_edges
from dxf2price.core.pricing import PriceQuote, estimate_price
from dxf2price.core.processor import DrawingProcessor, get_file_data
from dxf2price.core.resolver import MainShapeResolver, MainShapeResult
from dxf2price.core.stitcher import ContourStitcher, find_shapes

__all__ = [
    # Bounds
    "BoundsEstimator",
    # Stitcher
    "ContourStitcher",
    # Processor
    "DrawingProcessor",
    # Geometry
    "KernelPolygon",
    # Resolver
    "MainShapeResolver",
    "MainShapeResult",
    # Pricing
    "PriceQuote",
    # Measurer
    "ShapeMeasurer",
    "build_polygon",
    "bulge_to_arc",
    "decurve",
    "entity_length",
    "estimate_price",
    "find_edges",
    "find_shapes",
    "get_file_data",
    "move_to_origin",
    "points_equal",
    "translate_shapes",
    "vector_angle",
]
