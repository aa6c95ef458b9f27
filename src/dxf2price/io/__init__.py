"""Drawing I/O layer for dxf2price.

This module handles reading DXF drawings using ezdxf and writing
measurement reports. It provides a clean abstraction layer between
ezdxf and the domain models.

Key responsibilities:
- Load DXF drawings
- Convert ezdxf entities to domain models
- Write JSON measurement reports

Key classes:
- DrawingReader: Load drawings and extract entities
- ResultWriter: Save measurement reports
"""

from dxf2price.io.reader import DrawingReader
from dxf2price.io.writer import ResultWriter

__all__ = [
    "DrawingReader",
    "ResultWriter",
]
