"""Drawing reader for loading DXF files.

This module provides the DrawingReader class for loading DXF drawings
and extracting their modelspace entities into domain models.
"""

from collections.abc import Iterator
from pathlib import Path

import ezdxf
from ezdxf.document import Drawing

from dxf2price.domain import Entity
from dxf2price.exceptions import DrawingLoadError
from dxf2price.io.converter import ezdxf_entity_to_domain


class DrawingReader:
    """Loads DXF drawings and extracts entities.

    Example:
        reader = DrawingReader(Path("part.dxf"))
        reader.load()
        entities = reader.read_entities()
    """

    def __init__(self, drawing_path: Path) -> None:
        """Initialize the drawing reader.

        Args:
            drawing_path: Path to the DXF file
        """
        self._drawing_path = drawing_path
        self._doc: Drawing | None = None

    def load(self) -> None:
        """Load the drawing file.

        Raises:
            FileNotFoundError: If the drawing file does not exist
            DrawingLoadError: If the file is not a readable DXF drawing
        """
        if not self._drawing_path.exists():
            raise FileNotFoundError(f"Drawing file not found: {self._drawing_path}")

        try:
            self._doc = ezdxf.readfile(str(self._drawing_path))
        except (OSError, UnicodeDecodeError, ezdxf.DXFError) as e:
            raise DrawingLoadError(str(self._drawing_path), str(e)) from e

    @property
    def dxf_version(self) -> str:
        """Return the DXF version of the loaded drawing (e.g. 'AC1015').

        Raises:
            RuntimeError: If the drawing has not been loaded yet
        """
        if self._doc is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")

        return self._doc.dxfversion

    def iter_entities(self) -> Iterator[Entity]:
        """Iterate over modelspace entities, converting to domain model.

        Yields entities in drawing order.

        Yields:
            Entity domain models

        Raises:
            RuntimeError: If the drawing has not been loaded yet
        """
        if self._doc is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")

        for dxf_entity in self._doc.modelspace():
            yield ezdxf_entity_to_domain(dxf_entity)

    def read_entities(self) -> list[Entity]:
        """Return all modelspace entities as a list."""
        return list(self.iter_entities())

    def close(self) -> None:
        """Release the loaded document."""
        self._doc = None

    def __enter__(self) -> "DrawingReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
