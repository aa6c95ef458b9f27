"""Main-shape resolution: picking the outer contour.

A drawing for a cut part is one outer contour with any number of openings
inside it. The resolver finds that outer contour by probing shape 0 against
every other shape until one contains the other, then checks that all shapes
are inside it.

Only shape 0 is compared with the others; two non-zero shapes are never
compared directly. The nesting check runs against a wall-clock budget and
stops early, flagging the result, when the budget is spent.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from dxf2price.domain import Shape
from dxf2price.exceptions import (
    GeometryKernelError,
    MainShapeNotFoundError,
    NestingViolationError,
)

DEFAULT_INCLUDES_CHECK_TIMEOUT_MS = 1000.0


@dataclass
class MainShapeResult:
    """Resolved outer contour.

    Attributes:
        main: The outer contour
        shapes: All shapes with the main shape first, others in input order
        skipped_includes_check: True if the nesting check ran out of time
    """

    main: Shape
    shapes: list[Shape]
    skipped_includes_check: bool = False


class MainShapeResolver:
    """Selects the outer contour and verifies nesting."""

    def __init__(
        self,
        timeout_ms: float = DEFAULT_INCLUDES_CHECK_TIMEOUT_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the resolver.

        Args:
            timeout_ms: Budget for the nesting check in milliseconds
            clock: Time source in seconds
        """
        self.timeout_ms = timeout_ms
        self._clock = clock

    def resolve(self, shapes: list[Shape]) -> MainShapeResult:
        """Pick the outer contour among measured shapes.

        Args:
            shapes: Measured shapes with polygons

        Returns:
            MainShapeResult with the main shape first

        Raises:
            MainShapeNotFoundError: If there are no shapes or no containment
                relation between shape 0 and any other shape
            NestingViolationError: If a shape lies outside the main shape
        """
        if not shapes:
            raise MainShapeNotFoundError("no shapes")

        if len(shapes) == 1:
            main = shapes[0]
            main.main = True
            return MainShapeResult(main=main, shapes=[main])

        try:
            main_index = self._find_main_index(shapes)
        except GeometryKernelError as e:
            raise MainShapeNotFoundError(str(e)) from e

        main = shapes[main_index]
        main.main = True
        ordered = [main] + [s for i, s in enumerate(shapes) if i != main_index]

        try:
            skipped = self._check_includes(main, ordered)
        except GeometryKernelError as e:
            raise MainShapeNotFoundError(str(e)) from e

        main.skipped_includes_check = skipped
        return MainShapeResult(main=main, shapes=ordered, skipped_includes_check=skipped)

    def _find_main_index(self, shapes: list[Shape]) -> int:
        """Find the outer contour by probing shape 0 against the others.

        Args:
            shapes: At least two measured shapes

        Returns:
            Index of the outer contour

        Raises:
            MainShapeNotFoundError: If no containment relation is found
        """
        first = shapes[0].polygon
        if first is None:
            raise MainShapeNotFoundError("shape 0 has no polygon")

        for index in range(1, len(shapes)):
            other = shapes[index].polygon
            if other is None:
                continue
            if first.contains(other):
                return 0
            if other.contains(first):
                return index

        raise MainShapeNotFoundError("no shape contains another")

    def _check_includes(self, main: Shape, ordered: list[Shape]) -> bool:
        """Verify every shape after the first lies inside the main shape.

        Args:
            main: The outer contour
            ordered: Shapes with the main shape first

        Returns:
            True if the check stopped early because the budget ran out

        Raises:
            NestingViolationError: If a shape is outside the main shape
        """
        started = self._clock()

        for index in range(1, len(ordered)):
            shape = ordered[index]
            if shape.polygon is None or not main.polygon.contains(shape.polygon):
                raise NestingViolationError(index)
            if (self._clock() - started) * 1000 > self.timeout_ms:
                return True

        return False
