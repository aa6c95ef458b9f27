"""Exception hierarchy for dxf2price."""


class Dxf2PriceError(Exception):
    """Base exception for all dxf2price errors."""

    pass


class DrawingError(Dxf2PriceError):
    """Errors related to drawing loading."""

    pass


class DrawingLoadError(DrawingError):
    """Error loading a drawing file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read drawing '{path}': {reason}")


class GeometryKernelError(Dxf2PriceError):
    """The geometry kernel failed on a query (area, containment, distance)."""

    pass


class ShapeError(Dxf2PriceError):
    """Errors related to a single reconstructed shape.

    Shape errors never abort a run: the shape is dropped and the message is
    recorded in the result.
    """

    def __init__(self, reason: str, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        super().__init__(reason)


class ShapeBuildError(ShapeError):
    """The geometry kernel rejected the shape's primitive sequence."""

    def __str__(self) -> str:
        if self.index is None:
            return self.reason
        return f"Shape {self.index} has errors: {self.reason}"


class ShapeMeasureError(ShapeError):
    """Area or perimeter of a shape could not be computed."""

    def __init__(self, quantity: str, reason: str, index: int | None = None) -> None:
        self.quantity = quantity
        super().__init__(reason, index)

    def __str__(self) -> str:
        if self.index is None:
            return f"Can not compute {self.quantity}: {self.reason}"
        return f"Can not compute {self.quantity} of shape {self.index}: {self.reason}"


class MainShapeError(Dxf2PriceError):
    """File-level errors while resolving the outer contour."""

    pass


class MainShapeNotFoundError(MainShapeError):
    """No unambiguous outer contour could be selected."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__("Cannot determine main shape")


class NestingViolationError(MainShapeError):
    """A shape lies outside the selected outer contour."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__("Not all shapes are inside main shape")
