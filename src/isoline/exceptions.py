"""Exception hierarchy for Isoline."""


class IsolineError(Exception):
    """Base exception for all Isoline errors."""

    pass


class FieldError(IsolineError):
    """Errors related to scalar fields."""

    pass


class FieldShapeError(FieldError, ValueError):
    """Field samples do not form a rectangular grid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid field shape: {reason}")


class SampleOutOfBoundsError(FieldError, IndexError):
    """A field was sampled outside of its dimensions.

    This always signals a caller bug; fields never clamp coordinates.
    """

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Sample ({x}, {y}) is outside of field with dimensions {width}x{height}"
        )


class FieldLoadError(FieldError):
    """Error loading a field from a file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load field '{path}': {reason}")


class ContourError(IsolineError):
    """Error with contour data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RenderError(IsolineError):
    """Error writing contours to an output document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
