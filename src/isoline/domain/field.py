"""Scalar field abstraction.

A scalar field is anything that can report its grid dimensions and return a
sample at an integer grid position. This module defines:
- ScalarField: The protocol every field implements
- GridField: A field backed by a row-major grid of samples
- FunctionField: A procedural field evaluating a function on demand
- FramedField: A decorator forcing the outer ring of samples to a fixed value
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from isoline.exceptions import FieldShapeError, SampleOutOfBoundsError

# Added to the border value so framed border samples are strictly above it
BORDER_EPSILON = 1e-9


@runtime_checkable
class ScalarField(Protocol):
    """A rectangular grid of scalar samples.

    `sample` is only defined for `0 <= x < width` and `0 <= y < height`.
    Querying outside of that range is a programming error.
    """

    def dimensions(self) -> tuple[int, int]:
        """Return the (width, height) of the field."""
        ...

    def sample(self, x: int, y: int) -> float:
        """Return the value at grid position (x, y)."""
        ...


def _check_bounds(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise SampleOutOfBoundsError(x, y, width, height)


class GridField:
    """A field backed by row-major samples, indexed as `rows[y][x]`.

    Any nested sequence works, including lists of lists and 2D numpy arrays.

    Example:
        field = GridField([[0.0, 1.0], [1.0, 0.0]])
        field.sample(1, 0)  # 1.0
    """

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        """Initialize the grid field.

        Args:
            rows: Sample rows, all of the same length

        Raises:
            FieldShapeError: If the rows have different lengths
        """
        self._rows = rows
        self._height = len(rows)
        self._width = len(rows[0]) if self._height else 0

        for y, row in enumerate(rows):
            if len(row) != self._width:
                raise FieldShapeError(
                    f"row {y} has {len(row)} samples, expected {self._width}"
                )

    def dimensions(self) -> tuple[int, int]:
        return (self._width, self._height)

    def sample(self, x: int, y: int) -> float:
        _check_bounds(x, y, self._width, self._height)
        return float(self._rows[y][x])

    def __repr__(self) -> str:
        return f"GridField(width={self._width}, height={self._height})"


class FunctionField:
    """A procedural field that evaluates `func(x, y)` for every sample."""

    def __init__(self, width: int, height: int, func: Callable[[int, int], float]) -> None:
        if width < 0 or height < 0:
            raise FieldShapeError(f"negative dimensions {width}x{height}")
        self._width = width
        self._height = height
        self._func = func

    def dimensions(self) -> tuple[int, int]:
        return (self._width, self._height)

    def sample(self, x: int, y: int) -> float:
        _check_bounds(x, y, self._width, self._height)
        return float(self._func(x, y))

    def __repr__(self) -> str:
        return f"FunctionField(width={self._width}, height={self._height})"


class FramedField:
    """Decorator forcing every sample on the outer ring to `border_z + BORDER_EPSILON`.

    Marching a framed field at `border_z` guarantees that shapes touching the
    edge of the field are closed off, so every contour becomes a ring.

    Attributes:
        inner: The wrapped field
        border_z: Value the border samples are driven just above
    """

    def __init__(self, inner: ScalarField, border_z: float) -> None:
        self.inner = inner
        self.border_z = border_z

    def dimensions(self) -> tuple[int, int]:
        return self.inner.dimensions()

    def sample(self, x: int, y: int) -> float:
        width, height = self.inner.dimensions()
        _check_bounds(x, y, width, height)

        if x == 0 or x == width - 1 or y == 0 or y == height - 1:
            return self.border_z + BORDER_EPSILON
        return self.inner.sample(x, y)

    def __repr__(self) -> str:
        return f"FramedField(inner={self.inner!r}, border_z={self.border_z})"


def framed(field: ScalarField, border_z: float) -> FramedField:
    """Wrap a field so that its border samples sit just above `border_z`.

    Args:
        field: Field to wrap
        border_z: Border value, usually the threshold being traced

    Returns:
        FramedField with the same dimensions as `field`
    """
    return FramedField(field, border_z)


def field_range(field: ScalarField) -> tuple[float, float]:
    """Find the minimum and maximum sample of a field.

    Args:
        field: Field to scan

    Returns:
        Tuple of (zmin, zmax); (inf, -inf) for an empty field
    """
    width, height = field.dimensions()
    zmin = float("inf")
    zmax = float("-inf")

    for y in range(height):
        for x in range(width):
            z = field.sample(x, y)
            zmin = min(zmin, z)
            zmax = max(zmax, z)

    return (zmin, zmax)
