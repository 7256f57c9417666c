"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout isoline:
- Point: A 2D point in grid coordinates
- Segment: A directed boundary fragment inside a single grid cell
- Contour: An ordered sequence of points
- Contours: The contours traced for one threshold
"""

from typing import NamedTuple, TypeAlias


class Point(NamedTuple):
    """A point in grid space.

    Coordinates are fractional wherever a contour crosses a cell edge.
    Being a tuple, a Point compares equal to a plain `(x, y)` pair.

    Attributes:
        x: Column coordinate, growing to the right
        y: Row coordinate, growing downwards
    """

    x: float
    y: float


class Segment(NamedTuple):
    """A directed boundary fragment.

    Segments are oriented so that the area above the threshold always lies on
    the same side of the direction of travel.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point


Contour: TypeAlias = list[Point]
Contours: TypeAlias = list[Contour]
