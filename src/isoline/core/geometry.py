"""Geometric operations for contour tracing and simplification.

This module provides the numeric building blocks for:
- Edge interpolation (where a contour crosses a cell edge)
- Perpendicular distance (used by polyline simplification)
- Signed area calculation (shoelace formula, winding checks)
- Bounding boxes and polyline length

All functions are pure and accept any sequence of (x, y) pairs.
"""

import math
from collections.abc import Sequence


def fraction(z: float, z_range: tuple[float, float]) -> float:
    """Locate `z` along the interval `(z0, z1)` as a fraction in [0, 1].

    Used to interpolate where a contour crosses a cell edge whose endpoint
    samples are `z0` and `z1`.

    Args:
        z: Threshold value
        z_range: Samples at the two ends of the edge

    Returns:
        `(z - z0) / (z1 - z0)` clamped to [0, 1]. Returns 0.5 when
        `z0 == z1`, placing the crossing at the edge midpoint.

    Examples:
        >>> fraction(7.5, (5.0, 10.0))
        0.5
        >>> fraction(3.0, (3.0, 3.0))
        0.5
        >>> fraction(12.0, (5.0, 10.0))
        1.0
    """
    z0, z1 = z_range
    if z0 == z1:
        return 0.5

    t = (z - z0) / (z1 - z0)
    return min(1.0, max(0.0, t))


def perpendicular_distance(
    point: Sequence[float],
    start: Sequence[float],
    end: Sequence[float],
) -> float:
    """Calculate the distance from a point to the infinite line through two points.

    When `start == end` the line is undefined and the Euclidean distance
    between `point` and `start` is returned instead.

    Args:
        point: The point to measure
        start: First point on the line
        end: Second point on the line

    Returns:
        Non-negative distance

    Examples:
        >>> perpendicular_distance((1.0, 1.0), (0.0, 0.0), (2.0, 0.0))
        1.0
        >>> perpendicular_distance((3.0, 4.0), (0.0, 0.0), (0.0, 0.0))
        5.0
    """
    px, py = point[0], point[1]
    sx, sy = start[0], start[1]
    ex, ey = end[0], end[1]

    dx = ex - sx
    dy = ey - sy
    length = math.hypot(dx, dy)

    if length == 0.0:
        return math.hypot(px - sx, py - sy)

    return abs(dy * px - dx * py + ex * sy - ey * sx) / length


def is_closed(points: Sequence[Sequence[float]]) -> bool:
    """Check if a polyline ends exactly where it starts.

    Args:
        points: Polyline points

    Returns:
        True if there are at least two points and first == last
    """
    return len(points) > 1 and tuple(points[0]) == tuple(points[-1])


def signed_area(points: Sequence[Sequence[float]]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    A duplicated closing point contributes nothing, so closed and open
    representations of the same ring give the same result. In y-down grid
    coordinates, a positive area means the ring runs clockwise on screen.

    Args:
        points: Points forming the polygon boundary

    Returns:
        Signed area in square grid units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def bounding_box(points: Sequence[Sequence[float]]) -> tuple[float, float, float, float]:
    """Calculate bounding box of a polyline.

    Args:
        points: Polyline points

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zeros for an empty polyline
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def polyline_length(points: Sequence[Sequence[float]]) -> float:
    """Sum of the lengths of consecutive segments of a polyline."""
    return sum(
        math.hypot(b[0] - a[0], b[1] - a[1])
        for a, b in zip(points, points[1:], strict=False)
    )
