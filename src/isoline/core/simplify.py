"""Polyline simplification with the Ramer-Douglas-Peucker algorithm.

Points that lie within `eps` of the chord joining the ends of their
sub-path are dropped. The recursion of the textbook algorithm is replaced by
an explicit stack of index ranges, so very long polylines cannot exhaust the
interpreter's call stack.

See https://en.wikipedia.org/wiki/Ramer%E2%80%93Douglas%E2%80%93Peucker_algorithm
"""

from collections.abc import Sequence
from typing import TypeVar

from isoline.core.geometry import is_closed, perpendicular_distance

DEFAULT_EPSILON = 1e-9

P = TypeVar("P", bound=Sequence[float])


def simplify(points: Sequence[P]) -> list[P]:
    """Simplify a polyline, dropping only points that add no detail.

    Uses an epsilon of 1e-9, so only (near) collinear points are removed.

    Args:
        points: Polyline points, open or closed

    Returns:
        New list with a subset of the input points, in order

    Examples:
        >>> simplify([(1, 1), (2, 2), (3, 3)])
        [(1, 1), (3, 3)]
    """
    return simplify_with_eps(points, DEFAULT_EPSILON)


def simplify_with_eps(points: Sequence[P], eps: float) -> list[P]:
    """Simplify a polyline with the given distance tolerance.

    A closed polyline (first point equal to last) has its closing point set
    aside, the remaining open path simplified and the closing point put back.
    The algorithm is undefined on a loop whose chord has zero length.

    Args:
        points: Polyline points, open or closed
        eps: Points farther than this from the chord of their sub-path are kept

    Returns:
        New list with a subset of the input points, in order
    """
    if len(points) < 2:
        return list(points)

    if is_closed(points):
        simplified = _rdp(points[:-1], eps)
        simplified.append(points[-1])
        return simplified

    return _rdp(points, eps)


def _rdp(points: Sequence[P], eps: float) -> list[P]:
    """Ramer-Douglas-Peucker on an open path using an explicit stack."""
    n = len(points)
    if n < 3:
        return list(points)

    keep = [False] * n
    keep[0] = True
    keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        start = points[first]
        end = points[last]
        farthest = first
        max_dist = -1.0

        for i in range(first + 1, last):
            dist = perpendicular_distance(points[i], start, end)
            if dist > max_dist:
                max_dist = dist
                farthest = i

        if max_dist > eps:
            keep[farthest] = True
            stack.append((farthest, last))
            stack.append((first, farthest))

    return [p for p, kept in zip(points, keep, strict=True) if kept]
