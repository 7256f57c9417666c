"""Reassembly of directed segments into ordered contours.

Marching squares produces an unordered soup of segments. Stitching chains
them end-to-start into polylines. Segments are bucketed by their start point
rounded to the nearest grid position, so the continuation of a chain is found
with a dict lookup and a scan of a tiny bucket.

Chains are started from segments starting on the field boundary whenever one
exists, so open contours are traced from one end to the other instead of
being split into fragments.
"""

import logging
import math
from collections.abc import Iterable

from isoline.domain.contour import Contour, Contours, Point, Segment

logger = logging.getLogger(__name__)

Key = tuple[int, int]


def grid_key(point: Point) -> Key:
    """Round a point to the nearest grid position (halves round up)."""
    return (math.floor(point[0] + 0.5), math.floor(point[1] + 0.5))


class SegmentIndex:
    """Pending segments bucketed by rounded start point.

    Invariants:
    - No key maps to an empty bucket; emptied buckets are deleted.
    - `boundary_keys` holds exactly the bucket keys whose bucket contains a
      segment starting on the outer edge of the field, in insertion order.
      The edge test uses the exact start coordinates, never the rounded key.

    Example:
        index = SegmentIndex(segments, (width, height))
        segment = index.pop_start()
        following = index.pop_from(segment.end)
    """

    def __init__(self, segments: Iterable[Segment], dimensions: tuple[int, int]) -> None:
        """Index segments for a field of the given dimensions.

        Args:
            segments: Segments to index
            dimensions: (width, height) of the field the segments came from
        """
        self._width, self._height = dimensions
        self._buckets: dict[Key, list[Segment]] = {}
        # dict used as an insertion-ordered set
        self.boundary_keys: dict[Key, None] = {}
        self._size = 0

        for segment in segments:
            self.add(segment)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def is_boundary(self, point: Point) -> bool:
        """Check if a point lies exactly on the outer edge of the field."""
        x, y = point
        return x == 0 or x == self._width - 1 or y == 0 or y == self._height - 1

    def add(self, segment: Segment) -> None:
        """Add a pending segment."""
        key = grid_key(segment.start)
        self._buckets.setdefault(key, []).append(segment)
        if self.is_boundary(segment.start):
            self.boundary_keys.setdefault(key, None)
        self._size += 1

    def pop_start(self) -> Segment:
        """Remove and return a segment to start a new contour from.

        A segment starting exactly on the boundary is preferred, so open
        chains are traced from their first point. Otherwise the most recent
        segment of the oldest remaining bucket is used.

        Raises:
            KeyError: If the index is empty
        """
        if self.boundary_keys:
            key = next(iter(self.boundary_keys))
            bucket = self._buckets[key]
            i = next(
                i for i in range(len(bucket) - 1, -1, -1)
                if self.is_boundary(bucket[i].start)
            )
            return self._take(key, i)

        if not self._buckets:
            raise KeyError("pop_start from an empty SegmentIndex")

        key = next(iter(self._buckets))
        return self._take(key, len(self._buckets[key]) - 1)

    def pop_from(self, point: Point) -> Segment | None:
        """Remove and return the segment starting exactly at `point`.

        Args:
            point: Start point to match

        Returns:
            The matching segment, or None if no pending segment starts there
        """
        key = grid_key(point)
        bucket = self._buckets.get(key)
        if bucket is None:
            return None

        for i, segment in enumerate(bucket):
            if segment.start == point:
                return self._take(key, i)
        return None

    def _take(self, key: Key, i: int) -> Segment:
        bucket = self._buckets[key]
        segment = bucket.pop(i)
        self._size -= 1

        if key in self.boundary_keys and not any(self.is_boundary(s.start) for s in bucket):
            del self.boundary_keys[key]
        if not bucket:
            del self._buckets[key]

        return segment


def build_contours(segments: Iterable[Segment], dimensions: tuple[int, int]) -> Contours:
    """Chain directed segments into contours.

    Each segment is consumed exactly once. A contour ends when no pending
    segment starts at its last point; it is then either a closed ring (last
    point equals first) or an open chain.

    Args:
        segments: Directed segments in any order
        dimensions: (width, height) of the field, used to detect boundary starts

    Returns:
        Contours in the order they were completed
    """
    index = SegmentIndex(segments, dimensions)
    total = len(index)
    contours: Contours = []

    while index:
        first = index.pop_start()
        contour: Contour = [first.start, first.end]

        while (following := index.pop_from(contour[-1])) is not None:
            contour.append(following.end)

        contours.append(contour)

    logger.debug("Stitched %d segments into %d contours", total, len(contours))
    return contours
