"""Core processing algorithms for isoline.

This module contains the core algorithms for:

- Geometry operations (edge interpolation, perpendicular distance, area)
- Marching squares (cell classification, segment emission)
- Segment stitching (spatial index, boundary-first chaining)
- Polyline simplification (Ramer-Douglas-Peucker)
- Multi-level processing (thresholds, framing, statistics)

All algorithms are:
- Single-threaded and synchronous
- Pure (new outputs, no shared state between calls)

Key functions:
- march: Trace the contours of a field at one threshold
- emit_segments: Classify cells and emit directed segments
- build_contours: Chain segments into contours
- simplify, simplify_with_eps: Reduce a polyline
- fraction: Interpolate an edge crossing
- perpendicular_distance: Distance from a point to a line

Key classes:
- SegmentIndex: Pending segments bucketed by rounded start point
- ContourProcessor: Traces a field at several thresholds
"""

from isoline.core.geometry import (
    bounding_box,
    fraction,
    is_closed,
    perpendicular_distance,
    polyline_length,
    signed_area,
)
from isoline.core.marching import classify_cell, emit_segments, march
from isoline.core.processor import ContourProcessor, ProcessingResult
from isoline.core.simplify import DEFAULT_EPSILON, simplify, simplify_with_eps
from isoline.core.stitcher import SegmentIndex, build_contours

__all__ = [
    # Processor classes
    "ContourProcessor",
    "DEFAULT_EPSILON",
    "ProcessingResult",
    # Stitching
    "SegmentIndex",
    # Geometry functions
    "bounding_box",
    "build_contours",
    # Marching squares
    "classify_cell",
    "emit_segments",
    "fraction",
    "is_closed",
    "march",
    "perpendicular_distance",
    "polyline_length",
    "signed_area",
    # Simplification
    "simplify",
    "simplify_with_eps",
]
