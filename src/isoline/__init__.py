"""Isoline - Trace isocontours of scalar fields as vector polylines.

Isoline extracts the polylines where a sampled scalar function crosses a
threshold (marching squares), stitches the per-cell segments into ordered,
directed contours and simplifies them with Ramer-Douglas-Peucker.

Example:
    field = GridField([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    contours = [simplify(c) for c in march(field, 0.5)]

This yields a single closed diamond around the centre sample:
(1.5, 1.0) -> (1.0, 0.5) -> (0.5, 1.0) -> (1.0, 1.5) -> (1.5, 1.0).
"""

from isoline.core.marching import march
from isoline.core.simplify import simplify, simplify_with_eps
from isoline.domain.field import FramedField, FunctionField, GridField, ScalarField, framed

__version__ = "0.1.0"

__all__ = [
    "FramedField",
    "FunctionField",
    "GridField",
    "ScalarField",
    "__version__",
    "framed",
    "march",
    "simplify",
    "simplify_with_eps",
]
