"""Domain models for isoline.

This module contains the data contracts between the contour pipeline and its
callers. All models are designed to be:

- Cheap to create (tuples and plain lists for points and contours)
- Independent of any file format or rendering backend

Key classes:
- ScalarField: Protocol for anything that can be sampled on a grid
- GridField, FunctionField: Concrete fields
- FramedField: Border-forcing field decorator
- Point, Segment: Geometric primitives in grid space
- IsolineLevel: Contours traced for one threshold
"""

from isoline.domain.contour import Contour, Contours, Point, Segment
from isoline.domain.field import (
    BORDER_EPSILON,
    FramedField,
    FunctionField,
    GridField,
    ScalarField,
    field_range,
    framed,
)
from isoline.domain.level import IsolineLevel

__all__: list[str] = [
    "BORDER_EPSILON",
    # Type aliases
    "Contour",
    "Contours",
    # Fields
    "FramedField",
    "FunctionField",
    "GridField",
    "IsolineLevel",
    # Core types
    "Point",
    "ScalarField",
    "Segment",
    "field_range",
    "framed",
]
