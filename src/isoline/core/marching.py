"""Marching squares cell classification and segment emission.

Every 2x2 block of samples (a cell) is classified against the threshold into
one of 16 cases. Each case maps to zero, one or two directed segments joining
the points where the contour crosses the cell edges. Segments are oriented so
that the area above the threshold is on the left of the direction of travel
in y-down grid coordinates (counter-clockwise outer rings on screen).

Cell corner labels:

    ul ---- top ---- ur
    |                 |
   left             right
    |                 |
    bl --- bottom --- br
"""

import logging

from isoline.core.geometry import fraction
from isoline.core.stitcher import build_contours
from isoline.domain.contour import Contours, Point, Segment
from isoline.domain.field import ScalarField

logger = logging.getLogger(__name__)

TOP = "top"
BOTTOM = "bottom"
LEFT = "left"
RIGHT = "right"

# Case code -> directed (start edge, end edge) pairs.
# Bit 0: bl above, bit 1: br above, bit 2: ur above, bit 3: ul above.
# Saddles 5 and 10 always use the same two-segment decomposition.
CASE_SEGMENTS: dict[int, tuple[tuple[str, str], ...]] = {
    0: (),
    1: ((BOTTOM, LEFT),),
    2: ((RIGHT, BOTTOM),),
    3: ((RIGHT, LEFT),),
    4: ((TOP, RIGHT),),
    5: ((TOP, LEFT), (BOTTOM, RIGHT)),
    6: ((TOP, BOTTOM),),
    7: ((TOP, LEFT),),
    8: ((LEFT, TOP),),
    9: ((BOTTOM, TOP),),
    10: ((LEFT, BOTTOM), (RIGHT, TOP)),
    11: ((RIGHT, TOP),),
    12: ((LEFT, RIGHT),),
    13: ((BOTTOM, RIGHT),),
    14: ((LEFT, BOTTOM),),
    15: (),
}

SADDLE_CASES = frozenset({5, 10})


def classify_cell(ulz: float, urz: float, blz: float, brz: float, threshold: float) -> int:
    """Compute the 4-bit marching squares case of a cell.

    Args:
        ulz: Upper-left sample
        urz: Upper-right sample
        blz: Bottom-left sample
        brz: Bottom-right sample
        threshold: Contour value; samples strictly above it count as filled

    Returns:
        Case code in range 0-15
    """
    case = 0
    if blz > threshold:
        case |= 1
    if brz > threshold:
        case |= 2
    if urz > threshold:
        case |= 4
    if ulz > threshold:
        case |= 8
    return case


def _edge_point(
    edge: str,
    x: int,
    y: int,
    corners: tuple[float, float, float, float],
    threshold: float,
) -> Point:
    ulz, urz, blz, brz = corners
    if edge == TOP:
        return Point(x + fraction(threshold, (ulz, urz)), float(y))
    if edge == BOTTOM:
        return Point(x + fraction(threshold, (blz, brz)), float(y + 1))
    if edge == LEFT:
        return Point(float(x), y + fraction(threshold, (ulz, blz)))
    return Point(float(x + 1), y + fraction(threshold, (urz, brz)))


def cell_segments(
    case: int,
    x: int,
    y: int,
    corners: tuple[float, float, float, float],
    threshold: float,
) -> list[Segment]:
    """Build the directed segments of a classified cell.

    Args:
        case: Case code from classify_cell
        x: Cell column (column of its upper-left sample)
        y: Cell row (row of its upper-left sample)
        corners: Samples as (ul, ur, bl, br)
        threshold: Contour value

    Returns:
        Zero, one or two segments with interpolated endpoints
    """
    return [
        Segment(
            _edge_point(start, x, y, corners, threshold),
            _edge_point(end, x, y, corners, threshold),
        )
        for start, end in CASE_SEGMENTS[case]
    ]


def edge_segments(
    x: int,
    y: int,
    width: int,
    height: int,
    corners: tuple[float, float, float, float],
    threshold: float,
) -> list[Segment]:
    """Segments along the image edge over the filled part of a border cell.

    Each side of the cell lying on the field boundary contributes the stretch
    between its corners above the threshold and its edge crossing. Sides are
    walked with the filled area on the left (leftwards along the top,
    downwards along the left, rightwards along the bottom, upwards along the
    right), so the pieces join the cell's own segments and the neighbouring
    cells' pieces into closed rings.

    Args:
        x: Cell column
        y: Cell row
        width: Field width in samples
        height: Field height in samples
        corners: Samples as (ul, ur, bl, br)
        threshold: Contour value

    Returns:
        Zero to four segments; empty for cells off the outermost ring
    """
    ulz, urz, blz, brz = corners
    ul = Point(float(x), float(y))
    ur = Point(float(x + 1), float(y))
    bl = Point(float(x), float(y + 1))
    br = Point(float(x + 1), float(y + 1))

    sides = []
    if y == 0:
        sides.append((TOP, ur, urz, ul, ulz))
    if x == 0:
        sides.append((LEFT, ul, ulz, bl, blz))
    if y == height - 2:
        sides.append((BOTTOM, bl, blz, br, brz))
    if x == width - 2:
        sides.append((RIGHT, br, brz, ur, urz))

    segments = []
    for edge, start, start_z, end, end_z in sides:
        start_above = start_z > threshold
        end_above = end_z > threshold
        if start_above and end_above:
            segments.append(Segment(start, end))
        elif start_above:
            segments.append(Segment(start, _edge_point(edge, x, y, corners, threshold)))
        elif end_above:
            segments.append(Segment(_edge_point(edge, x, y, corners, threshold), end))
    return segments


def emit_segments(
    field: ScalarField,
    threshold: float,
    close_border_cells: bool = False,
) -> list[Segment]:
    """Classify every cell of a field and collect its boundary segments.

    Rows are scanned top to bottom while caching the current and next row of
    samples, so each sample is read from the field exactly once.

    Args:
        field: Field to scan
        threshold: Contour value
        close_border_cells: Also emit segments along the image edge where the
            border is above the threshold, closing regions cut by the edge

    Returns:
        Unordered list of directed segments
    """
    width, height = field.dimensions()
    segments: list[Segment] = []

    if width < 2 or height < 2:
        return segments

    current_row = [field.sample(x, 0) for x in range(width)]
    saddles = 0

    for y in range(height - 1):
        next_row = [field.sample(0, y + 1)]

        for x in range(width - 1):
            ulz = current_row[x]
            urz = current_row[x + 1]
            blz = next_row[x]
            brz = field.sample(x + 1, y + 1)
            next_row.append(brz)

            case = classify_cell(ulz, urz, blz, brz, threshold)
            corners = (ulz, urz, blz, brz)

            if case in SADDLE_CASES:
                saddles += 1

            segments.extend(cell_segments(case, x, y, corners, threshold))
            if close_border_cells:
                segments.extend(edge_segments(x, y, width, height, corners, threshold))

        current_row = next_row

    logger.debug(
        "Emitted %d segments (%d saddle cells) for %dx%d field at threshold %s",
        len(segments), saddles, width, height, threshold
    )
    return segments


def march(
    field: ScalarField,
    threshold: float,
    close_border_cells: bool = False,
) -> Contours:
    """Find the contours of a field at the given threshold.

    Args:
        field: Field to trace
        threshold: Contour value
        close_border_cells: See emit_segments

    Returns:
        Contours as ordered lists of points. Closed rings repeat their first
        point at the end; open chains start and end on the field boundary.

    Example:
        contours = march(framed(heightmap, 128.0), 128.0)
    """
    segments = emit_segments(field, threshold, close_border_cells=close_border_cells)
    return build_contours(segments, field.dimensions())
