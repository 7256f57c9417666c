"""SVG writer for traced contours.

This module provides a minimal SVG document model and the SvgWriter class for
rendering processor results, one <path> element per threshold.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path
from xml.sax.saxutils import quoteattr

from isoline.config import OutputConfig
from isoline.core.processor import ProcessingResult
from isoline.exceptions import RenderError

SVG_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)


def format_number(value: float) -> str:
    """Format a coordinate without a trailing '.0' for whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class SvgElement:
    """A single self-closing SVG element.

    Attributes are written in sorted order so output is deterministic.
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.attributes: dict[str, str] = {}

    @classmethod
    def polyline(cls, points: Iterable[Sequence[float]]) -> "SvgElement":
        """Create a <polyline> through the given points."""
        return cls("polyline").set(
            "points",
            " ".join(f"{format_number(p[0])},{format_number(p[1])}" for p in points),
        )

    @classmethod
    def path(cls, contours: Iterable[Sequence[Sequence[float]]]) -> "SvgElement":
        """Create a <path> with one closed subpath per non-empty contour."""
        subpaths = []
        for contour in contours:
            if not contour:
                continue
            first, *rest = contour
            d = f"M {format_number(first[0])},{format_number(first[1])} "
            d += "".join(f"L {format_number(p[0])},{format_number(p[1])} " for p in rest)
            subpaths.append(d + "Z")

        return cls("path").set("d", " ".join(subpaths))

    @classmethod
    def rect(cls, origin: tuple[float, float], size: tuple[float, float]) -> "SvgElement":
        """Create a <rect> at `origin` with the given (width, height)."""
        return (
            cls("rect")
            .set("x", format_number(origin[0]))
            .set("y", format_number(origin[1]))
            .set("width", format_number(size[0]))
            .set("height", format_number(size[1]))
        )

    def fill(self, color: str) -> "SvgElement":
        """Set the fill colour."""
        return self.set("fill", color)

    def set(self, name: str, value: str) -> "SvgElement":
        """Set an attribute and return self for chaining."""
        self.attributes[name] = str(value)
        return self

    def to_string(self) -> str:
        attrs = "".join(
            f"{name}={quoteattr(value)} " for name, value in sorted(self.attributes.items())
        )
        return f"<{self.tag} {attrs}/>"

    def __str__(self) -> str:
        return self.to_string()


class SvgDocument:
    """An SVG document with a fixed viewBox.

    Example:
        doc = SvgDocument((0, 0, 200, 200))
        doc.push(SvgElement.polyline(contour).fill("none"))
        print(doc.to_string())
    """

    def __init__(self, viewbox: tuple[float, float, float, float]) -> None:
        self.viewbox = viewbox
        self.children: list[SvgElement] = []

    def push(self, element: SvgElement) -> "SvgDocument":
        """Append an element and return self for chaining."""
        self.children.append(element)
        return self

    def to_string(self) -> str:
        viewbox = " ".join(format_number(v) for v in self.viewbox)
        lines = [
            SVG_HEADER
            + f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" viewBox="{viewbox}">'
        ]
        lines.extend(child.to_string() for child in self.children)
        lines.append("</svg>")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()


def lerp_color(low: str, high: str, t: float) -> str:
    """Linearly interpolate between two '#rrggbb' colours.

    Args:
        low: Colour at t = 0
        high: Colour at t = 1
        t: Position in [0, 1]

    Returns:
        Interpolated '#rrggbb' colour

    Examples:
        >>> lerp_color("#000000", "#ffffff", 0.5)
        '#7f7f7f'
    """
    channels = []
    for i in (1, 3, 5):
        a = int(low[i:i + 2], 16)
        b = int(high[i:i + 2], 16)
        channels.append(int(a + (b - a) * t))
    return "#{:02x}{:02x}{:02x}".format(*channels)


class SvgWriter:
    """Renders processor results as SVG documents."""

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            config: Output styling (defaults to OutputConfig())
        """
        self.config = config or OutputConfig()

    def render(self, result: ProcessingResult) -> SvgDocument:
        """Build a document with one <path> per traced level.

        Filled documents draw levels from highest to lowest threshold, so
        each level paints over the area of the levels above it.
        """
        doc = SvgDocument((0.0, 0.0, float(result.width), float(result.height)))
        levels = [level for level in result.levels if not level.is_empty()]

        if self.config.fill:
            levels = sorted(levels, key=lambda level: level.threshold, reverse=True)

        count = len(levels)
        for i, level in enumerate(levels):
            element = (
                SvgElement.path(level.contours)
                .set("stroke", self.config.stroke)
                .set("stroke-width", format_number(self.config.stroke_width))
            )
            if self.config.fill:
                t = 1.0 - i / (count - 1) if count > 1 else 0.0
                element.fill(lerp_color(self.config.fill_low, self.config.fill_high, t))
            else:
                element.fill("none")
            doc.push(element)

        return doc

    def write(self, result: ProcessingResult, output_path: Path) -> Path:
        """Render and save a document.

        Args:
            result: Processor output
            output_path: Destination .svg file

        Returns:
            The path written

        Raises:
            RenderError: If the file cannot be written
        """
        doc = self.render(result)
        try:
            output_path.write_text(doc.to_string(), encoding="utf-8")
        except OSError as e:
            raise RenderError(str(output_path), str(e)) from e
        return output_path

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for an input heightmap.

        Args:
            input_path: Path to the input file

        Returns:
            Path with the same stem and an .svg suffix, next to the input

        Example:
            SvgWriter.get_output_path(Path("maps/terrain.png"))  # maps/terrain.svg
        """
        return input_path.with_suffix(".svg")
