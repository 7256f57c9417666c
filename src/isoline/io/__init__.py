"""File I/O layer for isoline.

This module handles reading scalar fields from files and writing traced
contours as SVG. The core pipeline never depends on it.

Key responsibilities:
- Load grayscale heightmaps (via Pillow) and text grids
- Render processor results as SVG documents
- Derive default output paths

Key classes:
- HeightmapReader: Load fields from files
- SvgWriter: Save contours as SVG
"""

from isoline.io.reader import HeightmapReader
from isoline.io.writer import SvgDocument, SvgElement, SvgWriter

__all__ = [
    "HeightmapReader",
    "SvgDocument",
    "SvgElement",
    "SvgWriter",
]
