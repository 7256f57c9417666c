"""Heightmap reader for loading scalar fields from files.

This module provides the HeightmapReader class for loading grayscale images
and plain-text sample grids into GridField instances.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from isoline.domain.field import GridField
from isoline.exceptions import FieldLoadError, FieldShapeError

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff"})
TEXT_SUFFIXES = frozenset({".txt", ".csv"})


class HeightmapReader:
    """Loads heightmaps and sample grids as fields.

    Images are converted to 8-bit grayscale, so samples range from 0 to 255.
    Text grids hold one row of samples per line, separated by whitespace or
    commas; blank lines and lines starting with '#' are ignored.

    Example:
        reader = HeightmapReader(Path("terrain.png"))
        field = reader.load()
        width, height = field.dimensions()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the heightmap reader.

        Args:
            path: Path to an image or text grid
        """
        self._path = path

    @property
    def format(self) -> str:
        """Return the input format: 'image' or 'text'.

        Raises:
            FieldLoadError: If the file suffix is not supported
        """
        suffix = self._path.suffix.lower()
        if suffix in IMAGE_SUFFIXES:
            return "image"
        if suffix in TEXT_SUFFIXES:
            return "text"
        raise FieldLoadError(str(self._path), f"unsupported file type '{suffix}'")

    def load(self) -> GridField:
        """Load the file as a field.

        Returns:
            GridField with one sample per pixel or grid entry

        Raises:
            FileNotFoundError: If the file does not exist
            FieldLoadError: If the file cannot be decoded
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Heightmap file not found: {self._path}")

        if self.format == "image":
            rows = self._read_image()
        else:
            rows = self._read_text()

        try:
            return GridField(rows)
        except FieldShapeError as e:
            raise FieldLoadError(str(self._path), e.reason) from e

    def _read_image(self) -> list[list[float]]:
        try:
            with Image.open(self._path) as img:
                gray = img.convert("L")
        except (UnidentifiedImageError, OSError) as e:
            raise FieldLoadError(str(self._path), str(e)) from e

        width, height = gray.size
        pixels = gray.tobytes()
        return [
            [float(v) for v in pixels[y * width:(y + 1) * width]]
            for y in range(height)
        ]

    def _read_text(self) -> list[list[float]]:
        rows: list[list[float]] = []
        text = self._path.read_text(encoding="utf-8")

        for line_no, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                rows.append([float(v) for v in line.replace(",", " ").split()])
            except ValueError as e:
                raise FieldLoadError(str(self._path), f"line {line_no}: {e}") from e

        return rows
