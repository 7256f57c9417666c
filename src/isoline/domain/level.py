"""Per-threshold results of the contour pipeline."""

from dataclasses import dataclass, field
from typing import Any

from isoline.domain.contour import Contour, Point
from isoline.exceptions import ContourError


@dataclass
class IsolineLevel:
    """Contours traced for a single threshold.

    Attributes:
        threshold: The value the contours were traced at
        contours: Traced (and possibly simplified) contours
        raw_point_count: Number of points before simplification
    """

    threshold: float
    contours: list[Contour] = field(default_factory=list)
    raw_point_count: int = 0

    @property
    def point_count(self) -> int:
        """Total number of points across all contours."""
        return sum(len(c) for c in self.contours)

    @property
    def closed_count(self) -> int:
        """Number of contours forming closed rings."""
        return sum(1 for c in self.contours if len(c) > 1 and c[0] == c[-1])

    def is_empty(self) -> bool:
        """Check if no contour was found at this threshold."""
        return not self.contours

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with threshold, contours and raw point count
        """
        return {
            "threshold": self.threshold,
            "contours": [[[p[0], p[1]] for p in c] for c in self.contours],
            "raw_point_count": self.raw_point_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IsolineLevel":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a level

        Returns:
            IsolineLevel instance

        Raises:
            ContourError: If a point does not have exactly two coordinates
        """
        contours: list[Contour] = []
        for raw in data["contours"]:
            contour: Contour = []
            for coords in raw:
                if len(coords) != 2:
                    raise ContourError(f"Expected 2 coordinates per point, got {len(coords)}")
                contour.append(Point(float(coords[0]), float(coords[1])))
            contours.append(contour)

        return cls(
            threshold=data["threshold"],
            contours=contours,
            raw_point_count=data.get("raw_point_count", 0),
        )
