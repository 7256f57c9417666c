"""Configuration settings for Isoline."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class MarchConfig(BaseModel):
    """Configuration for contour tracing."""

    levels: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Number of evenly spaced thresholds when none are given",
    )
    thresholds: list[float] | None = Field(
        default=None,
        description="Explicit thresholds to trace (overrides levels)",
    )
    frame_border: bool = Field(
        default=True,
        description="Force border samples above each threshold so every contour is closed",
    )
    close_border_cells: bool = Field(
        default=False,
        description="Run contours along the image edge where the border is above the threshold",
    )

    def resolve_thresholds(self, zmin: float, zmax: float) -> list[float]:
        """Get the thresholds to trace for a field spanning [zmin, zmax].

        Args:
            zmin: Smallest sample of the field
            zmax: Largest sample of the field

        Returns:
            Explicit thresholds if configured, otherwise `levels` values spread
            evenly from zmin to zmax inclusive
        """
        if self.thresholds is not None:
            return list(self.thresholds)

        if self.levels == 1:
            return [(zmin + zmax) / 2.0]

        step = (zmax - zmin) / (self.levels - 1)
        return [zmin + step * i for i in range(self.levels)]


class SimplifyConfig(BaseModel):
    """Configuration for polyline simplification."""

    enabled: bool = Field(
        default=True,
        description="Simplify contours after tracing",
    )
    epsilon: float = Field(
        default=1e-9,
        ge=0.0,
        description="Distance tolerance in grid units",
    )


class OutputConfig(BaseModel):
    """Configuration for SVG output."""

    stroke: str = Field(
        default="black",
        description="Stroke colour",
    )
    stroke_width: float = Field(
        default=0.5,
        gt=0.0,
        description="Stroke width in grid units",
    )
    fill: bool = Field(
        default=False,
        description="Fill each level with a colour interpolated between fill_low and fill_high",
    )
    fill_low: str = Field(
        default="#d37b47",
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Fill colour of the lowest level",
    )
    fill_high: str = Field(
        default="#2e8972",
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Fill colour of the highest level",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @model_validator(mode="after")
    def _normalize_levels(self) -> "LoggingConfig":
        self.log_level = self.log_level.upper()
        self.file_log_level = self.file_log_level.upper()
        return self


class IsolineSettings(BaseModel):
    """Main application settings."""

    march: MarchConfig = Field(default_factory=MarchConfig)
    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> IsolineSettings:
    """Get default application settings."""
    return IsolineSettings()
