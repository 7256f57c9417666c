"""Multi-level contour processing pipeline.

This module coordinates tracing one field at many thresholds: choosing the
thresholds, optionally framing the field at each of them, marching, and
simplifying every contour.

Key components:
- ProcessingResult: Levels traced for one field plus statistics
- ContourProcessor: Main orchestrator class
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from isoline.config import IsolineSettings
from isoline.core.marching import march
from isoline.core.simplify import simplify_with_eps
from isoline.domain import IsolineLevel, ScalarField, field_range, framed
from isoline.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass
class ProcessingResult:
    """Output of ContourProcessor.process.

    Attributes:
        width: Field width in samples
        height: Field height in samples
        levels: One entry per threshold, in tracing order
        stats: Counts and timing for the run
    """

    width: int
    height: int
    levels: list[IsolineLevel] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    @property
    def contour_count(self) -> int:
        """Total number of contours over all levels."""
        return sum(len(level.contours) for level in self.levels)


class ContourProcessor:
    """Orchestrates tracing a field at several thresholds.

    Manages the complete workflow:
    1. Resolve thresholds (explicit, or evenly spaced over the field range)
    2. Frame the field at each threshold if configured
    3. March the field into contours
    4. Simplify each contour if configured
    5. Collect per-level results and statistics

    Example:
        settings = IsolineSettings()
        processor = ContourProcessor(settings)
        result = processor.process(GridField(rows))
    """

    def __init__(self, config: IsolineSettings) -> None:
        """Initialize contour processor with configuration.

        Args:
            config: Isoline settings containing march and simplify config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )

    def trace_level(self, source: ScalarField, threshold: float) -> IsolineLevel:
        """Trace a single threshold.

        Args:
            source: Field to trace
            threshold: Contour value

        Returns:
            IsolineLevel with the (possibly simplified) contours
        """
        march_config = self.config.march
        target = framed(source, threshold) if march_config.frame_border else source

        contours = march(
            target,
            threshold,
            close_border_cells=march_config.close_border_cells,
        )
        raw_point_count = sum(len(c) for c in contours)

        if self.config.simplify.enabled:
            eps = self.config.simplify.epsilon
            contours = [simplify_with_eps(c, eps) for c in contours]

        return IsolineLevel(
            threshold=threshold,
            contours=contours,
            raw_point_count=raw_point_count,
        )

    def process(
        self,
        source: ScalarField,
        thresholds: Sequence[float] | None = None,
        progress_callback: Callable[[int, int, float], None] | None = None,
    ) -> ProcessingResult:
        """Trace a field at every configured threshold.

        Args:
            source: Field to trace
            thresholds: Thresholds to trace (defaults to the configured ones)
            progress_callback: Optional callback(completed, total, threshold)
                for progress updates

        Returns:
            ProcessingResult with one level per threshold
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        width, height = source.dimensions()

        if thresholds is None:
            zmin, zmax = field_range(source)
            processing_logger.log_field(width, height, zmin, zmax)
            if width == 0 or height == 0:
                thresholds = []
            else:
                thresholds = self.config.march.resolve_thresholds(zmin, zmax)

        self.logger.info(
            "Starting contour processing",
            width=width,
            height=height,
            levels=len(thresholds),
            frame_border=self.config.march.frame_border,
            simplify=self.config.simplify.enabled,
        )

        result = ProcessingResult(width=width, height=height, stats=stats)
        total = len(thresholds)

        for completed, threshold in enumerate(thresholds, start=1):
            processing_logger.log_level_start(threshold)
            level_start = time.time()

            level = self.trace_level(source, threshold)

            processing_logger.log_level_complete(
                threshold=threshold,
                contours=len(level.contours),
                closed=level.closed_count,
                raw_points=level.raw_point_count,
                points=level.point_count,
                duration_ms=(time.time() - level_start) * 1000,
            )
            result.levels.append(level)

            if progress_callback is not None:
                progress_callback(completed, total, threshold)

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            levels=stats.level_count,
            contours=stats.contour_count,
            points=stats.point_count,
            reduction_percent=round(stats.reduction_percent, 1),
            duration_s=round(stats.duration_seconds, 3),
        )

        return result
