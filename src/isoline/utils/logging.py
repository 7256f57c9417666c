"""Logging utilities for Isoline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    level_count: int = 0
    empty_level_count: int = 0
    contour_count: int = 0
    closed_count: int = 0
    raw_point_count: int = 0
    point_count: int = 0
    level_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def reduction_percent(self) -> float:
        """Share of traced points removed by simplification."""
        if self.raw_point_count == 0:
            return 0.0
        return 100.0 * (1.0 - self.point_count / self.raw_point_count)

    @property
    def avg_level_time_ms(self) -> float | None:
        """Average time spent per level."""
        if not self.level_times_ms:
            return None
        return sum(self.level_times_ms) / len(self.level_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_isoline", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._isoline = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler._isoline = True  # type: ignore[attr-defined]
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("isoline")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_level_start(self, threshold: float) -> None:
        """Log start of tracing one threshold."""
        self._logger.debug("Tracing level", threshold=threshold)

    def log_level_complete(
        self,
        threshold: float,
        contours: int,
        closed: int,
        raw_points: int,
        points: int,
        duration_ms: float,
    ) -> None:
        """Log a traced threshold."""
        self._logger.info(
            "Level traced",
            threshold=threshold,
            contours=contours,
            closed=closed,
            raw_points=raw_points,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.level_count += 1
        self._stats.contour_count += contours
        self._stats.closed_count += closed
        self._stats.raw_point_count += raw_points
        self._stats.point_count += points
        self._stats.level_times_ms.append(duration_ms)
        if contours == 0:
            self._stats.empty_level_count += 1

    def log_field(self, width: int, height: int, zmin: float, zmax: float) -> None:
        """Log field dimensions and sample range."""
        self._logger.debug(
            "Field scanned",
            width=width,
            height=height,
            zmin=zmin,
            zmax=zmax,
        )

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
