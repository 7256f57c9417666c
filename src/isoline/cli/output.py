"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from isoline.domain import IsolineLevel

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for level tracing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Isoline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_field_info(path: str, source_format: str, width: int, height: int) -> None:
    """Print field information.

    Args:
        path: Path to the input file
        source_format: Input format ("image" or "text")
        width: Field width in samples
        height: Field height in samples
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    line.append(f" ({source_format})")
    console.print(line)
    console.print(f"  {width:,} {SYM_DOT} {height:,} samples")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_levels_table(levels: list[IsolineLevel]) -> None:
    """Print a per-threshold breakdown.

    Args:
        levels: Traced levels
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Threshold", justify="right")
    table.add_column("Contours", justify="right")
    table.add_column("Closed", justify="right")
    table.add_column("Points", justify="right")

    for level in levels:
        table.add_row(
            f"{level.threshold:.4g}",
            str(len(level.contours)),
            str(level.closed_count),
            f"{level.raw_point_count:,} {SYM_STEP} {level.point_count:,}",
        )

    console.print(table)


def print_success(
    output_path: str,
    total_time_s: float,
    levels: int,
    contours: int,
    raw_points: int,
    points: int,
    avg_level_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        levels: Number of thresholds traced
        contours: Number of contours found
        raw_points: Points before simplification
        points: Points after simplification
        avg_level_time_ms: Average time per level in milliseconds, shown when given
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(
        f"  {levels} levels {SYM_DOT} {contours} contours {SYM_DOT} "
        f"{raw_points:,} {SYM_STEP} {points:,} points"
    )

    if avg_level_time_ms is not None:
        console.print(f"  {avg_level_time_ms:.1f}ms avg per level")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
