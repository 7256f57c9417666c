"""CLI application entry point for isoline.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from isoline import __version__
from isoline.cli.output import (
    console,
    create_progress,
    print_error,
    print_field_info,
    print_header,
    print_levels_table,
    print_step,
    print_success,
)
from isoline.config import (
    IsolineSettings,
    LoggingConfig,
    MarchConfig,
    OutputConfig,
    SimplifyConfig,
)
from isoline.core import ContourProcessor
from isoline.exceptions import FieldLoadError, IsolineError, RenderError
from isoline.io import HeightmapReader, SvgWriter

# Create the Typer app
app = typer.Typer(
    name="isoline",
    help="Trace isocontours of heightmaps and sample grids as SVG outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Isoline[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a grayscale image or a text grid of samples",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {name}.svg next to the input)",
        ),
    ] = None,
    levels: Annotated[
        int,
        typer.Option(
            "--levels",
            "-n",
            help="Number of evenly spaced thresholds over the sample range",
            min=1,
            max=1000,
        ),
    ] = 10,
    thresholds: Annotated[
        list[float] | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Explicit threshold to trace (repeatable, overrides --levels)",
        ),
    ] = None,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Simplification tolerance in grid units",
            min=0.0,
        ),
    ] = 1e-9,
    no_frame: Annotated[
        bool,
        typer.Option(
            "--no-frame",
            help="Do not force the border above each threshold (allows open contours)",
        ),
    ] = False,
    no_simplify: Annotated[
        bool,
        typer.Option(
            "--no-simplify",
            help="Keep every traced point",
        ),
    ] = False,
    close_border_cells: Annotated[
        bool,
        typer.Option(
            "--close-border-cells",
            help="Outline filled regions along the image edge",
        ),
    ] = False,
    fill: Annotated[
        bool,
        typer.Option(
            "--fill",
            help="Fill levels with a colour gradient",
        ),
    ] = False,
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            help="Stroke width in grid units",
            min=0.001,
        ),
    ] = 0.5,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace the contours of a heightmap and save them as SVG.

    Example:
        isoline terrain.png --levels 50

    This will create terrain.svg with 50 contour levels spread evenly between
    the lowest and highest sample.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(
            f"Input path is not a file: {input_path}",
            details="Please provide a path to an image or a text grid.",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = IsolineSettings(
        march=MarchConfig(
            levels=levels,
            thresholds=thresholds or None,
            frame_border=not no_frame,
            close_border_cells=close_border_cells,
        ),
        simplify=SimplifyConfig(
            enabled=not no_simplify,
            epsilon=epsilon,
        ),
        output=OutputConfig(
            fill=fill,
            stroke_width=stroke_width,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    output_path = output if output is not None else SvgWriter.get_output_path(input_path)

    try:
        if not quiet:
            print_step("Loading field")

        reader = HeightmapReader(input_path)
        source = reader.load()
        width, height = source.dimensions()

        if not quiet:
            print_field_info(str(input_path), reader.format, width, height)
            print_step("Tracing contours")

        processor = ContourProcessor(settings)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Tracing", total=None)

                def update_progress(completed: int, total: int, *_: object) -> None:
                    progress.update(task_id, completed=completed, total=total)

                result = processor.process(source, progress_callback=update_progress)
        else:
            result = processor.process(source)

        if verbose:
            print_levels_table(result.levels)

        SvgWriter(settings.output).write(result, output_path)

        if not quiet:
            stats = result.stats
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                levels=stats.level_count,
                contours=stats.contour_count,
                raw_points=stats.raw_point_count,
                points=stats.point_count,
                avg_level_time_ms=stats.avg_level_time_ms if verbose else None,
            )

    except FieldLoadError as e:
        print_error(f"Could not load field: {e.reason}")
        raise typer.Exit(code=1)
    except RenderError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except IsolineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
