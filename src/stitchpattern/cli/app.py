"""CLI application entry point for stitchpattern.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from stitchpattern import __version__
from stitchpattern.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_grid_info,
    print_header,
    print_image_info,
    print_palette,
    print_step,
    print_success,
    print_written,
)
from stitchpattern.config import (
    THREAD_PALETTE,
    FillShape,
    LoggingConfig,
    RenderConfig,
    StitchPatternSettings,
    StyleParameters,
    find_thread_color,
)
from stitchpattern.core import PatternPipeline
from stitchpattern.exceptions import (
    ExportError,
    ImageDecodeError,
    InvalidDimensionError,
    StitchPatternError,
)
from stitchpattern.io import ImageReader, PatternWriter
from stitchpattern.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="stitchpattern",
    help="Turn photos into cross-stitch silhouette patterns.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Stitchpattern[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def root(
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
    """Turn photos into cross-stitch silhouette patterns."""


@app.command()
def generate(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to the source photo",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for output files (default: beside the photo)",
        ),
    ] = None,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-w",
            help="Number of stitch columns",
            min=1,
        ),
    ] = 32,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            "-t",
            help="Cells darker than this luminance are stitched (0-255)",
            min=0,
            max=255,
        ),
    ] = 128,
    shape: Annotated[
        str,
        typer.Option(
            "--shape",
            "-s",
            help="Stitch marker shape (circle|square)",
        ),
    ] = "circle",
    outline: Annotated[
        float,
        typer.Option(
            "--outline",
            help="Outline offset; the stroke is twice this wide (0 = no outline)",
            min=0.0,
        ),
    ] = 0.0,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="DMC thread code (see 'stitchpattern palette')",
        ),
    ] = "310",
    svg: Annotated[
        bool,
        typer.Option("--svg/--no-svg", help="Write an SVG document"),
    ] = True,
    png: Annotated[
        bool,
        typer.Option("--png/--no-png", help="Write a PNG preview"),
    ] = True,
    preview_width: Annotated[
        int,
        typer.Option(
            "--preview-width",
            help="Width of the PNG preview in pixels",
            min=1,
        ),
    ] = 800,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show the grid statistics without writing files",
        ),
    ] = False,
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
) -> None:
    """Generate a stitch pattern from a photo.

    The photo is shrunk to the stitch grid, cells darker than the threshold
    become stitches, and an optional outline is traced around the
    silhouette.

    Example:
        stitchpattern generate cat.png --width 48 --outline 1

    This will create cat-pattern.svg and cat-pattern.png beside cat.png.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        fill_shape = FillShape(shape.lower())
    except ValueError:
        print_error(f"Invalid shape: {shape}", details="Valid values: circle, square")
        raise typer.Exit(code=1)

    thread = find_thread_color(color)
    if thread is None:
        print_error(
            f"Unknown thread colour: {color}",
            details="Valid codes: " + ", ".join(c.code for c in THREAD_PALETTE),
        )
        raise typer.Exit(code=1)

    if output_dir is not None and not output_dir.is_dir():
        print_error(f"Output directory not found: {output_dir}")
        raise typer.Exit(code=1)

    try:
        settings = StitchPatternSettings(
            style=StyleParameters(
                stitch_count_width=width,
                threshold=threshold,
                fill_shape=fill_shape,
                outline_offset=outline,
                color=thread,
            ),
            render=RenderConfig(preview_width=preview_width),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid parameters", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    pipeline = PatternPipeline(settings, logger=logger)
    start = time.perf_counter()

    try:
        if not quiet:
            print_step("Loading image")
        bitmap = ImageReader().read(input_image)
        if not quiet:
            print_image_info(str(input_image), bitmap.width, bitmap.height)
            print_step("Generating pattern")

        pattern = pipeline.generate(bitmap, settings.style)
        if not quiet:
            print_grid_info(
                width=pattern.width,
                height=pattern.height,
                stitches=pattern.stitch_count,
                contours=len(pattern.contours),
                color=pattern.style.color,
            )

        if dry_run:
            if not quiet:
                console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no files written")
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Writing")
        writer = PatternWriter()
        written: list[Path] = []
        if svg:
            written.append(
                writer.write_svg(
                    pipeline.export_svg(pattern),
                    _output_path(input_image, output_dir, ".svg"),
                )
            )
        if png:
            written.append(
                writer.write_png(
                    pipeline.render_preview(pattern, bitmap.aspect_ratio),
                    _output_path(input_image, output_dir, ".png"),
                )
            )

        if not quiet:
            for path in written:
                print_written(str(path), _format_file_size(path))
            print_success((time.perf_counter() - start) * 1000)

    except ImageDecodeError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except InvalidDimensionError as e:
        print_error(str(e), details="Try a larger --width for this image's aspect ratio.")
        raise typer.Exit(code=1)
    except ExportError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except StitchPatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def palette() -> None:
    """List the available thread colours."""
    print_palette(THREAD_PALETTE)


def _output_path(input_image: Path, output_dir: Path | None, suffix: str) -> Path:
    path = PatternWriter.get_pattern_path(input_image, suffix)
    if output_dir is None:
        return path
    return output_dir / path.name


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
