"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stitchpattern.config import ThreadColor

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Stitchpattern[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, width: int, height: int) -> None:
    """Print source image information.

    Args:
        image_path: Path to the photo
        width: Photo width in pixels
        height: Photo height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    console.print(line)
    console.print(f"  {width:,} {SYM_DOT} {height:,} px")


def print_grid_info(
    width: int,
    height: int,
    stitches: int,
    contours: int,
    color: ThreadColor,
) -> None:
    """Print generated grid statistics.

    Args:
        width: Stitch columns
        height: Stitch rows
        stitches: Number of stitched cells
        contours: Number of outline paths
        color: Thread colour
    """
    console.print(f"  {width} x {height} stitches {SYM_DOT} [green]{stitches:,}[/green] filled")
    console.print(f"  {contours} outline paths {SYM_DOT} {color.label} (DMC {color.code})")


def print_written(path: str, file_size: str) -> None:
    """Print one written output file."""
    line = Text(f"  {SYM_OK} ")
    line.append(path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)


def print_palette(colors: tuple[ThreadColor, ...]) -> None:
    """Print the thread palette as a table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Code")
    table.add_column("Name")
    table.add_column("Colour")
    for color in colors:
        table.add_row(color.code, color.label, f"[{color.hex_value}]██[/] {color.hex_value}")
    console.print(table)


def print_success(total_time_ms: float) -> None:
    """Print completion message."""
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {total_time_ms:.0f}ms")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
