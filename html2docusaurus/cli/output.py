"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI status output.
Messages go to stderr so the converted Markdown can be piped from stdout.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

from html2docusaurus.models import StatsSnapshot

# (label, StatsSnapshot attribute) in display order
STATS_ROWS = (
    ("HTML lines", "html_lines"),
    ("Markdown lines", "markdown_lines"),
    ("Elements converted", "elements_converted"),
    ("Links found", "links_found"),
    ("Images found", "images_found"),
    ("Tables found", "tables_found"),
)


class OutputHandler:
    """Handles all terminal status output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console writing to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Converted page.html")
        >>> with handler.spinner("Fetching page..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_stats(self, stats: StatsSnapshot) -> None:
        """Display conversion statistics as a table.

        Args:
            stats: Statistics snapshot of a finished conversion
        """
        table = Table(title="Conversion Summary", show_header=False)
        table.add_column("Metric")
        table.add_column("Count", justify="right")
        for label, attribute in STATS_ROWS:
            table.add_row(label, str(getattr(stats, attribute)))
        self.console.print(table)
