"""Console output for the CLI.

Wraps rich so every command prints status lines and readings the same way.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.table import Table

from fng.domain.reading.model.value import SentimentReading, StoredReading


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None, quiet: bool = False) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Readings
    # -------------------------------------------------------------------------

    def reading(self, reading: SentimentReading, *, title: str | None = None) -> None:
        """Print a reading as a two-column table."""
        table = Table(title=title, show_header=False, box=None)
        table.add_column(style="cyan")
        table.add_column()

        table.add_row("Score", reading.score_text)
        table.add_row("Timestamp", reading.timestamp)
        table.add_row("Source", reading.source.value)
        if isinstance(reading, StoredReading) and reading.updated_at is not None:
            table.add_row("Updated", reading.updated_at.isoformat())

        self._console.print(table)


_console: Console | None = None


def get_console() -> Console:
    """Get the shared console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console
