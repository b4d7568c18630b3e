"""Console-based output handler for SPConverter."""

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Rich Console-based output handler.

    Messages routinely carry file paths, which may contain square brackets,
    so message text is escaped before it is combined with markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(escape(message))

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]\\[!][/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {escape(message)}")
