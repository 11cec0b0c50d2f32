"""
Rich UI renderer for think_tool.
Handles rendering of results, errors and status messages.
"""
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text


class RichRenderer:
    """
    Renderer for all console output.
    Plain text results are printed verbatim, without markup or highlighting.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the Rich renderer.

        Args:
            console: Optional Rich Console instance
        """
        self._console = console or Console()

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_output(self, output: str, output_format: str = "text") -> None:
        """
        Print a formatted result.

        Args:
            output: Formatted result text
            output_format: 'text' or 'json'
        """
        if output_format == "json" and self._console.is_terminal:
            self._console.print(Syntax(output, "json", word_wrap=True))
        else:
            self._console.print(Text(output), highlight=False)

    def print_error(self, message: str, title: str = "Error") -> None:
        """
        Print an error message.

        Args:
            message: Error message
            title: Error title
        """
        self._console.print(f"[bold red]✗ {title}[/bold red]")
        self._console.print(Text(message, style="bold red"))

    def print_info(self, message: str) -> None:
        """Print an informational line."""
        self._console.print(Text(message, style="dim"))

    def print_success(self, message: str) -> None:
        """Print a success line."""
        self._console.print(Text(message, style="bold green"))
