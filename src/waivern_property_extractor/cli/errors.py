"""CLI error handling for the property extractor."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing_extensions import override

import typer
from rich.console import Console
from rich.panel import Panel

logger = logging.getLogger(__name__)
console = Console()


class CLIError(Exception):
    """A command failed for a reason worth showing to the user.

    Wraps lower-level errors (missing lines, unreadable config, no property
    under the cursor) with the name of the command that hit them.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialise the error.

        Args:
            message: What went wrong
            command: Failing command ("extract" or "scan")
            original_error: Underlying exception, if any

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        """Return the message with the failing command, if known."""
        message = super().__str__()
        if self.command:
            return f"CLI command '{self.command}' failed: {message}"
        return message


def _show_error(title: str, error: CLIError) -> None:
    logger.error("%s: %s", title, error)
    console.print(Panel(f"[red]{error}[/red]", title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Report any failure inside the block as an error panel and exit 1.

    Args:
        command: Command name attached to errors that are not CLIError yet
        title: Panel title

    """
    try:
        yield
    except CLIError as e:
        _show_error(title, e)
        raise typer.Exit(1) from e
    except Exception as e:
        cli_error = CLIError(str(e), command=command, original_error=e)
        _show_error(title, cli_error)
        raise typer.Exit(1) from cli_error
