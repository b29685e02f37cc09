"""Unified CLI handler for standardized error handling and input."""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from scriptpad.cli.formatters.json_formatter import JsonFormatter
from scriptpad.config import get_logger
from scriptpad.exceptions import ScriptpadError

logger = get_logger(__name__)

STDIN_MARKER = "-"


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use
        """
        logger.error(
            "Command failed",
            error_type=type(error).__name__,
            error=str(error),
            exit_code=exit_code,
        )

        if json_output:
            self.console.out(
                self.json_formatter.format_error_response(error, exit_code),
                highlight=False,
            )
        elif isinstance(error, ScriptpadError):
            self.console.print(f"[red]✗ {error.message}[/red]", highlight=False)
            if error.hint:
                self.console.print(f"[yellow]→ {error.hint}[/yellow]", highlight=False)
        elif isinstance(error, FileNotFoundError):
            self.console.print(f"[red]✗ File not found: {error}[/red]", highlight=False)
        else:
            self.console.print(f"[red]Error: {error}[/red]", highlight=False)

        raise typer.Exit(exit_code)

    def read_input(self, source: Path | str) -> str:
        """Read a text argument from a file, or from stdin for ``-``.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if str(source) == STDIN_MARKER:
            return sys.stdin.read()
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(str(path))
        return path.read_text(encoding="utf-8")


def cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator for CLI commands with standardized error handling."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except (ScriptpadError, OSError, ValueError) as e:
            CLIHandler().handle_error(e, kwargs.get("json_output", False))

    return wrapper
