"""Shared pieces of the CLI output formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """How a command renders its result."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class OutputFormatter(ABC, Generic[T]):
    """Turns command results into printable text for one console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> str:
        """Render ``data`` as a string in ``format_type``."""

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> None:
        """Write the rendered result without markup, wrapping or highlighting.

        Screenplay text is column-indented, so anything rich would reflow or
        colour must be left alone.
        """
        self.console.out(self.format(data, format_type), highlight=False)
