"""scriptpad CLI commands."""

from __future__ import annotations

from scriptpad.cli.commands.convert import (
    export_command,
    parse_command,
    render_command,
)
from scriptpad.cli.commands.edit import insert_command, wrap_command

__all__ = [
    "export_command",
    "insert_command",
    "parse_command",
    "render_command",
    "wrap_command",
]
