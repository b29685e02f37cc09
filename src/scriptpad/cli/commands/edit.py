"""Live-editing operations exposed as commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpad.cli.formatters.json_formatter import JsonFormatter
from scriptpad.cli.utils.cli_handler import CLIHandler, cli_command
from scriptpad.editor.insertion import insert_element
from scriptpad.editor.snippets import ElementKind
from scriptpad.editor.wrap import auto_wrap_dialogue

console = Console()


@cli_command
def wrap_command(
    text_file: Annotated[
        Path,
        typer.Argument(help="Screenplay text file ('-' for stdin)"),
    ],
    caret: Annotated[
        int | None,
        typer.Option("--caret", help="Caret offset to follow through the wrap"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Re-flow dialogue lines longer than the dialogue column."""
    handler = CLIHandler(console)
    text = handler.read_input(text_file)
    result = auto_wrap_dialogue(text)

    if json_output:
        data = {
            "text": result.text,
            "changed": result.changed,
            "delta": result.delta,
            "caret": result.map_offset(caret) if caret is not None else None,
        }
        console.out(JsonFormatter().format(data), highlight=False)
    else:
        console.out(result.text, highlight=False)


@cli_command
def insert_command(
    kind: Annotated[ElementKind, typer.Argument(help="Element to insert")],
    text_file: Annotated[
        Path,
        typer.Argument(help="Screenplay text file ('-' for stdin)"),
    ],
    start: Annotated[
        int | None,
        typer.Option("--start", help="Selection start (default: end of text)"),
    ] = None,
    end: Annotated[
        int | None,
        typer.Option("--end", help="Selection end (default: selection start)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Insert a placeholder element at the selection.

    Examples:
        scriptpad insert scene draft.txt
        scriptpad insert dialogue draft.txt --start 120 --json
    """
    handler = CLIHandler(console)
    content = handler.read_input(text_file)
    selection_start = len(content) if start is None else start
    selection_end = selection_start if end is None else end
    result = insert_element(kind, content, selection_start, selection_end)

    if json_output:
        data = {
            "content": result.content,
            "caret_start": result.caret_start,
            "caret_end": result.caret_end,
        }
        console.out(JsonFormatter().format(data), highlight=False)
    else:
        console.out(result.content, highlight=False)
