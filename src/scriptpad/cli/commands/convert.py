"""Block/text conversion commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpad.cli.formatters.base import OutputFormat
from scriptpad.cli.formatters.block_formatter import BlockFormatter
from scriptpad.cli.formatters.json_formatter import JsonFormatter
from scriptpad.cli.utils.cli_handler import CLIHandler, cli_command
from scriptpad.formatting.converter import blocks_to_text, text_to_blocks
from scriptpad.models.blocks import parse_blocks
from scriptpad.screenplay import Screenplay

console = Console()


@cli_command
def render_command(
    blocks_file: Annotated[
        Path,
        typer.Argument(help="JSON file holding a list of blocks ('-' for stdin)"),
    ],
) -> None:
    """Render stored blocks as screenplay text.

    Examples:
        scriptpad render scene.json
        echo '[{"type": "sceneHeading", "text": "INT. HOUSE - DAY"}]' | scriptpad render -
    """
    handler = CLIHandler(console)
    blocks = parse_blocks(json.loads(handler.read_input(blocks_file)))
    console.out(blocks_to_text(blocks), highlight=False)


@cli_command
def parse_command(
    text_file: Annotated[
        Path,
        typer.Argument(help="Screenplay text file ('-' for stdin)"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    table: Annotated[
        bool, typer.Option("--table", help="Show blocks as a table")
    ] = False,
) -> None:
    """Parse screenplay text into blocks."""
    handler = CLIHandler(console)
    blocks = text_to_blocks(handler.read_input(text_file))

    if json_output:
        output_format = OutputFormat.JSON
    elif table:
        output_format = OutputFormat.TABLE
    else:
        output_format = OutputFormat.TEXT
    BlockFormatter(console).print(blocks, output_format)


@cli_command
def export_command(
    screenplay_file: Annotated[
        Path,
        typer.Argument(help="Stored screenplay document (JSON, '-' for stdin)"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Render every scene of a stored screenplay document.

    The document has the shape
    {"id": ..., "screenplay": {"screenplayTitle": ...}, "scenes": {id: {"blocks": [...]}}}.
    """
    handler = CLIHandler(console)
    screenplay = Screenplay.from_stored(json.loads(handler.read_input(screenplay_file)))

    if json_output:
        console.out(JsonFormatter().format(screenplay), highlight=False)
        return

    console.out(screenplay.title.upper(), highlight=False)
    for scene in screenplay.scenes:
        console.out(f"\n--- {scene.id} ---\n{scene.content}", highlight=False)
