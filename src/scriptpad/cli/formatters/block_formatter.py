"""Block list output formatting."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table

from scriptpad.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpad.cli.formatters.json_formatter import JsonFormatter
from scriptpad.models.blocks import Block, dump_blocks


class BlockFormatter(OutputFormatter[Sequence[Block]]):
    """Format parsed blocks as a table, plain lines or JSON."""

    def format(
        self, data: Sequence[Block], format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(dump_blocks(data))
        return "\n".join(f"{block.type:<13} {block.text}" for block in data)

    def build_table(self, data: Sequence[Block]) -> Table:
        table = Table(title="Blocks", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Text")
        for i, block in enumerate(data, 1):
            table.add_row(str(i), block.type, block.text)
        return table

    def print(
        self, data: Sequence[Block], format_type: OutputFormat = OutputFormat.TEXT
    ) -> None:
        if format_type == OutputFormat.TABLE:
            self.console.print(self.build_table(data))
        else:
            super().print(data, format_type)
