"""CLI output formatters."""

from scriptpad.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpad.cli.formatters.block_formatter import BlockFormatter
from scriptpad.cli.formatters.json_formatter import JsonFormatter

__all__ = ["BlockFormatter", "JsonFormatter", "OutputFormat", "OutputFormatter"]
