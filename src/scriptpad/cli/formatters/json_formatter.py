"""JSON output for scriptpad commands."""

from __future__ import annotations

import json
from typing import Any

from scriptpad.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Serialise command results and error envelopes as indented JSON."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Dump ``data``; pydantic models (screenplays, blocks) in JSON mode.

        Args:
            data: Model, mapping or list to serialise
            format_type: Ignored, the output is always JSON

        Returns:
            JSON string
        """
        if hasattr(data, "model_dump"):
            data = data.model_dump(mode="json")
        return json.dumps(data, default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Build the ``{"success": false, ...}`` envelope printed for ``--json``."""
        message = str(error) if isinstance(error, Exception) else error
        return json.dumps({"success": False, "error": message, "code": code}, indent=2)
