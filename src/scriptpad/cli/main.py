"""Main CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpad import __version__
from scriptpad.cli.commands import (
    export_command,
    insert_command,
    parse_command,
    render_command,
    wrap_command,
)
from scriptpad.cli.formatters.json_formatter import JsonFormatter
from scriptpad.cli.utils.cli_handler import CLIHandler
from scriptpad.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)
from scriptpad.exceptions import ScriptpadError

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptpad",
    help="Screenplay formatting engine: render, parse, wrap and insert elements",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="render")(render_command)
app.command(name="parse")(parse_command)
app.command(name="export")(export_command)
app.command(name="wrap")(wrap_command)
app.command(name="insert")(insert_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptpad version."""
    version_info = {
        "name": "scriptpad",
        "version": __version__,
        "description": "Screenplay formatting engine",
    }

    if json_output:
        console.out(JsonFormatter().format(version_info), highlight=False)
    else:
        console.print(f"scriptpad v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCRIPTPAD_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, object] = {}
    if debug:
        overrides.update(log_level="DEBUG", debug=True)
    elif verbose:
        overrides["log_level"] = "INFO"

    if not (config or overrides):
        return

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except (ScriptpadError, OSError, ValueError) as e:
        CLIHandler(console).handle_error(e)
        return

    set_settings(settings)
    configure_logging(settings)
    logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
