"""Validate command for checking room configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from roomcost.application.config import ConfigError, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a room configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        roomcost validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(
        f"Configuration is valid: {config.room.length} x {config.room.width} x "
        f"{config.room.height} m, {len(config.layers)} layer(s)"
    )


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(f"    Line {line}, column {column}: {detail.get('message')}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
