"""CLI subcommands for the roomcost application."""

from roomcost.cli.commands.validate import validate_command

__all__ = ["validate_command"]
