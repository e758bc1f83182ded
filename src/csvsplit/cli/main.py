#!/usr/bin/env python3
"""
Main CLI Entry Point for the CSV Split Poster

Provides the csvsplit command group and its utility commands.
"""

import logging
import os

import click

from ..core.config import get_config
from ..core.errors import ConfigurationError
from ..core.json_utils import format_json


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    CSV Split Poster - post CSV transactions to YNAB as one split transaction.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["CSVSPLIT_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = get_config()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("csvsplit").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"CSV file: {config.csv_import.csv_path}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from csvsplit import __author__, __version__

    click.echo(f"CSV Split Poster v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration (access token redacted)."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(format_json(config_obj.to_dict()))


# Import post command
from .post import post  # noqa: E402

main.add_command(post)


if __name__ == "__main__":
    main()
