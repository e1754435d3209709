"""
Unified CLI entry point for release-copier using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import copy
from .._version import __version__
from ..utils.constants import DEFAULT_CONFIG_PATH


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="release-copier")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    envvar="RELEASE_COPIER_CONFIG",
    help=f"Path to TOML config file (default: {DEFAULT_CONFIG_PATH} if present)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Release Copier - Copy GitHub releases and their assets between repositories."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


cli.add_command(copy.copy)


def main() -> None:
    """Main entry point for the CLI."""
    # Click only re-raises Abort (Ctrl-C) outside standalone mode
    try:
        cli.main(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)


__all__ = ["cli", "main"]
