"""
Copy command for release-copier CLI.

This module provides the copy command, which copies one release (or every
missing release) between repositories. Options fall back to environment
variables, then to the configuration file, then to defaults.
"""

import logging
import sys
from typing import Any, List, Optional

import click
from pydantic import ValidationError

from ..api import GitHubClient
from ..exceptions import ConfigError, TransportError
from ..models.context import CopyJobConfig, parse_asset_patterns, parse_repository
from ..services import CopyService
from ..utils import ConfigManager, setup_logging
from ..utils.constants import DEFAULT_API_URL, DEFAULT_STAGING_DIR
from ..utils.error_handling import handle_generic_error, handle_transport_error


def _split_repository(value: Optional[str], flag: str) -> tuple:
    """Split an OWNER/REPO option value, exiting with an error if malformed."""
    if not value:
        return None, None
    try:
        return parse_repository(value)
    except ValueError:
        click.echo(f"Error: {flag} repository must be in format 'owner/repo'", err=True)
        sys.exit(1)


def _first(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def _include_patterns(cli_value: Optional[str], file_value: Any) -> Optional[List[str]]:
    if cli_value is not None:
        return parse_asset_patterns(cli_value)
    if isinstance(file_value, str):
        return parse_asset_patterns(file_value)
    return list(file_value) if file_value else None


@click.command("copy")
@click.argument("release_tag", required=False)
@click.option(
    "-a",
    "--all",
    "copy_all",
    is_flag=True,
    envvar="COPY_ALL_RELEASES",
    help="Copy all releases missing at the destination (oldest to newest)",
)
@click.option("-S", "--source", "source", help="Source repository (owner/repo format)")
@click.option("-D", "--dest", "dest", help="Destination repository (owner/repo format)")
@click.option("--source-owner", envvar="SOURCE_OWNER", help="Source repository owner")
@click.option("--source-repo", envvar="SOURCE_REPO", help="Source repository name")
@click.option("--dest-owner", envvar="DEST_OWNER", help="Destination repository owner")
@click.option("--dest-repo", envvar="DEST_REPO", help="Destination repository name")
@click.option("--source-api-key", envvar="SOURCE_API_KEY", help="API token for the source repository")
@click.option("--dest-api-key", envvar="DEST_API_KEY", help="API token for the destination repository")
@click.option(
    "-t",
    "--temp-dir",
    envvar="TEMP_DIR",
    help=f"Temporary directory for downloaded assets (default: {DEFAULT_STAGING_DIR})",
)
@click.option(
    "-i",
    "--include-assets",
    envvar="INCLUDE_ASSETS",
    help="Include assets matching any of these space-separated regex patterns (default: all assets)",
)
@click.option("-r", "--replace-regex", envvar="BODY_REPLACE_REGEX", help="Regex pattern to replace in release body")
@click.option(
    "-w",
    "--replace-with",
    envvar="BODY_REPLACE_WITH",
    help="Replacement text for the regex pattern (matches are removed when omitted)",
)
@click.option(
    "--sort-by-semver/--sort-by-date",
    "sort_by_semver",
    default=None,
    envvar="SORT_BY_SEMVER",
    help="Order copy-all runs by semantic version (default) or by creation date",
)
@click.option("--api-url", envvar="GITHUB_API_URL", help=f"GitHub REST API URL (default: {DEFAULT_API_URL})")
@click.pass_context
def copy(  # pylint: disable=too-many-arguments,too-many-locals
    ctx: click.Context,
    release_tag: Optional[str],
    copy_all: bool,
    source: Optional[str],
    dest: Optional[str],
    source_owner: Optional[str],
    source_repo: Optional[str],
    dest_owner: Optional[str],
    dest_repo: Optional[str],
    source_api_key: Optional[str],
    dest_api_key: Optional[str],
    temp_dir: Optional[str],
    include_assets: Optional[str],
    replace_regex: Optional[str],
    replace_with: Optional[str],
    sort_by_semver: Optional[bool],
    api_url: Optional[str],
) -> None:
    """Copy a GitHub release and its assets to another repository."""
    debug = ctx.obj["debug"]
    setup_logging(debug)

    try:
        file_config = ConfigManager(ctx.obj["config"])
        file_config.load()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # -S/-D take precedence over the separate owner/repo options
    s_owner, s_repo = _split_repository(source, "Source")
    d_owner, d_repo = _split_repository(dest, "Destination")

    values = {
        "source_token": _first(source_api_key, file_config.get("source.api_key")),
        "source_owner": _first(s_owner, source_owner, file_config.get("source.owner")),
        "source_repo": _first(s_repo, source_repo, file_config.get("source.repo")),
        "dest_token": _first(dest_api_key, file_config.get("destination.api_key")),
        "dest_owner": _first(d_owner, dest_owner, file_config.get("destination.owner")),
        "dest_repo": _first(d_repo, dest_repo, file_config.get("destination.repo")),
        "staging_dir": _first(temp_dir, file_config.get("copy.temp_dir"), DEFAULT_STAGING_DIR),
    }

    missing = [
        label
        for key, label in (
            ("source_token", "SOURCE_API_KEY environment variable"),
            ("source_owner", "source owner (-S)"),
            ("source_repo", "source repo (-S)"),
            ("dest_token", "DEST_API_KEY environment variable"),
            ("dest_owner", "destination owner (-D)"),
            ("dest_repo", "destination repo (-D)"),
            ("staging_dir", "temporary directory (-t)"),
        )
        if not values[key]
    ]
    if missing:
        click.echo("Error: Missing required parameters:", err=True)
        for label in missing:
            click.echo(f"  {label}", err=True)
        sys.exit(1)

    try:
        config = CopyJobConfig(
            **values,
            release_tag=release_tag,
            copy_all_releases=copy_all or bool(file_config.get("copy.all_releases", False)),
            include_assets=_include_patterns(include_assets, file_config.get("copy.include_assets")),
            body_replace_regex=_first(replace_regex, file_config.get("copy.body_replace_regex")),
            body_replace_with=_first(replace_with, file_config.get("copy.body_replace_with")),
            sort_by_semver=_first(sort_by_semver, file_config.get("copy.sort_by_semver"), True),
            api_url=_first(api_url, file_config.get("api_url"), DEFAULT_API_URL),
            debug=debug,
        )
    except ValidationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    source_client = GitHubClient(config.source_token, api_url=config.api_url)
    dest_client = GitHubClient(config.dest_token, api_url=config.api_url)

    try:
        if config.copy_all_releases:
            logging.info("Mode: Copy all releases")
        else:
            logging.info("Mode: Copy single release (%s)", config.release_tag)

        result = CopyService(config, source_client, dest_client).run()
        logging.info("Copied: %s", ", ".join(result.copied) or "none")
        if result.skipped:
            logging.info("Skipped (already present): %s", ", ".join(result.skipped))

        click.echo("Action completed successfully.")

    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except TransportError as e:
        handle_transport_error(e, "release copy")
        sys.exit(1)
    except Exception as e:  # pylint: disable=broad-except
        handle_generic_error(e, "release copy")
        sys.exit(1)
    finally:
        source_client.close()
        dest_client.close()


__all__ = ["copy"]
