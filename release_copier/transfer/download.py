"""
Download operations for copying releases.

This module fetches a release by tag from the source repository, applies the
asset inclusion filter and streams every included asset into the staging
directory.
"""

import logging
import os
from typing import Optional, Sequence

from ..exceptions import TransportError
from ..models.release import Release
from ..protocols import AssetTransport
from .filters import AssetFilter


def download_release(
    transport: AssetTransport,
    asset_filter: Optional[Sequence[str]],
    owner: str,
    repo: str,
    tag: str,
    staging_dir: Optional[str],
) -> Release:
    """
    Download a release and its included assets from the source repository.

    Files are written to ``staging_dir`` under the asset display name; a file
    left there by an earlier run is overwritten. When ``staging_dir`` is
    empty, only the metadata is collected.

    Args:
        transport: Asset transport authenticated for the source repository
        asset_filter: Regex patterns selecting assets by name (None includes all)
        owner: Source repository owner
        repo: Source repository name
        tag: Release tag
        staging_dir: Directory receiving the asset files

    Returns:
        Release with the source body and the included asset names in listing order

    Raises:
        NotFoundError: If the tag does not exist at the source
        TransportError: If fetching metadata or streaming an asset fails
        LocalIOError: If an asset file cannot be written
    """
    source_release = transport.get_release_by_tag(owner, repo, tag)
    logging.info("Fetched release with ID: %s", source_release.id)

    assets = transport.list_release_assets(owner, repo, source_release.id)
    logging.info("Release has %d assets", len(assets))

    name_filter = AssetFilter(asset_filter)
    included_assets = []

    for asset in assets:
        details = transport.get_release_asset(owner, repo, asset.id)
        file_name = details.name or ""

        if not file_name:
            logging.warning("Asset %s has no name, skipping", asset.id)
            continue

        if not name_filter.includes(file_name):
            logging.info("Ignoring asset: %s", file_name)
            continue

        included_assets.append(file_name)
        logging.info("Downloading asset: %s...", file_name)

        if staging_dir:
            _download_asset(transport, owner, repo, asset.id, os.path.join(staging_dir, file_name))
        else:
            logging.warning("No output directory specified, skipping file download")

    return Release(body=source_release.body_text, assets=included_assets)


def _download_asset(transport: AssetTransport, owner: str, repo: str, asset_id: int, path: str) -> None:
    """Stream one asset, naming the asset in any transport failure."""
    try:
        transport.download_release_asset(owner, repo, asset_id, path)
    except TransportError as e:
        raise type(e)(
            f"Error downloading asset: {asset_id}: {e}", status_code=e.status_code, response_data=e.response_data
        ) from e


__all__ = ["download_release"]
