"""
Upload operations for copying releases.

This module recreates a downloaded release at the destination repository and
uploads its staged asset files.
"""

import logging
import os
from typing import Optional

from ..exceptions import LocalIOError
from ..models.release import Release
from ..protocols import AssetTransport


def _read_staged_file(staging_dir: str, name: str) -> bytes:
    path = os.path.join(staging_dir, name)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise LocalIOError(f"Failed to read staged asset {path}: {e}") from e


def upload_release(
    transport: AssetTransport,
    owner: str,
    repo: str,
    tag: str,
    staging_dir: Optional[str],
    release: Release,
) -> None:
    """
    Create a release at the destination and upload its assets.

    The release body is used verbatim. Assets are uploaded in the order of
    ``release.assets``. Any failure stops the remaining uploads; the created
    release is left in place with the assets uploaded so far.

    Args:
        transport: Asset transport authenticated for the destination repository
        owner: Destination repository owner
        repo: Destination repository name
        tag: Tag for the new release
        staging_dir: Directory containing the asset files
        release: Release body and asset names to recreate

    Raises:
        TransportError: If creating the release or uploading an asset fails
        LocalIOError: If a staged asset file cannot be read
    """
    logging.info("Creating release: %s", tag)
    created = transport.create_release(owner, repo, tag, release.body)

    for asset_name in release.assets:
        logging.info("Uploading release asset: %s", asset_name)

        if not staging_dir:
            logging.warning("No input directory specified for asset: %s, skipping", asset_name)
            continue

        data = _read_staged_file(staging_dir, asset_name)
        transport.upload_release_asset(owner, repo, created.id, asset_name, data, upload_url=created.upload_url)


__all__ = ["upload_release"]
