"""
Copy service for high-level release copy operations.

This module orchestrates copying one release, or every release missing at
the destination, from the source repository: download, optional body
transformation, upload. Execution is strictly sequential and nothing is
retried; the first failure ends the run.
"""

import logging
import os
from typing import List, Optional

from ..exceptions import ConfigError, LocalIOError
from ..models.context import CopyJobConfig
from ..models.results import CopyResult
from ..protocols import AssetTransport
from ..transfer import download_release, transform_body, upload_release
from ..utils.versioning import sort_releases


class CopyService:
    """
    Drives release copies between two repositories.

    The two transports are injected so that each side keeps its own
    credential and tests can substitute doubles.
    """

    def __init__(self, config: CopyJobConfig, source: AssetTransport, destination: AssetTransport) -> None:
        """
        Initialize the copy service.

        Args:
            config: Job configuration
            source: Transport authenticated for the source repository
            destination: Transport authenticated for the destination repository
        """
        self.config = config
        self.source = source
        self.destination = destination

    def validate(self) -> None:
        """
        Check that exactly one of a release tag and copy-all mode is selected.

        Raises:
            ConfigError: If both or neither are set
        """
        if self.config.copy_all_releases and self.config.release_tag:
            raise ConfigError("Cannot specify both copyAllReleases and releaseTag. Choose one or the other.")
        if not self.config.copy_all_releases and not self.config.release_tag:
            raise ConfigError("Must specify either copyAllReleases or releaseTag.")

    def ensure_staging_dir(self) -> None:
        """
        Create the staging directory if it does not exist.

        The directory is not cleaned afterwards; files of earlier runs are
        overwritten by name.

        Raises:
            LocalIOError: If the directory cannot be created
        """
        staging_dir = self.config.staging_dir
        if not staging_dir or os.path.isdir(staging_dir):
            return
        try:
            os.makedirs(staging_dir, exist_ok=True)
        except OSError as e:
            raise LocalIOError(f"Failed to create staging directory {staging_dir}: {e}") from e
        logging.debug("Created staging directory %s", staging_dir)

    def run(self) -> CopyResult:
        """
        Copy the configured release, or every missing release in copy-all mode.

        Returns:
            CopyResult with the copied and skipped tags

        Raises:
            ConfigError: On an invalid mode selection (before any network call)
            NotFoundError: If a requested source release does not exist
            TransportError: On any other remote failure
            LocalIOError: On staging directory or staged file failures
        """
        self.validate()
        self.ensure_staging_dir()

        if self.config.copy_all_releases:
            return self.copy_all_releases()

        result = CopyResult()
        self.copy_release(self.config.release_tag)  # type: ignore[arg-type]
        result.add_copied(self.config.release_tag)  # type: ignore[arg-type]
        return result

    def copy_release(self, tag: str) -> None:
        """
        Copy one release: download, transform the body, upload.

        Args:
            tag: Release tag to copy
        """
        config = self.config

        release = download_release(
            self.source,
            config.include_assets,
            config.source_owner,
            config.source_repo,
            tag,
            config.staging_dir,
        )

        if config.body_replace_regex:
            release.body = transform_body(release.body, config.body_replace_regex, config.body_replace_with)

        upload_release(
            self.destination,
            config.dest_owner,
            config.dest_repo,
            tag,
            config.staging_dir,
            release,
        )

        logging.info("Completed copying release %s from %s to %s", tag, config.source, config.destination)

    def ordered_source_tags(self) -> List[str]:
        """List every source release tag in processing order (oldest first)."""
        config = self.config
        releases = self.source.list_releases(config.source_owner, config.source_repo)
        logging.info("Found %d releases in %s", len(releases), config.source)

        ordered = sort_releases(releases, by_semver=config.sort_by_semver)
        order_name = "semantic version" if config.sort_by_semver else "creation date"
        logging.debug("Releases sorted by %s: %s", order_name, [r.tag_name for r in ordered])
        return [r.tag_name for r in ordered]

    def copy_all_releases(self) -> CopyResult:
        """
        Copy every source release that does not exist at the destination.

        An existence check failing for any reason other than "not found"
        aborts the whole run. Releases copied before a failure stay copied.

        Returns:
            CopyResult with the copied and skipped tags
        """
        config = self.config
        result = CopyResult()

        for tag in self.ordered_source_tags():
            if self.destination.release_exists(config.dest_owner, config.dest_repo, tag):
                logging.info("Release %s already exists in %s, skipping", tag, config.destination)
                result.add_skipped(tag)
                continue

            logging.info("Processing release %s", tag)
            self.copy_release(tag)
            result.add_copied(tag)

        logging.info("Copied %d release(s), skipped %d existing", len(result.copied), len(result.skipped))
        return result


def copy_release(
    config: CopyJobConfig, source: AssetTransport, destination: Optional[AssetTransport] = None
) -> CopyResult:
    """
    Run a copy job.

    Args:
        config: Job configuration
        source: Transport for the source repository
        destination: Transport for the destination repository (defaults to source)

    Returns:
        CopyResult with the copied and skipped tags
    """
    return CopyService(config, source, destination or source).run()


__all__ = ["CopyService", "copy_release"]
