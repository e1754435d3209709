"""
Asset transport protocol for type safety.

This module defines the interface the downloader, the uploader and the copy
service depend on. GitHubClient implements it; tests substitute doubles that
return canned responses without any network.
"""

from pathlib import Path
from typing import List, Optional, Protocol, Union

from ..models.github_api import AssetResponse, ReleaseResponse, ReleaseSummary


class AssetTransport(Protocol):
    """
    Protocol defining the hosting API operations used to copy releases.

    Implementations raise NotFoundError when a release or asset does not exist
    and TransportError (carrying status code and payload) for other failures.
    """

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> ReleaseResponse:
        """Get a release by tag; raise NotFoundError if absent."""
        ...

    def release_exists(self, owner: str, repo: str, tag: str) -> bool:
        """Return whether a release exists; non "not found" errors propagate."""
        ...

    def list_releases(self, owner: str, repo: str) -> List[ReleaseSummary]:
        """List every release of a repository (all pages)."""
        ...

    def list_release_assets(self, owner: str, repo: str, release_id: int) -> List[AssetResponse]:
        """List the assets of a release in listing order."""
        ...

    def get_release_asset(self, owner: str, repo: str, asset_id: int) -> AssetResponse:
        """Get the metadata (display name) of an asset."""
        ...

    def download_release_asset(self, owner: str, repo: str, asset_id: int, destination: Union[str, Path]) -> Path:
        """Stream the content of an asset into a local file."""
        ...

    def create_release(self, owner: str, repo: str, tag: str, body: str) -> ReleaseResponse:
        """Create a release."""
        ...

    def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        name: str,
        data: bytes,
        upload_url: Optional[str] = None,
    ) -> AssetResponse:
        """Upload a named asset to a release."""
        ...


__all__ = ["AssetTransport"]
