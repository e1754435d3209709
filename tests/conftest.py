"""
Test fixtures and mock data for release-copier tests.

This module provides common fixtures, a canned asset transport double and
utilities for testing the release-copier package.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

import pytest
import respx

from release_copier.exceptions import NotFoundError, TransportError
from release_copier.models import CopyJobConfig
from release_copier.models.github_api import AssetResponse, ReleaseResponse, ReleaseSummary


class FakeTransport:
    """
    In-memory AssetTransport returning canned responses.

    Attributes:
        releases: Release payloads by tag
        assets: Asset lists by release id
        contents: Asset bytes by asset id
        existing: Tags reported as existing by release_exists
        exists_error: Error raised by release_exists, if set
        calls: Ordered log of (operation, args) tuples
    """

    def __init__(self) -> None:
        self.releases: Dict[str, Dict[str, Any]] = {}
        self.assets: Dict[int, List[Dict[str, Any]]] = {}
        self.contents: Dict[int, bytes] = {}
        self.existing: Set[str] = set()
        self.exists_error: Optional[Exception] = None
        self.download_error: Optional[Exception] = None
        self.upload_error: Optional[Exception] = None
        self.created: List[Dict[str, Any]] = []
        self.uploaded: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []
        self._next_id = 1000

    # Setup helpers

    def add_release(
        self,
        tag: str,
        body: Optional[str] = "",
        assets: Optional[Dict[str, bytes]] = None,
        created_at: str = "2023-01-01T00:00:00Z",
    ) -> int:
        """Register a source release with named assets; returns the release id."""
        release_id = self._new_id()
        self.releases[tag] = {"id": release_id, "tag_name": tag, "body": body, "created_at": created_at}
        self.assets[release_id] = []
        for name, content in (assets or {}).items():
            asset_id = self._new_id()
            self.assets[release_id].append({"id": asset_id, "name": name})
            self.contents[asset_id] = content
        return release_id

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def operations(self, name: str) -> List[tuple]:
        """Return the logged calls of one operation."""
        return [call for call in self.calls if call[0] == name]

    # AssetTransport implementation

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> ReleaseResponse:
        self.calls.append(("get_release_by_tag", owner, repo, tag))
        if tag not in self.releases:
            raise NotFoundError(f"Failed to get release {tag}: 404 - Not Found", status_code=404)
        return ReleaseResponse.model_validate(self.releases[tag])

    def release_exists(self, owner: str, repo: str, tag: str) -> bool:
        self.calls.append(("release_exists", owner, repo, tag))
        if self.exists_error is not None:
            raise self.exists_error
        return tag in self.existing

    def list_releases(self, owner: str, repo: str) -> List[ReleaseSummary]:
        self.calls.append(("list_releases", owner, repo))
        return [ReleaseSummary.model_validate(r) for r in self.releases.values()]

    def list_release_assets(self, owner: str, repo: str, release_id: int) -> List[AssetResponse]:
        self.calls.append(("list_release_assets", owner, repo, release_id))
        return [AssetResponse(id=a["id"]) for a in self.assets.get(release_id, [])]

    def get_release_asset(self, owner: str, repo: str, asset_id: int) -> AssetResponse:
        self.calls.append(("get_release_asset", owner, repo, asset_id))
        for assets in self.assets.values():
            for asset in assets:
                if asset["id"] == asset_id:
                    return AssetResponse.model_validate(asset)
        raise NotFoundError(f"Failed to get asset {asset_id}: 404", status_code=404)

    def download_release_asset(self, owner: str, repo: str, asset_id: int, destination: Union[str, Path]) -> Path:
        self.calls.append(("download_release_asset", owner, repo, asset_id, str(destination)))
        if self.download_error is not None:
            raise self.download_error
        path = Path(destination)
        path.write_bytes(self.contents[asset_id])
        return path

    def create_release(self, owner: str, repo: str, tag: str, body: str) -> ReleaseResponse:
        self.calls.append(("create_release", owner, repo, tag, body))
        release_id = self._new_id()
        self.created.append({"id": release_id, "tag": tag, "body": body})
        return ReleaseResponse(id=release_id, tag_name=tag, body=body)

    def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        name: str,
        data: bytes,
        upload_url: Optional[str] = None,
    ) -> AssetResponse:
        self.calls.append(("upload_release_asset", owner, repo, release_id, name))
        if self.upload_error is not None:
            raise self.upload_error
        self.uploaded.append({"release_id": release_id, "name": name, "data": data})
        return AssetResponse(id=self._new_id(), name=name)


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def source_transport():
    """Canned transport for the source repository."""
    return FakeTransport()


@pytest.fixture
def dest_transport():
    """Canned transport for the destination repository."""
    return FakeTransport()


@pytest.fixture
def staging_dir(tmp_path):
    """Staging directory for downloaded assets."""
    path = tmp_path / "files"
    path.mkdir()
    return path


@pytest.fixture
def make_config(tmp_path):
    """Factory for CopyJobConfig with test defaults."""

    def _make(**overrides: Any) -> CopyJobConfig:
        values: Dict[str, Any] = {
            "source_token": "mock-source-api-key",
            "source_owner": "source-owner",
            "source_repo": "source-repo",
            "dest_token": "mock-dest-api-key",
            "dest_owner": "dest-owner",
            "dest_repo": "dest-repo",
            "staging_dir": str(tmp_path / "temp-test-dir"),
            "release_tag": "v1.0.0",
        }
        values.update(overrides)
        return CopyJobConfig(**values)

    return _make


@pytest.fixture
def rate_limit_error():
    """Non "not found" error as raised by the transport for rate limiting."""
    return TransportError(
        "Rate limit exceeded", status_code=429, response_data={"message": "API rate limit exceeded"}
    )
