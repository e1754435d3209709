"""
GitHub REST API client for release and release asset operations.

This module provides the GitHubClient class, the single transport used by the
downloader, the uploader and the copy service. One client is created per
credential and injected; the copy logic never builds HTTP clients itself.

Key Features:
    - Bearer token authentication (TokenAuth)
    - Exhaustive Link-header pagination for collections
    - Streaming asset downloads straight to disk
    - Errors mapped to NotFoundError / TransportError carrying the remote
      status code and response payload
    - No retries of failed requests; connection retries stay in the transport
"""

# Standard library imports
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union
from urllib.parse import quote, urlparse

# Third-party imports
import httpx

# Local imports
from ..exceptions import LocalIOError, NotFoundError, TransportError
from ..models.github_api import AssetResponse, ReleaseResponse, ReleaseSummary
from ..utils import create_session_with_retry
from ..utils.constants import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_UPLOADS_URL,
    MAX_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    PER_PAGE,
)
from .auth import TokenAuth

# Strips the RFC 6570 template suffix of release upload URLs ("{?name,label}")
_URI_TEMPLATE_RE = re.compile(r"\{[^}]*\}$")


def _path(*segments: Union[str, int]) -> str:
    """Join URL path segments, percent-encoding each one (tags may contain '/', '#' or '%')."""
    return "/".join(quote(str(segment), safe="") for segment in segments)


def _response_data(response: httpx.Response) -> Any:
    """Return the parsed JSON payload of a response, or its text."""
    try:
        return response.json()
    except (ValueError, json.JSONDecodeError):
        return response.text or None


def _error_message(response: httpx.Response, operation: str) -> str:
    data = _response_data(response)
    detail = data.get("message") if isinstance(data, dict) else data
    if detail:
        return f"Failed to {operation}: {response.status_code} - {detail}"
    return f"Failed to {operation}: {response.status_code}"


def _chunk_size(response: httpx.Response) -> int:
    """Pick a streaming chunk size from the announced content length."""
    content_length = response.headers.get("content-length")
    if content_length and content_length.isdigit():
        # Larger chunks for bigger files, capped at MAX_CHUNK_SIZE
        return min(max(MIN_CHUNK_SIZE, int(content_length) // 100), MAX_CHUNK_SIZE)
    return MIN_CHUNK_SIZE


class GitHubClient:
    """
    A client for the release endpoints of the GitHub REST API.

    API documentation:
    - https://docs.github.com/en/rest/releases/releases
    - https://docs.github.com/en/rest/releases/assets
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        uploads_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            token: Pre-issued API token for this side of the copy
            api_url: REST API base URL (GitHub Enterprise: https://host/api/v3)
            uploads_url: Upload host; derived from api_url when not given
            timeout: Request timeout in seconds
            session: Optional preconfigured httpx.Client (tests)
        """
        self.api_url = api_url.rstrip("/")
        self.uploads_url = (uploads_url or self._default_uploads_url(self.api_url)).rstrip("/")
        self.timeout = timeout
        self._auth = TokenAuth(token, urlparse(self.api_url).hostname or "", urlparse(self.uploads_url).hostname or "")
        self.session = session or create_session_with_retry(timeout=timeout, auth=self._auth)
        logging.debug("GitHubClient initialized for %s", self.api_url)

    @staticmethod
    def _default_uploads_url(api_url: str) -> str:
        if api_url == DEFAULT_API_URL:
            return DEFAULT_UPLOADS_URL
        # GitHub Enterprise Server serves uploads under /api/uploads on the same host
        parsed = urlparse(api_url)
        return f"{parsed.scheme}://{parsed.netloc}/api/uploads"

    def close(self) -> None:
        """Close the session and release all connections."""
        self.session.close()
        logging.debug("GitHubClient session closed")

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    # ========================================================================
    # Request helpers
    # ========================================================================

    def _url(self, *segments: Union[str, int]) -> str:
        """Build a fully qualified API URL from path segments."""
        return f"{self.api_url}/{_path(*segments)}"

    def _check_response(self, response: httpx.Response, operation: str) -> None:
        """Raise NotFoundError or TransportError for unsuccessful responses."""
        if response.is_success:
            return

        message = _error_message(response, operation)
        data = _response_data(response)
        logging.debug("Client error during %s: %s - %s", operation, response.status_code, response.text)

        if response.status_code == 404:
            raise NotFoundError(message, status_code=404, response_data=data)
        raise TransportError(message, status_code=response.status_code, response_data=data)

    def _request(self, method: str, url: str, operation: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map failures to TransportError."""
        try:
            response = self.session.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to {operation}: {e}") from e
        self._check_response(response, operation)
        return response

    def _paginate(self, first_url: str, operation: str) -> Iterator[Dict[str, Any]]:
        """Yield every item of a paginated collection, following Link headers."""
        url: Optional[str] = first_url
        params: Optional[Dict[str, Any]] = {"per_page": PER_PAGE}
        page = 0

        while url:
            page += 1
            response = self._request("GET", url, f"{operation} (page {page})", params=params)
            yield from response.json()
            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

    # ========================================================================
    # Releases
    # ========================================================================

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> ReleaseResponse:
        """
        Get a published release by tag name.

        Raises:
            NotFoundError: If no release exists for the tag
            TransportError: For any other API failure
        """
        response = self._request(
            "GET", self._url("repos", owner, repo, "releases", "tags", tag), f"get release {tag} of {owner}/{repo}"
        )
        return ReleaseResponse.model_validate(response.json())

    def release_exists(self, owner: str, repo: str, tag: str) -> bool:
        """
        Check whether a release with the tag exists.

        Returns:
            True if the release exists, False if the API reports it as not found

        Raises:
            TransportError: For any failure other than "not found"
        """
        try:
            self.get_release_by_tag(owner, repo, tag)
        except NotFoundError:
            return False
        return True

    def list_releases(self, owner: str, repo: str) -> List[ReleaseSummary]:
        """List all releases of a repository, across every page."""
        items = self._paginate(self._url("repos", owner, repo, "releases"), f"list releases of {owner}/{repo}")
        return [ReleaseSummary.model_validate(item) for item in items]

    def create_release(self, owner: str, repo: str, tag: str, body: str) -> ReleaseResponse:
        """Create a release for the tag with the given body."""
        response = self._request(
            "POST",
            self._url("repos", owner, repo, "releases"),
            f"create release {tag} in {owner}/{repo}",
            json={"tag_name": tag, "body": body},
        )
        return ReleaseResponse.model_validate(response.json())

    # ========================================================================
    # Release assets
    # ========================================================================

    def list_release_assets(self, owner: str, repo: str, release_id: int) -> List[AssetResponse]:
        """List all assets of a release in listing order."""
        items = self._paginate(
            self._url("repos", owner, repo, "releases", release_id, "assets"),
            f"list assets of release {release_id}",
        )
        return [AssetResponse.model_validate(item) for item in items]

    def get_release_asset(self, owner: str, repo: str, asset_id: int) -> AssetResponse:
        """Get the metadata of a release asset."""
        response = self._request(
            "GET", self._url("repos", owner, repo, "releases", "assets", asset_id), f"get asset {asset_id}"
        )
        return AssetResponse.model_validate(response.json())

    def download_release_asset(self, owner: str, repo: str, asset_id: int, destination: Union[str, Path]) -> Path:
        """
        Stream the binary content of a release asset to a local file.

        An existing file at the destination is overwritten.

        Args:
            owner: Repository owner
            repo: Repository name
            asset_id: ID of the asset
            destination: File to write

        Returns:
            Path of the written file

        Raises:
            NotFoundError: If the asset does not exist
            TransportError: If the download fails
            LocalIOError: If the file cannot be written
        """
        url = self._url("repos", owner, repo, "releases", "assets", asset_id)
        path = Path(destination)
        logging.debug("Streaming asset %s to %s", asset_id, path)

        try:
            with self.session.stream("GET", url, headers={"Accept": "application/octet-stream"}) as response:
                if not response.is_success:
                    response.read()
                    self._check_response(response, f"download asset {asset_id}")
                chunk_size = _chunk_size(response)
                try:
                    with open(path, "wb") as f:
                        for chunk in response.iter_bytes(chunk_size=chunk_size):
                            f.write(chunk)
                except OSError as e:
                    raise LocalIOError(f"Failed to write asset {asset_id} to {path}: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to download asset {asset_id}: {e}") from e

        return path

    def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        name: str,
        data: bytes,
        upload_url: Optional[str] = None,
    ) -> AssetResponse:
        """
        Upload a file as a named asset of a release.

        Args:
            owner: Repository owner
            repo: Repository name
            release_id: ID of the release receiving the asset
            name: Asset file name
            data: File content
            upload_url: Upload URL template returned with the release, if known

        Returns:
            AssetResponse of the created asset
        """
        if upload_url:
            url = _URI_TEMPLATE_RE.sub("", upload_url)
        else:
            url = f"{self.uploads_url}/" + _path("repos", owner, repo, "releases", release_id, "assets")

        response = self._request(
            "POST",
            url,
            f"upload asset {name} to release {release_id}",
            params={"name": name},
            content=data,
            headers={"Content-Type": "application/octet-stream"},
        )
        return AssetResponse.model_validate(response.json())


__all__ = ["GitHubClient"]
