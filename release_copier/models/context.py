"""Context and configuration models for release copy operations."""

from typing import List, Optional, Tuple

from pydantic import Field, field_validator

from ..utils.constants import DEFAULT_API_URL, DEFAULT_STAGING_DIR
from .base import CopierBaseModel


class RepositoryCoordinates(CopierBaseModel):
    """
    Location of a repository on the hosting service.

    Attributes:
        owner: User or organization owning the repository
        repo: Repository name
    """

    owner: str
    repo: str

    @field_validator("owner", "repo")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject empty coordinates."""
        if not v.strip():
            raise ValueError("Repository owner and name must not be empty")
        return v.strip()

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


class CopyJobConfig(CopierBaseModel):
    """
    Parameter set for one release-copier invocation.

    Built once at the process boundary and passed into the copy service; the
    copy logic never reads environment variables itself.

    Attributes:
        source_token: API token for the source repository
        source_owner: Source repository owner
        source_repo: Source repository name
        dest_token: API token for the destination repository
        dest_owner: Destination repository owner
        dest_repo: Destination repository name
        staging_dir: Local directory holding downloaded asset files
        release_tag: Tag of the single release to copy
        copy_all_releases: Copy every source release missing at the destination
        include_assets: Regex patterns selecting assets by name (None includes all)
        body_replace_regex: Regex applied to the release body
        body_replace_with: Replacement text (None deletes the matches)
        sort_by_semver: Order copy-all runs by semantic version instead of creation date
        api_url: REST API base URL
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
    """

    source_token: str = Field(repr=False)
    source_owner: str
    source_repo: str
    dest_token: str = Field(repr=False)
    dest_owner: str
    dest_repo: str
    staging_dir: str = DEFAULT_STAGING_DIR
    release_tag: Optional[str] = None
    copy_all_releases: bool = False
    include_assets: Optional[List[str]] = None
    body_replace_regex: Optional[str] = None
    body_replace_with: Optional[str] = None
    sort_by_semver: bool = True
    api_url: str = DEFAULT_API_URL
    debug: int = 0

    @field_validator("release_tag", "body_replace_regex", mode="before")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("include_assets", mode="before")
    @classmethod
    def split_patterns(cls, v):
        """Accept a whitespace separated string as well as a list of patterns."""
        if isinstance(v, str):
            return parse_asset_patterns(v)
        return v

    @property
    def source(self) -> RepositoryCoordinates:
        """Source repository coordinates."""
        return RepositoryCoordinates(owner=self.source_owner, repo=self.source_repo)

    @property
    def destination(self) -> RepositoryCoordinates:
        """Destination repository coordinates."""
        return RepositoryCoordinates(owner=self.dest_owner, repo=self.dest_repo)


def parse_repository(value: str) -> Tuple[str, str]:
    """
    Split an ``OWNER/REPO`` string.

    Args:
        value: Repository in ``owner/repo`` form

    Returns:
        Tuple of (owner, repo)

    Raises:
        ValueError: If the value is not in ``owner/repo`` form

    Example:
        >>> parse_repository("octo-org/octo-repo")
        ('octo-org', 'octo-repo')
    """
    owner, sep, repo = value.partition("/")
    if not sep or not owner or not repo:
        raise ValueError(f"Repository must be in format 'owner/repo', got '{value}'")
    return owner, repo


def parse_asset_patterns(value: Optional[str]) -> Optional[List[str]]:
    """
    Split a whitespace separated list of asset name patterns.

    Args:
        value: Patterns separated by spaces, tabs or newlines

    Returns:
        List of patterns, or None when no pattern is given (include all assets)
    """
    if not value:
        return None
    patterns = [p for p in value.split() if p]
    return patterns or None


__all__ = [
    "RepositoryCoordinates",
    "CopyJobConfig",
    "parse_repository",
    "parse_asset_patterns",
]
