"""
Pydantic models for release-copier.

This package contains all Pydantic models used in the application:
- github_api: Models for GitHub REST API responses
- base, release, context, results: Domain models
"""

# GitHub API Response Models
from .github_api import GitHubBaseModel, ReleaseSummary, ReleaseResponse, AssetResponse

# Domain Models
from .base import CopierBaseModel
from .release import Release
from .context import CopyJobConfig, RepositoryCoordinates, parse_asset_patterns, parse_repository
from .results import CopyResult

__all__ = [
    # GitHub API Models
    "GitHubBaseModel",
    "ReleaseSummary",
    "ReleaseResponse",
    "AssetResponse",
    # Domain Models
    "CopierBaseModel",
    "Release",
    "CopyJobConfig",
    "RepositoryCoordinates",
    "parse_asset_patterns",
    "parse_repository",
    "CopyResult",
]
