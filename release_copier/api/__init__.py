"""
GitHub API client modules.

This package provides the client used as asset transport:
- Token authentication
- GitHub client for release and release asset operations
"""

from .auth import TokenAuth
from .github_client import GitHubClient

# Import GitHub API models for convenience
from ..models.github_api import AssetResponse, ReleaseResponse, ReleaseSummary

__all__ = [
    "TokenAuth",
    "GitHubClient",
    # API Models
    "AssetResponse",
    "ReleaseResponse",
    "ReleaseSummary",
]
