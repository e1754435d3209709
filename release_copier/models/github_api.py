"""
Pydantic models for GitHub REST API responses.

Only the fields release-copier relies on are declared; the API returns many
more, which are kept as extra attributes.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


# ============================================================================
# Base Models
# ============================================================================


class GitHubBaseModel(BaseModel):
    """Base model for all GitHub API responses."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields from API


# ============================================================================
# Release Models
# ============================================================================


class ReleaseSummary(GitHubBaseModel):
    """Entry of a release listing, used to order copy-all runs."""

    tag_name: str
    created_at: Optional[datetime] = None

    @field_validator("created_at", mode="after")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Timestamps without an offset are taken as UTC."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ReleaseResponse(ReleaseSummary):
    """Response for a single release."""

    id: int
    tag_name: str = ""
    body: Optional[str] = None
    upload_url: Optional[str] = None

    @property
    def body_text(self) -> str:
        """Release body with a missing value normalized to empty text."""
        return self.body or ""


# ============================================================================
# Asset Models
# ============================================================================


class AssetResponse(GitHubBaseModel):
    """Response for a release asset."""

    id: int
    name: Optional[str] = None
    size: Optional[int] = None
    content_type: Optional[str] = None


__all__ = [
    "GitHubBaseModel",
    "ReleaseSummary",
    "ReleaseResponse",
    "AssetResponse",
]
