"""Base models for release-copier."""

from pydantic import BaseModel, ConfigDict


class CopierBaseModel(BaseModel):
    """Base model for all release-copier domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["CopierBaseModel"]
