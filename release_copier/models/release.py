"""Release transfer value passed between download, transform and upload."""

from typing import List

from pydantic import Field, field_validator

from .base import CopierBaseModel


class Release(CopierBaseModel):
    """
    Logical unit of transfer for one tag.

    Binary payloads are not held here; they live in the staging directory
    under the file names listed in ``assets``.

    Attributes:
        body: Release notes text (a missing body is normalized to "")
        assets: Asset file names in source listing order
    """

    body: str = ""
    assets: List[str] = Field(default_factory=list)

    @field_validator("body", mode="before")
    @classmethod
    def normalize_body(cls, v):
        """Treat a missing body as empty text."""
        return "" if v is None else v


__all__ = ["Release"]
