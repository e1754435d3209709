"""Result models for release copy operations."""

from typing import List

from pydantic import Field

from .base import CopierBaseModel


class CopyResult(CopierBaseModel):
    """
    Outcome of a copy run.

    Attributes:
        copied: Tags copied to the destination, in processing order
        skipped: Tags skipped because the destination already had them
    """

    copied: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)

    def add_copied(self, tag: str) -> None:
        """Record a copied tag."""
        self.copied = self.copied + [tag]

    def add_skipped(self, tag: str) -> None:
        """Record a skipped tag."""
        self.skipped = self.skipped + [tag]

    @property
    def total(self) -> int:
        """Number of tags processed."""
        return len(self.copied) + len(self.skipped)


__all__ = ["CopyResult"]
