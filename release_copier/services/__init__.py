"""
Service layer for release-copier.

This package provides the high-level copy service used by the CLI.
"""

from .copy_service import CopyService, copy_release

__all__ = ["CopyService", "copy_release"]
