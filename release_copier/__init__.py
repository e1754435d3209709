"""
Release Copier - Copy GitHub releases between repositories.

This package downloads a release (body text and binary assets) from a source
repository, optionally rewrites the body, and recreates the release with its
assets in a destination repository. A copy-all mode copies every source
release that the destination does not have yet, oldest first.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import GitHubClient, TokenAuth
from .exceptions import ConfigError, LocalIOError, NotFoundError, PatternError, ReleaseCopierError, TransportError
from .models import CopyJobConfig, CopyResult, Release
from .services import CopyService, copy_release
from .transfer import download_release, transform_body, upload_release
from .utils import setup_logging
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "GitHubClient",
    "TokenAuth",
    "ReleaseCopierError",
    "ConfigError",
    "LocalIOError",
    "NotFoundError",
    "PatternError",
    "TransportError",
    "CopyJobConfig",
    "CopyResult",
    "Release",
    "CopyService",
    "copy_release",
    "download_release",
    "transform_body",
    "upload_release",
    "setup_logging",
    "cli_main",
    "cli_group",
]
