"""
Central constants for release-copier.

This module consolidates the constants used throughout the codebase
to eliminate magic numbers and strings.
"""

from .._version import __version__

# ============================================================================
# API and Network Constants
# ============================================================================

# Default REST endpoint (override for GitHub Enterprise Server)
DEFAULT_API_URL = "https://api.github.com"

# Host that receives release asset uploads on github.com
DEFAULT_UPLOADS_URL = "https://uploads.github.com"

GITHUB_API_VERSION = "2022-11-28"

USER_AGENT = f"release-copier/{__version__}"

# Default timeout for HTTP requests (seconds); asset transfers can be large
DEFAULT_TIMEOUT = 300.0

# Page size used when exhausting paginated collections
PER_PAGE = 100

# Chunk size bounds for streaming asset downloads (bytes)
MIN_CHUNK_SIZE = 8192
MAX_CHUNK_SIZE = 65536

# ============================================================================
# Copy Defaults
# ============================================================================

# Staging directory for downloaded asset files
DEFAULT_STAGING_DIR = "./files"

# Configuration file consulted when --config is not given
DEFAULT_CONFIG_PATH = "~/.config/release-copier/config.toml"

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_UPLOADS_URL",
    "GITHUB_API_VERSION",
    "USER_AGENT",
    "DEFAULT_TIMEOUT",
    "PER_PAGE",
    "MIN_CHUNK_SIZE",
    "MAX_CHUNK_SIZE",
    "DEFAULT_STAGING_DIR",
    "DEFAULT_CONFIG_PATH",
]
