"""Version information for release-copier."""

__version__ = "1.0.0"
