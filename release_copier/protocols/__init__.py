"""
Protocol definitions for release-copier.
"""

from .transport_protocol import AssetTransport

__all__ = ["AssetTransport"]
