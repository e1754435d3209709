"""
Transfer operations for copying releases between repositories.

Modules:
    - download: Fetch a release and stream its included assets to the staging directory
    - upload: Recreate a release at the destination and upload the staged assets
    - body: Optional release body substitution
    - filters: Asset name inclusion filter
"""

from .body import transform_body
from .download import download_release
from .filters import AssetFilter, is_asset_included
from .upload import upload_release

__all__ = [
    "transform_body",
    "download_release",
    "AssetFilter",
    "is_asset_included",
    "upload_release",
]
