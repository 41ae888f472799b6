"""Host-provided asset stores."""

from app_bootstrap.assets.base import AssetError, AssetStore, ResourceNotFound
from app_bootstrap.assets.registry import available_stores, get_asset_store

__all__ = [
    "AssetError",
    "AssetStore",
    "ResourceNotFound",
    "available_stores",
    "get_asset_store",
]
