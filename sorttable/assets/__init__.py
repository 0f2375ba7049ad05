"""Asset registry - tracks which stylesheets a rendered page must load."""

from .registry import AssetRegistry, get_asset_registry

__all__ = [
    "AssetRegistry",
    "get_asset_registry",
]
