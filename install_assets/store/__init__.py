"""
The store module resolves assets in dependency order.

- AssetStore resolves each asset kind exactly once, loading it from disk when
  possible and generating it from its dependencies otherwise.
- AssetStoreConfig holds the asset directory and resolution options.
"""

from .store import AssetStore, AssetStoreConfig

__all__ = [
    "AssetStore",
    "AssetStoreConfig",
]
