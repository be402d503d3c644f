"""
The asset module defines the contract between an asset, its dependencies and
the storage its files are read from.

- Asset: declares dependencies and produces files by generating or loading.
- Parents: the resolved dependencies handed to `Asset.generate`.
- FileFetcher: read access to files written by a previous run.
- persist_to_file: writes the files of a materialized asset.
"""

from .asset import Asset, WritableAsset
from .fetcher import DiskFileFetcher, FileFetcher
from .file import AssetFile
from .parents import Parents
from .writer import persist_to_file

__all__ = [
    "Asset",
    "WritableAsset",
    "AssetFile",
    "Parents",
    "FileFetcher",
    "DiskFileFetcher",
    "persist_to_file",
]
