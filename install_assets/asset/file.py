"""File representation of asset output."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AssetFile:
    """A file produced by an asset.

    The filename is a path relative to the asset directory and identifies the
    file; the data is opaque to everything but the asset that produced it.
    """

    filename: str
    """Relative path of the file, using `/` as a separator."""

    data: bytes
    """Content of the file."""

    def __repr__(self) -> str:
        """Return a short representation without the file content."""
        return f"AssetFile(filename={self.filename!r}, size={len(self.data)})"
