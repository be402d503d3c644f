"""Read access to previously written asset files."""

from abc import ABC, abstractmethod
import asyncio
import logging
from pathlib import Path, PurePosixPath

import aiofiles

from install_assets.exceptions import AssetException

from .file import AssetFile

__all__ = ["FileFetcher", "DiskFileFetcher"]

_LOGGER = logging.getLogger(__name__)


class FileFetcher(ABC):
    """Interface for reading asset files from storage."""

    @abstractmethod
    async def fetch_by_pattern(self, pattern: str) -> list[AssetFile]:
        """Return every file whose relative path matches the glob pattern.

        Files are ordered by filename. No matching files is not an error and
        returns an empty list.
        """

    @abstractmethod
    async def fetch_by_name(self, name: str) -> AssetFile | None:
        """Return the file at the relative path, or None if it does not exist."""


class DiskFileFetcher(FileFetcher):
    """Reads asset files from a directory on the local filesystem."""

    def __init__(self, directory: Path) -> None:
        """Initialize DiskFileFetcher rooted at the asset directory."""
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """Root directory that filenames are relative to."""
        return self._directory

    async def _read(self, path: Path) -> AssetFile:
        filename = str(PurePosixPath(path.relative_to(self._directory)))
        try:
            async with aiofiles.open(str(path), mode="rb") as asset_file:
                data = await asset_file.read()
        except OSError as err:
            raise AssetException(f"Failed to read file {path}: {err}") from err
        return AssetFile(filename=filename, data=data)

    async def fetch_by_pattern(self, pattern: str) -> list[AssetFile]:
        """Return every file under the directory matching the glob pattern."""
        if not self._directory.is_dir():
            _LOGGER.debug("Asset directory %s does not exist", self._directory)
            return []
        paths = await asyncio.to_thread(
            lambda: sorted(p for p in self._directory.glob(pattern) if p.is_file())
        )
        _LOGGER.debug(
            "Found %d files matching %s in %s", len(paths), pattern, self._directory
        )
        return [await self._read(path) for path in paths]

    async def fetch_by_name(self, name: str) -> AssetFile | None:
        """Return the file at the relative path if it exists."""
        path = self._directory / name
        if not path.is_file():
            _LOGGER.debug("File %s not found in %s", name, self._directory)
            return None
        return await self._read(path)
