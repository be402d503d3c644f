"""Write asset files to disk."""

import asyncio
import logging
from pathlib import Path

import aiofiles

from install_assets.exceptions import AssetException, AssetStateError

from .asset import Asset

__all__ = ["persist_to_file"]

_LOGGER = logging.getLogger(__name__)


async def persist_to_file(asset: Asset, directory: Path) -> list[Path]:
    """Write the files of a materialized asset under the directory.

    Returns the paths that were written.
    """
    if not (files := asset.files):
        raise AssetStateError(f"Asset {asset.name} has no files to write")
    written: list[Path] = []
    for file in files:
        path = Path(directory) / file.filename
        _LOGGER.debug("Writing %s (%d bytes)", path, len(file.data))
        try:
            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            async with aiofiles.open(str(path), mode="wb") as asset_file:
                await asset_file.write(file.data)
        except OSError as err:
            raise AssetException(f"Failed to write file {path}: {err}") from err
        written.append(path)
    _LOGGER.info("Wrote %d files for %s to %s", len(written), asset.name, directory)
    return written
