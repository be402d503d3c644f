"""Asset contract.

An asset is a unit of derived install configuration. It declares the kinds of
assets it depends on, and can produce its files in one of two ways:

- `generate`: compute the files from dependencies that were already resolved
  by the caller (see `install_assets.store.AssetStore`).
- `load`: reconstruct the same state from files previously written to disk.

An asset instance is materialized at most once, by whichever of the two paths
succeeds first. A failed attempt leaves the asset unmaterialized.
"""

from abc import ABC, abstractmethod
import logging
from typing import TYPE_CHECKING

from install_assets.exceptions import AssetStateError

from .file import AssetFile

if TYPE_CHECKING:
    from .fetcher import FileFetcher
    from .parents import Parents

__all__ = ["Asset", "WritableAsset"]

_LOGGER = logging.getLogger(__name__)


class Asset(ABC):
    """Base class for all assets."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human friendly name for the asset."""

    @abstractmethod
    def dependencies(self) -> list[type["Asset"]]:
        """Return the kinds of assets that must be resolved before `generate`.

        This is called before any resolution happens and must not depend on
        the state of the asset.
        """

    @abstractmethod
    def generate(self, parents: "Parents") -> None:
        """Generate the asset from its resolved dependencies."""

    @abstractmethod
    async def load(self, fetcher: "FileFetcher") -> bool:
        """Load the asset from previously written files.

        Returns False when the files are not present, in which case the
        caller is expected to generate the asset instead.
        """

    @property
    @abstractmethod
    def files(self) -> list[AssetFile]:
        """Return the files of the asset, empty until it is materialized."""

    def __str__(self) -> str:
        return self.name


class WritableAsset(Asset):
    """An asset whose state is a list of files that can be written to disk."""

    def __init__(self) -> None:
        """Initialize an unmaterialized asset."""
        self._files: list[AssetFile] | None = None

    @property
    def materialized(self) -> bool:
        """Return True once the asset was generated or loaded."""
        return self._files is not None

    @property
    def files(self) -> list[AssetFile]:
        """Return the files of the asset, empty until it is materialized."""
        return list(self._files or [])

    def _check_unmaterialized(self) -> None:
        """Assert the asset has not already been generated or loaded."""
        if self._files is not None:
            raise AssetStateError(f"Asset {self.name} was already materialized")

    def _materialize(self, files: list[AssetFile]) -> None:
        """Record the output of a successful generate or load."""
        self._check_unmaterialized()
        seen: set[str] = set()
        for file in files:
            if file.filename in seen:
                raise AssetStateError(
                    f"Asset {self.name} produced duplicate file {file.filename}"
                )
            seen.add(file.filename)
        _LOGGER.debug("Materialized %s with %d files", self.name, len(files))
        self._files = list(files)
