"""Store that resolves assets and their dependencies.

The store is the only place where assets are resolved. Every asset kind is
resolved at most once per store: files written by a previous run are loaded
when present, otherwise the dependencies of the asset are resolved first and
the asset is generated from them.
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import TypeVar

from install_assets.asset import Asset, DiskFileFetcher, FileFetcher, Parents
from install_assets.context import trace_context
from install_assets.exceptions import (
    AssetDefect,
    AssetException,
    AssetStateError,
    DependencyException,
)

__all__ = ["AssetStore", "AssetStoreConfig"]

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=Asset)


@dataclass
class AssetStoreConfig:
    """Configuration for the AssetStore.

    Attributes:
        directory: Directory holding files written by previous runs.
        load_from_disk: If False, every asset is generated even when its files
            exist on disk.
    """

    directory: Path
    load_from_disk: bool = True

    def __post_init__(self) -> None:
        """Resolve the directory after initialization."""
        self.directory = Path(self.directory).expanduser().resolve()


class AssetStore:
    """Resolves assets, loading them from disk or generating them."""

    def __init__(
        self, config: AssetStoreConfig, fetcher: FileFetcher | None = None
    ) -> None:
        """Initialize the AssetStore.

        Args:
            config: The configuration for the store
            fetcher: Source of previously written files, defaults to reading
                from the configured directory.
        """
        self._config = config
        self._fetcher = fetcher or DiskFileFetcher(config.directory)
        self._registered: dict[type[Asset], Asset] = {}
        self._resolved: dict[type[Asset], Asset] = {}
        self._in_progress: list[type[Asset]] = []

    def add(self, asset: Asset) -> None:
        """Register a pre-configured asset instance to use for its kind.

        Kinds that are not registered are created with their no-argument
        constructor when first needed.
        """
        cls = type(asset)
        if cls in self._resolved:
            raise AssetStateError(f"Asset {asset.name} was already resolved")
        self._registered[cls] = asset

    def get(self, cls: type[T]) -> T | None:
        """Return the asset of the given kind if it was already resolved."""
        if (asset := self._resolved.get(cls)) is None:
            return None
        if not isinstance(asset, cls):
            raise AssetStateError(
                f"Asset {asset.name} is not of type {cls.__name__} (was {asset.__class__.__name__})"
            )
        return asset

    async def fetch(self, cls: type[T]) -> T:
        """Return the resolved asset of the given kind, resolving it if needed."""
        await self._fetch(cls)
        if (asset := self.get(cls)) is None:
            raise AssetStateError(f"Asset {cls.__name__} was not resolved")
        return asset

    def _instance(self, cls: type[Asset]) -> Asset:
        if (asset := self._registered.get(cls)) is not None:
            return asset
        try:
            return cls()
        except TypeError as err:
            raise DependencyException(
                cls.__name__, f"asset must be added to the store before use: {err}"
            ) from err

    async def _fetch(self, cls: type[Asset]) -> Asset:
        if (resolved := self._resolved.get(cls)) is not None:
            return resolved
        if cls in self._in_progress:
            chain = " -> ".join(c.__name__ for c in self._in_progress + [cls])
            raise DependencyException(cls.__name__, f"dependency cycle {chain}")
        asset = self._instance(cls)
        self._in_progress.append(cls)
        try:
            with trace_context(asset.name) as step:
                await self._resolve(asset)
        finally:
            self._in_progress.pop()
        _LOGGER.debug("Resolved %s in %0.3fs", step.label, step.elapsed)
        self._resolved[cls] = asset
        return asset

    async def _resolve(self, asset: Asset) -> None:
        if self._config.load_from_disk and await asset.load(self._fetcher):
            _LOGGER.info("Loaded %s from %s", asset.name, self._config.directory)
            return

        parents = Parents()
        for dependency in asset.dependencies():
            try:
                parents.add(await self._fetch(dependency))
            except (AssetDefect, DependencyException):
                raise
            except AssetException as err:
                raise DependencyException(
                    asset.name, f"failed to resolve {dependency.__name__}: {err}"
                ) from err

        _LOGGER.debug(
            "Generating %s from %s", asset.name, [parent.name for parent in parents]
        )
        asset.generate(parents)
        _LOGGER.info("Generated %s", asset.name)
