"""Registry of resolved dependencies handed to an asset."""

from collections.abc import Iterator
import logging
from typing import TypeVar

from install_assets.exceptions import DependencyException

from .asset import Asset

__all__ = ["Parents"]

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=Asset)


class Parents:
    """Resolved dependencies of an asset, keyed by asset kind.

    An asset only ever reads from its parents, it does not modify them.
    """

    def __init__(self, assets: list[Asset] | None = None) -> None:
        """Initialize Parents with already resolved assets."""
        self._assets: dict[type[Asset], Asset] = {}
        for asset in assets or []:
            self.add(asset)

    def add(self, asset: Asset) -> None:
        """Add a resolved asset, replacing any asset of the same kind."""
        _LOGGER.debug("Adding parent %s", asset.name)
        self._assets[type(asset)] = asset

    def get(self, cls: type[T]) -> T:
        """Return the resolved asset of the given kind."""
        if (asset := self._assets.get(cls)) is None:
            raise DependencyException(
                cls.__name__, "dependency was not resolved before use"
            )
        if not isinstance(asset, cls):
            raise DependencyException(
                cls.__name__,
                f"resolved asset is not of type {cls.__name__} (was {asset.__class__.__name__})",
            )
        return asset

    def __contains__(self, cls: object) -> bool:
        return cls in self._assets

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)
