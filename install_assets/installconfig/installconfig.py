"""Asset holding the user supplied install configuration."""

import logging

from install_assets.asset import Asset, FileFetcher, Parents, WritableAsset
from install_assets.asset.file import AssetFile
from install_assets.exceptions import AssetStateError, InputException
from install_assets.manifest import InstallConfig

__all__ = ["InstallConfigAsset", "INSTALL_CONFIG_FILENAME"]

_LOGGER = logging.getLogger(__name__)

INSTALL_CONFIG_FILENAME = "install-config.yaml"


class InstallConfigAsset(WritableAsset):
    """The install configuration of the cluster.

    The configuration is either provided when the asset is created, or read
    from `install-config.yaml` in the asset directory.
    """

    def __init__(self, config: InstallConfig | None = None) -> None:
        """Initialize the asset, optionally seeded with a configuration."""
        super().__init__()
        self._seed = config
        self._config: InstallConfig | None = None

    @property
    def name(self) -> str:
        return "Install Config"

    def dependencies(self) -> list[type[Asset]]:
        return []

    @property
    def config(self) -> InstallConfig:
        """The parsed install configuration."""
        if self._config is None:
            raise AssetStateError(f"Asset {self.name} has not been materialized")
        return self._config

    def generate(self, parents: Parents) -> None:
        """Serialize the seeded install configuration."""
        if self._seed is None:
            raise InputException(
                f"No install configuration provided and {INSTALL_CONFIG_FILENAME} was not found"
            )
        data = self._seed.yaml().encode()
        self._materialize([AssetFile(filename=INSTALL_CONFIG_FILENAME, data=data)])
        self._config = self._seed

    async def load(self, fetcher: FileFetcher) -> bool:
        """Read the install configuration from disk."""
        if (file := await fetcher.fetch_by_name(INSTALL_CONFIG_FILENAME)) is None:
            return False
        config = InstallConfig.parse_yaml(file.data)
        _LOGGER.debug(
            "Loaded install config for cluster %s (%d masters)",
            config.name,
            config.master_count(),
        )
        self._materialize([file])
        self._config = config
        return True
