"""Asset holding the configuration of the cluster network operator."""

import logging

from install_assets.asset import Asset, FileFetcher, Parents, WritableAsset
from install_assets.asset.file import AssetFile
from install_assets.exceptions import SerializationException
from install_assets.installconfig import InstallConfigAsset
from install_assets.manifest import NetworkConfig

__all__ = ["NetworkOperator", "NETWORK_CONFIG_FILENAME"]

_LOGGER = logging.getLogger(__name__)

NETWORK_CONFIG_FILENAME = "network/network-config.yaml"


class NetworkOperator(WritableAsset):
    """Network operator configuration derived from the install config.

    The serialized file is embedded as-is in the cluster config, so loading
    keeps the bytes read from disk without re-encoding them.
    """

    def __init__(self) -> None:
        super().__init__()
        self._config: NetworkConfig | None = None

    @property
    def name(self) -> str:
        return "Network Operator"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfigAsset]

    @property
    def config(self) -> NetworkConfig | None:
        """The network operator configuration, once materialized."""
        return self._config

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfigAsset).config
        config = NetworkConfig.from_install_config(install_config)
        try:
            data = config.yaml().encode()
        except (TypeError, ValueError) as err:
            raise SerializationException(NETWORK_CONFIG_FILENAME, err) from err
        self._materialize([AssetFile(filename=NETWORK_CONFIG_FILENAME, data=data)])
        self._config = config

    async def load(self, fetcher: FileFetcher) -> bool:
        if (file := await fetcher.fetch_by_name(NETWORK_CONFIG_FILENAME)) is None:
            return False
        config = NetworkConfig.parse_yaml(file.data)
        _LOGGER.debug("Loaded network profile %s", config.network_profile)
        self._materialize([file])
        self._config = config
        return True
