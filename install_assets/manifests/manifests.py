"""The common manifests installed in every cluster.

The asset produces two kinds of files under `manifests/`:

- `cluster-config.yaml`: the kube-system/cluster-config-v1 ConfigMap holding
  the serialized network and install configuration.
- The bootkube manifests, rendered from templates with certificates and
  settings taken from the other install assets.

Loading is all-or-nothing: files on disk are only reused when the cluster
config is among them and parses, otherwise the asset is generated again.
"""

import logging

import yaml

from install_assets.asset import Asset, FileFetcher, Parents, WritableAsset
from install_assets.asset.file import AssetFile
from install_assets.exceptions import InputException, SerializationException
from install_assets.installconfig import InstallConfigAsset
from install_assets.manifest import ClusterConfigMap, cluster_config_map
from install_assets.tls import (
    EtcdCA,
    EtcdClientCertKey,
    IngressCertKey,
    KubeCA,
    KubeletCertKey,
    MCSCertKey,
    RootCA,
    ServiceServingCA,
)

from .bootkube import build_bootkube_files, manifest_path
from .network import NetworkOperator
from .template_data import BootkubeTemplateData, assemble_template_data

__all__ = ["Manifests", "KUBE_SYS_CONFIG_PATH"]

_LOGGER = logging.getLogger(__name__)

KUBE_SYS_CONFIG_PATH = manifest_path("cluster-config.yaml")


def _asset_text(asset: Asset) -> str:
    """Return the content of the primary file of an asset as text."""
    if not (files := asset.files):
        raise InputException(f"Asset {asset.name} has no files")
    try:
        return files[0].data.decode()
    except UnicodeDecodeError as err:
        raise InputException(
            f"Asset {asset.name} file {files[0].filename} is not valid text: {err}"
        ) from err


class Manifests(WritableAsset):
    """Generates the dependent operator config files."""

    def __init__(self) -> None:
        super().__init__()
        self._kube_sys_config: ClusterConfigMap | None = None

    @property
    def name(self) -> str:
        return "Common Manifests"

    def dependencies(self) -> list[type[Asset]]:
        return [
            InstallConfigAsset,
            NetworkOperator,
            RootCA,
            EtcdCA,
            IngressCertKey,
            KubeCA,
            ServiceServingCA,
            EtcdClientCertKey,
            MCSCertKey,
            KubeletCertKey,
        ]

    @property
    def kube_sys_config(self) -> ClusterConfigMap | None:
        """The cluster config ConfigMap, once materialized."""
        return self._kube_sys_config

    def generate(self, parents: Parents) -> None:
        """Generate the cluster config and the bootkube manifests."""
        self._check_unmaterialized()
        # The network and install configs go to the kube-system config map
        kube_sys_config = cluster_config_map(
            network_config=_asset_text(parents.get(NetworkOperator)),
            install_config=_asset_text(parents.get(InstallConfigAsset)),
        )
        try:
            kube_sys_config_data = kube_sys_config.yaml().encode()
        except (yaml.YAMLError, TypeError, ValueError) as err:
            raise SerializationException(
                f"{kube_sys_config.namespaced_name} configmap", err
            ) from err

        files = [AssetFile(filename=KUBE_SYS_CONFIG_PATH, data=kube_sys_config_data)]
        files.extend(build_bootkube_files(self._template_data(parents)))
        self._materialize(files)
        self._kube_sys_config = kube_sys_config

    def _template_data(self, parents: Parents) -> BootkubeTemplateData:
        return assemble_template_data(
            install_config=parents.get(InstallConfigAsset).config,
            etcd_ca=parents.get(EtcdCA),
            etcd_client=parents.get(EtcdClientCertKey),
            kube_ca=parents.get(KubeCA),
            mcs=parents.get(MCSCertKey),
            root_ca=parents.get(RootCA),
            service_serving_ca=parents.get(ServiceServingCA),
        )

    async def load(self, fetcher: FileFetcher) -> bool:
        """Load the manifests from disk."""
        self._check_unmaterialized()
        files = await fetcher.fetch_by_pattern(manifest_path("*"))
        if not files:
            return False

        config_file: AssetFile | None = None
        other_files: list[AssetFile] = []
        for file in files:
            if file.filename == KUBE_SYS_CONFIG_PATH:
                config_file = file
            else:
                other_files.append(file)
        if config_file is None:
            _LOGGER.info(
                "Ignoring %d files without %s", len(other_files), KUBE_SYS_CONFIG_PATH
            )
            return False

        try:
            kube_sys_config = ClusterConfigMap.parse_yaml(config_file.data)
        except InputException as err:
            raise InputException(f"Failed to parse {KUBE_SYS_CONFIG_PATH}: {err}") from err

        self._materialize([config_file, *other_files])
        self._kube_sys_config = kube_sys_config
        return True
