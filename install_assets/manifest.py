"""Data models for the documents consumed and produced by assets.

The models are plain dataclasses serialized with mashumaro. Field names use
python conventions and are mapped to the camelCase keys used on disk through
aliases, so a model written with `yaml()` parses back with `parse_yaml()`.
"""

from dataclasses import dataclass, field
from typing import Any, TypeVar

from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig
from mashumaro.exceptions import InvalidFieldValue, MissingField
import yaml

from .exceptions import InputException

__all__ = [
    "BaseManifest",
    "ObjectMeta",
    "MachinePool",
    "Networking",
    "InstallConfig",
    "CalicoConfig",
    "NetworkConfig",
    "ClusterConfigData",
    "ClusterConfigMap",
    "cluster_config_map",
]


CONFIG_MAP_KIND = "ConfigMap"
KUBE_SYSTEM_NAMESPACE = "kube-system"
CLUSTER_CONFIG_NAME = "cluster-config-v1"
NETWORK_CONFIG_KEY = "network-config"
INSTALL_CONFIG_KEY = "install-config"
MASTER_POOL_NAME = "master"

NETWORK_OPERATOR_API_VERSION = "net.operator.tectonic.coreos.com/v1"
NETWORK_OPERATOR_KIND = "TectonicNetworkOperatorConfig"
DEFAULT_MTU = "1450"

_M = TypeVar("_M", bound="BaseManifest")


def _check_version(doc: dict[str, Any], version: str) -> None:
    """Assert that the resource has exactly the specified version."""
    if not (api_version := doc.get("apiVersion")):
        raise InputException(f"Invalid object missing apiVersion: {doc}")
    if api_version != version:
        raise InputException(f"Invalid object expected '{version}': {doc}")


@dataclass
class BaseManifest(DataClassDictMixin):
    """Base class for all documents handled by assets."""

    @classmethod
    def parse_doc(cls: type[_M], doc: dict[str, Any]) -> _M:
        """Parse the document from a decoded YAML object."""
        try:
            return cls.from_dict(doc)
        except (MissingField, InvalidFieldValue, TypeError, ValueError) as err:
            raise InputException(f"Invalid {cls.__name__}: {err}") from err

    @classmethod
    def parse_yaml(cls: type[_M], content: str | bytes) -> _M:
        """Parse a serialized document."""
        try:
            doc = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise InputException(f"Invalid YAML for {cls.__name__}: {err}") from err
        if not isinstance(doc, dict):
            raise InputException(f"Invalid {cls.__name__}, expected a mapping: {doc}")
        return cls.parse_doc(doc)

    def yaml(self) -> str:
        """Return a YAML string representation of the document."""
        return yaml.dump(self.to_dict(), sort_keys=False)

    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True


@dataclass
class ObjectMeta(BaseManifest):
    """Identity of a kubernetes object."""

    name: str
    """The name of the object."""

    namespace: str | None = None
    """The namespace of the object, if namespaced."""


@dataclass
class MachinePool(BaseManifest):
    """A pool of machines with the same role."""

    name: str
    """Name of the pool e.g. `master` or `worker`."""

    replicas: int | None = None
    """Number of machines in the pool."""


@dataclass
class Networking(BaseManifest):
    """Cluster network settings from the install config."""

    type: str = "canal"
    """The network profile used by the network operator."""

    service_cidr: str = field(
        metadata=field_options(alias="serviceCIDR"), default="10.3.0.0/16"
    )
    """Address range for service IPs."""

    pod_cidr: str = field(metadata=field_options(alias="podCIDR"), default="10.2.0.0/16")
    """Address range for pod IPs."""


@dataclass
class InstallConfig(BaseManifest):
    """The user supplied configuration of the cluster to install."""

    metadata: ObjectMeta
    """The cluster name is stored as the object name."""

    cluster_id: str = field(metadata=field_options(alias="clusterID"))
    """Unique identifier of the cluster."""

    base_domain: str = field(metadata=field_options(alias="baseDomain"))
    """The base DNS domain of the cluster."""

    pull_secret: str = field(metadata=field_options(alias="pullSecret"))
    """The secret used to pull images for the cluster."""

    networking: Networking = field(default_factory=Networking)
    """Cluster network settings."""

    machines: list[MachinePool] = field(default_factory=list)
    """Machine pools in the cluster."""

    platform: dict[str, Any] | None = None
    """Platform specific settings, passed through untouched."""

    @property
    def name(self) -> str:
        """Name of the cluster."""
        return self.metadata.name

    def master_count(self) -> int:
        """Return the number of control plane machines."""
        for pool in self.machines:
            if pool.name == MASTER_POOL_NAME and pool.replicas is not None:
                return pool.replicas
        return 1


@dataclass
class CalicoConfig(BaseManifest):
    """Calico settings for the network operator."""

    mtu: str = DEFAULT_MTU
    """The MTU of the pod network interfaces."""


@dataclass
class NetworkConfig(BaseManifest):
    """Configuration consumed by the tectonic network operator."""

    pod_cidr: str = field(metadata=field_options(alias="podCIDR"))
    """Address range for pod IPs."""

    network_profile: str = field(metadata=field_options(alias="networkProfile"))
    """The network profile to deploy."""

    calico_config: CalicoConfig = field(
        metadata=field_options(alias="calicoConfig"), default_factory=CalicoConfig
    )
    """Calico specific settings."""

    api_version: str = field(
        metadata=field_options(alias="apiVersion"),
        default=NETWORK_OPERATOR_API_VERSION,
    )
    """The apiVersion of the document."""

    kind: str = NETWORK_OPERATOR_KIND
    """The kind of the document."""

    @classmethod
    def from_install_config(cls, install_config: InstallConfig) -> "NetworkConfig":
        """Create the network config for the cluster networking settings."""
        return cls(
            pod_cidr=install_config.networking.pod_cidr,
            network_profile=install_config.networking.type,
        )


@dataclass
class ClusterConfigData(BaseManifest):
    """The data keys of the cluster config ConfigMap.

    Both payloads are kept in their serialized text form.
    """

    network_config: str = field(metadata=field_options(alias=NETWORK_CONFIG_KEY))
    """The serialized network configuration."""

    install_config: str = field(metadata=field_options(alias=INSTALL_CONFIG_KEY))
    """The serialized install configuration."""


@dataclass
class ClusterConfigMap(BaseManifest):
    """The kube-system/cluster-config-v1 ConfigMap shared with the cluster."""

    metadata: ObjectMeta
    """Identity of the ConfigMap."""

    data: ClusterConfigData
    """The network and install configuration payloads."""

    api_version: str = field(metadata=field_options(alias="apiVersion"), default="v1")
    """The apiVersion of the ConfigMap."""

    kind: str = CONFIG_MAP_KIND
    """The kind of the object."""

    @property
    def namespaced_name(self) -> str:
        return f"{self.metadata.namespace}/{self.metadata.name}"

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "ClusterConfigMap":
        """Parse the cluster config from a kubernetes ConfigMap object."""
        _check_version(doc, "v1")
        if doc.get("kind") != CONFIG_MAP_KIND:
            raise InputException(f"Invalid {cls.__name__} expected kind ConfigMap: {doc}")
        if not isinstance(metadata := doc.get("metadata"), dict):
            raise InputException(f"Invalid {cls.__name__} missing metadata: {doc}")
        if (metadata.get("namespace"), metadata.get("name")) != (
            KUBE_SYSTEM_NAMESPACE,
            CLUSTER_CONFIG_NAME,
        ):
            raise InputException(
                f"Invalid {cls.__name__} expected "
                f"{KUBE_SYSTEM_NAMESPACE}/{CLUSTER_CONFIG_NAME}: {metadata}"
            )
        if not isinstance(data := doc.get("data"), dict):
            raise InputException(f"Invalid {cls.__name__} missing data: {doc}")
        if set(data) != {NETWORK_CONFIG_KEY, INSTALL_CONFIG_KEY}:
            raise InputException(
                f"Invalid {cls.__name__} expected data keys "
                f"{NETWORK_CONFIG_KEY} and {INSTALL_CONFIG_KEY}: {sorted(data)}"
            )
        for key, value in data.items():
            if not isinstance(value, str):
                raise InputException(
                    f"Invalid {cls.__name__} data.{key} is not a string"
                )
        return cls(
            api_version=doc["apiVersion"],
            kind=CONFIG_MAP_KIND,
            metadata=ObjectMeta(name=CLUSTER_CONFIG_NAME, namespace=KUBE_SYSTEM_NAMESPACE),
            data=ClusterConfigData(
                network_config=data[NETWORK_CONFIG_KEY],
                install_config=data[INSTALL_CONFIG_KEY],
            ),
        )

    def yaml(self) -> str:
        """Return the ConfigMap as a kubernetes YAML document."""
        doc = self.to_dict()
        return yaml.dump(
            {
                "apiVersion": doc["apiVersion"],
                "kind": doc["kind"],
                "metadata": doc["metadata"],
                "data": doc["data"],
            },
            sort_keys=False,
        )


def cluster_config_map(network_config: str, install_config: str) -> ClusterConfigMap:
    """Return the kube-system cluster config holding the given payloads."""
    return ClusterConfigMap(
        metadata=ObjectMeta(name=CLUSTER_CONFIG_NAME, namespace=KUBE_SYSTEM_NAMESPACE),
        data=ClusterConfigData(
            network_config=network_config, install_config=install_config
        ),
    )
