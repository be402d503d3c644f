"""Assemble the data used to render the bootkube manifest templates."""

import base64
from dataclasses import dataclass
import logging

from install_assets.manifest import InstallConfig
from install_assets.tls import (
    EtcdCA,
    EtcdClientCertKey,
    KubeCA,
    MCSCertKey,
    RootCA,
    ServiceServingCA,
)

__all__ = [
    "BootkubeTemplateData",
    "assemble_template_data",
    "etcd_endpoint_hostnames",
]

_LOGGER = logging.getLogger(__name__)

TECTONIC_NETWORK_OPERATOR_IMAGE = (
    "quay.io/coreos/tectonic-network-operator-dev:"
    "375423a332f2c12b79438fc6a6da6e448e28ec0f"
)


@dataclass(frozen=True, kw_only=True)
class BootkubeTemplateData:
    """Values referenced by the bootkube templates.

    Certificate and key material is base64 text so it can be embedded in YAML
    and JSON documents directly.
    """

    base64_cloud_provider_config: str
    etcd_ca_cert: str
    etcd_client_cert: str
    etcd_client_key: str
    kube_ca_cert: str
    kube_ca_key: str
    mcs_tls_cert: str
    mcs_tls_key: str
    pull_secret: str
    root_ca_cert: str
    service_serving_ca_cert: str
    service_serving_ca_key: str
    tectonic_network_operator_image: str
    cvo_cluster_id: str
    etcd_endpoint_hostnames: tuple[str, ...]
    etcd_endpoint_dns_suffix: str


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def etcd_endpoint_hostnames(cluster_name: str, count: int) -> tuple[str, ...]:
    """Return the hostnames of the etcd members for the cluster."""
    return tuple(f"{cluster_name}-etcd-{index}" for index in range(count))


def assemble_template_data(
    *,
    install_config: InstallConfig,
    etcd_ca: EtcdCA,
    etcd_client: EtcdClientCertKey,
    kube_ca: KubeCA,
    mcs: MCSCertKey,
    root_ca: RootCA,
    service_serving_ca: ServiceServingCA,
) -> BootkubeTemplateData:
    """Build the template data from the resolved install assets."""
    master_count = install_config.master_count()
    _LOGGER.debug(
        "Assembling template data for %s with %d etcd members",
        install_config.name,
        master_count,
    )
    return BootkubeTemplateData(
        # Cloud provider config is not supported yet.
        base64_cloud_provider_config="",
        etcd_ca_cert=_b64(etcd_ca.cert),
        etcd_client_cert=_b64(etcd_client.cert),
        etcd_client_key=_b64(etcd_client.key),
        kube_ca_cert=_b64(kube_ca.cert),
        kube_ca_key=_b64(kube_ca.key),
        mcs_tls_cert=_b64(mcs.cert),
        mcs_tls_key=_b64(mcs.key),
        pull_secret=_b64(install_config.pull_secret.encode()),
        root_ca_cert=_b64(root_ca.cert),
        service_serving_ca_cert=_b64(service_serving_ca.cert),
        service_serving_ca_key=_b64(service_serving_ca.key),
        tectonic_network_operator_image=TECTONIC_NETWORK_OPERATOR_IMAGE,
        cvo_cluster_id=install_config.cluster_id,
        etcd_endpoint_hostnames=etcd_endpoint_hostnames(
            install_config.name, master_count
        ),
        etcd_endpoint_dns_suffix=install_config.base_domain,
    )
