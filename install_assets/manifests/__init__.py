"""Manifest assets.

- NetworkOperator: the network operator configuration.
- Manifests: the cluster config ConfigMap and the bootkube manifests.
"""

from .manifests import KUBE_SYS_CONFIG_PATH, Manifests
from .network import NETWORK_CONFIG_FILENAME, NetworkOperator

__all__ = [
    "Manifests",
    "NetworkOperator",
    "KUBE_SYS_CONFIG_PATH",
    "NETWORK_CONFIG_FILENAME",
]
