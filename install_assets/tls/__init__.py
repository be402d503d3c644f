"""Certificate and key assets.

The assets only describe the certificates the cluster needs and where they
are stored; issuing them is delegated to the `CertificateIssuer` set in
`CERT_ISSUER`.
"""

from .certkey import (
    CertKey,
    EtcdCA,
    EtcdClientCertKey,
    IngressCertKey,
    KubeCA,
    KubeletCertKey,
    MCSCertKey,
    RootCA,
    ServiceServingCA,
)
from .issuer import CERT_ISSUER, CertificateIssuer, CertSpec

__all__ = [
    "CertKey",
    "RootCA",
    "EtcdCA",
    "KubeCA",
    "ServiceServingCA",
    "EtcdClientCertKey",
    "MCSCertKey",
    "IngressCertKey",
    "KubeletCertKey",
    "CertSpec",
    "CertificateIssuer",
    "CERT_ISSUER",
]
