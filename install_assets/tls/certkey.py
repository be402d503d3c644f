"""Certificate and key assets."""

from abc import abstractmethod
import logging
from typing import ClassVar

from install_assets.asset import Asset, FileFetcher, Parents, WritableAsset
from install_assets.asset.file import AssetFile
from install_assets.exceptions import AssetStateError, InputException
from install_assets.installconfig import InstallConfigAsset

from .issuer import CERT_ISSUER, CertSpec

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
]

_LOGGER = logging.getLogger(__name__)

TLS_DIR = "tls"
CA_VALIDITY_DAYS = 3650
CERT_VALIDITY_DAYS = 365


class CertKey(WritableAsset):
    """Base class for assets holding a certificate and its private key.

    Subclasses describe the certificate to issue and which certificate
    authority signs it. The files are stored as `tls/<file_stem>.crt` and
    `tls/<file_stem>.key`.
    """

    file_stem: ClassVar[str]
    display_name: ClassVar[str]
    signer: ClassVar[type["CertKey"] | None] = None

    def __init__(self) -> None:
        """Initialize an empty certificate asset."""
        super().__init__()
        self._cert: bytes | None = None
        self._key: bytes | None = None

    @property
    def name(self) -> str:
        return self.display_name

    @property
    def cert_filename(self) -> str:
        return f"{TLS_DIR}/{self.file_stem}.crt"

    @property
    def key_filename(self) -> str:
        return f"{TLS_DIR}/{self.file_stem}.key"

    @property
    def cert(self) -> bytes:
        """The PEM encoded certificate."""
        if self._cert is None:
            raise AssetStateError(f"Asset {self.name} has not been materialized")
        return self._cert

    @property
    def key(self) -> bytes:
        """The PEM encoded private key."""
        if self._key is None:
            raise AssetStateError(f"Asset {self.name} has not been materialized")
        return self._key

    def dependencies(self) -> list[type[Asset]]:
        return [self.signer] if self.signer is not None else []

    @abstractmethod
    def cert_spec(self, parents: Parents) -> CertSpec:
        """Return the certificate request for this asset."""

    def generate(self, parents: Parents) -> None:
        """Issue the certificate with the issuer of the current context."""
        if (issuer := CERT_ISSUER.get()) is None:
            raise InputException(f"No certificate issuer configured for {self.name}")
        signer = parents.get(self.signer) if self.signer is not None else None
        spec = self.cert_spec(parents)
        _LOGGER.debug(
            "Issuing %s signed by %s", spec.common_name, signer.name if signer else "self"
        )
        cert, key = issuer.issue(spec, signer)
        self._materialize(
            [
                AssetFile(filename=self.cert_filename, data=cert),
                AssetFile(filename=self.key_filename, data=key),
            ]
        )
        self._cert, self._key = cert, key

    async def load(self, fetcher: FileFetcher) -> bool:
        """Read the certificate and key, both files must be present."""
        cert_file = await fetcher.fetch_by_name(self.cert_filename)
        key_file = await fetcher.fetch_by_name(self.key_filename)
        if cert_file is None or key_file is None:
            if cert_file is not None or key_file is not None:
                _LOGGER.warning(
                    "Ignoring incomplete certificate files for %s", self.name
                )
            return False
        self._materialize([cert_file, key_file])
        self._cert, self._key = cert_file.data, key_file.data
        return True


class RootCA(CertKey):
    """Self-signed certificate authority at the root of the cluster PKI."""

    file_stem = "root-ca"
    display_name = "Root CA"

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="root-ca",
            organization="openshift",
            is_ca=True,
            validity_days=CA_VALIDITY_DAYS,
        )


class EtcdCA(CertKey):
    """Certificate authority for etcd."""

    file_stem = "etcd-client-ca"
    display_name = "Certificate (etcd)"
    signer = RootCA

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="etcd",
            organization="etcd",
            is_ca=True,
            validity_days=CA_VALIDITY_DAYS,
        )


class KubeCA(CertKey):
    """Certificate authority for the kubernetes API."""

    file_stem = "kube-ca"
    display_name = "Certificate (kube-ca)"
    signer = RootCA

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="kube-ca",
            organization="bootkube",
            is_ca=True,
            validity_days=CA_VALIDITY_DAYS,
        )


class ServiceServingCA(CertKey):
    """Certificate authority that signs service serving certificates."""

    file_stem = "service-serving-ca"
    display_name = "Certificate (service-serving)"
    signer = RootCA

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="service-serving",
            organization="openshift",
            is_ca=True,
            validity_days=CA_VALIDITY_DAYS,
        )


class EtcdClientCertKey(CertKey):
    """Client certificate used to talk to etcd."""

    file_stem = "etcd-client"
    display_name = "Certificate (etcd-client)"
    signer = EtcdCA

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="etcd",
            organization="etcd",
            validity_days=CERT_VALIDITY_DAYS,
        )


class MCSCertKey(CertKey):
    """Serving certificate for the machine config server."""

    file_stem = "machine-config-server"
    display_name = "Certificate (mcs)"
    signer = RootCA

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfigAsset, RootCA]

    def cert_spec(self, parents: Parents) -> CertSpec:
        config = parents.get(InstallConfigAsset).config
        return CertSpec(
            common_name="system:machine-config-server",
            organization="",
            validity_days=CERT_VALIDITY_DAYS,
            dns_names=(f"{config.name}-api.{config.base_domain}",),
        )


class IngressCertKey(CertKey):
    """Wildcard serving certificate for the default ingress."""

    file_stem = "ingress"
    display_name = "Certificate (ingress)"
    signer = KubeCA

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfigAsset, KubeCA]

    def cert_spec(self, parents: Parents) -> CertSpec:
        config = parents.get(InstallConfigAsset).config
        base = f"{config.name}.{config.base_domain}"
        return CertSpec(
            common_name=base,
            organization="ingress",
            validity_days=CERT_VALIDITY_DAYS,
            dns_names=(base, f"*.{base}"),
        )


class KubeletCertKey(CertKey):
    """Client certificate used by kubelets to bootstrap."""

    file_stem = "kubelet"
    display_name = "Certificate (kubelet)"
    signer = KubeCA

    def cert_spec(self, parents: Parents) -> CertSpec:
        return CertSpec(
            common_name="system:serviceaccount:kube-system:default",
            organization="system:serviceaccounts:kube-system",
            validity_days=CERT_VALIDITY_DAYS,
        )
