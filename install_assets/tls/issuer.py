"""Interface to the certificate authority used by certificate assets.

Issuing certificates is outside of this package. The issuer for the current
context is set with `CERT_ISSUER`, e.g.:

    token = CERT_ISSUER.set(MyIssuer())
    try:
        await store.fetch(Manifests)
    finally:
        CERT_ISSUER.reset(token)
"""

import contextvars
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .certkey import CertKey

__all__ = ["CertSpec", "CertificateIssuer", "CERT_ISSUER"]


@dataclass(frozen=True, kw_only=True)
class CertSpec:
    """Request for a certificate and private key."""

    common_name: str
    """Subject common name."""

    organization: str
    """Subject organization."""

    is_ca: bool = False
    """Whether the certificate may sign other certificates."""

    validity_days: int = 365
    """Lifetime of the certificate."""

    dns_names: tuple[str, ...] = ()
    """Subject alternative DNS names."""


class CertificateIssuer(Protocol):
    """Creates certificates and keys for certificate assets."""

    def issue(self, spec: CertSpec, signer: "CertKey | None") -> tuple[bytes, bytes]:
        """Return the PEM encoded certificate and key for the request.

        The signer is None for self-signed certificates. Failures should be
        raised as `install_assets.exceptions.AssetException`.
        """


CERT_ISSUER: contextvars.ContextVar[CertificateIssuer | None] = contextvars.ContextVar(
    "cert_issuer", default=None
)
