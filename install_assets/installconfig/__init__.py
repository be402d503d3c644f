"""Install configuration asset."""

from .installconfig import INSTALL_CONFIG_FILENAME, InstallConfigAsset

__all__ = [
    "InstallConfigAsset",
    "INSTALL_CONFIG_FILENAME",
]
