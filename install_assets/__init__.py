"""
Materialize the manifests needed to install a cluster from a graph of assets.

Assets declare the assets they depend on and either generate their files from
them or load files written by a previous run. See `install_assets.store` for
resolving assets and `install_assets.manifests` for the cluster manifests.
"""

__all__ = [
    "asset",
    "store",
    "manifest",
    "installconfig",
    "tls",
    "manifests",
    "exceptions",
]
