"""Test fixtures for the manifest assets."""

from pathlib import Path

import pytest

from install_assets.installconfig import InstallConfigAsset
from install_assets.manifest import InstallConfig
from install_assets.manifests import Manifests
from install_assets.store import AssetStore, AssetStoreConfig


@pytest.fixture(name="asset_dir")
def asset_dir_fixture(tmp_path: Path) -> Path:
    """Directory holding the asset files of a test."""
    return tmp_path / "assets"


@pytest.fixture(name="store")
def store_fixture(asset_dir: Path, install_config: InstallConfig) -> AssetStore:
    """Create a store seeded with the test install config."""
    store = AssetStore(AssetStoreConfig(directory=asset_dir))
    store.add(InstallConfigAsset(install_config))
    return store


@pytest.fixture(name="manifests")
async def manifests_fixture(store: AssetStore) -> Manifests:
    """Generate the manifests for the test cluster."""
    return await store.fetch(Manifests)
