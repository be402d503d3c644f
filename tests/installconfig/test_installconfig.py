"""Tests for the install config asset."""

from pathlib import Path

import pytest

from install_assets.asset import DiskFileFetcher, Parents, persist_to_file
from install_assets.exceptions import AssetStateError, InputException
from install_assets.installconfig import INSTALL_CONFIG_FILENAME, InstallConfigAsset
from install_assets.manifest import InstallConfig


def test_generate_from_seed(install_config: InstallConfig) -> None:
    """Test generating the asset from a provided configuration."""
    asset = InstallConfigAsset(install_config)
    assert asset.dependencies() == []
    asset.generate(Parents())
    assert asset.config == install_config
    assert [file.filename for file in asset.files] == [INSTALL_CONFIG_FILENAME]
    assert InstallConfig.parse_yaml(asset.files[0].data) == install_config


def test_generate_without_seed() -> None:
    """Test the asset cannot be generated without a configuration."""
    asset = InstallConfigAsset()
    with pytest.raises(InputException, match="No install configuration"):
        asset.generate(Parents())
    with pytest.raises(AssetStateError):
        asset.config


async def test_load(tmp_path: Path, install_config: InstallConfig) -> None:
    """Test loading the install config written by a previous run."""
    asset = InstallConfigAsset(install_config)
    asset.generate(Parents())
    await persist_to_file(asset, tmp_path)

    loaded = InstallConfigAsset()
    assert await loaded.load(DiskFileFetcher(tmp_path))
    assert loaded.config == install_config
    assert loaded.config.master_count() == 3
    assert loaded.files == asset.files


async def test_load_missing(tmp_path: Path) -> None:
    """Test loading when no install config was written."""
    assert not await InstallConfigAsset().load(DiskFileFetcher(tmp_path))


async def test_load_invalid(tmp_path: Path) -> None:
    """Test loading an install config that does not parse."""
    (tmp_path / INSTALL_CONFIG_FILENAME).write_text("metadata: [")
    asset = InstallConfigAsset()
    with pytest.raises(InputException):
        await asset.load(DiskFileFetcher(tmp_path))
    assert asset.files == []
