"""Tests for reading and writing asset files on disk."""

from pathlib import Path

import pytest

from install_assets.asset import (
    Asset,
    AssetFile,
    DiskFileFetcher,
    FileFetcher,
    Parents,
    WritableAsset,
    persist_to_file,
)
from install_assets.exceptions import AssetStateError


class StaticAsset(WritableAsset):
    """Asset generating a fixed set of files."""

    FILES = [
        AssetFile(filename="manifests/b.yaml", data=b"b: 1\n"),
        AssetFile(filename="manifests/a.yaml", data=b"a: 1\n"),
        AssetFile(filename="tls/ca.crt", data=b"\x00\x01"),
        AssetFile(filename="top.yaml", data=b""),
    ]

    @property
    def name(self) -> str:
        return "Static"

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:
        self._materialize(self.FILES)

    async def load(self, fetcher: FileFetcher) -> bool:
        return False


async def test_persist_and_fetch(tmp_path: Path) -> None:
    """Test files written for an asset can be fetched back."""
    asset = StaticAsset()
    asset.generate(Parents())
    written = await persist_to_file(asset, tmp_path)
    assert len(written) == 4
    assert (tmp_path / "tls" / "ca.crt").read_bytes() == b"\x00\x01"

    fetcher = DiskFileFetcher(tmp_path)
    files = await fetcher.fetch_by_pattern("manifests/*")
    assert files == [
        AssetFile(filename="manifests/a.yaml", data=b"a: 1\n"),
        AssetFile(filename="manifests/b.yaml", data=b"b: 1\n"),
    ]

    file = await fetcher.fetch_by_name("tls/ca.crt")
    assert file == AssetFile(filename="tls/ca.crt", data=b"\x00\x01")


async def test_fetch_missing(tmp_path: Path) -> None:
    """Test fetching files that do not exist is not an error."""
    fetcher = DiskFileFetcher(tmp_path)
    assert await fetcher.fetch_by_pattern("manifests/*") == []
    assert await fetcher.fetch_by_name("install-config.yaml") is None


async def test_fetch_missing_directory(tmp_path: Path) -> None:
    """Test fetching from an asset directory that was never created."""
    fetcher = DiskFileFetcher(tmp_path / "does-not-exist")
    assert await fetcher.fetch_by_pattern("*") == []
    assert await fetcher.fetch_by_name("install-config.yaml") is None


async def test_fetch_skips_directories(tmp_path: Path) -> None:
    """Test the pattern only matches files."""
    (tmp_path / "manifests" / "nested").mkdir(parents=True)
    (tmp_path / "manifests" / "a.yaml").write_text("a: 1\n")
    files = await DiskFileFetcher(tmp_path).fetch_by_pattern("manifests/*")
    assert [file.filename for file in files] == ["manifests/a.yaml"]


async def test_persist_unmaterialized(tmp_path: Path) -> None:
    """Test writing an asset that was not generated."""
    with pytest.raises(AssetStateError, match="no files"):
        await persist_to_file(StaticAsset(), tmp_path)
