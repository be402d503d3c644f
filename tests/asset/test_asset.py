"""Tests for the asset contract."""

import pytest

from install_assets.asset import (
    Asset,
    AssetFile,
    FileFetcher,
    Parents,
    WritableAsset,
)
from install_assets.exceptions import AssetStateError, DependencyException


class DummyAsset(WritableAsset):
    """Asset producing the files it was created with."""

    def __init__(self, files: list[AssetFile]) -> None:
        super().__init__()
        self._output = files

    @property
    def name(self) -> str:
        return "Dummy"

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:
        self._materialize(self._output)

    async def load(self, fetcher: FileFetcher) -> bool:
        return False


class OtherAsset(DummyAsset):
    """A second kind of asset."""

    @property
    def name(self) -> str:
        return "Other"


def test_files_empty_before_generate() -> None:
    """Test an asset has no files until it is materialized."""
    asset = DummyAsset([AssetFile(filename="a.yaml", data=b"a")])
    assert not asset.materialized
    assert asset.files == []
    assert str(asset) == "Dummy"


def test_generate_once() -> None:
    """Test an asset can only be materialized once."""
    files = [
        AssetFile(filename="a.yaml", data=b"a"),
        AssetFile(filename="b.yaml", data=b"b"),
    ]
    asset = DummyAsset(files)
    asset.generate(Parents())
    assert asset.materialized
    assert asset.files == files

    with pytest.raises(AssetStateError, match="already materialized"):
        asset.generate(Parents())
    assert asset.files == files


def test_files_returns_copy() -> None:
    """Test callers cannot modify the files of an asset."""
    asset = DummyAsset([AssetFile(filename="a.yaml", data=b"a")])
    asset.generate(Parents())
    asset.files.clear()
    assert len(asset.files) == 1


def test_duplicate_filenames() -> None:
    """Test an asset cannot produce two files with the same path."""
    asset = DummyAsset(
        [
            AssetFile(filename="a.yaml", data=b"a"),
            AssetFile(filename="a.yaml", data=b"b"),
        ]
    )
    with pytest.raises(AssetStateError, match="duplicate file a.yaml"):
        asset.generate(Parents())
    assert not asset.materialized


def test_asset_file_repr() -> None:
    """Test the file content is not included in the representation."""
    file = AssetFile(filename="tls/root-ca.key", data=b"secret")
    assert repr(file) == "AssetFile(filename='tls/root-ca.key', size=6)"


def test_parents_get() -> None:
    """Test looking up resolved parents by kind."""
    dummy = DummyAsset([])
    other = OtherAsset([])
    parents = Parents([dummy, other])
    assert len(parents) == 2
    assert DummyAsset in parents
    assert parents.get(DummyAsset) is dummy
    assert parents.get(OtherAsset) is other
    assert list(parents) == [dummy, other]


def test_parents_missing() -> None:
    """Test looking up a parent that was never resolved."""
    parents = Parents([DummyAsset([])])
    assert OtherAsset not in parents
    with pytest.raises(DependencyException, match="OtherAsset dependency failed"):
        parents.get(OtherAsset)
