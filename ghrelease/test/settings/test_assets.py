"""Tests for ghrelease.settings.assets module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghrelease.settings.assets import AssetList


class TestAssetList:
    def test_empty(self) -> None:
        assets = AssetList()
        assert len(assets) == 0
        assert not assets
        assert assets.files == ()

    def test_flattens_nested_iterables(self) -> None:
        assets = AssetList("a.jar", ["b.jar", (Path("c.zip"),)])
        assert assets.files == (Path("a.jar"), Path("b.jar"), Path("c.zip"))

    def test_set_from_replaces(self) -> None:
        assets = AssetList("a.jar")
        assets.set_from("b.jar")
        assert list(assets) == [Path("b.jar")]

    def test_set_from_nothing_clears(self) -> None:
        assets = AssetList("a.jar")
        assets.set_from()
        assert len(assets) == 0

    def test_duplicates_dropped(self) -> None:
        assets = AssetList("a.jar", Path("a.jar"), "b.jar")
        assert len(assets) == 2

    def test_contains(self) -> None:
        assets = AssetList("build/libs/app.jar")
        assert "build/libs/app.jar" in assets
        assert Path("build/libs/app.jar") in assets
        assert 3 not in assets

    def test_no_filesystem_access(self, tmp_path: Path) -> None:
        missing = tmp_path / "not-built-yet.jar"
        assets = AssetList(missing)
        assert assets.files == (missing,)

    def test_rejects_non_paths(self) -> None:
        with pytest.raises(TypeError, match="release asset must be a path"):
            AssetList(42)  # type: ignore[arg-type]

    def test_repr(self) -> None:
        assert repr(AssetList("a.jar")) == "AssetList(['a.jar'])"
