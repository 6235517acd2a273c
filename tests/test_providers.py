"""Tests for the in-memory and file system resource providers."""

from __future__ import annotations

from pathlib import Path

import pytest

from localeswitch.localization import (
    FolderEntry,
    MemoryResourceProvider,
    PathResourceProvider,
)


class TestMemoryResourceProvider:
    """Dict-backed provider."""

    async def test_locate_folders(self, provider: MemoryResourceProvider) -> None:
        """Direct child folders are listed in first-appearance order."""
        folders = await provider.locate_folders("Localization")

        assert folders == [
            FolderEntry("ja", "Localization/ja"),
            FolderEntry("de", "Localization/de"),
            FolderEntry("Shared", "Localization/Shared"),
        ]

    async def test_locate_folders_trailing_separator(
        self, provider: MemoryResourceProvider
    ) -> None:
        """A trailing separator on the prefix is ignored."""
        names = [f.name for f in await provider.locate_folders("Localization/")]

        assert names == ["ja", "de", "Shared"]

    async def test_files_are_not_folders(self, provider: MemoryResourceProvider) -> None:
        """Leaf resources directly under the prefix are not folders."""
        names = [f.name for f in await provider.locate_folders("Localization/ja")]

        assert names == ["Text"]

    async def test_declared_empty_folders(self) -> None:
        """Explicit folders are listed even without resources."""
        provider = MemoryResourceProvider(folders=["Localization/fr"])

        assert [f.name for f in await provider.locate_folders("Localization")] == ["fr"]

    async def test_missing_prefix(self, provider: MemoryResourceProvider) -> None:
        """Unknown prefixes have no folders."""
        assert await provider.locate_folders("Missing") == []

    async def test_exists(self, provider: MemoryResourceProvider) -> None:
        """exists() reports stored resources only."""
        assert await provider.exists("Localization/ja/bg.png")
        assert not await provider.exists("Localization/de/bg.png")

    async def test_load_and_unload(self, provider: MemoryResourceProvider) -> None:
        """load() caches the resource until unload()."""
        path = "Localization/ja/bg.png"
        assert not provider.is_loaded(path)

        assert await provider.load(path) == b"ja-bg"
        assert provider.is_loaded(path)
        assert provider.get_loaded_or_none(path) == b"ja-bg"

        await provider.unload(path)
        assert not provider.is_loaded(path)
        assert provider.get_loaded_or_none(path) is None

    async def test_load_missing(self, provider: MemoryResourceProvider) -> None:
        """Unknown paths raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await provider.load("Localization/fr/bg.png")

    async def test_unload_unknown_is_noop(self, provider: MemoryResourceProvider) -> None:
        """Unloading something never loaded does nothing."""
        await provider.unload("nothing")

    async def test_add(self) -> None:
        """add() makes new resources visible."""
        provider = MemoryResourceProvider()
        provider.add("Localization/ko/bg.png", b"ko")

        assert await provider.exists("Localization/ko/bg.png")
        assert [f.name for f in await provider.locate_folders("Localization")] == ["ko"]


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Directory tree with two locale folders and one stray file."""
    base = tmp_path / "Localization"
    (base / "ja").mkdir(parents=True)
    (base / "de").mkdir()
    (base / "ja" / "bg.png").write_bytes(b"ja-bg")
    (base / "README.txt").write_text("not a folder", encoding="utf-8")
    return tmp_path


class TestPathResourceProvider:
    """Disk-backed provider."""

    async def test_locate_folders_sorted(self, asset_root: Path) -> None:
        """Subdirectories are listed sorted; files are ignored."""
        provider = PathResourceProvider(asset_root)

        folders = await provider.locate_folders("Localization")

        assert folders == [
            FolderEntry("de", "Localization/de"),
            FolderEntry("ja", "Localization/ja"),
        ]

    async def test_missing_prefix(self, asset_root: Path) -> None:
        """A missing prefix directory has no folders."""
        assert await PathResourceProvider(asset_root).locate_folders("Missing") == []

    async def test_exists(self, asset_root: Path) -> None:
        """exists() is true for files only."""
        provider = PathResourceProvider(asset_root)

        assert await provider.exists("Localization/ja/bg.png")
        assert not await provider.exists("Localization/ja")
        assert not await provider.exists("Localization/de/bg.png")

    async def test_load_bytes(self, asset_root: Path) -> None:
        """load() returns file bytes and caches them."""
        provider = PathResourceProvider(str(asset_root))

        assert await provider.load("Localization/ja/bg.png") == b"ja-bg"
        assert provider.is_loaded("Localization/ja/bg.png")

        await provider.unload("Localization/ja/bg.png")
        assert provider.get_loaded_or_none("Localization/ja/bg.png") is None

    async def test_load_missing(self, asset_root: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await PathResourceProvider(asset_root).load("Localization/fr/bg.png")

    @pytest.mark.parametrize(
        "path",
        ["", "/etc/passwd", "\\windows", "../secret", "Localization/../../secret"],
    )
    async def test_rejects_unsafe_paths(self, asset_root: Path, path: str) -> None:
        """Empty, absolute and traversal paths are rejected."""
        with pytest.raises(ValueError, match="path"):
            await PathResourceProvider(asset_root).exists(path)
