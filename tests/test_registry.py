"""Tests for LocaleRegistry locale discovery.

Covers tag filtering, source locale inclusion, deduplication, snapshot
immutability and last-known-good behavior on provider failure.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from localeswitch.diagnostics import DiagnosticCode, DiscoveryError
from localeswitch.localization import FolderEntry, LocaleRegistry, MemoryResourceProvider


class FailingProvider(MemoryResourceProvider):
    """Provider whose folder enumeration can be switched to fail."""

    __slots__ = ("fail",)

    def __init__(self, *args: object, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[arg-type]
        self.fail = False

    async def locate_folders(self, prefix: str) -> list[FolderEntry]:
        if self.fail:
            msg = "asset bundle index unreachable"
            raise OSError(msg)
        return await super().locate_folders(prefix)


class TestInitialState:
    """Registry before the first refresh."""

    def test_source_locale_only(self, provider: MemoryResourceProvider) -> None:
        """Only the source locale is available before discovery."""
        registry = LocaleRegistry(provider, "Localization", "en")

        assert registry.list() == ("en",)
        assert registry.is_available("en")
        assert not registry.is_available("ja")


class TestRefresh:
    """Discovery through the resource provider."""

    async def test_discovers_language_folders(self, registry: LocaleRegistry) -> None:
        """Folders named after language tags become locales; others are ignored."""
        assert registry.list() == ("ja", "de", "en")
        assert not registry.is_available("Shared")

    async def test_every_discovered_locale_is_available(self, registry: LocaleRegistry) -> None:
        """is_available holds for every locale returned by refresh()."""
        locales = await registry.refresh()

        assert all(registry.is_available(locale) for locale in locales)
        assert registry.is_available(registry.source_locale)

    async def test_source_locale_added_without_folder(self) -> None:
        """Source locale is available even when it has no folder."""
        provider = MemoryResourceProvider({"Localization/ja/a.txt": "a"})
        registry = LocaleRegistry(provider, "Localization", "en")

        assert await registry.refresh() == ("ja", "en")

    async def test_source_locale_deduplicated(self) -> None:
        """A folder for the source locale does not duplicate it."""
        provider = MemoryResourceProvider(
            {"Localization/en/a.txt": "a", "Localization/ja/a.txt": "a"}
        )
        registry = LocaleRegistry(provider, "Localization", "en")

        assert await registry.refresh() == ("en", "ja")
        assert len(registry) == 2

    async def test_empty_prefix_yields_source_only(self) -> None:
        """No localization folders means only the source locale."""
        registry = LocaleRegistry(MemoryResourceProvider(), "Localization", "ja")

        assert await registry.refresh() == ("ja",)

    async def test_custom_tag_filter(self, provider: MemoryResourceProvider) -> None:
        """tag_filter replaces language-tag recognition."""
        registry = LocaleRegistry(
            provider, "Localization", "en", tag_filter=lambda name: name.istitle()
        )

        assert await registry.refresh() == ("Shared", "en")

    async def test_region_and_script_tags(self) -> None:
        """BCP-47 tags with region or script subtags are recognized."""
        provider = MemoryResourceProvider(
            folders=["Localization/pt-BR", "Localization/zh-Hans", "Localization/backup"]
        )
        registry = LocaleRegistry(provider, "Localization", "en")

        assert await registry.refresh() == ("pt-BR", "zh-Hans", "en")

    async def test_non_canonical_folders_ignored(self) -> None:
        """Folders like "EN", "de_DE" or "root" never shadow canonical locales."""
        provider = MemoryResourceProvider(
            folders=[
                "Localization/EN",
                "Localization/root",
                "Localization/de_DE",
                "Localization/ja",
            ]
        )
        registry = LocaleRegistry(provider, "Localization", "en")

        assert await registry.refresh() == ("ja", "en")

    async def test_refresh_replaces_previous_set(self) -> None:
        """A refresh is a full re-scan, not an incremental update."""
        provider = MemoryResourceProvider({"Localization/ja/a.txt": "a"})
        registry = LocaleRegistry(provider, "Localization", "en")
        await registry.refresh()

        provider.add("Localization/de/a.txt", "a")
        await registry.refresh()

        assert registry.list() == ("ja", "de", "en")


class TestSnapshot:
    """Callers cannot mutate registry state."""

    async def test_list_is_immutable(self, registry: LocaleRegistry) -> None:
        """list() returns a tuple snapshot."""
        snapshot = registry.list()

        assert isinstance(snapshot, tuple)
        assert snapshot == registry.locales
        assert list(registry) == list(snapshot)

    async def test_contains(self, registry: LocaleRegistry) -> None:
        """`in` is a membership check against the last refresh."""
        assert "ja" in registry
        assert "fr" not in registry


class TestDiscoveryFailure:
    """Provider failures keep the last-known-good set."""

    async def test_failure_raises_discovery_error(self) -> None:
        """Enumeration failure surfaces as DiscoveryError chained to the cause."""
        provider = FailingProvider({"Localization/ja/a.txt": "a"})
        provider.fail = True
        registry = LocaleRegistry(provider, "Localization", "en")

        with pytest.raises(DiscoveryError) as exc_info:
            await registry.refresh()

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.path_prefix == "Localization"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DISCOVERY_FAILED

    async def test_failure_keeps_previous_set(self) -> None:
        """Available set is unchanged after a failed refresh."""
        provider = FailingProvider({"Localization/ja/a.txt": "a"})
        registry = LocaleRegistry(provider, "Localization", "en")
        await registry.refresh()

        provider.add("Localization/de/a.txt", "a")
        provider.fail = True
        with pytest.raises(DiscoveryError):
            await registry.refresh()

        assert registry.list() == ("ja", "en")
        assert not registry.is_available("de")

    async def test_filter_failure_keeps_previous_set(self) -> None:
        """A raising tag filter is reported the same way."""

        def broken_filter(name: str) -> bool:
            raise ValueError(name)

        provider = MemoryResourceProvider({"Localization/ja/a.txt": "a"})
        registry = LocaleRegistry(provider, "Localization", "en", tag_filter=broken_filter)

        with pytest.raises(DiscoveryError):
            await registry.refresh()

        assert registry.list() == ("en",)


class TestSequenceProvider:
    """Any object satisfying the provider protocol works."""

    async def test_structural_provider(self) -> None:
        """A plain class with locate_folders() is accepted."""

        class IndexProvider:
            async def locate_folders(self, prefix: str) -> Sequence[FolderEntry]:
                return (FolderEntry("ko", f"{prefix}/ko"), FolderEntry("ko", f"{prefix}/ko"))

        registry = LocaleRegistry(IndexProvider(), "L10n", "en")  # type: ignore[arg-type]

        assert await registry.refresh() == ("ko", "en")
