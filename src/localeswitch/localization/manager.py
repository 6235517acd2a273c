"""Localization service facade.

Composes locale discovery, the switch protocol, path resolution and
persistence into the service the rest of the engine talks to.

Lifecycle:
    manager = LocalizationManager(provider, config)
    await manager.initialize()           # discover locales
    await manager.load_state(store)      # restore or default, runs hooks
    ...
    await manager.select_locale("ja")    # runtime switch
    manager.save_state(store)
    manager.destroy()

Resource access:
    Localized resources live at "<prefix>/<locale>/<path>". Source-locale
    content is never relocated, so localized_resource_available() answers
    False without I/O while the source locale is selected, and
    resolve_resource_path() falls back to the raw path.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, Self

from localeswitch.diagnostics import ErrorTemplate, NotInitializedError, SwitchConflictError
from localeswitch.locale_utils import is_language_tag
from localeswitch.localization.config import LocalizationConfig
from localeswitch.localization.coordinator import SwitchCoordinator, SwitchResult
from localeswitch.localization.paths import LocalizedPathResolver
from localeswitch.localization.persistence import (
    SettingsStore,
    load_locale,
    resolve_default_locale,
    save_locale,
)
from localeswitch.localization.providers import ResourceProvider
from localeswitch.localization.registry import LocaleRegistry
from localeswitch.localization.types import (
    LocaleChangedCallback,
    LocaleCode,
    ResourcePath,
    SwitchHook,
)

__all__ = ["LocalizationManager"]

logger = logging.getLogger(__name__)


class LocalizationManager:
    """Runtime localization service.

    Holds the selected locale, lets subsystems hook into locale switches
    and resolves localized resource paths.

    Example:
        >>> provider = MemoryResourceProvider({"Localization/ja/bg.png": b"..."})
        >>> async with LocalizationManager(provider) as l10n:
        ...     l10n.add_change_locale_task(backgrounds.reload)
        ...     await l10n.load_state(SettingsStateMap())
        ...     await l10n.select_locale("ja")
        ...     image = await l10n.load_localized_resource("bg.png")

    Attributes:
        config: Immutable service configuration
    """

    __slots__ = (
        "_coordinator",
        "_initialized",
        "_provider",
        "_registry",
        "_resolver",
        "_settings_store",
        "config",
    )

    def __init__(
        self,
        provider: ResourceProvider,
        config: LocalizationConfig | None = None,
        *,
        settings_store: SettingsStore | None = None,
        tag_filter: Callable[[str], bool] = is_language_tag,
    ) -> None:
        """Initialize the service. No I/O happens until initialize().

        Args:
            provider: Resource provider holding localized resources
            config: Service configuration (default: LocalizationConfig())
            settings_store: If given, the selected locale is saved to it
                after every completed switch
            tag_filter: Predicate deciding which folder names are locales
        """
        self.config = config or LocalizationConfig()
        self._provider = provider
        self._registry = LocaleRegistry(
            provider,
            self.config.path_prefix,
            self.config.source_locale,
            tag_filter=tag_filter,
        )
        self._coordinator = SwitchCoordinator(self._registry)
        self._resolver = LocalizedPathResolver(self.config.path_prefix)
        self._settings_store = settings_store
        self._initialized = False

    # ------------------------------------------------------------------
    # Service lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Discover available locales.

        Raises:
            DiscoveryError: If the provider could not be enumerated
        """
        await self._registry.refresh()
        if self._settings_store is not None:
            self._coordinator.subscribe(self._persist_selection)
        self._initialized = True

    def reset(self) -> None:
        """Reset per-session state. The selection survives a reset."""
        logger.debug("Localization service reset; selected locale: %s", self.selected_locale)

    def destroy(self) -> None:
        """Drop all hooks, listeners and the current selection.

        Raises:
            SwitchConflictError: If a switch is in flight
        """
        self._coordinator.reset()
        self._coordinator.clear_registrations()
        self._initialized = False

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Destroy the service.

        If the body raised while a switch is still in flight, the body's
        exception propagates and the service is left intact.
        """
        if exc_val is None:
            self.destroy()
            return
        try:
            self.destroy()
        except SwitchConflictError:
            logger.warning(
                "Service not destroyed: switch in flight while leaving context on %s",
                type(exc_val).__name__,
            )

    def save_state(self, store: SettingsStore) -> None:
        """Persist the selected locale into store."""
        save_locale(store, self.selected_locale)

    async def load_state(self, store: SettingsStore) -> SwitchResult:
        """Restore the persisted locale and select it.

        Falls back to the configured default (else source) locale when
        nothing was saved, or when the saved locale is no longer available.
        If the configured default was not discovered either, the source
        locale is selected; it is always available.
        This is normally the first selection, so every hook runs.
        """
        default_locale = resolve_default_locale(self.config)
        locale = load_locale(store, default_locale)
        result = await self._coordinator.select_locale(locale)
        if result.is_unavailable and locale != default_locale:
            logger.warning(
                "Saved locale '%s' is no longer available; selecting '%s'",
                locale,
                default_locale,
            )
            result = await self._coordinator.select_locale(default_locale)
        source_locale = self.config.source_locale
        if result.is_unavailable and default_locale != source_locale:
            logger.warning(
                "Default locale '%s' is not available; selecting source locale '%s'",
                default_locale,
                source_locale,
            )
            result = await self._coordinator.select_locale(source_locale)
        return result

    def _persist_selection(self, locale: LocaleCode) -> None:
        if self._settings_store is not None:
            save_locale(self._settings_store, locale)

    # ------------------------------------------------------------------
    # Locales
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        """Check if locales have been discovered."""
        return self._initialized

    @property
    def coordinator(self) -> SwitchCoordinator:
        """Switch coordinator driving locale changes."""
        return self._coordinator

    @property
    def registry(self) -> LocaleRegistry:
        """Registry of discovered locales."""
        return self._registry

    @property
    def source_locale(self) -> LocaleCode:
        """Locale the original content is authored in."""
        return self.config.source_locale

    @property
    def selected_locale(self) -> LocaleCode | None:
        """Currently selected locale, or None before the first selection."""
        return self._coordinator.current_locale

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return a snapshot of the discovered locales."""
        return self._registry.list()

    def locale_available(self, locale: LocaleCode) -> bool:
        """Check whether locale can be selected."""
        return self._registry.is_available(locale)

    async def select_locale(self, locale: LocaleCode) -> SwitchResult:
        """Switch to locale, running every change-locale task.

        See SwitchCoordinator.select_locale() for the protocol.
        """
        return await self._coordinator.select_locale(locale)

    # ------------------------------------------------------------------
    # Hooks and listeners
    # ------------------------------------------------------------------

    def add_change_locale_task(self, task: SwitchHook) -> None:
        """Run task during every locale switch. Idempotent."""
        self._coordinator.register_hook(task)

    def remove_change_locale_task(self, task: SwitchHook) -> None:
        """Stop running task on locale switches. Unknown tasks are ignored."""
        self._coordinator.unregister_hook(task)

    def add_locale_changed_listener(self, listener: LocaleChangedCallback) -> None:
        """Call listener with the new locale after every completed switch."""
        self._coordinator.subscribe(listener)

    def remove_locale_changed_listener(self, listener: LocaleChangedCallback) -> None:
        """Stop notifying listener. Unknown listeners are ignored."""
        self._coordinator.unsubscribe(listener)

    # ------------------------------------------------------------------
    # Localized resources
    # ------------------------------------------------------------------

    def _require_selection(self, operation: str) -> LocaleCode:
        locale = self._coordinator.current_locale
        if not self._coordinator.has_selection or locale is None:
            raise NotInitializedError(ErrorTemplate.not_initialized(operation))
        return locale

    def localized_path(self, path: ResourcePath) -> ResourcePath:
        """Path of resource path in the selected locale.

        Raises:
            NotInitializedError: If no locale has been selected yet
        """
        locale = self._require_selection("build localized path")
        return self._resolver.localize(path, locale)

    async def localized_resource_available(self, path: ResourcePath) -> bool:
        """Check whether path has a variant in the selected locale.

        Always False while the source locale is selected.

        Raises:
            NotInitializedError: If no locale has been selected yet
        """
        locale = self._require_selection("check localized resource")
        if locale == self.config.source_locale:
            return False
        return await self._provider.exists(self._resolver.localize(path, locale))

    async def resolve_resource_path(self, path: ResourcePath) -> ResourcePath:
        """Path to load for path: the localized variant if present, else path."""
        if await self.localized_resource_available(path):
            return self.localized_path(path)
        return path

    async def load_localized_resource(self, path: ResourcePath) -> Any:
        """Load the selected-locale variant of path.

        Raises:
            NotInitializedError: If no locale has been selected yet
            FileNotFoundError: If the provider has no such resource
        """
        return await self._provider.load(self.localized_path(path))

    def get_loaded_localized_resource_or_none(self, path: ResourcePath) -> Any | None:
        """Return the loaded selected-locale variant of path, or None."""
        return self._provider.get_loaded_or_none(self.localized_path(path))

    async def unload_localized_resource(self, path: ResourcePath) -> None:
        """Release the selected-locale variant of path."""
        await self._provider.unload(self.localized_path(path))

    def localized_resource_loaded(self, path: ResourcePath) -> bool:
        """Check whether the selected-locale variant of path is loaded."""
        return self._provider.is_loaded(self.localized_path(path))

    def __repr__(self) -> str:
        return (
            f"LocalizationManager(selected_locale={self.selected_locale!r}, "
            f"locales={self.available_locales()!r})"
        )
