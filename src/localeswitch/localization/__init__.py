"""Runtime localization package.

Provides the full localization stack: type aliases, configuration,
resource providers, locale discovery, the switch protocol, persistence
and the service facade.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, ResourcePath, SwitchHook, ...)
    config       - LocalizationConfig
    providers    - ResourceProvider protocol, MemoryResourceProvider, PathResourceProvider
    paths        - localize(), LocalizedPathResolver
    registry     - LocaleRegistry (locale discovery)
    coordinator  - SwitchCoordinator, SwitchResult, HookRegistry, ObserverList
    persistence  - LocaleSettings, SettingsStateMap, save_locale, load_locale
    manager      - LocalizationManager (service facade)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localeswitch.enums import SwitchState, SwitchStatus
from localeswitch.localization.config import LocalizationConfig
from localeswitch.localization.coordinator import (
    CallbackRegistry,
    HookRegistry,
    ObserverList,
    SwitchCoordinator,
    SwitchResult,
)
from localeswitch.localization.manager import LocalizationManager
from localeswitch.localization.paths import LocalizedPathResolver, localize
from localeswitch.localization.persistence import (
    LocaleSettings,
    SettingsState,
    SettingsStateMap,
    SettingsStore,
    load_locale,
    resolve_default_locale,
    save_locale,
)
from localeswitch.localization.providers import (
    FolderEntry,
    MemoryResourceProvider,
    PathResourceProvider,
    ResourceProvider,
)
from localeswitch.localization.registry import LocaleRegistry
from localeswitch.localization.types import (
    LocaleChangedCallback,
    LocaleCode,
    ResourcePath,
    SwitchHook,
)

__all__ = [
    # Service facade
    "LocalizationManager",
    "LocalizationConfig",
    # Switch protocol
    "SwitchCoordinator",
    "SwitchResult",
    "SwitchState",
    "SwitchStatus",
    "CallbackRegistry",
    "HookRegistry",
    "ObserverList",
    # Discovery
    "LocaleRegistry",
    # Path resolution
    "LocalizedPathResolver",
    "localize",
    # Providers
    "ResourceProvider",
    "FolderEntry",
    "MemoryResourceProvider",
    "PathResourceProvider",
    # Persistence
    "LocaleSettings",
    "SettingsState",
    "SettingsStore",
    "SettingsStateMap",
    "load_locale",
    "resolve_default_locale",
    "save_locale",
    # Type aliases for user code type annotations
    "LocaleChangedCallback",
    "LocaleCode",
    "ResourcePath",
    "SwitchHook",
]
