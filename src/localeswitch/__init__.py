"""localeswitch - runtime locale switching for interactive content engines.

Discovers which locales a resource provider holds, coordinates locale
switches across independent subsystems that each reload their own
locale-dependent resources, and resolves localized resource paths with
the source locale as fallback.

Public API:
    LocalizationManager - Service facade (discovery, switching, resources)
    LocalizationConfig - Source/default locale and resource layout
    SwitchCoordinator - Switch protocol: hooks, observers, current locale
    SwitchResult - Outcome of a switch request
    LocaleRegistry - Locale discovery
    localize - Build "<prefix>/<locale>/<path>" resource paths
    SettingsStateMap - Settings store with JSON persistence

Exceptions:
    LocalizationError - Base exception class
    UnavailableLocaleError - Locale not discovered
    DiscoveryError - Provider enumeration failed
    HookError - Switch hook failed
    SwitchConflictError - Switch requested while another is in flight
    NotInitializedError - Used before a locale was selected

Submodules:
    localeswitch.localization - Localization stack
    localeswitch.diagnostics - Error types and diagnostic formatting
    localeswitch.locale_utils - Babel-backed language tag recognition
"""

from .diagnostics import (
    DiscoveryError,
    HookError,
    LocalizationError,
    NotInitializedError,
    SwitchConflictError,
    UnavailableLocaleError,
)
from .enums import SwitchState, SwitchStatus
from .localization import (
    LocaleRegistry,
    LocaleSettings,
    LocalizationConfig,
    LocalizationManager,
    MemoryResourceProvider,
    PathResourceProvider,
    SettingsStateMap,
    SwitchCoordinator,
    SwitchResult,
    localize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeswitch")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DiscoveryError",
    "HookError",
    "LocaleRegistry",
    "LocaleSettings",
    "LocalizationConfig",
    "LocalizationError",
    "LocalizationManager",
    "MemoryResourceProvider",
    "NotInitializedError",
    "PathResourceProvider",
    "SettingsStateMap",
    "SwitchConflictError",
    "SwitchCoordinator",
    "SwitchResult",
    "SwitchState",
    "SwitchStatus",
    "UnavailableLocaleError",
    "__version__",
    "localize",
]
