"""Shared constants for localeswitch.

Centralizes the defaults used by configuration, path resolution and
persistence so that they have a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_SOURCE_LOCALE",
    # Resource layout
    "DEFAULT_PATH_PREFIX",
    "PATH_SEPARATOR",
    # Persistence
    "SETTINGS_KEY_SELECTED_LOCALE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale the non-localized content is authored in. Always available, even
# when the resource provider holds no folder for it.
DEFAULT_SOURCE_LOCALE: str = "en"

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

# Root under which each locale owns a folder: "<prefix>/<locale>/<resource>".
DEFAULT_PATH_PREFIX: str = "Localization"

# Separator expected by resource providers. Not os.sep: provider paths are
# logical keys, not filesystem paths.
PATH_SEPARATOR: str = "/"

# ============================================================================
# PERSISTENCE
# ============================================================================

# Wire key of the selected-locale field in the persisted settings record.
SETTINGS_KEY_SELECTED_LOCALE: str = "selectedLocale"
