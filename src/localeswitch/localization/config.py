"""Configuration for the localization service.

Provides a single frozen dataclass holding the locale defaults and the
resource layout used by discovery and path resolution.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeswitch.constants import DEFAULT_PATH_PREFIX, DEFAULT_SOURCE_LOCALE, PATH_SEPARATOR

__all__ = ["LocalizationConfig"]


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Immutable configuration for LocalizationManager.

    All fields have sensible defaults; ``LocalizationConfig()`` is usable
    as-is for content authored in English with localized resources stored
    under ``Localization/<locale>/``.

    Attributes:
        source_locale: Locale the original content is authored in
            (default: "en"). Always available, never relocated.
        default_locale: Locale selected when no saved state exists
            (default: None, meaning the source locale).
        path_prefix: Provider path under which each locale owns a folder
            (default: "Localization").

    Example:
        >>> config = LocalizationConfig(source_locale="ja", default_locale="en")
        >>> config.initial_locale
        'en'
        >>> LocalizationConfig().initial_locale
        'en'
    """

    source_locale: str = DEFAULT_SOURCE_LOCALE
    default_locale: str | None = None
    path_prefix: str = DEFAULT_PATH_PREFIX

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If source_locale is empty, default_locale is an
                empty string, or path_prefix is empty or ends with a
                path separator.
        """
        if not self.source_locale:
            msg = "source_locale must not be empty"
            raise ValueError(msg)
        if self.default_locale is not None and not self.default_locale:
            msg = "default_locale must be None or a non-empty locale code"
            raise ValueError(msg)
        if not self.path_prefix:
            msg = "path_prefix must not be empty"
            raise ValueError(msg)
        if self.path_prefix.endswith(PATH_SEPARATOR):
            msg = f"path_prefix must not end with '{PATH_SEPARATOR}', got: '{self.path_prefix}'"
            raise ValueError(msg)

    @property
    def initial_locale(self) -> str:
        """Locale to select when nothing was persisted: default, else source."""
        return self.default_locale or self.source_locale
