"""Localized resource path resolution.

A localized resource lives at ``<prefix>/<locale>/<resource path>``.
Resolution is pure string work: no I/O, no validation, no escaping.

Whether to resolve at all is caller policy. Source-locale assets are not
relocated, so LocalizationManager uses raw paths for the source locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeswitch.constants import DEFAULT_PATH_PREFIX, PATH_SEPARATOR
from localeswitch.localization.types import LocaleCode, ResourcePath

__all__ = ["LocalizedPathResolver", "localize"]


def localize(
    resource_path: ResourcePath,
    locale: LocaleCode,
    prefix: str = DEFAULT_PATH_PREFIX,
) -> ResourcePath:
    """Build the provider path of a resource in the given locale.

    Args:
        resource_path: Logical resource path (e.g., 'bg.png')
        locale: Locale code (e.g., 'ja')
        prefix: Localization root (default: 'Localization')

    Returns:
        Localized provider path

    Example:
        >>> localize("bg.png", "ja")
        'Localization/ja/bg.png'
        >>> localize("Text/intro.txt", "zh-Hans", "L10n")
        'L10n/zh-Hans/Text/intro.txt'
    """
    return PATH_SEPARATOR.join((prefix, locale, resource_path))


@dataclass(frozen=True, slots=True)
class LocalizedPathResolver:
    """Path resolver bound to a localization prefix.

    Attributes:
        prefix: Localization root shared by all locales
    """

    prefix: str = DEFAULT_PATH_PREFIX

    def localize(self, resource_path: ResourcePath, locale: LocaleCode) -> ResourcePath:
        """Build the provider path of a resource in the given locale."""
        return localize(resource_path, locale, self.prefix)
