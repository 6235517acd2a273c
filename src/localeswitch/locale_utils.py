"""Locale utilities backed by Babel's CLDR data.

Used to decide whether a folder name found under the localization prefix
is a recognized language tag. Locale codes handled by the rest of the
package are opaque strings compared by exact match; normalization here is
only applied to the value handed to Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_language_tag",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hans")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hans")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("ja")
        'ja'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


# CLDR pseudo-locales that Babel parses but that name no language
_PSEUDO_LOCALES = frozenset({"root", "und"})


@functools.lru_cache(maxsize=512)
def is_language_tag(tag: str) -> bool:
    """Check whether tag is a canonical BCP-47 tag for a CLDR language.

    Folder names under the localization prefix that fail this check
    (e.g. "Shared", "_backup") are not treated as locales. Locales are
    compared by exact string, so only the canonical spelling is accepted:
    "EN", "de_DE" and the pseudo-locales "root" and "und" are rejected.

    Args:
        tag: Candidate language tag (e.g., "ja", "zh-Hans", "pt-BR")

    Returns:
        True if Babel resolves tag to a locale whose identifier, written
        with hyphens, is tag itself

    Example:
        >>> is_language_tag("ja")
        True
        >>> is_language_tag("Textures")
        False
        >>> is_language_tag("EN")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not tag or not tag.isascii() or tag != tag.strip() or tag in _PSEUDO_LOCALES:
        return False
    try:
        locale = get_babel_locale(tag)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return str(locale).replace("_", "-") == tag


def clear_locale_cache() -> None:
    """Clear the Babel locale and tag-recognition caches."""
    get_babel_locale.cache_clear()
    is_language_tag.cache_clear()
