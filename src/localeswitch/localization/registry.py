"""Discovery of available locales.

A locale is available when the resource provider holds a folder named
after a recognized language tag directly under the localization prefix.
The source locale is always available, whether or not it has a folder.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from localeswitch.diagnostics import DiscoveryError, ErrorTemplate
from localeswitch.locale_utils import is_language_tag
from localeswitch.localization.providers import ResourceProvider
from localeswitch.localization.types import LocaleCode

__all__ = ["LocaleRegistry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Set of locales discovered in a resource provider.

    The set changes only through a full, successful refresh(). Until the
    first refresh it holds the source locale alone.

    Example:
        >>> registry = LocaleRegistry(provider, "Localization", "en")
        >>> await registry.refresh()
        ('ja', 'en')
        >>> registry.is_available("ja")
        True

    Attributes:
        path_prefix: Provider path enumerated for locale folders
        source_locale: Locale that is always available
    """

    __slots__ = ("_locales", "_lookup", "_provider", "_tag_filter", "path_prefix", "source_locale")

    def __init__(
        self,
        provider: ResourceProvider,
        path_prefix: str,
        source_locale: LocaleCode,
        *,
        tag_filter: Callable[[str], bool] = is_language_tag,
    ) -> None:
        """Initialize the registry.

        Args:
            provider: Resource provider to enumerate
            path_prefix: Provider path holding one folder per locale
            source_locale: Locale the original content is authored in
            tag_filter: Predicate deciding which folder names are locales
                (default: recognized by Babel/CLDR)
        """
        self._provider = provider
        self._tag_filter = tag_filter
        self.path_prefix = path_prefix
        self.source_locale = source_locale
        self._locales: tuple[LocaleCode, ...] = (source_locale,)
        self._lookup: frozenset[LocaleCode] = frozenset(self._locales)

    async def refresh(self) -> tuple[LocaleCode, ...]:
        """Re-scan the provider and replace the available set.

        Returns:
            The new snapshot of available locales

        Raises:
            DiscoveryError: If enumeration failed. The previous set is kept
                and the provider exception is chained as __cause__.
        """
        try:
            entries = await self._provider.locate_folders(self.path_prefix)
            discovered = [entry.name for entry in entries if self._tag_filter(entry.name)]
        except Exception as e:
            logger.warning("Locale discovery under %s failed: %s", self.path_prefix, e)
            diagnostic = ErrorTemplate.discovery_failed(self.path_prefix, e)
            raise DiscoveryError(diagnostic, path_prefix=self.path_prefix) from e

        # dict.fromkeys() removes duplicates while maintaining insertion order
        locales = tuple(dict.fromkeys([*discovered, self.source_locale]))
        self._locales = locales
        self._lookup = frozenset(locales)
        logger.info("Discovered %d locales under %s: %s", len(locales), self.path_prefix, locales)
        return locales

    def is_available(self, locale: LocaleCode) -> bool:
        """Check whether locale was found by the last refresh."""
        return locale in self._lookup

    def list(self) -> tuple[LocaleCode, ...]:
        """Return an immutable snapshot of the available locales."""
        return self._locales

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Immutable snapshot of the available locales."""
        return self._locales

    def __contains__(self, locale: object) -> bool:
        return locale in self._lookup

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleRegistry(path_prefix={self.path_prefix!r}, locales={self._locales!r})"
