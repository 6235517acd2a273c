"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating hooks and listeners.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Awaitable, Callable

__all__ = [
    "LocaleChangedCallback",
    "LocaleCode",
    "ResourcePath",
    "SwitchHook",
]

type LocaleCode = str
"""RFC 5646 language tag (e.g., 'en', 'ja', 'zh-Hans'). Compared by exact match."""

type ResourcePath = str
"""Logical provider path using '/' separators (e.g., 'Text/intro.txt')."""

type SwitchHook = Callable[[], Awaitable[None]]
"""Async callable run during every locale switch to reload locale state."""

type LocaleChangedCallback = Callable[[LocaleCode], None]
"""Observer called with the new locale after a switch completes."""
