"""Persistence of the selected locale across sessions.

The selected locale is stored as a small typed record in an external
settings store. Loading applies a default when no record exists; the
loaded value is validated later, when it is fed into select_locale().

Components:
    LocaleSettings - Immutable record persisted by the service
    SettingsStore - Protocol for typed key/value settings stores
    SettingsStateMap - In-memory store with JSON file persistence
    save_locale / load_locale - Adapter functions used by the service

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, Self

from localeswitch.constants import SETTINGS_KEY_SELECTED_LOCALE
from localeswitch.localization.types import LocaleCode

if TYPE_CHECKING:
    from localeswitch.localization.config import LocalizationConfig

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Record
    "LocaleSettings",
    # Stores
    "SettingsState",
    "SettingsStore",
    "SettingsStateMap",
    # Adapter
    "load_locale",
    "resolve_default_locale",
    "save_locale",
]

logger = logging.getLogger(__name__)


class SettingsState(Protocol):
    """Record type storable in a SettingsStateMap."""

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self: ...


class SettingsStore(Protocol):
    """Protocol for typed key/value settings stores.

    One record is kept per record type.
    """

    def get_state[T: SettingsState](self, state_type: type[T]) -> T | None:
        """Return the stored record of state_type, or None if absent."""
        ...

    def set_state(self, value: SettingsState) -> None:
        """Store value, replacing any record of the same type."""
        ...


@dataclass(frozen=True, slots=True)
class LocaleSettings:
    """Persisted localization settings.

    Attributes:
        selected_locale: Locale selected when the state was saved
    """

    selected_locale: LocaleCode | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {SETTINGS_KEY_SELECTED_LOCALE: self.selected_locale}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Deserialize from a dict produced by to_dict().

        Raises:
            TypeError: If the selected locale is present but not a string
        """
        value = data.get(SETTINGS_KEY_SELECTED_LOCALE)
        if value is not None and not isinstance(value, str):
            msg = f"{SETTINGS_KEY_SELECTED_LOCALE} must be a string, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(selected_locale=value)


class SettingsStateMap:
    """In-memory settings store keyed by record type name.

    Records are kept in serialized form, so a store reloaded from JSON
    yields the same records as the store that wrote it.

    Example:
        >>> store = SettingsStateMap()
        >>> store.set_state(LocaleSettings("ja"))
        >>> store.save("settings.json")
        >>> SettingsStateMap.load("settings.json").get_state(LocaleSettings)
        LocaleSettings(selected_locale='ja')
    """

    __slots__ = ("_states",)

    def __init__(self, states: dict[str, dict[str, Any]] | None = None) -> None:
        self._states: dict[str, dict[str, Any]] = dict(states or {})

    @staticmethod
    def _key(state_type: type) -> str:
        return state_type.__qualname__

    def get_state[T: SettingsState](self, state_type: type[T]) -> T | None:
        data = self._states.get(self._key(state_type))
        if data is None:
            return None
        return state_type.from_dict(data)

    def set_state(self, value: SettingsState) -> None:
        self._states[self._key(type(value))] = value.to_dict()

    def remove_state(self, state_type: type) -> None:
        """Delete the record of state_type if present."""
        self._states.pop(self._key(state_type), None)

    def __len__(self) -> int:
        return len(self._states)

    def dumps(self) -> str:
        """Serialize all records to a JSON document."""
        return json.dumps(self._states, ensure_ascii=False, indent=2, sort_keys=True)

    @classmethod
    def loads(cls, document: str) -> SettingsStateMap:
        """Build a store from a JSON document produced by dumps().

        Raises:
            ValueError: If the document is not a JSON object of objects
        """
        data = json.loads(document)
        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            msg = "Settings document must be a JSON object mapping names to objects"
            raise ValueError(msg)
        return cls(data)

    def save(self, path: str | Path) -> None:
        """Write all records to a UTF-8 JSON file."""
        Path(path).write_text(self.dumps(), encoding="utf-8")
        logger.debug("Saved %d settings records to %s", len(self._states), path)

    @classmethod
    def load(cls, path: str | Path) -> SettingsStateMap:
        """Read a store from a JSON file written by save().

        A missing file yields an empty store.

        Raises:
            ValueError: If the file content is malformed
            OSError: If the file exists but cannot be read
        """
        file_path = Path(path)
        if not file_path.exists():
            logger.debug("No settings file at %s; starting empty", path)
            return cls()
        return cls.loads(file_path.read_text(encoding="utf-8"))


def resolve_default_locale(config: LocalizationConfig) -> LocaleCode:
    """Locale used when nothing was persisted: configured default, else source."""
    return config.initial_locale


def save_locale(store: SettingsStore, locale: LocaleCode | None) -> None:
    """Persist the selected locale."""
    store.set_state(LocaleSettings(selected_locale=locale))


def load_locale(store: SettingsStore, default_locale: LocaleCode) -> LocaleCode:
    """Return the persisted locale, or default_locale if none was saved.

    The value is not checked against the discovered locales.
    """
    settings = store.get_state(LocaleSettings)
    if settings is None or settings.selected_locale is None:
        return default_locale
    return settings.selected_locale
