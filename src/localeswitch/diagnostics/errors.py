"""Localization exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Construct diagnostics through ErrorTemplate rather than formatting
messages inline.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DiscoveryError",
    "HookError",
    "LocalizationError",
    "NotInitializedError",
    "SwitchConflictError",
    "UnavailableLocaleError",
]


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnavailableLocaleError(LocalizationError):
    """Requested locale is not in the discovered set.

    Recoverable: no state was changed.

    Attributes:
        locale: The locale that was requested
    """

    def __init__(self, message: str | Diagnostic, *, locale: str = "") -> None:
        super().__init__(message)
        self.locale = locale


class DiscoveryError(LocalizationError):
    """Resource provider enumeration failed during a locale refresh.

    The previously discovered locale set is kept. The provider's exception
    is available as ``__cause__``.

    Attributes:
        path_prefix: Prefix that was being enumerated
    """

    def __init__(self, message: str | Diagnostic, *, path_prefix: str = "") -> None:
        super().__init__(message)
        self.path_prefix = path_prefix


class HookError(LocalizationError):
    """A switch hook failed while reloading locale-specific state.

    The switch is not rolled back: the current locale already equals
    ``locale``. Hooks after the failing one did not run.

    Attributes:
        locale: Locale the switch was moving to
        hook_name: Qualified name of the failing hook
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        hook_name: str = "",
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.hook_name = hook_name


class SwitchConflictError(LocalizationError):
    """A switch was requested while another one was in flight.

    Attributes:
        requested_locale: Locale of the rejected request
        in_flight_locale: Locale the running switch is moving to
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        requested_locale: str = "",
        in_flight_locale: str = "",
    ) -> None:
        super().__init__(message)
        self.requested_locale = requested_locale
        self.in_flight_locale = in_flight_locale


class NotInitializedError(LocalizationError):
    """Operation needs a selected locale but none has been selected yet."""
