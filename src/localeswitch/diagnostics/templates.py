"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def locale_unavailable(locale: str, available: tuple[str, ...]) -> Diagnostic:
        """Requested locale was not discovered.

        Args:
            locale: The requested locale
            available: Locales that are currently available

        Returns:
            Diagnostic for LOCALE_UNAVAILABLE
        """
        msg = f"Locale '{locale}' is not available"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNAVAILABLE,
            message=msg,
            hint=f"Available locales: {', '.join(available) or '(none)'}",
            locale=locale,
            severity="warning",
        )

    @staticmethod
    def discovery_failed(path_prefix: str, error: BaseException) -> Diagnostic:
        """Resource provider could not enumerate locale folders.

        Args:
            path_prefix: Prefix that was enumerated
            error: Exception raised by the provider

        Returns:
            Diagnostic for DISCOVERY_FAILED
        """
        msg = f"Failed to discover locales under '{path_prefix}': {error}"
        return Diagnostic(
            code=DiagnosticCode.DISCOVERY_FAILED,
            message=msg,
            hint="Previously discovered locales remain available",
            resource_path=path_prefix,
        )

    @staticmethod
    def hook_failed(hook_name: str, locale: str, error: BaseException) -> Diagnostic:
        """Switch hook raised while the locale was changing.

        Args:
            hook_name: Qualified name of the hook
            locale: Target locale of the switch
            error: Exception raised by the hook

        Returns:
            Diagnostic for HOOK_FAILED
        """
        msg = f"Switch hook '{hook_name}' failed while selecting '{locale}': {error}"
        return Diagnostic(
            code=DiagnosticCode.HOOK_FAILED,
            message=msg,
            hint="Remaining hooks were skipped; the locale change was not rolled back",
            locale=locale,
        )

    @staticmethod
    def switch_conflict(requested_locale: str, in_flight_locale: str) -> Diagnostic:
        """Switch requested while another switch is running.

        Args:
            requested_locale: Locale of the rejected request
            in_flight_locale: Locale of the running switch

        Returns:
            Diagnostic for SWITCH_CONFLICT
        """
        msg = (
            f"Cannot select '{requested_locale}' while switch to "
            f"'{in_flight_locale}' is in progress"
        )
        return Diagnostic(
            code=DiagnosticCode.SWITCH_CONFLICT,
            message=msg,
            hint="Wait for the running switch to finish, then retry",
            locale=requested_locale,
        )

    @staticmethod
    def not_initialized(operation: str) -> Diagnostic:
        """Service used before a locale was selected.

        Args:
            operation: Name of the attempted operation

        Returns:
            Diagnostic for NOT_INITIALIZED
        """
        msg = f"Cannot {operation}: no locale has been selected yet"
        return Diagnostic(
            code=DiagnosticCode.NOT_INITIALIZED,
            message=msg,
            hint="Call initialize() and load_state() or select_locale() first",
        )
