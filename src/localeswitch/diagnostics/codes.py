"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Selection errors (requested locale not usable)
        2000-2999: Discovery errors (resource provider enumeration)
        3000-3999: Switch errors (hook failures, concurrent requests)
        4000-4999: Lifecycle errors (service used before initialization)
    """

    # Selection errors (1000-1999)
    LOCALE_UNAVAILABLE = 1001

    # Discovery errors (2000-2999)
    DISCOVERY_FAILED = 2001

    # Switch errors (3000-3999)
    HOOK_FAILED = 3001
    SWITCH_CONFLICT = 3002

    # Lifecycle errors (4000-4999)
    NOT_INITIALIZED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale involved in the failure (if any)
        resource_path: Provider path involved in the failure (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    resource_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_UNAVAILABLE]: Locale 'fr' is not available
              = locale: fr
              = help: Available locales: en, ja

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
